"""
Exception types raised by gridmix.
"""

from __future__ import annotations

from typing import Optional


class GridMixError(Exception): ...


class DocumentDecodeError(GridMixError): ...


class UnsupportedCountryError(GridMixError):
    """Raised when a fixture source has no data for the requested country."""

    def __init__(self, country_code: str) -> None:
        self.country_code = country_code
        super().__init__(f"No data available for country: {country_code}")


class InvalidDateError(GridMixError, ValueError): ...


class FetchError(GridMixError):
    """Raised when the ENTSO-E request fails at the transport level."""

    def __init__(
        self,
        message: str = "Failed to fetch generation data",
        code: str = "FETCH_ERROR",
        details: Optional[str] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details
        super().__init__(f"{message}: {details}" if details else message)
