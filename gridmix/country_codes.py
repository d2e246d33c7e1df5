"""
Country code constants for the ENTSO-E transparency platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CountryCode(StrEnum):
    """
    Two-letter codes of the countries the dashboard supports.

    Usage:
        >>> CountryCode("IT")  # CountryCode.IT
        >>> str(CountryCode.DE)  # "DE"
    """

    IT = "IT"  # Italy
    DE = "DE"  # Germany
    FR = "FR"  # France


@dataclass(frozen=True)
class Country:
    code: CountryCode
    name: str
    entsoe_code: str  # EIC area code used as in_Domain


COUNTRIES: dict[CountryCode, Country] = {
    CountryCode.IT: Country(CountryCode.IT, "Italy", "10YIT-GRTN-----B"),
    CountryCode.DE: Country(CountryCode.DE, "Germany", "10Y1001A1001A83F"),
    CountryCode.FR: Country(CountryCode.FR, "France", "10YFR-RTE------C"),
}

DEFAULT_COUNTRY = COUNTRIES[CountryCode.IT]


def area_code(country_code: CountryCode | str) -> str:
    """
    Resolve the ENTSO-E area code for a country.

    Unknown codes are passed through unchanged so callers may supply a raw
    EIC code directly.
    """
    try:
        return COUNTRIES[CountryCode(str(country_code).upper())].entsoe_code
    except ValueError:
        return str(country_code)
