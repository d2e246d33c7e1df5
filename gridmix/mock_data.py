"""
Fixture generation data for running without an ENTSO-E token.
"""

from __future__ import annotations

from .analysis import summarize
from .country_codes import CountryCode
from .exceptions import UnsupportedCountryError
from .logging_config import get_logger
from .models import GenerationSummary

logger = get_logger(__name__)

MOCK_DATE = "20231201"

# Daily average MW per category.
_MOCK_MIX: dict[CountryCode, dict[str, float]] = {
    CountryCode.IT: {
        "Natural Gas": 18500,
        "Hydro": 12300,
        "Nuclear": 0,  # Italy has no nuclear
        "Solar": 8900,
        "Wind": 6200,
        "Coal": 4100,
        "Oil": 2800,
        "Biomass": 2100,
        "Geothermal": 900,
        "Other": 800,
    },
    CountryCode.DE: {
        "Wind": 28400,
        "Natural Gas": 22100,
        "Nuclear": 18900,
        "Coal": 24500,
        "Solar": 12800,
        "Hydro": 7200,
        "Biomass": 6800,
        "Oil": 1200,
        "Other": 900,
    },
    CountryCode.FR: {
        "Nuclear": 42800,
        "Hydro": 14200,
        "Natural Gas": 8900,
        "Wind": 7600,
        "Solar": 4100,
        "Coal": 2800,
        "Oil": 1900,
        "Biomass": 1600,
        "Other": 1000,
    },
}

MOCK_GENERATION_DATA: dict[str, GenerationSummary] = {
    str(code): summarize(mix, str(code), MOCK_DATE) for code, mix in _MOCK_MIX.items()
}


def get_mock_generation_data(country_code: str, date: str) -> GenerationSummary:
    """
    Return the fixture summary for a country, keyed to the requested date.

    Raises:
        UnsupportedCountryError: If there is no fixture for the country
    """
    logger.info("mock_generation_data_requested", country=country_code, date=date)
    data = MOCK_GENERATION_DATA.get(str(country_code).upper())
    if data is None:
        raise UnsupportedCountryError(country_code)
    return data.with_date(date)
