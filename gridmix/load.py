"""
Responsible for fetching generation documents from the ENTSO-E API and storing them to disk.
"""

from __future__ import annotations

import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Optional

import requests

from .config import ApiConfig
from .country_codes import CountryCode, area_code
from .exceptions import FetchError, InvalidDateError
from .logging_config import configure_logging, get_logger
from .mock_data import get_mock_generation_data
from .models import GenerationSummary
from .parser import parse_generation_document

logger = get_logger(__name__)

DOCUMENT_TYPE_ACTUAL_GENERATION = "A75"
PROCESS_TYPE_REALISED = "A16"
DATE_FORMAT = "%Y%m%d"
HEALTH_CHECK_TIMEOUT_SECONDS = 5
DATA_DIR = Path(__file__).parent.parent / "data"

XML_HEADERS = {
    "Content-Type": "application/xml",
    "Accept": "application/xml",
}


def request_window(date: str) -> tuple[str, str]:
    """
    Build the periodStart/periodEnd pair (yyyyMMddHHmm) covering one day.

    Raises:
        InvalidDateError: If date is not a yyyyMMdd key
    """
    try:
        day = datetime.strptime(date, DATE_FORMAT)
    except (ValueError, TypeError) as e:
        raise InvalidDateError(f"Invalid date key '{date}', expected yyyyMMdd") from e
    next_day = day + timedelta(days=1)
    return f"{day.strftime(DATE_FORMAT)}0000", f"{next_day.strftime(DATE_FORMAT)}0000"


class Load:
    """
    Fetches the actual generation per type document for one country and day.
    """

    def __init__(
        self,
        country_code: CountryCode | str = CountryCode.IT,
        date: Optional[str] = None,
        config: Optional[ApiConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ApiConfig.from_env()
        self.country_code = str(country_code).upper()
        self.date = date or datetime.now().strftime(DATE_FORMAT)
        self.session = session or requests.Session()

    def _build_params(self) -> Dict[str, str]:
        period_start, period_end = request_window(self.date)
        params = {
            "documentType": DOCUMENT_TYPE_ACTUAL_GENERATION,
            "processType": PROCESS_TYPE_REALISED,
            "in_Domain": area_code(self.country_code),
            "periodStart": period_start,
            "periodEnd": period_end,
        }
        if self.config.token:
            params["securityToken"] = self.config.token
        return params

    def fetch(self) -> str:
        """
        Request the raw XML document.

        Raises:
            FetchError: On connection problems or a non-2xx response
        """
        params = self._build_params()
        logger.info("fetching_generation_data", country=self.country_code, date=self.date)
        try:
            response = self.session.get(
                self.config.generation_url,
                params=params,
                headers=XML_HEADERS,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("generation_fetch_failed", country=self.country_code, date=self.date, error=str(e))
            raise FetchError(details=str(e)) from e
        return response.text

    def store(self, document: str, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
        return output_path

    def fetch_and_store(self, output_path: Path) -> Path:
        document = self.fetch()
        return self.store(document, output_path)

    def get_generation_data(self) -> GenerationSummary:
        """
        Fetch and normalise the generation data, from fixtures when configured.

        Raises:
            UnsupportedCountryError: If mock data is enabled and the country has no fixture
            FetchError: If the live request fails
        """
        if self.config.use_mock_data:
            return get_mock_generation_data(self.country_code, self.date)
        return parse_generation_document(self.fetch(), self.country_code, self.date)

    def health_check(self) -> bool:
        if self.config.use_mock_data:
            return True
        try:
            response = self.session.get(
                self.config.base_url.rstrip("/") + "/ping",
                timeout=HEALTH_CHECK_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
        except requests.RequestException:
            return False
        return True


def data_path_for(country_code: str, date: str, data_dir: Path = DATA_DIR) -> Path:
    return Path(data_dir) / f"{country_code.lower()}-{date}-generation.xml"


if __name__ == "__main__":
    configure_logging()
    if len(sys.argv) < 3:
        print("Usage: python -m gridmix.load <country_code> <yyyyMMdd>")
        sys.exit(1)
    country_arg, date_arg = sys.argv[1].upper(), sys.argv[2]
    try:
        loader = Load(country_code=country_arg, date=date_arg)
        path = loader.fetch_and_store(data_path_for(country_arg, date_arg))
    except (FetchError, InvalidDateError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Stored generation document: {path}")
