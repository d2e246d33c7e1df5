import sys

from .config import ApiConfig
from .country_codes import CountryCode
from .exceptions import FetchError, UnsupportedCountryError
from .load import Load, data_path_for
from .logging_config import configure_logging
from .report import GenerationReport


def main(country_code: CountryCode | str, date: str, config: ApiConfig | None = None) -> None:
    """
    Main entrypoint that fetches a generation document and reports on it.

    With mock data enabled nothing is fetched; the fixture summary is printed instead.

    Args:
        country_code: Country code (CountryCode enum or string that will be validated)
        date: Date key in yyyyMMdd form
        config: API settings; read from the environment when omitted
    """
    # Convert string to CountryCode if needed
    if isinstance(country_code, str):
        country_code = CountryCode(country_code.upper())

    config = config or ApiConfig.from_env()
    loader = Load(country_code=country_code, date=date, config=config)

    if config.use_mock_data:
        summary = loader.get_generation_data()
        GenerationReport.print_summary(summary, title="[MOCK] " + GenerationReport.title_for(country_code, date))
        return

    data_path = data_path_for(country_code.value, date)
    print("Fetching data from API and storing to:", data_path)
    loader.fetch_and_store(data_path)

    reporter = GenerationReport(data_path, country_code, date)
    reporter.run()


if __name__ == "__main__":
    configure_logging()
    if len(sys.argv) < 3:
        print("Usage: python -m gridmix.main <country_code> <yyyyMMdd>")
        sys.exit(1)
    try:
        main(sys.argv[1], sys.argv[2])
    except ValueError:
        print(f"Error: Invalid country code '{sys.argv[1]}' or date '{sys.argv[2]}'.")
        sys.exit(1)
    except (FetchError, UnsupportedCountryError) as e:
        print(f"Error: {e}")
        sys.exit(1)
