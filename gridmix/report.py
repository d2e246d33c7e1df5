"""
Reads a stored generation document from disk, summarises it, and prints the results.
"""

from __future__ import annotations

import sys
from pathlib import Path

from .country_codes import COUNTRIES, CountryCode
from .formatting import calculate_percentage, format_date_string, format_power_value
from .load import data_path_for
from .logging_config import configure_logging
from .models import GenerationSummary
from .parser import parse_generation_document


class GenerationReport:
    """Loads a document from a file, summarises it, and prints to stdout."""

    def __init__(self, input_path: Path, country_code: CountryCode | str, date: str) -> None:
        # Convert string to CountryCode if needed
        if isinstance(country_code, str):
            self.country_code = CountryCode(country_code.upper())
        else:
            self.country_code = country_code
        self.input_path = Path(input_path)
        self.date = date

    def load_summary(self) -> GenerationSummary:
        document = self.input_path.read_text(encoding="utf-8")
        return parse_generation_document(document, self.country_code.value, self.date)

    @staticmethod
    def title_for(country_code: CountryCode, date: str) -> str:
        return f"Generation mix for {COUNTRIES[country_code].name} on {format_date_string(date)}"

    @staticmethod
    def print_summary(summary: GenerationSummary, title: str) -> None:
        print("\n" + "=" * 70)
        print(title)
        print("=" * 70)

        if summary.is_empty:
            print("No generation data available.")
            return

        print(f"{'Source':<20} | {'Generation':>12} | {'Share (%)':>10} | {'Renewable':>9}")
        print("-" * 70)
        for category in summary.generation_by_type:
            share = calculate_percentage(category.value, summary.total_generation)
            renewable = "yes" if category.is_renewable else "no"
            print(
                f"{category.display_name:<20} | "
                f"{format_power_value(category.value, category.unit):>12} | "
                f"{share:>10.1f} | "
                f"{renewable:>9}"
            )
        print("-" * 70)
        print(f"Total generation: {format_power_value(summary.total_generation)}")
        print(f"Renewable share:  {summary.renewable_percentage:.1f}%")
        top = ", ".join(
            f"{source.display_name} ({format_power_value(source.value)})"
            for source in summary.top_sources
        )
        print(f"Top sources:      {top}")

    def run(self) -> GenerationSummary:
        summary = self.load_summary()
        self.print_summary(summary, title=self.title_for(self.country_code, self.date))
        return summary


def main(country_code: CountryCode | str, date: str) -> None:
    """
    Main entrypoint for report.py.

    Args:
        country_code: Country code (CountryCode enum or string that will be validated)
        date: Date key in yyyyMMdd form
    """
    # Convert string to CountryCode if needed
    if isinstance(country_code, str):
        try:
            country_code = CountryCode(country_code.upper())
        except ValueError:
            print(f"Error: Invalid country code '{country_code}'. Supported: {', '.join(CountryCode)}")
            sys.exit(1)

    data_path = data_path_for(country_code.value, date)

    if not data_path.exists():
        print(f"Error: Data file not found: {data_path}")
        print(f"Please run the load program first to fetch data for {country_code.value}:")
        print(f"  python -m gridmix.load {country_code.value} {date}")
        sys.exit(1)

    reporter = GenerationReport(data_path, country_code, date)
    reporter.run()


if __name__ == "__main__":
    configure_logging()
    if len(sys.argv) < 3:
        print("Usage: python -m gridmix.report <country_code> <yyyyMMdd>")
        sys.exit(1)
    main(sys.argv[1], sys.argv[2])
