"""
Unit tests for ENTSO-E document decoding using the bundled sample documents.
"""

import unittest
from pathlib import Path

from structlog.testing import capture_logs

from gridmix.exceptions import DocumentDecodeError
from gridmix.parser import decode_time_series, parse_generation_document

DATA_DIR = Path(__file__).parent / "data"

SYNTHETIC_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<GL_MarketDocument xmlns="urn:iec62325.351:tc57wg16:451-6:generationloaddocument:3:0">
  <TimeSeries>
    <MktPSRType><psrType>B16</psrType></MktPSRType>
    <Period>
      <Point><position>1</position><quantity>100</quantity></Point>
      <Point><position>2</position><quantity>200</quantity></Point>
    </Period>
  </TimeSeries>
  <TimeSeries>
    <MktPSRType><psrType>B19</psrType></MktPSRType>
    <Period>
      <Point><position>1</position><quantity>50</quantity></Point>
    </Period>
  </TimeSeries>
</GL_MarketDocument>
"""


def load_sample_document(name="it-20231201-generation.xml"):
    """Load a sample ENTSO-E document from the repo."""
    return (DATA_DIR / name).read_text(encoding="utf-8")


class TestDecodeTimeSeries(unittest.TestCase):
    def test_decodes_sample_document(self):
        entries = decode_time_series(load_sample_document())

        # The block without a psrType is skipped
        self.assertEqual(len(entries), 9)
        self.assertEqual(entries[0].psr_type, "B04")
        self.assertEqual(entries[0].quantities, (18000.0, 19000.0))

    def test_zero_point_series_has_no_quantities(self):
        entries = decode_time_series(load_sample_document())
        nuclear = next(e for e in entries if e.psr_type == "B14")
        self.assertEqual(nuclear.quantities, ())
        self.assertEqual(nuclear.representative_quantity, 0.0)

    def test_unparsable_quantity_is_zero(self):
        entries = decode_time_series(load_sample_document())
        biomass = next(e for e in entries if e.psr_type == "B01")
        self.assertEqual(biomass.quantities, (0.0, 4200.0))

    def test_non_finite_and_missing_quantities_are_zero(self):
        document = (
            "<doc><TimeSeries><psrType>B16</psrType>"
            "<Point><quantity>NaN</quantity></Point>"
            "<Point><quantity>inf</quantity></Point>"
            "<Point><position>3</position></Point>"
            "<Point><quantity> 12.5 </quantity></Point>"
            "</TimeSeries></doc>"
        )
        entries = decode_time_series(document)
        self.assertEqual(entries[0].quantities, (0.0, 0.0, 0.0, 12.5))

    def test_works_without_namespace(self):
        document = SYNTHETIC_DOCUMENT.replace(
            ' xmlns="urn:iec62325.351:tc57wg16:451-6:generationloaddocument:3:0"', ""
        )
        self.assertEqual([e.psr_type for e in decode_time_series(document)], ["B16", "B19"])

    def test_accepts_bytes(self):
        entries = decode_time_series(SYNTHETIC_DOCUMENT.encode("utf-8"))
        self.assertEqual(len(entries), 2)

    def test_acknowledgement_has_no_entries(self):
        with capture_logs() as logs:
            entries = decode_time_series(load_sample_document("no-data-acknowledgement.xml"))
        self.assertEqual(entries, [])
        self.assertEqual(logs[0]["event"], "generation_document_acknowledgement")
        self.assertIn("No matching data found", logs[0]["reason"])

    def test_malformed_document_raises(self):
        with self.assertRaises(DocumentDecodeError):
            decode_time_series("<not-xml")
        with self.assertRaises(DocumentDecodeError):
            decode_time_series("")


class TestParseGenerationDocument(unittest.TestCase):
    def test_synthetic_document(self):
        summary = parse_generation_document(SYNTHETIC_DOCUMENT, "IT", "20231201")

        values = {c.type: c.value for c in summary.generation_by_type}
        self.assertEqual(values, {"Solar": 150, "Wind": 50})
        self.assertEqual(summary.total_generation, 200)
        self.assertEqual(summary.renewable_percentage, 100.0)
        self.assertEqual(summary.country, "IT")
        self.assertEqual(summary.date, "20231201")

    def test_sample_document(self):
        summary = parse_generation_document(load_sample_document(), "IT", "20231201")

        self.assertEqual(
            [(c.type, c.value) for c in summary.generation_by_type],
            [
                ("Natural Gas", 18500),
                ("Hydro", 12300),
                ("Solar", 8900),
                ("Wind", 6200),
                ("Other", 800),
                ("Biomass", 2100),
            ],
        )
        self.assertEqual(summary.total_generation, 48800)
        # (12300 + 8900 + 6200 + 2100) / 48800 = 60.45...
        self.assertEqual(summary.renewable_percentage, 60.5)
        self.assertEqual([c.type for c in summary.top_sources], ["Natural Gas", "Hydro"])

    def test_quantity_beyond_decimal_precision(self):
        document = (
            "<doc><TimeSeries><psrType>B16</psrType>"
            "<Point><quantity>1e30</quantity></Point>"
            "</TimeSeries></doc>"
        )
        summary = parse_generation_document(document, "IT", "20231201")

        self.assertEqual([(c.type, c.value) for c in summary.generation_by_type], [("Solar", 10 ** 30)])
        self.assertEqual(summary.total_generation, 10 ** 30)
        self.assertEqual(summary.renewable_percentage, 100.0)

    def test_overflowing_series_is_dropped(self):
        document = (
            "<doc><TimeSeries><psrType>B16</psrType>"
            "<Point><quantity>1e308</quantity></Point>"
            "<Point><quantity>1e308</quantity></Point>"
            "</TimeSeries>"
            "<TimeSeries><psrType>B14</psrType>"
            "<Point><quantity>500</quantity></Point>"
            "</TimeSeries></doc>"
        )
        summary = parse_generation_document(document, "FR", "20231201")

        self.assertEqual([(c.type, c.value) for c in summary.generation_by_type], [("Nuclear", 500)])
        self.assertEqual(summary.renewable_percentage, 0)

    def test_overflowing_totals_return_empty_summary(self):
        document = (
            "<doc><TimeSeries><psrType>B16</psrType>"
            "<Point><quantity>1e308</quantity></Point>"
            "</TimeSeries>"
            "<TimeSeries><psrType>B19</psrType>"
            "<Point><quantity>1e308</quantity></Point>"
            "</TimeSeries></doc>"
        )
        with capture_logs() as logs:
            summary = parse_generation_document(document, "DE", "20231201")

        self.assertTrue(summary.is_empty)
        self.assertEqual(summary.total_generation, 0)
        self.assertEqual(logs[-1]["event"], "generation_document_out_of_range")
        self.assertEqual(logs[-1]["log_level"], "warning")

    def test_malformed_input_returns_empty_summary(self):
        with capture_logs() as logs:
            summary = parse_generation_document("<not-xml", "IT", "20231201")

        self.assertEqual(summary.generation_by_type, [])
        self.assertEqual(summary.top_sources, [])
        self.assertEqual(summary.total_generation, 0)
        self.assertEqual(summary.renewable_percentage, 0)
        self.assertEqual(summary.country, "IT")

        self.assertEqual(logs[0]["event"], "generation_document_decode_failed")
        self.assertEqual(logs[0]["log_level"], "warning")
        self.assertEqual(logs[0]["country"], "IT")

    def test_missing_input_returns_empty_summary(self):
        for raw in (None, "", b""):
            summary = parse_generation_document(raw, "DE", "20231201")
            self.assertTrue(summary.is_empty)

    def test_acknowledgement_returns_empty_summary(self):
        summary = parse_generation_document(
            load_sample_document("no-data-acknowledgement.xml"), "FR", "20231201"
        )
        self.assertTrue(summary.is_empty)
        self.assertEqual(summary.renewable_percentage, 0)


if __name__ == "__main__":
    unittest.main()
