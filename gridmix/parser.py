"""
Decoding of ENTSO-E "Actual Generation per Type" (A75) XML documents.

Only TimeSeries blocks, their psrType code and their Point quantities are
read; the rest of the document is ignored. Element names are matched
without their namespace, since ENTSO-E documents declare a versioned
default namespace.
"""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from .analysis import aggregate, summarize
from .exceptions import DocumentDecodeError
from .logging_config import get_logger
from .models import GenerationSummary, RawTimeSeriesEntry

logger = get_logger(__name__)

ACKNOWLEDGEMENT_ROOT = "Acknowledgement_MarketDocument"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _iter_named(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element.iter():
        if _local_name(child.tag) == name:
            yield child


def _first_text(element: ET.Element, name: str) -> Optional[str]:
    for child in _iter_named(element, name):
        if child.text and child.text.strip():
            return child.text.strip()
    return None


def _parse_quantity(text: Optional[str]) -> float:
    """Parse a Point quantity; missing, unparsable or non-finite values count as 0."""
    if text is None:
        return 0.0
    try:
        quantity = float(text)
    except ValueError:
        return 0.0
    return quantity if math.isfinite(quantity) else 0.0


def decode_time_series(raw_document: str | bytes) -> list[RawTimeSeriesEntry]:
    """
    Decode the TimeSeries blocks of a generation document.

    Blocks without a psrType code are skipped. An acknowledgement document
    (the API's reply when there is no data) yields no entries.

    Raises:
        DocumentDecodeError: If the document is empty or not well-formed XML
    """
    if not raw_document:
        raise DocumentDecodeError("Empty generation document")
    try:
        root = ET.fromstring(raw_document)
    except (ET.ParseError, ValueError) as e:
        raise DocumentDecodeError(f"Malformed generation document: {e}") from e

    if _local_name(root.tag) == ACKNOWLEDGEMENT_ROOT:
        logger.info("generation_document_acknowledgement", reason=_first_text(root, "text"))
        return []

    entries = []
    for series in _iter_named(root, "TimeSeries"):
        psr_type = _first_text(series, "psrType")
        if psr_type is None:
            logger.debug("time_series_without_psr_type_skipped")
            continue
        quantities = tuple(
            _parse_quantity(_first_text(point, "quantity"))
            for point in _iter_named(series, "Point")
        )
        entries.append(RawTimeSeriesEntry(psr_type=psr_type, quantities=quantities))
    return entries


def parse_generation_document(
    raw_document: str | bytes | None, country: str, date: str
) -> GenerationSummary:
    """
    Parse a raw A75 document into a GenerationSummary.

    Never raises on bad input: a document that cannot be decoded, or whose
    quantities overflow the totals, yields an empty summary and a warning
    is logged.

    Args:
        raw_document: XML text as returned by the transparency platform.
        country: Country code the document was requested for.
        date: Date key (yyyyMMdd) the document was requested for.
    """
    try:
        entries = decode_time_series(raw_document or "")
    except DocumentDecodeError as e:
        logger.warning(
            "generation_document_decode_failed",
            country=country,
            date=date,
            error=str(e),
        )
        return GenerationSummary.empty(country, date)

    try:
        return summarize(aggregate(entries), country, date)
    except ArithmeticError as e:
        # Quantities too large to total or share (e.g. several points near 1e308).
        logger.warning(
            "generation_document_out_of_range",
            country=country,
            date=date,
            error=str(e),
        )
        return GenerationSummary.empty(country, date)
