"""
Aggregation of decoded ENTSO-E time series into a generation summary.

These helpers operate on already-decoded documents and do not handle
fetching or presentation concerns.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, Mapping

from .formatting import (
    aggregate_generation_by_renewable,
    calculate_percentage,
    round_half_up,
    sort_generation_by_value,
)
from .models import GenerationCategory, GenerationSummary, RawTimeSeriesEntry
from .psr_types import classify

TOP_SOURCES_LIMIT = 2


def aggregate(entries: Iterable[RawTimeSeriesEntry]) -> Dict[str, float]:
    """
    Sum the representative quantity of each time series per category.

    Each series contributes the mean of its points (ENTSO-E reports several
    readings per period; the mean approximates the level over the day).
    Several psrTypes may feed the same category, e.g. onshore and offshore
    wind.

    Args:
        entries: Decoded TimeSeries blocks.

    Returns:
        Mapping: category -> summed MW, in first-seen category order.
    """
    totals: Dict[str, float] = {}
    for entry in entries:
        category = classify(entry.psr_type).category
        totals[category] = totals.get(category, 0.0) + entry.representative_quantity
    return totals


def summarize(
    aggregated: Mapping[str, float],
    country: str,
    date: str,
    top_n: int = TOP_SOURCES_LIMIT,
) -> GenerationSummary:
    """
    Build the GenerationSummary for one country/date from aggregated categories.

    Values are rounded to whole MW; categories left at 0 (or below) and
    non-finite sums are dropped. The renewable percentage is computed from the rounded values
    so that it always agrees with total_generation.

    Args:
        aggregated: Mapping category -> MW (e.g. the output of aggregate()).
        country: Country code the data belongs to.
        date: Caller's date key, passed through unchanged.
        top_n: How many of the largest categories to report as top sources.
    """
    # Float overflow in the aggregation leaves inf or nan, which has no MW value.
    rounded = {
        category: int(round_half_up(value, 0))
        for category, value in aggregated.items()
        if math.isfinite(value)
    }
    # Negative sums (net consumption) have no place in a generation mix.
    categories = [
        GenerationCategory.create(category, value)
        for category, value in rounded.items()
        if value > 0
    ]

    total_generation = sum(category.value for category in categories)
    split = aggregate_generation_by_renewable(categories)

    return GenerationSummary(
        country=country,
        date=date,
        generation_by_type=categories,
        total_generation=total_generation,
        renewable_percentage=calculate_percentage(split["renewable"], total_generation),
        top_sources=sort_generation_by_value(categories)[:top_n],
    )
