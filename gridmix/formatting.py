"""
Display helpers for generation values.

Rounding is decimal half-up on the shortest repr of the float, so that
e.g. 2.25 GW renders as "2.3 GW" rather than following binary rounding.
"""

from __future__ import annotations

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, TypedDict

from .models import DEFAULT_UNIT, ChartDataPoint, GenerationCategory

GIGA_THRESHOLD = 1000


class RenewableSplit(TypedDict):
    renewable: float
    non_renewable: float


def round_half_up(value: float, places: int = 0) -> Decimal:
    """
    Round a number to the given decimal places, halves away from zero.

    Raises:
        ValueError: If value is NaN or infinite
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value}")
    number = Decimal(str(value))
    exponent = Decimal(1).scaleb(-places)
    # Enough digits for the integer part plus the requested places.
    context = Context(prec=max(28, number.adjusted() + places + 2), rounding=ROUND_HALF_UP)
    return number.quantize(exponent, context=context)


def format_power_value(value: float, unit: str = DEFAULT_UNIT) -> str:
    """
    Format a power value, switching to giga units from 1000 upwards.

    Examples:
        >>> format_power_value(999.9)
        '1000 MW'
        >>> format_power_value(2250)
        '2.3 GW'
        >>> format_power_value(1000, "kW")
        '1.0 GkW'
    """
    if value >= GIGA_THRESHOLD:
        giga_unit = "GW" if unit == "MW" else f"G{unit}"
        return f"{round_half_up(value / GIGA_THRESHOLD, 1):.1f} {giga_unit}"
    return f"{round_half_up(value, 0):.0f} {unit}"


def calculate_percentage(value: float, total: float) -> float:
    """Share of value in total as a percentage with one decimal; 0 when total is 0."""
    if total == 0:
        return 0
    return float(round_half_up((value / total) * 100, 1))


def sort_generation_by_value(
    categories: Iterable[GenerationCategory],
) -> list[GenerationCategory]:
    """Return a new list sorted descending by value. Ties keep input order."""
    return sorted(categories, key=lambda c: c.value, reverse=True)


def aggregate_generation_by_renewable(
    categories: Iterable[GenerationCategory],
) -> RenewableSplit:
    renewable = 0.0
    non_renewable = 0.0
    for category in categories:
        if category.is_renewable:
            renewable += category.value
        else:
            non_renewable += category.value
    return {"renewable": renewable, "non_renewable": non_renewable}


def chart_data_points(categories: Iterable[GenerationCategory]) -> list[ChartDataPoint]:
    """Chart-ready points, largest source first."""
    return [
        ChartDataPoint(
            label=category.display_name,
            value=category.value,
            color=category.color,
            is_renewable=category.is_renewable,
        )
        for category in sort_generation_by_value(categories)
    ]


def format_date_string(date_key: str) -> str:
    """
    Convert a yyyyMMdd date key to dd/MM/yyyy.

    Raises:
        ValueError: If the key is not a valid yyyyMMdd date
    """
    return datetime.strptime(date_key, "%Y%m%d").strftime("%d/%m/%Y")
