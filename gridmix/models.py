"""
Data models for generation-per-type summaries.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Optional

from .psr_types import color_for, is_renewable

DEFAULT_UNIT = "MW"


@dataclass(frozen=True)
class GenerationCategory:
    """Generation of one simplified category (e.g. "Wind") for a country/day."""

    type: str
    display_name: str
    value: float
    unit: str = DEFAULT_UNIT
    is_renewable: bool = False
    color: str = ""

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Generation value must be non-negative, got {self.value} for {self.type}")

    @classmethod
    def create(
        cls, category_type: str, value: float, display_name: Optional[str] = None
    ) -> GenerationCategory:
        """
        Create a GenerationCategory, resolving renewability and colour from
        the static category tables.
        """
        return cls(
            type=category_type,
            display_name=display_name or category_type,
            value=value,
            unit=DEFAULT_UNIT,
            is_renewable=is_renewable(category_type),
            color=color_for(category_type),
        )


@dataclass
class GenerationSummary:
    """Normalised generation summary for one country and date key."""

    country: str
    date: str
    generation_by_type: list[GenerationCategory] = field(default_factory=list)
    total_generation: float = 0
    renewable_percentage: float = 0
    top_sources: list[GenerationCategory] = field(default_factory=list)

    @classmethod
    def empty(cls, country: str, date: str) -> GenerationSummary:
        """The summary returned when a document holds no usable data."""
        return cls(country=country, date=date)

    @property
    def is_empty(self) -> bool:
        return not self.generation_by_type

    def with_date(self, date: str) -> GenerationSummary:
        return replace(
            self,
            date=date,
            generation_by_type=list(self.generation_by_type),
            top_sources=list(self.top_sources),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RawTimeSeriesEntry:
    """One decoded TimeSeries block: its psrType code and point quantities."""

    psr_type: str
    quantities: tuple[float, ...] = ()

    @property
    def representative_quantity(self) -> float:
        """Mean of the point quantities; 0 for a series without points."""
        if not self.quantities:
            return 0.0
        return sum(self.quantities) / len(self.quantities)


@dataclass(frozen=True)
class ChartDataPoint:
    label: str
    value: float
    color: str
    is_renewable: bool
