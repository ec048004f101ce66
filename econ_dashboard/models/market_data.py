"""Data models for tracked series and report rows."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TrackedSeries:
    """A FRED series shown as one row of the report."""

    key: str
    label: str
    series_id: str
    start_date: date | None = None
    position: str = "middle"

    def resolve_start(self, today: date) -> date:
        """Start date for the walkback; None means today."""
        return self.start_date or today


@dataclass(frozen=True)
class Observation:
    """Single observation from a FRED series.

    The value is kept as the raw string FRED returns, including its "."
    missing-data sentinel.
    """

    series_id: str
    date: date
    value: str


@dataclass(frozen=True)
class ReportRow:
    """One labeled value in the rendered report."""

    key: str
    label: str
    value: str | None
    position: str = "middle"

    @classmethod
    def from_series(cls, series: TrackedSeries, value: str | None) -> "ReportRow":
        return cls(
            key=series.key,
            label=series.label,
            value=value,
            position=series.position,
        )
