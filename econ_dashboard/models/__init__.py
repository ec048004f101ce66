"""Data models."""

from econ_dashboard.models.market_data import Observation, ReportRow, TrackedSeries

__all__ = ["Observation", "ReportRow", "TrackedSeries"]
