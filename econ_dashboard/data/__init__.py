"""Data fetching and recency resolution."""

from .fred_fetcher import FredFetcher
from .resolver import find_recent_value, resolve_all

__all__ = ["FredFetcher", "find_recent_value", "resolve_all"]
