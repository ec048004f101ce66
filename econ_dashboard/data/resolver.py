"""Walk back from a start date to the most recent published value."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from typing import Protocol

from econ_dashboard.errors import FetchError, ResolutionExhausted
from econ_dashboard.models.market_data import Observation, ReportRow, TrackedSeries


logger = logging.getLogger(__name__)


class ValueFetcher(Protocol):
    def fetch_value(self, series_id: str, day: date) -> str: ...


def find_recent_value(
    fetcher: ValueFetcher, series_id: str, start: date, max_lookback_days: int
) -> Observation:
    """
    Find the most recent observation at or before a date.

    Queries start, start - 1 day, ... start - max_lookback_days, one
    request per day, and returns the first hit. NotFound and
    TransportError are treated the same way: try the previous day.

    Raises:
        ResolutionExhausted: Nothing found within the window
    """
    day = start
    attempts = 0
    for _ in range(max_lookback_days + 1):
        attempts += 1
        try:
            value = fetcher.fetch_value(series_id, day)
        except FetchError as e:
            logger.debug(f"  {type(e).__name__}: {e}")
            day -= timedelta(days=1)
            continue

        logger.info(f"{series_id} = {value} ({day}, {attempts} request(s))")
        return Observation(series_id=series_id, date=day, value=value)

    raise ResolutionExhausted(series_id, start, attempts)


def resolve_all(
    fetcher: ValueFetcher,
    series: Iterable[TrackedSeries],
    today: date,
    max_lookback_days: int,
) -> list[ReportRow]:
    """
    Resolve every tracked series in order, one after another.

    A series that cannot be resolved gets a row with no value so the
    report shows a placeholder for it.
    """
    rows = []
    for tracked in series:
        start = tracked.resolve_start(today)
        logger.info(f"Resolving {tracked.series_id} from {start}...")
        try:
            obs = find_recent_value(
                fetcher, tracked.series_id, start, max_lookback_days
            )
            rows.append(ReportRow.from_series(tracked, obs.value))
        except ResolutionExhausted as e:
            logger.error(str(e))
            rows.append(ReportRow.from_series(tracked, None))
    return rows
