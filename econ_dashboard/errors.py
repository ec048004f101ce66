"""Exception classes for fetching, resolving and serving."""

from datetime import date


class FetchError(Exception):
    """Base class for a failed single-date FRED query."""

    def __init__(self, series_id: str, day: date, message: str | None = None):
        self.series_id = series_id
        self.day = day
        detail = f"{series_id} on {day.isoformat()}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


class NotFound(FetchError):
    """No observation was published for the queried date."""


class TransportError(FetchError):
    """The request failed or the response could not be parsed."""


class ResolutionExhausted(Exception):
    """No observation was found within the lookback window."""

    def __init__(self, series_id: str, start: date, attempts: int):
        self.series_id = series_id
        self.start = start
        self.attempts = attempts
        super().__init__(
            f"No value for {series_id} in {attempts} days back from "
            f"{start.isoformat()}"
        )


class ReportWriteError(Exception):
    """The generated report could not be written to disk."""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write report to {path}: {cause}")
