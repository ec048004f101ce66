"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
import json
import os

from dotenv import load_dotenv

from econ_dashboard.models.market_data import TrackedSeries


load_dotenv()


# Tracked series in render order. A start_date of None means "today".
DEFAULT_SERIES: tuple[TrackedSeries, ...] = (
    TrackedSeries("usa-gdp", "USA GDP:", "GNPCA", date(2022, 1, 2), "middle"),
    TrackedSeries("usa-unemployment", "Unemployment:", "UNRATE", None, "middle"),
    TrackedSeries("usa-10yr-bond-yield", "10yr Yield:", "DGS10", None, "middle"),
    TrackedSeries("usa-inflation", "USA Inflation:", "CPIAUCSL", None, "bottom"),
    TrackedSeries("wti-crude", "WTI Crude:", "DCOILWTICO", None, "bottom"),
    TrackedSeries("usa-corn", "Corn:", "DTB1YR", None, "bottom"),
)

# Long enough for an annual series such as GNPCA.
DEFAULT_MAX_LOOKBACK_DAYS = 400

_TRUTHY = {"1", "true", "yes", "on"}


def load_series_file(path: Path | str) -> tuple[TrackedSeries, ...]:
    """
    Load tracked series from a JSON file.

    The file holds a list of objects with ``key``, ``label`` and
    ``series_id``, plus optional ``start_date`` (YYYY-MM-DD) and
    ``position``.
    """
    with open(path, encoding="utf-8") as f:
        entries = json.load(f)

    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a JSON list of series")

    series = []
    for entry in entries:
        try:
            start = entry.get("start_date")
            series.append(
                TrackedSeries(
                    key=entry["key"],
                    label=entry["label"],
                    series_id=entry["series_id"],
                    start_date=date.fromisoformat(start) if start else None,
                    position=entry.get("position", "middle"),
                )
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"{path}: invalid series entry {entry!r}") from e
    return tuple(series)


def _series_from_env() -> tuple[TrackedSeries, ...]:
    path = os.getenv("ECON_DASHBOARD_SERIES_FILE")
    if path:
        return load_series_file(path)
    return DEFAULT_SERIES


@dataclass
class Settings:
    """Application settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    host: str = field(
        default_factory=lambda: os.getenv("ECON_DASHBOARD_HOST", "0.0.0.0")
    )
    port: int = field(
        default_factory=lambda: int(os.getenv("ECON_DASHBOARD_PORT", "3000"))
    )
    public_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv(
                "ECON_DASHBOARD_PUBLIC_DIR",
                Path(__file__).parent.parent.parent / "public",
            )
        )
    )
    max_lookback_days: int = field(
        default_factory=lambda: int(
            os.getenv(
                "ECON_DASHBOARD_MAX_LOOKBACK_DAYS", str(DEFAULT_MAX_LOOKBACK_DAYS)
            )
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("FRED_TIMEOUT", "30.0"))
    )
    persist_report: bool = field(
        default_factory=lambda: os.getenv("ECON_DASHBOARD_PERSIST_REPORT", "")
        .strip()
        .lower()
        in _TRUTHY
    )
    series: tuple[TrackedSeries, ...] = field(default_factory=_series_from_env)
    report_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.public_dir = Path(self.public_dir)
        self.report_path = self.public_dir / "index.html"
        if self.max_lookback_days < 0:
            raise ValueError("max_lookback_days must not be negative")

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ValueError(
                "FRED_API_KEY not set. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
