"""Shared pytest fixtures.

Provides:
- Settings pointing at a temporary public directory
- A scripted fetcher standing in for the FRED API
- Resolved report rows and a FastAPI test client built from them
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from econ_dashboard.config import DEFAULT_SERIES, Settings
from econ_dashboard.errors import NotFound, TransportError
from econ_dashboard.models import ReportRow
from econ_dashboard.server import ReportHolder, create_app


STYLES = b"body { color: #e2e8f0; }\n.data { padding: 0.75rem; }\n"

SAMPLE_VALUES = {
    "usa-gdp": "20529.011",
    "usa-unemployment": "4.1",
    "usa-10yr-bond-yield": "4.22",
    "usa-inflation": "314.540",
    "wti-crude": "71.34",
    "usa-corn": "4.18",
}


class ScriptedFetcher:
    """Answers fetch_value from a table and records every call."""

    def __init__(
        self,
        values: dict[tuple[str, date], str] | None = None,
        transport_failures: set[tuple[str, date]] | None = None,
    ) -> None:
        self.values = values or {}
        self.transport_failures = transport_failures or set()
        self.calls: list[tuple[str, date]] = []

    def fetch_value(self, series_id: str, day: date) -> str:
        self.calls.append((series_id, day))
        if (series_id, day) in self.transport_failures:
            raise TransportError(series_id, day, "connection refused")
        try:
            return self.values[(series_id, day)]
        except KeyError:
            raise NotFound(series_id, day, "no observations") from None


@pytest.fixture()
def public_dir(tmp_path: Path) -> Path:
    public = tmp_path / "public"
    public.mkdir()
    (public / "styles.css").write_bytes(STYLES)
    return public


@pytest.fixture()
def settings(public_dir: Path) -> Settings:
    return Settings(
        fred_api_key="test-key",
        public_dir=public_dir,
        max_lookback_days=30,
        persist_report=False,
        series=DEFAULT_SERIES,
    )


@pytest.fixture()
def rows() -> list[ReportRow]:
    return [ReportRow.from_series(s, SAMPLE_VALUES[s.key]) for s in DEFAULT_SERIES]


@pytest.fixture()
def holder(rows: list[ReportRow]) -> ReportHolder:
    return ReportHolder(rows)


@pytest.fixture()
def client(settings: Settings, holder: ReportHolder) -> TestClient:
    return TestClient(create_app(settings, holder))
