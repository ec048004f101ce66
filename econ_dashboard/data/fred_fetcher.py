"""FRED API fetcher for single-date observations."""

import logging
from datetime import date

import httpx

from econ_dashboard.config import Settings
from econ_dashboard.errors import NotFound, TransportError


logger = logging.getLogger(__name__)


class FredFetcher:
    """Fetches one observation value per request from the FRED API."""

    BASE_URL = "https://api.stlouisfed.org/fred"

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.request_timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FredFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_value(self, series_id: str, day: date) -> str:
        """
        Fetch the value of a series for exactly one date.

        Args:
            series_id: FRED series ID
            day: Used as both observation_start and observation_end

        Returns:
            The raw value string of the first observation

        Raises:
            NotFound: No observation, or no value, for that date
            TransportError: Request failed or the body was not usable JSON
        """
        params = {
            "series_id": series_id,
            "observation_start": day.isoformat(),
            "observation_end": day.isoformat(),
            "api_key": self.settings.fred_api_key,
            "file_type": "json",
        }

        try:
            response = self.client.get(
                f"{self.BASE_URL}/series/observations",
                params=params,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                series_id, day, f"HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(series_id, day, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise TransportError(series_id, day, "invalid JSON response") from e

        if not isinstance(data, dict):
            raise TransportError(series_id, day, "unexpected response format")

        observations = data.get("observations") or []
        if not isinstance(observations, list):
            raise TransportError(series_id, day, "unexpected observations format")
        if not observations:
            raise NotFound(series_id, day, "no observations")

        first = observations[0]
        if not isinstance(first, dict):
            raise TransportError(series_id, day, "unexpected observation format")
        value = first.get("value")
        if value is None or value == "":
            raise NotFound(series_id, day, "value not found in response")
        if not isinstance(value, str):
            raise TransportError(series_id, day, f"non-string value {value!r}")

        return value


def main() -> None:
    """CLI entry point for looking up the latest value of a series."""
    import argparse
    import sys

    from econ_dashboard.data.resolver import find_recent_value, resolve_all
    from econ_dashboard.errors import ResolutionExhausted

    parser = argparse.ArgumentParser(description="Look up latest FRED values")
    parser.add_argument(
        "--series",
        type=str,
        help="FRED series ID (default: all tracked series)",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Start date for the walkback, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--max-lookback",
        type=int,
        default=None,
        help="Maximum number of days to walk back",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        settings = Settings()
        lookback = (
            args.max_lookback
            if args.max_lookback is not None
            else settings.max_lookback_days
        )
        start = args.date or date.today()

        with FredFetcher(settings) as fetcher:
            if args.series:
                obs = find_recent_value(fetcher, args.series, start, lookback)
                print(f"{obs.series_id}: {obs.value} ({obs.date})")
                return

            rows = resolve_all(fetcher, settings.series, start, lookback)
            for series, row in zip(settings.series, rows):
                value = row.value if row.value is not None else "N/A"
                print(f"  {series.series_id:12} | {row.label:16} {value}")

    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except ResolutionExhausted as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
