"""Configuration."""

from econ_dashboard.config.settings import DEFAULT_SERIES, Settings

__all__ = ["DEFAULT_SERIES", "Settings"]
