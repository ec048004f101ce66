"""Economic data snapshot served as a static HTML page."""

__version__ = "0.1.0"
