"""HTML rendering."""

from econ_dashboard.ui.html_exporter import PLACEHOLDER, export_html, render_report

__all__ = ["PLACEHOLDER", "export_html", "render_report"]
