"""Render the economic data report as HTML."""

import html
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from econ_dashboard.models.market_data import ReportRow


logger = logging.getLogger(__name__)

PLACEHOLDER = "N/A"

_HEAD = (
    '<!DOCTYPE html><html><head><title>Economic Data</title>'
    '<link rel="stylesheet" href="styles.css"><meta charset="utf-8"></head>'
)

_HEADER = (
    '<body><div class="stuff">'
    '<a class="arrow-link" href="#"><div class="arrow left">&#8592;</div></a>'
    '<div class="title">Economic Data</div>'
    '<a class="arrow-link" href="#"><div class="arrow right">&#8594;</div></a>'
)

_FOOTER = "</div></body></html>"


def format_value(value: str | None, escape_values: bool = False) -> str:
    """Text shown for a value. Missing values become the placeholder."""
    if value is None:
        return PLACEHOLDER
    return html.escape(value) if escape_values else value


def render_row(row: ReportRow, escape_values: bool = False) -> str:
    value = format_value(row.value, escape_values)
    return (
        f'<div class="data {row.position}">'
        f'<div class="type">{row.label}</div>'
        f'<div id="{row.key}">{value}</div>'
        f"</div>"
    )


def render_report(rows: Iterable[ReportRow], escape_values: bool = False) -> str:
    """
    Build the report document from resolved rows.

    Values are inserted as-is unless escape_values is set. FRED returns
    plain numeric strings, but anything else in a value would end up in
    the markup verbatim.
    """
    body = "".join(render_row(row, escape_values) for row in rows)
    return _HEAD + _HEADER + body + _FOOTER


def write_report(document: str, output_path: Path | str) -> Path:
    """Write a rendered document, replacing any previous file atomically."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_name(output_path.name + ".tmp")
    tmp_path.write_text(document, encoding="utf-8")
    os.replace(tmp_path, output_path)
    return output_path


def export_html(
    rows: Iterable[ReportRow],
    output_path: Path | str,
    escape_values: bool = False,
) -> Path:
    """
    Render rows and save the document.

    Args:
        rows: Resolved report rows
        output_path: Where to save the HTML file
        escape_values: HTML-escape values before inserting them

    Returns:
        Path to the generated file
    """
    path = write_report(render_report(rows, escape_values), output_path)
    logger.info(f"Report written to {path}")
    return path


def main() -> None:
    """CLI entry point."""
    import argparse
    from datetime import date

    from econ_dashboard.config import Settings
    from econ_dashboard.data import FredFetcher, resolve_all

    parser = argparse.ArgumentParser(description="Export economic data as HTML")
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output path (default: public/index.html)"
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="HTML-escape values before inserting them"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        settings = Settings()
        with FredFetcher(settings) as fetcher:
            rows = resolve_all(
                fetcher, settings.series, date.today(), settings.max_lookback_days
            )
        path = export_html(rows, args.output or settings.report_path, args.escape)
        print(f"Report exported to: {path}")
    except ValueError as e:
        print(f"Configuration error: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
