"""Tests for report rendering."""

from dataclasses import replace

from econ_dashboard.models import ReportRow
from econ_dashboard.ui import PLACEHOLDER, export_html, render_report

from tests.conftest import SAMPLE_VALUES


def test_render_is_deterministic(rows):
    assert render_report(rows) == render_report(list(rows))


def test_every_value_in_its_labeled_field(rows):
    document = render_report(rows)

    for key, value in SAMPLE_VALUES.items():
        assert f'<div id="{key}">{value}</div>' in document


def test_document_shell(rows):
    document = render_report(rows)

    assert document.startswith("<!DOCTYPE html><html><head>")
    assert '<link rel="stylesheet" href="styles.css">' in document
    assert '<meta charset="utf-8">' in document
    assert '<div class="title">Economic Data</div>' in document
    assert document.endswith("</div></body></html>")


def test_rows_keep_order_and_position(rows):
    document = render_report(rows)

    offsets = [document.index(f'id="{row.key}"') for row in rows]
    assert offsets == sorted(offsets)
    assert (
        '<div class="data middle"><div class="type">USA GDP:</div>' in document
    )
    assert '<div class="data bottom"><div class="type">Corn:</div>' in document


def test_changing_one_value_changes_only_that_field(rows):
    changed = list(rows)
    changed[2] = replace(changed[2], value="9.99")

    before = render_report(rows)
    after = render_report(changed)

    old_field = f'<div id="{rows[2].key}">{rows[2].value}</div>'
    new_field = f'<div id="{rows[2].key}">9.99</div>'
    assert after != before
    assert after == before.replace(old_field, new_field)


def test_missing_value_renders_placeholder():
    row = ReportRow("usa-gdp", "USA GDP:", None)

    document = render_report([row])

    assert f'<div id="usa-gdp">{PLACEHOLDER}</div>' in document
    assert "None" not in document
    assert "undefined" not in document


def test_values_unescaped_by_default():
    row = ReportRow("wti-crude", "WTI Crude:", "<b>71</b>")

    assert '<div id="wti-crude"><b>71</b></div>' in render_report([row])


def test_escape_values():
    row = ReportRow("wti-crude", "WTI Crude:", "<b>71</b> & co")

    document = render_report([row], escape_values=True)

    assert '<div id="wti-crude">&lt;b&gt;71&lt;/b&gt; &amp; co</div>' in document


def test_export_html_writes_document(rows, tmp_path):
    output = tmp_path / "dist" / "index.html"

    path = export_html(rows, output)

    assert path == output
    assert output.read_text(encoding="utf-8") == render_report(rows)
    assert list(output.parent.iterdir()) == [output]


def test_export_html_overwrites_previous(rows, tmp_path):
    output = tmp_path / "index.html"
    output.write_text("stale", encoding="utf-8")

    export_html(rows, output)

    assert "stale" not in output.read_text(encoding="utf-8")
