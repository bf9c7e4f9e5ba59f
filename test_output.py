#!/usr/bin/env python3
"""
Tests for the CLI output helper
"""

import io

from rich.console import Console

from scrape_checker.output import Output


def _output(quiet=False):
    out_buf, err_buf = io.StringIO(), io.StringIO()
    out = Output(
        console=Console(file=out_buf, width=200, highlight=False),
        err_console=Console(file=err_buf, width=200, highlight=False),
        quiet=quiet,
    )
    return out, out_buf, err_buf


def test_success():
    out, buf, _ = _output()
    out.success("Operation completed")
    assert "✔ Operation completed" in buf.getvalue()


def test_error_goes_to_stderr():
    out, buf, err = _output()
    out.error("Something went wrong")
    assert "Something went wrong" in err.getvalue()
    assert buf.getvalue() == ""


def test_warn_and_info():
    out, buf, _ = _output()
    out.warn("Be careful")
    out.info("FYI")
    assert "⚠ Be careful" in buf.getvalue()
    assert "ℹ FYI" in buf.getvalue()


def test_key_value():
    out, buf, _ = _output()
    out.key_value("Name", "John")
    assert "Name: John" in buf.getvalue()


def test_list_item():
    out, buf, _ = _output()
    out.list_item("First item")
    assert "  • First item" in buf.getvalue()


def test_selector_brackets_are_not_markup():
    out, buf, _ = _output()
    out.dim("  [title]: 4")
    out.dim("  [class*='card'] a: 2")
    assert "[title]: 4" in buf.getvalue()
    assert "[class*='card'] a: 2" in buf.getvalue()


def test_divider():
    out, buf, _ = _output()
    out.divider(length=10)
    assert "─" * 10 in buf.getvalue()


def test_quiet_suppresses_all_but_errors_and_raw():
    out, buf, err = _output(quiet=True)
    out.info("hidden")
    out.success("hidden")
    out.raw('{"ok": true}')
    out.error("shown")
    assert "hidden" not in buf.getvalue()
    assert '{"ok": true}' in buf.getvalue()
    assert "shown" in err.getvalue()
