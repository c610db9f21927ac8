"""Tests for the colored status lines."""

from __future__ import annotations

import io

from rich.console import Console

from precommit_check.reporter import Reporter


def _terminal(buffer: io.StringIO, no_color: bool = False) -> Reporter:
    console = Console(file=buffer, force_terminal=True, color_system="standard", no_color=no_color, width=200)
    return Reporter(console)


def test_pass_is_green_and_failure_is_red() -> None:
    buffer = io.StringIO()
    reporter = _terminal(buffer)
    reporter.passed("fmt")
    reporter.failed("check")
    reporter.done()

    out = buffer.getvalue()
    assert "\x1b[32m✅ fmt" in out
    assert "\x1b[31m❌ check failed" in out
    assert "\x1b[32m🎉 all done!" in out


def test_no_color_emits_plain_lines() -> None:
    buffer = io.StringIO()
    reporter = _terminal(buffer, no_color=True)
    reporter.passed("fmt")
    reporter.failed("check")

    assert buffer.getvalue() == "✅ fmt\n❌ check failed\n"
