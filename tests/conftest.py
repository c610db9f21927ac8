"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from precommit_check.config import Settings
from precommit_check.models import Check, Mode
from precommit_check.process import ProcessRunner
from precommit_check.reporter import Reporter


PASS = "exit 0"
FAIL = "exit 1"


def seq(name: str, command: str) -> Check:
    return Check(name=name, command=command, mode=Mode.SEQUENTIAL)


def conc(name: str, command: str) -> Check:
    return Check(name=name, command=command, mode=Mode.CONCURRENT)


def marking(name: str, command: str) -> str:
    """Wrap a command so every invocation appends a line to ``<name>.runs``."""
    return f"echo run >> '{name}.runs'; {command}"


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(buffer: io.StringIO) -> Reporter:
    """Reporter writing plain text into an in-memory buffer."""
    console = Console(file=buffer, no_color=True, highlight=False, width=200)
    return Reporter(console)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(cwd=tmp_path)


@pytest.fixture
def executor(settings: Settings) -> ProcessRunner:
    return ProcessRunner(settings)


def lines(buffer: io.StringIO) -> list[str]:
    return [ln for ln in buffer.getvalue().splitlines() if ln.strip()]
