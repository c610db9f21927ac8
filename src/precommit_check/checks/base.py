from __future__ import annotations
from typing import Protocol
from ..models import Check, CheckResult


class CheckExecutor(Protocol):
    """Protocol for anything that can execute a single check."""

    def run(self, check: Check) -> CheckResult:
        ...
