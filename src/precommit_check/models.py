from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Mode(str, Enum):
    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"


@dataclass(frozen=True)
class Check:
    """A named shell command line and how it is scheduled."""
    name: str
    command: str
    mode: Mode


@dataclass
class CheckResult:
    """Outcome of running one check's command."""
    name: str
    ok: bool
    returncode: Optional[int] = None
    duration_s: float = 0.0


@dataclass
class RunOutcome:
    """Results of a whole run, in the order they were reported."""
    results: List[CheckResult] = field(default_factory=list)
    failed_check: Optional[str] = None
    strict: bool = False

    def add(self, result: CheckResult) -> None:
        self.results.append(result)

    def has_failures(self) -> bool:
        return any(not r.ok for r in self.results)

    @property
    def exit_code(self) -> int:
        if self.failed_check is not None:
            return 1
        if self.strict and self.has_failures():
            return 1
        return 0
