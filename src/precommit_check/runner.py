from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Sequence
import logging

from .checks.base import CheckExecutor
from .models import Check, Mode, RunOutcome
from .reporter import Reporter


log = logging.getLogger(__name__)


def _require_mode(checks: Sequence[Check], mode: Mode) -> None:
    for c in checks:
        if c.mode != mode:
            raise ValueError(f"check {c.name!r} is {c.mode.value} but was listed as {mode.value}")


class CheckRunner:
    """
    Runs a pre-commit check list:
      - sequential checks one at a time, stopping at the first failure
      - then every concurrent check at once, joined before returning
    """

    def __init__(self, executor: CheckExecutor, reporter: Reporter, strict: bool = False) -> None:
        self.executor = executor
        self.reporter = reporter
        self.strict = strict

    def run(self, sequential: Sequence[Check], concurrent: Sequence[Check]) -> RunOutcome:
        _require_mode(sequential, Mode.SEQUENTIAL)
        _require_mode(concurrent, Mode.CONCURRENT)
        outcome = RunOutcome(strict=self.strict)

        for check in sequential:
            result = self.executor.run(check)
            outcome.add(result)
            if not result.ok:
                self.reporter.failed(check.name)
                outcome.failed_check = check.name
                log.debug("aborting after %s failed", check.name)
                return outcome
            self.reporter.passed(check.name)

        self._run_concurrent(list(concurrent), outcome)

        if outcome.exit_code == 0:
            self.reporter.done()
        return outcome

    def _run_concurrent(self, checks: List[Check], outcome: RunOutcome) -> None:
        if not checks:
            return
        # One worker per check so every child process starts immediately.
        with ThreadPoolExecutor(max_workers=len(checks), thread_name_prefix="check") as pool:
            futures = {pool.submit(self.executor.run, c): c for c in checks}
            for fut in as_completed(futures):
                result = fut.result()
                outcome.add(result)
                if result.ok:
                    self.reporter.passed(result.name)
                else:
                    self.reporter.failed(result.name)
