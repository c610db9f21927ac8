from __future__ import annotations
import logging
import subprocess
import time

from .config import Settings
from .models import Check, CheckResult


log = logging.getLogger(__name__)


class ProcessRunner:
    """Runs a check's command line through the shell, discarding its output."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def run(self, check: Check) -> CheckResult:
        cwd = str(self._settings.cwd) if self._settings.cwd else None
        log.debug("running %s: %s (cwd=%s)", check.name, check.command, cwd or ".")
        started = time.monotonic()
        try:
            proc = subprocess.run(
                check.command,
                shell=True,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as e:
            log.error("could not start %s: %s", check.name, e)
            return CheckResult(
                name=check.name,
                ok=False,
                returncode=None,
                duration_s=time.monotonic() - started,
            )
        elapsed = time.monotonic() - started
        log.debug("%s exited %d after %.2fs", check.name, proc.returncode, elapsed)
        return CheckResult(
            name=check.name,
            ok=proc.returncode == 0,
            returncode=proc.returncode,
            duration_s=elapsed,
        )
