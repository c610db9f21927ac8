from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for a single check run."""

    cwd: Optional[Path] = None
    strict: bool = False
    color: bool = True
    verbose: bool = False
