from __future__ import annotations
from typing import Sequence
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from .models import Check, RunOutcome


PASS_STYLE = "green"
FAIL_STYLE = "red"
NOTE_STYLE = "bold yellow"


class Reporter:
    def __init__(self, console: Console) -> None:
        self.console = console

    def passed(self, name: str) -> None:
        self.console.print(Text(f"✅ {name}", style=PASS_STYLE))

    def failed(self, name: str) -> None:
        self.console.print(Text(f"❌ {name} failed", style=FAIL_STYLE))

    def done(self) -> None:
        self.console.print(Text("🎉 all done!", style=PASS_STYLE))

    def listing(self, sequential: Sequence[Check], concurrent: Sequence[Check]) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Mode", no_wrap=True)
        table.add_column("Check", style="bold", no_wrap=True)
        table.add_column("Command")
        for c in [*sequential, *concurrent]:
            table.add_row(c.mode.value, c.name, c.command)
        self.console.print(Panel.fit(table, title=Text("Checks", style="bold blue")))

    def summary(self, outcome: RunOutcome) -> None:
        ok = sum(1 for r in outcome.results if r.ok)
        failed = len(outcome.results) - ok
        table = Table(show_header=True, header_style="bold")
        table.add_column("OK")
        table.add_column("FAILED")
        table.add_column("EXIT")
        table.add_row(str(ok), str(failed), str(outcome.exit_code))
        if outcome.exit_code != 0:
            style = "bold red"
        elif failed > 0:
            style = NOTE_STYLE
        else:
            style = "bold green"
        self.console.print(Panel.fit(table, title=Text("Summary", style=style)))
