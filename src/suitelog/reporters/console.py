
from typing import Dict, Optional
from rich.console import Console
from rich.table import Table

_COLUMNS = ["tests", "assertions", "passed", "failures", "errors", "incompletes", "skips", "risky"]

class ConsoleReporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def emit(self, stats: Dict[str, Dict[str, int]]) -> None:
        table = Table(title="Suite statistics")
        table.add_column("suite")
        for col in _COLUMNS:
            table.add_column(col, justify="right")
        for name, counters in stats.items():
            table.add_row(name, *(str(counters.get(col, 0)) for col in _COLUMNS))
        self.console.print(table)
