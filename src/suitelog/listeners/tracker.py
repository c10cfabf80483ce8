
from dataclasses import dataclass, field
from typing import List, Tuple
from ..errors import EmptyRunError
from .stats import SuiteRecord

@dataclass
class SuiteStackTracker:
    """Which suites are active, in start order.

    ``suites`` is the append-only history; ``_active`` is a real LIFO so
    the innermost suite is always the deepest one still running, even
    when suite names repeat or sibling suites run one after another.
    """
    suites: List[str] = field(default_factory=list)
    ended_suites: int = 0
    _active: List[SuiteRecord] = field(default_factory=list, repr=False)

    @property
    def depth(self) -> int:
        return len(self.suites) - self.ended_suites

    def push(self, record: SuiteRecord) -> None:
        self.suites.append(record.name)
        self._active.append(record)

    def pop(self) -> Tuple[SuiteRecord, bool]:
        """End the innermost suite; returns it and whether the run is complete."""
        if not self._active:
            raise EmptyRunError("suite ended but no suite is active")
        self.ended_suites += 1
        record = self._active.pop()
        return record, not self._active

    def top_level(self) -> SuiteRecord:
        if not self._active:
            raise EmptyRunError("no test suite has started")
        return self._active[0]

    def innermost(self) -> SuiteRecord:
        if not self._active:
            raise EmptyRunError("no test suite has started")
        return self._active[-1]
