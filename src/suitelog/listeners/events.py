
from dataclasses import dataclass
from typing import Optional, Protocol, Union
from .outcomes import Status

@dataclass(frozen=True)
class SuiteInfo:
    name: str
    test_count: int = 0

@dataclass(frozen=True)
class TestInfo:
    __test__ = False
    name: str
    description: str = ""
    status: Union[Status, str] = Status.PASSED
    assertions: Optional[int] = None
    output: str = ""

    def __post_init__(self):
        if not self.description:
            object.__setattr__(self, "description", self.name)

class EventSink(Protocol):
    """Events a host test runner delivers, in depth-first nested order."""
    def start_test_suite(self, suite: SuiteInfo) -> None: ...
    def end_test_suite(self, suite: SuiteInfo) -> None: ...
    def start_test(self, test: TestInfo) -> None: ...
    def end_test(self, test: TestInfo) -> None: ...
    def add_error(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None: ...
    def add_failure(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None: ...
    def add_warning(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None: ...
    def add_incomplete_test(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None: ...
    def add_risky_test(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None: ...
    def add_skipped_test(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None: ...
