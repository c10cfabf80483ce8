
import logging
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Union
from ..reporters.projector import LogProjector
from ..reporters.summary import Summary, build_summary
from .events import SuiteInfo, TestInfo
from .outcomes import classify
from .stats import StatisticsTable
from .tracker import SuiteStackTracker

log = logging.getLogger(__name__)

class RunState(str, Enum):
    IDLE = "idle"
    IN_RUN = "in_run"

class LoggerTestListener:
    """Test listener pushing run events and statistics to a logger.

    Events must arrive in depth-first nested order: every suite start is
    matched by one suite end and tests sit inside their enclosing suite.
    The top-level suite accumulates totals for the whole run; a nested
    suite is credited only for the tests that end while it is innermost.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        handlers: Iterable[logging.Handler] = (),
        filters: Iterable[Union[logging.Filter, Callable[[logging.LogRecord], bool]]] = (),
    ):
        self.logger = logger if logger is not None else logging.getLogger("suitelog")
        for handler in handlers:
            self.logger.addHandler(handler)
        for flt in filters:
            self.logger.addFilter(flt)
        self.projector = LogProjector(self.logger)
        self.tracker = SuiteStackTracker()
        self.stats = StatisticsTable()
        self.num_assertions = 0
        self.state = RunState.IDLE
        self.summary: Optional[Summary] = None

    # ---------- suites ----------
    def start_test_suite(self, suite: SuiteInfo) -> None:
        if self.state is RunState.IDLE:
            self.num_assertions = 0
            self.state = RunState.IN_RUN
        record = self.stats.open(suite.name, suite.test_count)
        self.tracker.push(record)
        self.projector.suite_started(suite)

    def end_test_suite(self, suite: SuiteInfo) -> None:
        record, complete = self.tracker.pop()
        if record.name != suite.name:
            log.debug("suite end for %r closed active suite %r", suite.name, record.name)
        self.projector.suite_ended(suite, record)
        if complete:
            self.summary = build_summary(record, self.num_assertions)
            self.projector.summary(self.summary)
            self.state = RunState.IDLE

    # ---------- tests ----------
    def start_test(self, test: TestInfo) -> None:
        self.projector.test_started(test)

    def end_test(self, test: TestInfo) -> None:
        bucket = classify(test.status)
        assertions = test.assertions or 0
        top = self.tracker.top_level()
        if self.tracker.depth > 1:
            self.tracker.innermost().credit(bucket, assertions)
        top.credit(bucket, assertions)
        self.num_assertions += assertions
        self.projector.test_ended(test, test.assertions)

    # ---------- terminal outcomes (logged only; counted at end_test) ----------
    def add_error(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None:
        self.projector.outcome("addError", test, reason, trace)

    def add_failure(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None:
        self.projector.outcome("addFailure", test, reason, trace)

    def add_warning(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None:
        self.projector.outcome("addWarning", test, reason, trace)

    def add_incomplete_test(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None:
        self.projector.outcome("addIncompleteTest", test, reason, trace)

    def add_risky_test(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None:
        self.projector.outcome("addRiskyTest", test, reason, trace)

    def add_skipped_test(self, test: TestInfo, reason: Optional[str] = None, trace: Optional[str] = None) -> None:
        self.projector.outcome("addSkippedTest", test, reason, trace)

    def get_stats(self) -> Dict[str, Dict[str, int]]:
        """Per-suite counters; a fresh copy on every call."""
        return self.stats.snapshot()
