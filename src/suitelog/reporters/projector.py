
import logging
from typing import Any, Dict, NamedTuple, Optional
from ..logging import NOTICE
from ..listeners.events import SuiteInfo, TestInfo
from ..listeners.stats import SuiteRecord
from .summary import Summary

# operation -> (level, message template)
OUTCOMES = {
    "addError": (logging.ERROR, "Error while running test '{}'."),
    "addFailure": (logging.ERROR, "Test '{}' failed."),
    "addWarning": (logging.WARNING, "Warning while running test '{}'."),
    "addIncompleteTest": (logging.WARNING, "Test '{}' is incomplete."),
    "addRiskyTest": (logging.WARNING, "Test '{}' is risky."),
    "addSkippedTest": (logging.WARNING, "Test '{}' has been skipped."),
}

class LogEntry(NamedTuple):
    level: int
    message: str
    context: Dict[str, Any]

def _test_context(operation: str, test: TestInfo) -> Dict[str, Any]:
    return {"testName": test.name, "testDescription": test.description, "operation": operation}

class LogProjector:
    """Turns listener events into log entries and hands them to the logger."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def emit(self, entry: LogEntry) -> LogEntry:
        # messages embed test and suite names verbatim; no placeholder expansion
        self.logger.log(entry.level, entry.message, extra={"context": entry.context, "interpolate": False})
        return entry

    def suite_started(self, suite: SuiteInfo) -> LogEntry:
        ctx = {"suiteName": suite.name, "testCount": suite.test_count, "operation": "startTestSuite"}
        return self.emit(LogEntry(NOTICE, f"TestSuite '{suite.name}' started with {suite.test_count} tests.", ctx))

    def suite_ended(self, suite: SuiteInfo, record: SuiteRecord) -> LogEntry:
        ctx = {
            "suiteName": suite.name,
            "testCount": record.tests,
            "assertionCount": record.assertions,
            "failureCount": record.failures,
            "errorCount": record.errors,
            "incompleteCount": record.incompletes,
            "skipCount": record.skips,
            "riskyCount": record.risky,
            "operation": "endTestSuite",
        }
        return self.emit(LogEntry(NOTICE, f"TestSuite '{suite.name}' ended.", ctx))

    def test_started(self, test: TestInfo) -> LogEntry:
        return self.emit(LogEntry(logging.INFO, f"Test '{test.name}' started.", _test_context("startTest", test)))

    def test_ended(self, test: TestInfo, assertions: Optional[int] = None) -> LogEntry:
        ctx = _test_context("endTest", test)
        ctx["output"] = test.output
        if assertions is not None:
            ctx["assertionCount"] = assertions
        return self.emit(LogEntry(logging.INFO, f"Test '{test.name}' ended.", ctx))

    def outcome(self, operation: str, test: TestInfo, reason: Optional[str] = None,
                trace: Optional[str] = None) -> LogEntry:
        level, template = OUTCOMES[operation]
        ctx = _test_context(operation, test)
        ctx["reason"] = reason or ""
        ctx["trace"] = trace or ""
        return self.emit(LogEntry(level, template.format(test.name), ctx))

    def summary(self, summary: Summary) -> LogEntry:
        return self.emit(LogEntry(NOTICE, summary.message, summary.context()))
