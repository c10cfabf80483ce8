
import json
from typing import IO, Iterable, Iterator, Optional, Tuple, Union
from pydantic import BaseModel, Field, ValidationError
from ..errors import ReplayError
from .events import EventSink, SuiteInfo, TestInfo

_OUTCOME_METHODS = {
    "addError": "add_error",
    "addFailure": "add_failure",
    "addWarning": "add_warning",
    "addIncompleteTest": "add_incomplete_test",
    "addRiskyTest": "add_risky_test",
    "addSkippedTest": "add_skipped_test",
}
_SUITE_OPS = ("startTestSuite", "endTestSuite")
_TEST_OPS = ("startTest", "endTest") + tuple(_OUTCOME_METHODS)

class ReplayEvent(BaseModel):
    """One line of an event file; field names match the emitted log context."""
    operation: str
    suiteName: Optional[str] = None
    testCount: int = Field(0, ge=0)
    testName: Optional[str] = None
    testDescription: str = ""
    status: str = "passed"
    assertionCount: Optional[int] = Field(None, ge=0)
    output: str = ""
    reason: Optional[str] = None
    trace: Optional[str] = None

def dispatch(sink: EventSink, event: ReplayEvent) -> None:
    op = event.operation
    if op in _SUITE_OPS:
        if event.suiteName is None:
            raise ValueError(f"{op} requires suiteName")
        suite = SuiteInfo(event.suiteName, event.testCount)
        if op == "startTestSuite":
            sink.start_test_suite(suite)
        else:
            sink.end_test_suite(suite)
        return
    if op not in _TEST_OPS:
        raise ValueError(f"unknown operation {op!r}")
    if event.testName is None:
        raise ValueError(f"{op} requires testName")
    test = TestInfo(event.testName, event.testDescription, event.status, event.assertionCount, event.output)
    if op == "startTest":
        sink.start_test(test)
    elif op == "endTest":
        sink.end_test(test)
    else:
        getattr(sink, _OUTCOME_METHODS[op])(test, event.reason, event.trace)

def parse_events(lines: Iterable[Union[str, bytes]]) -> Iterator[Tuple[int, ReplayEvent]]:
    """Parse event lines; byte lines are decoded one at a time as UTF-8."""
    for lineno, line in enumerate(lines, 1):
        try:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            if not line.strip():
                continue
            yield lineno, ReplayEvent.model_validate(json.loads(line))
        except UnicodeDecodeError as e:
            raise ReplayError(lineno, f"not valid UTF-8: {e}") from e
        except (json.JSONDecodeError, ValidationError) as e:
            raise ReplayError(lineno, str(e)) from e

def replay(sink: EventSink, stream: IO) -> int:
    """Feed every event in ``stream`` (text or binary) to ``sink``; returns the number of events."""
    count = 0
    for lineno, event in parse_events(stream):
        try:
            dispatch(sink, event)
        except ValueError as e:
            raise ReplayError(lineno, str(e)) from e
        count += 1
    return count
