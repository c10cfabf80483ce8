import io
import json
import pytest

from suitelog.errors import EmptyRunError, ReplayError
from suitelog.listeners.replay import ReplayEvent, dispatch, replay


def lines(*events):
    return io.StringIO("\n".join(json.dumps(e) for e in events) + "\n")


RUN = [
    {"operation": "startTestSuite", "suiteName": "Top", "testCount": 3},
    {"operation": "startTestSuite", "suiteName": "Inner", "testCount": 2},
    {"operation": "startTest", "testName": "testPass"},
    {"operation": "endTest", "testName": "testPass", "assertionCount": 1},
    {"operation": "startTest", "testName": "testSkip"},
    {"operation": "addSkippedTest", "testName": "testSkip", "reason": "no db"},
    {"operation": "endTest", "testName": "testSkip", "status": "skipped", "assertionCount": 0},
    {"operation": "endTestSuite", "suiteName": "Inner"},
    {"operation": "startTest", "testName": "testErr"},
    {"operation": "addError", "testName": "testErr", "reason": "boom", "trace": "x.py:1"},
    {"operation": "endTest", "testName": "testErr", "status": "ERROR", "assertionCount": 2},
    {"operation": "endTestSuite", "suiteName": "Top"},
]


def test_replay_full_run(listener, handler):
    assert replay(listener, lines(*RUN)) == len(RUN)
    stats = listener.get_stats()
    assert stats["Inner"]["tests"] == 2 and stats["Inner"]["skips"] == 1
    assert stats["Top"]["errors"] == 1 and stats["Top"]["assertions"] == 3
    assert listener.summary.message == "Results KO. Tests: 3, Assertions: 3, Errors: 1, Skipped: 1"
    skip = next(r for r in handler.records if r.context["operation"] == "addSkippedTest")
    assert skip.context["reason"] == "no db"


def test_blank_lines_are_skipped(listener):
    stream = io.StringIO('\n{"operation": "startTestSuite", "suiteName": "S"}\n\n')
    assert replay(listener, stream) == 1


def test_bad_json_reports_line_number(listener):
    stream = io.StringIO('{"operation": "startTestSuite", "suiteName": "S"}\n\n{nope\n')
    with pytest.raises(ReplayError) as exc:
        replay(listener, stream)
    assert exc.value.lineno == 3


def test_unknown_operation(listener):
    with pytest.raises(ReplayError, match="unknown operation"):
        replay(listener, lines({"operation": "explode"}))


def test_missing_names(listener):
    with pytest.raises(ValueError, match="requires suiteName"):
        dispatch(listener, ReplayEvent(operation="endTestSuite"))
    with pytest.raises(ReplayError, match="requires testName"):
        replay(listener, lines({"operation": "startTest"}))


def test_test_end_outside_suite_is_fatal(listener):
    with pytest.raises(EmptyRunError):
        replay(listener, lines({"operation": "endTest", "testName": "t"}))


@pytest.mark.parametrize("event", [
    {"operation": "startTestSuite", "suiteName": "S", "testCount": -4},
    {"operation": "endTest", "testName": "t", "assertionCount": -7},
])
def test_negative_counts_are_rejected(listener, event):
    stream = lines({"operation": "startTestSuite", "suiteName": "Top"}, event)
    with pytest.raises(ReplayError) as exc:
        replay(listener, stream)
    assert exc.value.lineno == 2
    assert all(v >= 0 for counters in listener.get_stats().values() for v in counters.values())


def test_binary_stream_is_decoded_per_line(listener):
    stream = io.BytesIO(b'{"operation": "startTestSuite", "suiteName": "S\xc3\xa9"}\n'
                        b'{"operation": "endTestSuite", "suiteName": "\xff"}\n')
    with pytest.raises(ReplayError, match="UTF-8") as exc:
        replay(listener, stream)
    assert exc.value.lineno == 2
    assert "Sé" in listener.get_stats()
