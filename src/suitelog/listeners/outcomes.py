
from enum import Enum
from typing import Optional, Union

class Status(str, Enum):
    PASSED = "passed"
    FAILURE = "failure"
    ERROR = "error"
    INCOMPLETE = "incomplete"
    SKIPPED = "skipped"
    RISKY = "risky"
    WARNING = "warning"

class Bucket(str, Enum):
    TESTS = "tests"
    FAILURES = "failures"
    ERRORS = "errors"
    INCOMPLETES = "incompletes"
    SKIPS = "skips"
    RISKY = "risky"

_BUCKETS = {
    Status.FAILURE.value: Bucket.FAILURES,
    Status.ERROR.value: Bucket.ERRORS,
    Status.INCOMPLETE.value: Bucket.INCOMPLETES,
    Status.SKIPPED.value: Bucket.SKIPS,
    Status.RISKY.value: Bucket.RISKY,
}

def classify(status: Optional[Union[Status, str]]) -> Bucket:
    """Map a terminal status code to its statistics bucket.

    Passed, warning and unrecognised codes all land in ``Bucket.TESTS``;
    an outcome is never dropped.
    """
    if status is None:
        return Bucket.TESTS
    key = status.value if isinstance(status, Status) else str(status).strip().lower()
    return _BUCKETS.get(key, Bucket.TESTS)
