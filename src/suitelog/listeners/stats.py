
from dataclasses import dataclass, asdict
from typing import Dict, Iterator, Optional
from .outcomes import Bucket

_BUCKET_FIELDS = {
    Bucket.TESTS: "passed",
    Bucket.FAILURES: "failures",
    Bucket.ERRORS: "errors",
    Bucket.INCOMPLETES: "incompletes",
    Bucket.SKIPS: "skips",
    Bucket.RISKY: "risky",
}

@dataclass
class SuiteRecord:
    """Counters for one suite.

    ``tests`` counts every test end credited to the suite; the six buckets
    split that total, so ``passed + failures + ... + risky == tests``.
    """
    name: str
    declared_tests: int = 0
    tests: int = 0
    assertions: int = 0
    passed: int = 0
    failures: int = 0
    errors: int = 0
    incompletes: int = 0
    skips: int = 0
    risky: int = 0

    def credit(self, bucket: Bucket, assertions: int = 0) -> None:
        self.tests += 1
        self.assertions += assertions
        field = _BUCKET_FIELDS[bucket]
        setattr(self, field, getattr(self, field) + 1)

    def count(self, bucket: Bucket) -> int:
        return getattr(self, _BUCKET_FIELDS[bucket])

    def counters(self) -> Dict[str, int]:
        data = asdict(self)
        del data["name"], data["declared_tests"]
        return data

class StatisticsTable:
    """Suite name -> most recently started SuiteRecord with that name."""
    def __init__(self):
        self._records: Dict[str, SuiteRecord] = {}

    def open(self, name: str, declared_tests: int = 0) -> SuiteRecord:
        rec = SuiteRecord(name=name, declared_tests=declared_tests)
        self._records[name] = rec
        return rec

    def get(self, name: str) -> Optional[SuiteRecord]:
        return self._records.get(name)

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        return {name: rec.counters() for name, rec in self._records.items()}

    def __contains__(self, name: str) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[SuiteRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)
