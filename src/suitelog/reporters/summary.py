
from dataclasses import dataclass
from typing import Any, Dict
from ..listeners.stats import SuiteRecord

_OPTIONAL = [
    ("Failures", "failures"),
    ("Errors", "errors"),
    ("Incomplete", "incompletes"),
    ("Skipped", "skips"),
    ("Risky", "risky"),
]

@dataclass(frozen=True)
class Summary:
    status: str
    tests: int
    assertions: int
    failures: int = 0
    errors: int = 0
    incompletes: int = 0
    skips: int = 0
    risky: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "OK"

    @property
    def message(self) -> str:
        parts = [f"Tests: {self.tests}", f"Assertions: {self.assertions}"]
        parts += [f"{label}: {getattr(self, attr)}" for label, attr in _OPTIONAL if getattr(self, attr) > 0]
        return f"Results {self.status}. " + ", ".join(parts)

    def context(self) -> Dict[str, Any]:
        return {
            "operation": "printFooter",
            "status": self.status,
            "testCount": self.tests,
            "assertionCount": self.assertions,
            "failureCount": self.failures,
            "errorCount": self.errors,
            "incompleteCount": self.incompletes,
            "skipCount": self.skips,
            "riskyCount": self.risky,
        }

def build_summary(record: SuiteRecord, assertions: int) -> Summary:
    """Final run summary from the top-level suite's counters."""
    status = "KO" if record.errors + record.failures > 0 else "OK"
    return Summary(
        status=status,
        tests=record.tests,
        assertions=assertions,
        failures=record.failures,
        errors=record.errors,
        incompletes=record.incompletes,
        skips=record.skips,
        risky=record.risky,
    )
