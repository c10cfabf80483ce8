from suitelog.listeners.stats import SuiteRecord
from suitelog.reporters.summary import Summary, build_summary


def test_zero_counts_are_omitted():
    rec = SuiteRecord("s", tests=3, passed=3)
    summary = build_summary(rec, 5)
    assert summary.ok
    assert summary.message == "Results OK. Tests: 3, Assertions: 5"


def test_empty_run_still_prints_tests_and_assertions():
    assert build_summary(SuiteRecord("s"), 0).message == "Results OK. Tests: 0, Assertions: 0"


def test_all_buckets_in_fixed_order():
    rec = SuiteRecord("s", tests=15, passed=0, failures=1, errors=2, incompletes=3, skips=4, risky=5)
    summary = build_summary(rec, 7)
    assert summary.status == "KO"
    assert summary.message == (
        "Results KO. Tests: 15, Assertions: 7, Failures: 1, Errors: 2, "
        "Incomplete: 3, Skipped: 4, Risky: 5"
    )


def test_errors_alone_make_the_run_ko():
    assert build_summary(SuiteRecord("s", tests=1, errors=1), 0).status == "KO"


def test_skips_and_risky_keep_the_run_ok():
    summary = build_summary(SuiteRecord("s", tests=2, skips=1, risky=1), 1)
    assert summary.status == "OK"
    assert summary.message.endswith("Skipped: 1, Risky: 1")


def test_context_fields():
    ctx = Summary("KO", 4, 9, failures=1, skips=2).context()
    assert ctx == {
        "operation": "printFooter",
        "status": "KO",
        "testCount": 4,
        "assertionCount": 9,
        "failureCount": 1,
        "errorCount": 0,
        "incompleteCount": 0,
        "skipCount": 2,
        "riskyCount": 0,
    }
