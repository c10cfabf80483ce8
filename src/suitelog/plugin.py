
from typing import Dict, List, Optional, Tuple
import pytest
from .config import load_config
from .listeners.events import SuiteInfo, TestInfo
from .listeners.listener import LoggerTestListener
from .listeners.outcomes import Status
from .logging import setup_logging

_OUTCOME_CALLS = {
    Status.ERROR: "add_error",
    Status.FAILURE: "add_failure",
    Status.INCOMPLETE: "add_incomplete_test",
    Status.SKIPPED: "add_skipped_test",
    Status.RISKY: "add_risky_test",
}

def report_status(report, excinfo=None) -> Optional[Status]:
    """Status implied by one phase report; None when the phase went cleanly."""
    xfail = hasattr(report, "wasxfail")
    if report.skipped:
        return Status.INCOMPLETE if xfail else Status.SKIPPED
    if report.failed:
        if report.when != "call":
            return Status.ERROR
        # strict XPASS fails without an exception
        if excinfo is None or excinfo.errisinstance(AssertionError):
            return Status.FAILURE
        return Status.ERROR
    if report.when == "call" and xfail:
        return Status.RISKY
    return None

def report_reason(report) -> str:
    if getattr(report, "wasxfail", ""):
        return report.wasxfail
    longrepr = report.longrepr
    if isinstance(longrepr, tuple):
        return longrepr[2]
    crash = getattr(longrepr, "reprcrash", None)
    if crash is not None:
        return crash.message
    return str(longrepr) if longrepr else ""

def _suite_nodes(item) -> list:
    return [n for n in item.listchain() if isinstance(n, (pytest.Module, pytest.Class))]

class SuitelogPlugin:
    """Feeds a pytest session to a listener as nested suites: session, module, class."""

    def __init__(self, listener: LoggerTestListener):
        self.listener = listener
        self.count_assertions = False
        self._counts: Dict[str, int] = {}
        self._open: List[Tuple[str, SuiteInfo]] = []
        self._status: Dict[str, Status] = {}
        self._assertions: Dict[str, int] = {}
        self._output: Dict[str, str] = {}

    def _test_info(self, item, status: Status = Status.PASSED) -> TestInfo:
        default = 0 if self.count_assertions else None
        return TestInfo(item.name, item.nodeid, status, self._assertions.get(item.nodeid, default),
                        self._output.get(item.nodeid, ""))

    def _enter(self, nodeid: str, name: str) -> None:
        suite = SuiteInfo(name, self._counts.get(nodeid, 0))
        self._open.append((nodeid, suite))
        self.listener.start_test_suite(suite)

    def _leave(self) -> None:
        _, suite = self._open.pop()
        self.listener.end_test_suite(suite)

    def pytest_sessionstart(self, session):
        self.count_assertions = bool(session.config.getini("enable_assertion_pass_hook"))

    @pytest.hookimpl(trylast=True)
    def pytest_collection_finish(self, session):
        self._counts[""] = len(session.items)
        for item in session.items:
            for node in _suite_nodes(item):
                self._counts[node.nodeid] = self._counts.get(node.nodeid, 0) + 1
        self._enter("", session.name)

    @pytest.hookimpl(hookwrapper=True, tryfirst=True)
    def pytest_runtest_protocol(self, item, nextitem):
        if not self._open:
            yield
            return
        chain = _suite_nodes(item)
        ids = [""] + [n.nodeid for n in chain]
        keep = 0
        while keep < min(len(ids), len(self._open)) and ids[keep] == self._open[keep][0]:
            keep += 1
        while len(self._open) > keep:
            self._leave()
        for node in chain[keep - 1:]:
            self._enter(node.nodeid, node.name)

        self.listener.start_test(self._test_info(item))
        yield
        status = self._status.pop(item.nodeid, Status.PASSED)
        self.listener.end_test(self._test_info(item, status))
        self._assertions.pop(item.nodeid, None)
        self._output.pop(item.nodeid, None)

    @pytest.hookimpl(hookwrapper=True, tryfirst=True)
    def pytest_runtest_makereport(self, item, call):
        outcome = yield
        report = outcome.get_result()
        # each phase report carries the captures of all phases so far
        self._output[item.nodeid] = report.capstdout + report.capstderr
        status = report_status(report, call.excinfo)
        if status is None or item.nodeid in self._status:
            return
        self._status[item.nodeid] = status
        notify = getattr(self.listener, _OUTCOME_CALLS[status])
        notify(self._test_info(item, status), report_reason(report), report.longreprtext)

    def pytest_warning_recorded(self, warning_message, when, nodeid, location):
        if when != "runtest" or not nodeid:
            return
        test = TestInfo(nodeid.rsplit("::", 1)[-1], nodeid)
        trace = f"{warning_message.filename}:{warning_message.lineno}"
        self.listener.add_warning(test, str(warning_message.message), trace)

    def pytest_assertion_pass(self, item, lineno, orig, expl):
        self._assertions[item.nodeid] = self._assertions.get(item.nodeid, 0) + 1

    @pytest.hookimpl(tryfirst=True)
    def pytest_sessionfinish(self, session, exitstatus):
        while self._open:
            self._leave()

def pytest_addoption(parser):
    group = parser.getgroup("suitelog")
    group.addoption("--suitelog", action="store_true", default=False,
                    help="log suite and test events with run statistics")
    group.addoption("--suitelog-config", default=None, help="suitelog YAML config file")

def pytest_configure(config):
    if not config.getoption("suitelog"):
        return
    cfg = load_config(config.getoption("suitelog_config"))
    verbose = config.getoption("verbose")
    level = "DEBUG" if verbose > 1 else "INFO" if verbose > 0 else None
    listener = LoggerTestListener(setup_logging(cfg, level))
    config.pluginmanager.register(SuitelogPlugin(listener), "suitelog-listener")
