# Lightweight package init: the pytest plugin and CLI pull in heavier imports.
__all__ = ["LoggerTestListener", "SuiteInfo", "TestInfo", "Status", "EmptyRunError", "setup_logging"]

def __getattr__(name):
    if name == "LoggerTestListener":
        from .listeners.listener import LoggerTestListener as _LoggerTestListener
        return _LoggerTestListener
    if name in ("SuiteInfo", "TestInfo"):
        from .listeners import events
        return getattr(events, name)
    if name == "Status":
        from .listeners.outcomes import Status as _Status
        return _Status
    if name == "EmptyRunError":
        from .errors import EmptyRunError as _EmptyRunError
        return _EmptyRunError
    if name == "setup_logging":
        from .logging import setup_logging as _setup_logging
        return _setup_logging
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
