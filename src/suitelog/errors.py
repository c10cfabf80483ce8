
class SuitelogError(Exception):
    """Base class for errors raised by suitelog."""

class EmptyRunError(SuitelogError, LookupError):
    """A suite was queried or ended while no suite is active."""

class ReplayError(SuitelogError, ValueError):
    def __init__(self, lineno: int, msg: str):
        super().__init__(f"line {lineno}: {msg}")
        self.lineno = lineno
