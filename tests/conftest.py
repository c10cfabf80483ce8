import logging
import pytest

from suitelog.listeners.listener import LoggerTestListener

class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    def messages(self, level=None):
        return [r.getMessage() for r in self.records if level is None or r.levelno == level]

    def operations(self):
        return [r.context["operation"] for r in self.records]

@pytest.fixture
def handler():
    return ListHandler()

@pytest.fixture
def listener(request, handler):
    logger = logging.getLogger(f"suitelog.tests.{request.node.name}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    lst = LoggerTestListener(logger, handlers=[handler])
    yield lst
    logger.removeHandler(handler)
