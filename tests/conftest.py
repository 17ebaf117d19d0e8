import itertools
import logging

import pytest

from willie import Level, Willie, WillieConfig
from willie.logutil import get_logger

_counter = itertools.count()


class CaptureHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(logging.NOTSET)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    @property
    def messages(self):
        return [r.getMessage() for r in self.records]


@pytest.fixture
def capture():
    logger = get_logger(f"willie.test.{next(_counter)}", level=Level.SILLY)
    handler = CaptureHandler()
    logger.addHandler(handler)
    yield logger, handler
    logger.removeHandler(handler)


@pytest.fixture
def willie(capture):
    logger, handler = capture
    facade = Willie(logger, WillieConfig(level=Level.SILLY))
    facade.captured = handler
    yield facade
    facade.close()
