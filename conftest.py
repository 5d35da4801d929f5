import pytest

from library_patterns.catalog import Catalog
from library_patterns.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    # Each test starts without a process-wide catalog and in plain output mode
    Catalog.reset_instance()
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    yield
    Catalog.reset_instance()


@pytest.fixture
def catalog():
    return Catalog()


class RecordingSink:
    def __init__(self, name, log=None):
        self.name = name
        self.log = log if log is not None else []

    def receive(self, message):
        self.log.append((self.name, message))


@pytest.fixture
def recording_sink():
    return RecordingSink
