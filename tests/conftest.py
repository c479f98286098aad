"""Shared fixtures for the test suite."""

import pytest


class ResourceLedger:
    """Counts acquisitions and releases made by producers under test."""

    def __init__(self):
        self.acquired = 0
        self.released = 0

    @property
    def live(self) -> int:
        return self.acquired - self.released

    def producer(self, *values):
        """Producer holding one resource for its whole lifetime."""
        self.acquired += 1
        try:
            for value in values:
                yield value
        finally:
            self.released += 1


@pytest.fixture
def ledger():
    return ResourceLedger()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration from the environment out of the tests."""
    for name in (
        "LAZY_GENERATOR_FAULT_POLICY",
        "LAZY_GENERATOR_BATCH_SIZE",
        "LAZY_GENERATOR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
