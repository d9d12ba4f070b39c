"""Unit test fixtures.

Shared fixtures live in tests/conftest.py; this file re-exports its helpers
and adds the fake clock used by time-dependent tests.
"""

import pytest

from tests.conftest import minimal_config_dict, run_cmd, write_vault_file

__all__ = [
    "FakeClock",
    "minimal_config_dict",
    "run_cmd",
    "write_vault_file",
]


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
