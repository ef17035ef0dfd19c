"""
Pytest configuration shared by all unit tests.

Provides a controllable millisecond clock and resets process-wide state
(logging configuration, the shared generator) between tests.
"""

from typing import Generator, List

import pytest

from idworker.logging import LoggingConfig
from idworker.snowflake import DEFAULT_EPOCH
from idworker.snowflake.shared import reset_generator


class FakeClock:
    def __init__(self, now: int) -> None:
        self.now = now
        self.calls = 0
        self._pending: List[int] = []

    def advance(self, milliseconds: int = 1):
        self.now += milliseconds

    def schedule(self, *values: int):
        """Queue values returned by the next reads, in order."""
        self._pending.extend(values)

    def __call__(self) -> int:
        self.calls += 1
        if self._pending:
            self.now = self._pending.pop(0)

        return self.now


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(DEFAULT_EPOCH + 1_000)


@pytest.fixture(autouse=True)
def reset_logging_config() -> Generator[None, None, None]:
    yield
    LoggingConfig().update(
        log_level="info",
        log_output="stderr",
        disabled_loggers=[],
    )


@pytest.fixture(autouse=True)
def reset_shared_generator() -> Generator[None, None, None]:
    reset_generator()
    yield
    reset_generator()
