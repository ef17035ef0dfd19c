from __future__ import annotations

import threading
from time import sleep
from typing import Optional

from idworker.logging import (
    ClockEntry,
    Entry,
    LoggerStream,
    LogLevel,
    logger as shared_logger,
)

from .clock import Clock, system_clock
from .constants import (
    DATACENTER_ID_SHIFT,
    DEFAULT_EPOCH,
    MAX_DATACENTER_ID,
    MAX_SEQ,
    MAX_TIMESTAMP,
    MAX_WORKER_ID,
    TIMESTAMP_SHIFT,
    WORKER_ID_BITS,
    WORKER_ID_SHIFT,
)
from .errors import ClockRegressionError, ConfigurationError
from .snowflake import Snowflake


class SnowflakeGenerator:
    """
    Coordination-free generator of 64-bit, time-sortable identifiers.

    Each identifier packs the milliseconds elapsed since ``epoch`` with the
    datacenter and worker ids of this node and a per-millisecond sequence.
    Up to 4096 identifiers are issued per millisecond. Once a millisecond's
    sequence space is used up the generator waits for the clock to reach
    the next millisecond rather than failing.

    If the clock moves backwards, ``next_id()`` raises
    ``ClockRegressionError`` and leaves the generator state untouched.

    Thread-safe via lock.
    """

    def __init__(
        self,
        worker_id: int = 0,
        datacenter_id: int = 0,
        *,
        epoch: int = DEFAULT_EPOCH,
        clock: Optional[Clock] = None,
        logger: Optional[LoggerStream] = None,
    ) -> None:
        _validate_component("worker_id", worker_id, MAX_WORKER_ID)
        _validate_component("datacenter_id", datacenter_id, MAX_DATACENTER_ID)

        if clock is None:
            clock = system_clock

        if isinstance(epoch, bool) or not isinstance(epoch, int):
            raise ConfigurationError(
                f"epoch must be an integer millisecond timestamp, got {epoch!r}"
            )

        if epoch < 0:
            raise ConfigurationError(f"epoch must not be negative, got {epoch}")

        current = clock()
        if epoch > current:
            raise ConfigurationError(
                f"epoch {epoch} lies in the future (current time is {current})"
            )

        if logger is None:
            logger = shared_logger["idworker"]

        self._worker_id = worker_id
        self._datacenter_id = datacenter_id
        self._epoch = epoch
        self._clock = clock
        self._logger = logger

        self._inf = (datacenter_id << DATACENTER_ID_SHIFT) | (
            worker_id << WORKER_ID_SHIFT
        )
        self._ts = -1
        self._seq = 0
        self._lock = threading.Lock()

        self._logger.log(
            Entry(
                message=f"Created generator for node {self.node_id} with epoch {epoch}",
                level=LogLevel.DEBUG,
                worker_id=worker_id,
                datacenter_id=datacenter_id,
            )
        )

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next_id()

    def next_id(self) -> int:
        """
        Generate the next identifier.

        Blocks (briefly) only when 4096 identifiers were already issued in
        the current millisecond.
        """
        with self._lock:
            current = self._clock()

            if current < self._ts:
                error = ClockRegressionError(self._ts, current)

                self._logger.log(
                    ClockEntry(
                        message=str(error),
                        level=LogLevel.ERROR,
                        worker_id=self._worker_id,
                        datacenter_id=self._datacenter_id,
                        last_timestamp=self._ts,
                        current_timestamp=current,
                        delta_ms=error.delta_ms,
                    )
                )

                raise error

            if current == self._ts:
                seq = (self._seq + 1) & MAX_SEQ

                if seq == 0:
                    self._logger.log(
                        Entry(
                            message=f"Sequence exhausted at {self._ts}, waiting for next millisecond",
                            level=LogLevel.DEBUG,
                            worker_id=self._worker_id,
                            datacenter_id=self._datacenter_id,
                        )
                    )

                    current = self._wait_next_millis(self._ts)

                self._seq = seq

            else:
                self._seq = 0

            self._ts = current

            return (
                ((current - self._epoch) & MAX_TIMESTAMP) << TIMESTAMP_SHIFT
                | self._inf
                | self._seq
            )

    def parse(self, value: int) -> Snowflake:
        """Decode an identifier using this generator's epoch."""
        return Snowflake.parse(value, epoch=self._epoch)

    def _wait_next_millis(self, last_timestamp: int) -> int:
        current = self._clock()
        while current <= last_timestamp:
            sleep(0)
            current = self._clock()

        return current

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def datacenter_id(self) -> int:
        return self._datacenter_id

    @property
    def node_id(self) -> int:
        return (self._datacenter_id << WORKER_ID_BITS) | self._worker_id

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def last_timestamp(self) -> int:
        return self._ts

    @property
    def sequence(self) -> int:
        return self._seq

    def __repr__(self) -> str:
        return (
            f"SnowflakeGenerator(worker_id={self._worker_id}, "
            f"datacenter_id={self._datacenter_id}, epoch={self._epoch})"
        )


def _validate_component(name: str, value: int, maximum: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")

    if not 0 <= value <= maximum:
        raise ConfigurationError(f"{name} must be 0-{maximum}, got {value}")
