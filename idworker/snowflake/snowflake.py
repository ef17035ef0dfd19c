from __future__ import annotations

import datetime
from typing import Any, Dict, NamedTuple

from .constants import (
    DATACENTER_ID_SHIFT,
    DEFAULT_EPOCH,
    MAX_DATACENTER_ID,
    MAX_SEQ,
    MAX_SNOWFLAKE,
    MAX_TIMESTAMP,
    MAX_WORKER_ID,
    TIMESTAMP_SHIFT,
    WORKER_ID_BITS,
    WORKER_ID_SHIFT,
)


class Snowflake(NamedTuple):
    """
    Decoded 64-bit Snowflake identifier.

    Structure (64 bits total, most significant first):
    - sign (1 bit): always 0
    - timestamp (41 bits): milliseconds elapsed since ``epoch``
    - datacenter_id (5 bits)
    - worker_id (5 bits)
    - sequence (12 bits): per-millisecond counter

    Tuple ordering matches identifier ordering for identifiers sharing
    the same node, since timestamp is compared first and sequence last.
    """

    timestamp: int
    datacenter_id: int
    worker_id: int
    sequence: int
    epoch: int = DEFAULT_EPOCH

    @classmethod
    def parse(
        cls,
        value: int,
        epoch: int = DEFAULT_EPOCH,
    ) -> Snowflake:
        """Decode an identifier produced with the given epoch."""
        if value < 0 or value > MAX_SNOWFLAKE:
            raise ValueError(
                f"Snowflake must be between 0 and {MAX_SNOWFLAKE}, got {value}"
            )

        return cls(
            timestamp=(value >> TIMESTAMP_SHIFT) & MAX_TIMESTAMP,
            datacenter_id=(value >> DATACENTER_ID_SHIFT) & MAX_DATACENTER_ID,
            worker_id=(value >> WORKER_ID_SHIFT) & MAX_WORKER_ID,
            sequence=value & MAX_SEQ,
            epoch=epoch,
        )

    def to_int(self) -> int:
        return (
            ((self.timestamp & MAX_TIMESTAMP) << TIMESTAMP_SHIFT)
            | (self.datacenter_id << DATACENTER_ID_SHIFT)
            | (self.worker_id << WORKER_ID_SHIFT)
            | self.sequence
        )

    @property
    def node_id(self) -> int:
        return (self.datacenter_id << WORKER_ID_BITS) | self.worker_id

    @property
    def unix_ms(self) -> int:
        return self.timestamp + self.epoch

    @property
    def datetime(self) -> datetime.datetime:
        return datetime.datetime.fromtimestamp(
            self.unix_ms / 1000,
            tz=datetime.timezone.utc,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.to_int(),
            "timestamp": self.timestamp,
            "unix_ms": self.unix_ms,
            "datetime": self.datetime.isoformat(),
            "datacenter_id": self.datacenter_id,
            "worker_id": self.worker_id,
            "node_id": self.node_id,
            "sequence": self.sequence,
            "epoch": self.epoch,
        }

    def __str__(self) -> str:
        return (
            f"Snowflake({self.timestamp}:{self.datacenter_id}:{self.worker_id}:{self.sequence}"
            f"@{self.unix_ms})"
        )
