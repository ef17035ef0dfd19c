from typing import Any, Dict

import msgspec

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """A log record emitted by a generator, tagged with its node identity."""

    message: str
    level: LogLevel
    worker_id: int | None = None
    datacenter_id: int | None = None

    @property
    def node(self) -> str:
        if self.worker_id is None or self.datacenter_id is None:
            return "-"

        return f"{self.datacenter_id}:{self.worker_id}"

    def to_template(
        self,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> str:
        fields = msgspec.structs.asdict(self)
        fields["level"] = self.level.value
        fields["node"] = self.node

        if context:
            fields.update(context)

        return template.format(**fields)


class ClockEntry(Entry, kw_only=True):
    last_timestamp: int
    current_timestamp: int
    delta_ms: int
