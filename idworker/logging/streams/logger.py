import threading
from typing import Dict

from .logger_stream import LoggerStream


class Logger:
    def __init__(self) -> None:
        self._streams: Dict[str, LoggerStream] = {}
        self._lock = threading.Lock()

    def __getitem__(self, name: str) -> LoggerStream:
        with self._lock:
            if self._streams.get(name) is None:
                self._streams[name] = LoggerStream(name=name)

            return self._streams[name]

    def configure(
        self,
        name: str | None = None,
        template: str | None = None,
        as_json: bool = False,
    ) -> LoggerStream:
        if name is None:
            name = 'default'

        with self._lock:
            self._streams[name] = LoggerStream(
                name=name,
                template=template,
                as_json=as_json,
            )

            return self._streams[name]


logger = Logger()
