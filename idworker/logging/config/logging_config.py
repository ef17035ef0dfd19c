import threading
from typing import List, Literal

from idworker.logging.models import LogLevel, LogLevelName
from .stream_type import StreamType


LogOutput = Literal['stdout', 'stderr']

# Shared by every thread: generators are called from worker threads that
# must observe the level and output chosen at startup.
_settings_lock = threading.Lock()
_global_settings = {
    "level": LogLevel.INFO,
    "output": StreamType.STDERR,
    "disabled_loggers": frozenset(),
}


class LoggingConfig:
    def update(
        self,
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
        disabled_loggers: List[str] | None = None,
    ):
        level = LogLevel.to_level(log_level) if log_level else None

        with _settings_lock:
            if level:
                _global_settings["level"] = level

            if log_output:
                _global_settings["output"] = (
                    StreamType.STDOUT if log_output == 'stdout' else StreamType.STDERR
                )

            if disabled_loggers is not None:
                _global_settings["disabled_loggers"] = frozenset(disabled_loggers)

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        with _settings_lock:
            disabled_loggers = _global_settings["disabled_loggers"]
            current_log_level = _global_settings["level"]

        return logger_name not in disabled_loggers and (
            log_level.severity >= current_log_level.severity
        )

    @property
    def level(self) -> LogLevel:
        with _settings_lock:
            return _global_settings["level"]

    @property
    def output(self) -> StreamType:
        with _settings_lock:
            return _global_settings["output"]
