from .entry import (
    ClockEntry as ClockEntry,
    Entry as Entry,
)
from .log import Log as Log
from .log_level import (
    LOG_LEVEL_SEVERITY as LOG_LEVEL_SEVERITY,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
