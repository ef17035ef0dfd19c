from .config import LoggingConfig as LoggingConfig
from .models import (
    ClockEntry as ClockEntry,
    Entry as Entry,
    LOG_LEVEL_SEVERITY as LOG_LEVEL_SEVERITY,
    Log as Log,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
from .streams import (
    Logger as Logger,
    LoggerStream as LoggerStream,
    logger as logger,
)
