from .logger import Logger as Logger, logger as logger
from .logger_stream import LoggerStream as LoggerStream
