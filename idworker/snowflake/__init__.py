from .clock import Clock as Clock, system_clock as system_clock
from .constants import DEFAULT_EPOCH as DEFAULT_EPOCH
from .errors import (
    ClockRegressionError as ClockRegressionError,
    ConfigurationError as ConfigurationError,
    SnowflakeError as SnowflakeError,
)
from .snowflake import Snowflake as Snowflake
from .snowflake_generator import SnowflakeGenerator as SnowflakeGenerator
