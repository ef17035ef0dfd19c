from .snowflake import (
    DEFAULT_EPOCH as DEFAULT_EPOCH,
    ClockRegressionError as ClockRegressionError,
    ConfigurationError as ConfigurationError,
    Snowflake as Snowflake,
    SnowflakeError as SnowflakeError,
    SnowflakeGenerator as SnowflakeGenerator,
)
from .snowflake.shared import (
    get_generator as get_generator,
    initialize_generator as initialize_generator,
    next_id as next_id,
    reset_generator as reset_generator,
)
