class SnowflakeError(Exception):
    pass


class ConfigurationError(SnowflakeError, ValueError):
    pass


class ClockRegressionError(SnowflakeError):
    def __init__(
        self,
        last_timestamp: int,
        current_timestamp: int,
    ) -> None:
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        self.delta_ms = last_timestamp - current_timestamp

        super().__init__(
            f"Clock moved backwards. Refusing to generate id for {self.delta_ms} milliseconds"
        )
