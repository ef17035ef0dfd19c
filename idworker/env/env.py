from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictInt

from idworker.snowflake.constants import DEFAULT_EPOCH

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    IDWORKER_WORKER_ID: StrictInt = 0
    IDWORKER_DATACENTER_ID: StrictInt = 0
    IDWORKER_EPOCH: StrictInt = DEFAULT_EPOCH
    IDWORKER_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "info"
    IDWORKER_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "IDWORKER_WORKER_ID": int,
            "IDWORKER_DATACENTER_ID": int,
            "IDWORKER_EPOCH": int,
            "IDWORKER_LOG_LEVEL": str,
            "IDWORKER_LOG_OUTPUT": str,
        }
