"""
Process-wide shared generator.

The shared instance is created exactly once, either explicitly through
``initialize_generator()`` or on first use of ``get_generator()`` from the
``IDWORKER_*`` environment variables (and ``.env`` file, if present).
"""

import threading
from typing import Optional

from idworker.env import Env, load_env

from .constants import DEFAULT_EPOCH
from .errors import ConfigurationError
from .snowflake_generator import SnowflakeGenerator

_shared_lock = threading.Lock()
_shared_generator: Optional[SnowflakeGenerator] = None


def initialize_generator(
    worker_id: int = 0,
    datacenter_id: int = 0,
    epoch: int = DEFAULT_EPOCH,
) -> SnowflakeGenerator:
    global _shared_generator

    with _shared_lock:
        if _shared_generator is None:
            _shared_generator = SnowflakeGenerator(
                worker_id,
                datacenter_id,
                epoch=epoch,
            )

            return _shared_generator

        configured = (
            _shared_generator.worker_id,
            _shared_generator.datacenter_id,
            _shared_generator.epoch,
        )

        if configured != (worker_id, datacenter_id, epoch):
            raise ConfigurationError(
                "Shared generator already initialized with "
                f"worker_id={configured[0]}, datacenter_id={configured[1]}, epoch={configured[2]}"
            )

        return _shared_generator


def get_generator(env_file: str | None = None) -> SnowflakeGenerator:
    global _shared_generator

    with _shared_lock:
        if _shared_generator is None:
            env = load_env(Env, env_file=env_file)

            _shared_generator = SnowflakeGenerator(
                env.IDWORKER_WORKER_ID,
                env.IDWORKER_DATACENTER_ID,
                epoch=env.IDWORKER_EPOCH,
            )

        return _shared_generator


def reset_generator():
    global _shared_generator

    with _shared_lock:
        _shared_generator = None


def next_id() -> int:
    return get_generator().next_id()
