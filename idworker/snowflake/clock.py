from time import time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Current wall-clock time in integer milliseconds since the Unix epoch."""
    return int(time() * 1000)
