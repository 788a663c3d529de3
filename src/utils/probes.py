"""Clock, timer and memory providers that tests can swap out."""

import os
import time
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]
Timer = Callable[[], float]
MemoryProbe = Callable[[], int]

# Matches the function's configured memory size.
MEMORY_BUDGET_BYTES = 128 * 1024 * 1024

WARNING_PERCENT = 70
UNHEALTHY_PERCENT = 90

STATM_PATH = "/proc/self/statm"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def monotonic_timer() -> float:
    return time.perf_counter()


def process_memory_bytes(statm_path: str = STATM_PATH) -> int:
    """Current resident memory of this process in bytes.

    Reads the resident page count (second field) of ``/proc/self/statm``,
    sampled fresh on every call so an earlier spike does not linger.
    """
    with open(statm_path) as statm:
        resident_pages = int(statm.read().split()[1])
    return resident_pages * os.sysconf("SC_PAGE_SIZE")


def classify_memory(used_bytes: int, budget_bytes: int = MEMORY_BUDGET_BYTES) -> str:
    """Map memory usage onto healthy / warning / unhealthy."""
    percent_used = used_bytes * 100 / budget_bytes
    if percent_used > UNHEALTHY_PERCENT:
        return "unhealthy"
    if percent_used > WARNING_PERCENT:
        return "warning"
    return "healthy"
