"""
Performance monitoring helpers.

Timing wrapper for spiral computations and a rough cost model used to
warn about expensive parameter choices before running them.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, NamedTuple

import structlog

from ..config import settings

logger = structlog.get_logger()

# Empirical cost model, milliseconds
BASE_TIME_MS = 50.0
PER_POINT_TIME_MS = 0.3


class TimedResult(NamedTuple):
    """Return value of a timed call."""
    value: Any
    elapsed_ms: float


def time_it(func: Callable, *args, label: str = "Operation", **kwargs) -> TimedResult:
    """
    Run a callable and measure its wall-clock time.

    Args:
        func: Callable to run
        *args: Positional arguments for func
        label: Name reported in the log entry
        **kwargs: Keyword arguments for func

    Returns:
        TimedResult with the callable's return value and elapsed milliseconds
    """
    start = time.perf_counter()
    value = func(*args, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    log = logger.info if settings.debug_timing else logger.debug
    log("Operation timed", label=label, elapsed_ms=round(elapsed_ms, 2))

    return TimedResult(value, elapsed_ms)


def estimate_computation_time(num_points: int) -> float:
    """Estimate computation time in milliseconds for a spiral of num_points."""
    if num_points < 0:
        raise ValueError(f"num_points must be non-negative, got {num_points}")
    return BASE_TIME_MS + num_points * PER_POINT_TIME_MS


@dataclass
class PerformanceReport:
    """Summary of the timings collected for one spiral render."""
    total_ms: float
    breakdown: Dict[str, float]
    timestamp: datetime = field(default_factory=datetime.now)


def performance_report(timings: Mapping[str, float]) -> PerformanceReport:
    """
    Summarise stage timings.

    Args:
        timings: Elapsed milliseconds keyed by stage name, in stage order

    Returns:
        PerformanceReport with the total and a per-stage breakdown
    """
    breakdown = {stage: float(elapsed) for stage, elapsed in timings.items()}
    if any(elapsed < 0 for elapsed in breakdown.values()):
        raise ValueError("Timings must be non-negative")

    return PerformanceReport(total_ms=sum(breakdown.values()), breakdown=breakdown)
