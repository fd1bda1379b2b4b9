"""
Logging and performance utilities.
"""

from .logging import configure_logging
from .performance import (
    PerformanceReport,
    TimedResult,
    estimate_computation_time,
    performance_report,
    time_it,
)

__all__ = ['configure_logging', 'PerformanceReport', 'TimedResult',
           'estimate_computation_time', 'performance_report', 'time_it']
