"""
Spiralizer: Fermat spiral points, plot limits and bounded cell counts.
"""

from .core import (
    DEFAULT_LIMITS,
    DEFAULT_PADDING,
    LimitPair,
    Point2D,
    PointSequence,
    ValidationResult,
    calculate_limits,
    count_bounded_cells,
    generate_spiral,
    validate_spiral_params,
)

__version__ = "0.1.0"

__all__ = ['DEFAULT_LIMITS', 'DEFAULT_PADDING', 'LimitPair', 'Point2D', 'PointSequence',
           'ValidationResult', 'calculate_limits', 'count_bounded_cells',
           'generate_spiral', 'validate_spiral_params']
