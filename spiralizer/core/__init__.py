"""
Core spiral computations.
"""

from .spiral import Point2D, PointSequence, generate_spiral
from .limits import DEFAULT_LIMITS, DEFAULT_PADDING, LimitPair, calculate_limits
from .cells import count_bounded_cells
from .validation import ValidationResult, validate_spiral_params

__all__ = ['Point2D', 'PointSequence', 'generate_spiral',
           'DEFAULT_LIMITS', 'DEFAULT_PADDING', 'LimitPair', 'calculate_limits',
           'count_bounded_cells', 'ValidationResult', 'validate_spiral_params']
