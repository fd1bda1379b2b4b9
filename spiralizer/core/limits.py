"""Symmetric plot limit calculation."""

import math
import numpy as np
import structlog
from typing import NamedTuple

logger = structlog.get_logger()

DEFAULT_PADDING = 1.1


class LimitPair(NamedTuple):
    """Symmetric axis bounds, lower == -upper."""
    lower: float
    upper: float


DEFAULT_LIMITS = LimitPair(-10.0, 10.0)


def calculate_limits(points, padding: float = DEFAULT_PADDING) -> LimitPair:
    """
    Calculate symmetric plot limits covering every point.

    The bound is ceil(max(|x|, |y|) * padding) over all points, a single
    scalar shared by both axes. NaN coordinates never raise the running
    maximum, so they are ignored; an infinite coordinate gives infinite
    limits unless padding is zero.

    Args:
        points: PointSequence or any (n, 2) array-like of x, y coordinates
        padding: Multiplicative slack applied to the largest magnitude

    Returns:
        LimitPair(-bound, bound), or DEFAULT_LIMITS for an empty input

    Raises:
        ValueError: If points is not (n, 2) shaped or padding is negative
            or not finite
    """
    coords = np.asarray(points, dtype=np.float64)
    if coords.size == 0:
        return DEFAULT_LIMITS

    if not math.isfinite(padding) or padding < 0:
        raise ValueError(f"padding must be a finite non-negative number, got {padding}")
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected an (n, 2) array of points, got shape {coords.shape}")

    magnitudes = np.abs(coords)
    max_abs = float(magnitudes[~np.isnan(magnitudes)].max(initial=0.0))

    # Zero padding collapses the bounds even for infinite coordinates
    bound = 0.0 if padding == 0 else float(np.ceil(max_abs * padding))

    logger.debug("Limits calculated", points=len(coords), max_abs=max_abs, bound=bound)

    return LimitPair(-bound, bound)
