"""Bounded cell counting."""

import numpy as np


def count_bounded_cells(has_infinite) -> int:
    """
    Count cells that have no infinite vertex.

    Args:
        has_infinite: 1-D sequence of flags, True where a cell is unbounded

    Returns:
        Number of entries equal to False
    """
    flags = np.asarray(has_infinite, dtype=bool)
    if flags.ndim > 1:
        raise ValueError(f"Expected a 1-D sequence of flags, got shape {flags.shape}")
    return int(np.count_nonzero(~flags))
