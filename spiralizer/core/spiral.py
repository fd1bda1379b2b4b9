"""Fermat spiral point generation."""

import numpy as np
import structlog
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional, Tuple, Union

from ..config import settings

logger = structlog.get_logger()


class Point2D(NamedTuple):
    """A single spiral point."""
    x: float
    y: float


@dataclass(frozen=True, eq=False)
class PointSequence:
    """Fixed-length sequence of 2-D points with labelled x/y columns.

    Wraps a read-only (n, 2) float64 array. Instances are never mutated
    after construction; use to_array() for a writable copy.
    """
    coords: np.ndarray
    columns: Tuple[str, str] = ("x", "y")

    def __post_init__(self):
        coords = np.array(self.coords, dtype=np.float64)
        if coords.size == 0:
            coords = coords.reshape(0, 2)
        elif coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) array of points, got shape {coords.shape}")
        coords.setflags(write=False)
        object.__setattr__(self, "coords", coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, index: Union[int, slice]) -> Union[Point2D, "PointSequence"]:
        if isinstance(index, slice):
            return PointSequence(self.coords[index])
        x, y = self.coords[index]
        return Point2D(float(x), float(y))

    def __iter__(self) -> Iterator[Point2D]:
        for x, y in self.coords:
            yield Point2D(float(x), float(y))

    def __array__(self, dtype=None, copy=None):
        if dtype is not None:
            return self.coords.astype(dtype)
        return self.coords.copy() if copy else self.coords

    @property
    def x(self) -> np.ndarray:
        return self.coords[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.coords[:, 1]

    def to_array(self) -> np.ndarray:
        return self.coords.copy()


def generate_spiral(angle_start: float = 0.0, angle_end: float = 100.0,
                    num_points: Optional[int] = None) -> PointSequence:
    """
    Generate points along a Fermat spiral r = sqrt(theta).

    Angles are sampled as angle_start + i * step with
    step = (angle_end - angle_start) / (num_points - 1), so the sequence
    runs backward when angle_start > angle_end. Negative angles have no
    real radius and produce NaN coordinates.

    Args:
        angle_start: Starting angle in radians
        angle_end: Ending angle in radians
        num_points: Number of points to generate, at least 2; defaults to
            settings.spiral_default_points

    Returns:
        PointSequence with exactly num_points rows

    Raises:
        TypeError: If num_points is not an integer
        ValueError: If num_points < 2
    """
    if num_points is None:
        num_points = settings.spiral_default_points

    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise TypeError(f"num_points must be an integer, got {type(num_points).__name__}")
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")

    step = (angle_end - angle_start) / (num_points - 1)
    theta = angle_start + np.arange(num_points, dtype=np.float64) * step

    with np.errstate(invalid="ignore"):
        r = np.sqrt(theta)

    coords = np.column_stack([r * np.cos(theta), r * np.sin(theta)])

    nan_points = int(np.count_nonzero(np.isnan(coords).any(axis=1)))
    if nan_points:
        logger.warning("Negative or undefined angles produced NaN points",
                       nan_points=nan_points, num_points=num_points)

    logger.debug("Spiral generated", angle_start=angle_start,
                 angle_end=angle_end, num_points=num_points)

    return PointSequence(coords)
