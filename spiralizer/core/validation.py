"""Advisory validation of spiral parameters."""

from typing import NamedTuple, Optional

from ..config import Settings, settings


class ValidationResult(NamedTuple):
    """Outcome of a parameter check; message is empty when valid."""
    valid: bool
    message: str


def validate_spiral_params(angle_start: float, angle_end: float, num_points: int,
                           config: Optional[Settings] = None) -> ValidationResult:
    """
    Check spiral parameters against the configured limits.

    Checks run in order and the first failure is reported. Nothing is
    raised; callers decide what to do with an invalid result.

    Args:
        angle_start: Starting angle
        angle_end: Ending angle
        num_points: Number of points
        config: Settings to validate against, defaults to the global settings

    Returns:
        ValidationResult with a valid flag and a user-facing message
    """
    config = config or settings

    if angle_start >= angle_end:
        return ValidationResult(False, "Start angle must be less than end angle")

    if num_points < config.spiral_min_points:
        return ValidationResult(
            False, f"Need at least {config.spiral_min_points} points for Voronoi diagram"
        )

    if num_points > config.spiral_max_points:
        return ValidationResult(
            False, f"Too many points! Maximum is {config.spiral_max_points} for performance"
        )

    if angle_end - angle_start > config.spiral_max_angle_range:
        return ValidationResult(
            False, f"Angle range too large! Keep it under {config.spiral_max_angle_range:g}"
        )

    return ValidationResult(True, "")
