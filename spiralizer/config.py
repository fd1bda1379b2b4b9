"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from SPIRALIZER_* environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Spiral parameter limits
    spiral_min_points: int = Field(default=3, description="Minimum points for a Voronoi diagram")
    spiral_max_points: int = Field(default=5000, description="Maximum points allowed")
    spiral_max_angle_range: float = Field(
        default=1000.0, description="Maximum allowed angle_end - angle_start"
    )
    spiral_default_points: int = Field(default=300, description="Default number of points")

    # Performance
    debug_timing: bool = Field(default=False, description="Log timings at info level")

    class Config:
        env_prefix = "SPIRALIZER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
