"""Tests for settings loading."""

from spiralizer.config import Settings


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        """Test the built-in defaults."""
        for name in ["LOG_LEVEL", "LOG_FORMAT", "SPIRAL_MIN_POINTS", "SPIRAL_MAX_POINTS",
                     "SPIRAL_MAX_ANGLE_RANGE", "SPIRAL_DEFAULT_POINTS", "DEBUG_TIMING"]:
            monkeypatch.delenv(f"SPIRALIZER_{name}", raising=False)

        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.spiral_min_points == 3
        assert config.spiral_max_points == 5000
        assert config.spiral_max_angle_range == 1000.0
        assert config.spiral_default_points == 300
        assert config.debug_timing is False

    def test_environment_override(self, monkeypatch):
        """Test that prefixed environment variables override defaults."""
        monkeypatch.setenv("SPIRALIZER_SPIRAL_MAX_POINTS", "250")
        monkeypatch.setenv("SPIRALIZER_DEBUG_TIMING", "true")

        config = Settings(_env_file=None)

        assert config.spiral_max_points == 250
        assert config.debug_timing is True

    def test_env_file(self, tmp_path, monkeypatch):
        """Test loading values from a .env file."""
        monkeypatch.delenv("SPIRALIZER_LOG_LEVEL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("SPIRALIZER_LOG_LEVEL=DEBUG\n")

        config = Settings(_env_file=env_file)

        assert config.log_level == "DEBUG"
