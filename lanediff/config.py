"""
Configuration management using Pydantic Settings.
Scoring knobs and logging options are loaded from environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Scoring Configuration
    ward_anomaly_threshold: int = Field(
        200,
        ge=0,
        description="Whole-match ward placements above which ward telemetry is distrusted",
        alias="WARD_ANOMALY_THRESHOLD",
    )

    # Logging Configuration
    debug_mode: bool = Field(False, description="Enable debug logging", alias="DEBUG_MODE")

    log_level: str = Field("INFO", description="Logging level", alias="LOG_LEVEL")

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_mode else self.log_level.upper()


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
