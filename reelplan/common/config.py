"""Configuration management."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Compiler settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="REELPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Frame-indexed renderer
    fps: int = Field(default=30, gt=0)

    # Overlay clamping
    overlay_lookback_margin: float = Field(default=0.5, ge=0)
    min_overlay_duration: float = Field(default=0.5, gt=0)

    # Background track runs this long past the last frame of video
    background_tail_seconds: float = Field(default=1.0, ge=0)

    # Clip audio ducking under a soundtrack
    music_duck_amount: float = Field(default=0.2, ge=0, le=1)
    min_clip_volume: float = Field(default=0.15, ge=0, le=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
