"""
Process-level settings for barnframe.

Values come from the environment (prefix BARNFRAME_) or a local .env file.
"""

from functools import lru_cache
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from barnframe.models import HorizontalBeamParams, VerticalBeamParams


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BARNFRAME_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Vertical beam defaults
    beam_margin: float = 2.0
    beam_max_spacing: float = 8.0
    beam_min_spacing: float = 4.0
    beam_min_count: int = 3

    # Horizontal beam defaults
    horizontal_height_ratios: list[float] = [0.25, 0.5, 0.75]

    def vertical_params(self) -> VerticalBeamParams:
        return VerticalBeamParams(
            margin=self.beam_margin,
            max_spacing=self.beam_max_spacing,
            min_spacing=self.beam_min_spacing,
            min_beams=self.beam_min_count,
        )

    def horizontal_params(self) -> HorizontalBeamParams:
        return HorizontalBeamParams(height_ratios=list(self.horizontal_height_ratios))


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level."""
    if settings is None:
        settings = get_settings()
    logger = logging.getLogger("barnframe")
    logger.setLevel(settings.log_level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))
        logger.addHandler(handler)
    return logger
