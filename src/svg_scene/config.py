"""Parser configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Parser settings, read from `SVG_SCENE_*` environment variables.

    `strict_paths` raises PathDataError instead of dropping malformed path
    commands.
    """

    strict_paths: bool = False
    default_stroke_width: float = 1.0

    model_config = {
        "env_prefix": "SVG_SCENE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
