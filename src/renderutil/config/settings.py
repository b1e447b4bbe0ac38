"""Configuration settings using Pydantic Settings.

Usage:
    from renderutil.config import SurfaceSettings

    # Load from environment variables (RENDERUTIL_SURFACE_*)
    settings = SurfaceSettings()

    # Or override with explicit values
    settings = SurfaceSettings(width=256, height=64)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SurfaceSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the offscreen drawing surface.

    The surface only backs a drawing context used for measurement and scratch
    drawing, so the default is a single pixel.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        mode: Pillow image mode (RGBA, RGB, L, ...).

    Environment Variables:
        RENDERUTIL_SURFACE_WIDTH
        RENDERUTIL_SURFACE_HEIGHT
        RENDERUTIL_SURFACE_MODE
    """

    model_config = SettingsConfigDict(
        env_prefix="RENDERUTIL_SURFACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    width: int = Field(default=1, ge=1)
    height: int = Field(default=1, ge=1)
    mode: str = "RGBA"
