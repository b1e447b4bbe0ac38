"""Configuration module using Pydantic Settings.

Usage:
    from renderutil.config import SurfaceSettings

    settings = SurfaceSettings(width=128, height=32)
"""

from renderutil.config.settings import SurfaceSettings

__all__ = [
    "SurfaceSettings",
]
