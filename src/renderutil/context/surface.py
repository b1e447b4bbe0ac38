"""Lazily created 2D drawing context.

RenderContext owns one drawing handle. The handle is created on the first
get_context() call, returned unchanged afterwards, and released by teardown().

Usage:
    from renderutil.context import RenderContext

    with RenderContext() as rc:
        draw = rc.get_context()
        draw.textbbox((0, 0), "label")

    # Or use the shared default owned by this module
    from renderutil.context import get_context
    draw = get_context()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from types import TracebackType
from typing import Any

from PIL import Image, ImageDraw

from renderutil.config import SurfaceSettings

logger = logging.getLogger(__name__)

ContextFactory = Callable[[SurfaceSettings], Any]


def create_pillow_context(settings: SurfaceSettings) -> ImageDraw.ImageDraw:
    """Create a Pillow drawing handle over a fresh image sized by settings."""
    image = Image.new(settings.mode, (settings.width, settings.height))
    return ImageDraw.Draw(image)


class RenderContext:
    """Owner of a lazily initialized drawing handle.

    Args:
        settings: Surface configuration. Loaded from the environment if omitted.
        factory: Callable building the handle from settings. Defaults to a
            Pillow ImageDraw over an offscreen image.
    """

    def __init__(
        self,
        settings: SurfaceSettings | None = None,
        factory: ContextFactory | None = None,
    ) -> None:
        self._settings = settings
        self._factory = factory or create_pillow_context
        self._handle: Any = None
        self._lock = threading.Lock()

    @property
    def settings(self) -> SurfaceSettings:
        if self._settings is None:
            self._settings = SurfaceSettings()
        return self._settings

    @property
    def is_initialized(self) -> bool:
        return self._handle is not None

    def get_context(self) -> Any:
        """Return the drawing handle, creating it on first use.

        Returns:
            The same handle on every call until teardown().
        """
        if self._handle is None:
            with self._lock:
                if self._handle is None:
                    settings = self.settings
                    self._handle = self._factory(settings)
                    logger.debug(
                        "Created drawing context %dx%d (%s)",
                        settings.width,
                        settings.height,
                        settings.mode,
                    )
        return self._handle

    def teardown(self) -> None:
        """Release the handle. The next get_context() creates a new one."""
        with self._lock:
            if self._handle is None:
                return
            self._handle = None
            logger.debug("Released drawing context")

    def __enter__(self) -> RenderContext:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.teardown()


# Module-level default context
_default_context = RenderContext()


def get_default_context() -> RenderContext:
    """Access the process-wide default RenderContext."""
    return _default_context


def get_context() -> Any:
    """Return the default context's drawing handle, creating it on first use."""
    return _default_context.get_context()


def reset_default_context() -> None:
    """Tear down the default context's handle."""
    _default_context.teardown()
