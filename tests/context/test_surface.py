"""Tests for RenderContext and the module-level drawing context."""

import logging

import pytest
from PIL import ImageDraw

from renderutil import RenderContext, SurfaceSettings, get_context, reset_default_context
from renderutil.context import get_default_context


@pytest.fixture
def counting_factory():
    """Factory that records every handle it builds."""
    created = []

    def factory(settings):
        handle = {"settings": settings, "serial": len(created)}
        created.append(handle)
        return handle

    factory.created = created
    return factory


@pytest.fixture
def default_context():
    reset_default_context()
    yield get_default_context()
    reset_default_context()


class TestRenderContext:
    def test_lazy_creation(self, counting_factory):
        rc = RenderContext(SurfaceSettings(), factory=counting_factory)

        assert not rc.is_initialized
        assert counting_factory.created == []

        rc.get_context()
        assert rc.is_initialized
        assert len(counting_factory.created) == 1

    def test_handle_is_memoized(self, counting_factory):
        rc = RenderContext(SurfaceSettings(), factory=counting_factory)

        assert rc.get_context() is rc.get_context()
        assert len(counting_factory.created) == 1

    def test_factory_receives_settings(self, counting_factory):
        settings = SurfaceSettings(width=32, height=8)
        rc = RenderContext(settings, factory=counting_factory)

        assert rc.get_context()["settings"] is settings

    def test_teardown_then_recreate(self, counting_factory):
        rc = RenderContext(SurfaceSettings(), factory=counting_factory)
        first = rc.get_context()

        rc.teardown()
        assert not rc.is_initialized

        second = rc.get_context()
        assert second is not first
        assert second["serial"] == 1

    def test_teardown_before_init_is_noop(self, counting_factory):
        rc = RenderContext(SurfaceSettings(), factory=counting_factory)
        rc.teardown()
        assert counting_factory.created == []

    def test_context_manager_tears_down(self, counting_factory):
        with RenderContext(SurfaceSettings(), factory=counting_factory) as rc:
            rc.get_context()
            assert rc.is_initialized
        assert not rc.is_initialized

    def test_default_factory_builds_pillow_draw(self):
        rc = RenderContext(SurfaceSettings(width=20, height=10, mode="RGB"))
        draw = rc.get_context()

        assert isinstance(draw, ImageDraw.ImageDraw)
        assert draw.im.size == (20, 10)
        assert draw.mode == "RGB"

    def test_settings_loaded_lazily_from_env(self, monkeypatch, counting_factory):
        monkeypatch.setenv("RENDERUTIL_SURFACE_WIDTH", "64")
        rc = RenderContext(factory=counting_factory)

        assert rc.get_context()["settings"].width == 64

    def test_creation_logged(self, caplog, counting_factory):
        rc = RenderContext(SurfaceSettings(), factory=counting_factory)
        with caplog.at_level(logging.DEBUG, logger="renderutil.context.surface"):
            rc.get_context()
            rc.teardown()

        messages = [record.getMessage() for record in caplog.records]
        assert "Created drawing context 1x1 (RGBA)" in messages
        assert "Released drawing context" in messages


class TestDefaultContext:
    def test_get_context_twice_returns_same_handle(self, default_context):
        assert get_context() is get_context()

    def test_reset_releases_default_handle(self, default_context):
        first = get_context()
        reset_default_context()

        assert not default_context.is_initialized
        assert get_context() is not first

    def test_default_handle_is_pillow_draw(self, default_context):
        assert isinstance(get_context(), ImageDraw.ImageDraw)
