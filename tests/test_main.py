"""Tests for the entry point wiring."""
from __future__ import annotations

import asyncio
import logging
import threading
from pathlib import Path

import pytest

from pocketsurf import main as entry
from pocketsurf.config.settings import Settings
from pocketsurf.core.events import action_event
from pocketsurf.core.state import Status
from pocketsurf.simulator.window import SimulatorWindow


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(assets_path=tmp_path / "assets", log_file=tmp_path / "run.log")


class TestLoadSprite:
    def test_paints_missing_sheet(self, settings: Settings) -> None:
        assert not settings.sprite_path.exists()
        sprite = entry.load_sprite(settings)
        assert settings.sprite_path.exists()
        assert sprite.wait(timeout=10)

    def test_uses_existing_sheet(self, settings: Settings) -> None:
        entry.load_sprite(settings).wait(timeout=10)
        mtime = settings.sprite_path.stat().st_mtime_ns
        assert entry.load_sprite(settings).wait(timeout=10)
        assert settings.sprite_path.stat().st_mtime_ns == mtime


class TestRunGame:
    def test_nothing_built_without_drawing_surface(
        self,
        settings: Settings,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        sessions: list[object] = []
        monkeypatch.setattr(entry, "RideSession", lambda *a, **kw: sessions.append(a))
        monkeypatch.setattr(SimulatorWindow, "init", lambda self: False)

        def fail_run(self):
            raise AssertionError("run() must not be called")

        monkeypatch.setattr(SimulatorWindow, "run", fail_run)

        with caplog.at_level(logging.ERROR):
            asyncio.run(entry.run_game(settings))

        assert "no drawing surface" in caplog.text
        assert sessions == []
        assert not settings.sprite_path.exists()
        assert not settings.assets_path.exists()
        assert not any(t.name == "SpriteSheetLoader" for t in threading.enumerate())

    def test_session_attached_after_init(
        self,
        settings: Settings,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        attached: list[SimulatorWindow] = []
        monkeypatch.setattr(SimulatorWindow, "init", lambda self: True)

        async def fake_run(self) -> None:
            attached.append(self)
            self.renderer.sprite.wait(timeout=10)

        monkeypatch.setattr(SimulatorWindow, "run", fake_run)

        asyncio.run(entry.run_game(settings))

        window = attached[0]
        assert window.session is not None
        assert window.session.playfield.width == settings.display.width
        assert window.renderer.sprite.is_loaded
        assert settings.sprite_path.exists()

        # Closed on the way out
        window.event_bus.emit(action_event())
        assert window.session.state.status == Status.READY


class TestSetupLogging:
    def test_console_and_file_handlers(self, settings: Settings) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level
        try:
            entry.setup_logging(debug=True, log_file=settings.log_file)
            added = [h for h in root.handlers if h not in before]
            assert len(added) == 2
            assert root.level == logging.DEBUG
            assert logging.getLogger("pocketsurf.core.events").level == logging.INFO

            logging.getLogger("pocketsurf.test").info("hello surf")
            for handler in added:
                handler.flush()
            assert "[INFO] pocketsurf.test: hello surf" in settings.log_file.read_text()
        finally:
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(level)
