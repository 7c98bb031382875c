"""Tests for environment-driven settings."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pocketsurf.config.settings import DisplaySettings, HudSettings, Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's .env or exported variables out of the defaults
    monkeypatch.chdir(tmp_path)
    for name in (
        "POCKETSURF_DEBUG",
        "POCKETSURF_TITLE",
        "POCKETSURF_DISPLAY__WIDTH",
        "POCKETSURF_HUD__POCKET_WIDE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self, tmp_path: Path) -> None:
        settings = Settings()
        assert not settings.debug
        assert settings.title == "Pocket Surf"
        assert settings.display == DisplaySettings()
        assert (settings.display.width, settings.display.height) == (480, 270)
        assert settings.display.fps == 60
        assert settings.hud == HudSettings()
        assert settings.sprite_path.resolve() == (tmp_path / "assets" / "surfer-sprite.png").resolve()


class TestOverrides:
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POCKETSURF_DEBUG", "true")
        monkeypatch.setenv("POCKETSURF_DISPLAY__WIDTH", "640")
        monkeypatch.setenv("POCKETSURF_HUD__POCKET_WIDE", "62.5")

        settings = Settings()
        assert settings.debug
        assert settings.display.width == 640
        assert settings.display.height == 270
        assert settings.hud.pocket_wide == 62.5

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("POCKETSURF_TITLE=Dawn Patrol\n")
        assert Settings().title == "Dawn Patrol"

    def test_sprite_path(self, tmp_path: Path) -> None:
        settings = Settings(assets_path=tmp_path / "art", sprite_file="board.png")
        assert settings.sprite_path == tmp_path / "art" / "board.png"

    def test_invalid_display_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DisplaySettings(scale=0)
