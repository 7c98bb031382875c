"""
Main entry point for Pocket Surf.

Wires the ride session, renderer and window together and runs the frame
loop until the window closes.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from pocketsurf.config.settings import Settings, get_settings
from pocketsurf.core.events import EventBus
from pocketsurf.game.session import RideSession
from pocketsurf.game.wave import Playfield
from pocketsurf.graphics.renderer import WaveRenderer
from pocketsurf.graphics.sprites import SpriteSheet, paint_surfer_sheet


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure console and file logging."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Per-frame noise
    logging.getLogger("pocketsurf.core.events").setLevel(logging.INFO)


def load_sprite(settings: Settings) -> SpriteSheet:
    """Start loading the surfer sheet, painting a default one if missing."""
    path = settings.sprite_path
    if not path.exists():
        logging.getLogger(__name__).info(f"No sprite sheet at {path}, painting default")
        paint_surfer_sheet(path)

    sprite = SpriteSheet(path)
    sprite.load_async()
    return sprite


async def run_game(settings: Settings) -> None:
    """Open the window, then build the session and run the frame loop.

    Nothing else is created (no session, no sprite file, no loader thread)
    until the window has a drawing surface.
    """
    from pocketsurf.simulator.window import SimulatorWindow, WindowConfig

    logger = logging.getLogger(__name__)

    playfield = Playfield(settings.display.width, settings.display.height)
    event_bus = EventBus()

    window = SimulatorWindow(
        playfield,
        config=WindowConfig(
            title=settings.title,
            fullscreen=settings.display.fullscreen,
            fps=settings.display.fps,
            scale=settings.display.scale,
        ),
        event_bus=event_bus,
    )

    if not window.init():
        logger.error("Game unavailable: no drawing surface")
        return

    session = RideSession(playfield, event_bus=event_bus, hud_settings=settings.hud)
    window.attach(session, WaveRenderer(playfield, sprite=load_sprite(settings)))

    try:
        await window.run()
    finally:
        session.close()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info("Pocket Surf starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Pocket Surf stopped")


if __name__ == "__main__":
    main()
