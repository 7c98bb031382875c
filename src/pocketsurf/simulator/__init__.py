"""Desktop host for Pocket Surf: pygame window, input and frame loop."""

from pocketsurf.simulator.display import PlayfieldDisplay
from pocketsurf.simulator.window import SimulatorWindow, WindowConfig

__all__ = ["PlayfieldDisplay", "SimulatorWindow", "WindowConfig"]
