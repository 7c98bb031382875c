"""Pocket Surf: ride the wave, stay in the pocket."""

__version__ = "0.1.0"
