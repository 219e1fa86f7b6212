"""Overlay adapters - implementations of Overlay port."""

from .console_overlay import ConsoleOverlay

__all__ = ['ConsoleOverlay']
