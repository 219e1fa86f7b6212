"""Overlay port - interface for the surface that displays translations."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable


@runtime_checkable
class Overlay(Protocol):
    """Port for overlay display surfaces.

    ``temp_hide``/``temp_show`` save and restore the visibility around a
    capture so the overlay does not photograph itself. ``hide`` discards any
    saved visibility, so a following ``temp_show`` leaves the overlay hidden.
    """

    async def show(self, text: str, cancel_event: asyncio.Event | None = None) -> None:
        """Display text and make the overlay visible."""
        ...

    async def hide(self, cancel_event: asyncio.Event | None = None) -> None:
        """Hide the overlay."""
        ...

    async def temp_hide(self, cancel_event: asyncio.Event | None = None) -> None:
        """Remember current visibility and hide for a capture."""
        ...

    async def temp_show(self, cancel_event: asyncio.Event | None = None) -> None:
        """Restore visibility saved by temp_hide."""
        ...
