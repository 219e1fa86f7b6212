"""Cancellation helpers built on asyncio.Event.

A single event is threaded through every pipeline step. Setting it aborts the
step in flight with ``asyncio.CancelledError`` and stops further steps.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar('T')


def raise_if_cancelled(cancel_event: asyncio.Event | None) -> None:
    """Raise CancelledError if cancellation has been requested."""
    if cancel_event is not None and cancel_event.is_set():
        raise asyncio.CancelledError("Operation cancelled")


async def run_cancellable(
    awaitable: Awaitable[T],
    cancel_event: asyncio.Event | None
) -> T:
    """Await ``awaitable`` unless the cancel event fires first.

    If the event fires first the pending work is cancelled and
    CancelledError is raised; a completed result is never discarded for a
    later cancellation.
    """
    if cancel_event is None:
        return await awaitable

    task = asyncio.ensure_future(awaitable)
    if cancel_event.is_set():
        task.cancel()
        raise asyncio.CancelledError("Operation cancelled")

    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        done, _ = await asyncio.wait(
            {task, waiter}, return_when=asyncio.FIRST_COMPLETED
        )
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        waiter.cancel()

    if task in done:
        return task.result()

    task.cancel()
    raise asyncio.CancelledError("Operation cancelled")


async def cancellable_sleep(delay: float, cancel_event: asyncio.Event | None) -> bool:
    """Sleep for ``delay`` seconds or until the event is set.

    Returns:
        True if the wait was cut short by cancellation
    """
    if cancel_event is None:
        await asyncio.sleep(delay)
        return False

    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=delay)
    except asyncio.TimeoutError:
        return False
    return True
