# scheduler.py
"""
Repeating tick tasks with a cancel handle.

`PygameScheduler` rides on the pygame event queue, so ticks and input
events are handled one at a time from the same loop. `ManualScheduler`
fires ticks on demand for tests and headless runs.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

import pygame  # type: ignore

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TimerHandle:
    """Active until `cancel()`; a cancelled handle never fires again."""

    def __init__(self, interval_ms: int, callback: Callable[[], None], on_cancel=None):
        self.interval_ms = interval_ms
        self.callback = callback
        self.active = True
        self.generation = 0
        self._on_cancel = on_cancel

    def fire(self) -> None:
        if self.active:
            self.callback()

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        if self._on_cancel is not None:
            self._on_cancel(self)


class ManualScheduler:
    """Keeps scheduled handles in a list; `advance()` fires every live one."""

    def __init__(self):
        self.handles: List[TimerHandle] = []

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(interval_ms, callback, on_cancel=self.handles.remove)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> int:
        return len(self.handles)

    def advance(self, ticks: int = 1) -> None:
        for _ in range(ticks):
            for handle in list(self.handles):
                handle.fire()


class PygameScheduler:
    """
    One repeating pygame timer event. Only a single task can be armed at a
    time; scheduling again replaces the previous one.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.current: Optional[TimerHandle] = None
        self._generation = 0

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> TimerHandle:
        if self.current is not None:
            self.current.cancel()
        handle = TimerHandle(interval_ms, callback, on_cancel=self._disarm)
        self._generation += 1
        handle.generation = self._generation
        self.current = handle
        # tag events so ticks fetched before a cancel cannot fire a newer handle
        pygame.time.set_timer(pygame.event.Event(self.event_type, gen=handle.generation), interval_ms)
        logger.debug("Armed tick timer every %d ms", interval_ms)
        return handle

    def _disarm(self, handle: TimerHandle) -> None:
        pygame.time.set_timer(self.event_type, 0)
        # Drop ticks that were queued before the timer was stopped.
        pygame.event.clear(self.event_type)
        if self.current is handle:
            self.current = None
        logger.debug("Disarmed tick timer")

    def dispatch(self, event) -> bool:
        """Run the tick callback for a timer event. Returns True if consumed."""
        if event.type != self.event_type:
            return False
        current = self.current
        if current is not None and getattr(event, "gen", None) == current.generation:
            current.fire()
        else:
            logger.debug("Dropped stale tick event")
        return True
