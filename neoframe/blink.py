"""Cursor blink state machine."""

from __future__ import annotations

import copy
import enum
import time
from typing import Any, Callable


class BlinkState(enum.Enum):
    WAITING = "waiting"
    ON = "on"
    OFF = "off"


_NEXT_STATE = {
    BlinkState.WAITING: BlinkState.ON,
    BlinkState.ON: BlinkState.OFF,
    BlinkState.OFF: BlinkState.ON,
}


class BlinkStatus:
    """Tracks whether the cursor should be drawn as it blinks.

    The cursor is any object with ``blinkwait``, ``blinkon`` and ``blinkoff``
    attributes in milliseconds (or None) that compares by value. ``schedule``
    is called with the clock time at which the next redraw is wanted.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        schedule: Callable[[float], None] | None = None,
    ) -> None:
        self._clock = clock
        self._schedule = schedule
        self.state = BlinkState.WAITING
        self.last_transition = clock()
        self.previous_cursor: Any = None

    def _delay_for_state(self, cursor: Any) -> int | None:
        if self.state is BlinkState.WAITING:
            return cursor.blinkwait
        if self.state is BlinkState.OFF:
            return cursor.blinkoff
        return cursor.blinkon

    def update_status(self, cursor: Any) -> bool:
        """Advance the blink state for ``cursor``; True when it should be drawn."""
        if self.previous_cursor is None or cursor != self.previous_cursor:
            self.previous_cursor = copy.copy(cursor)
            self.last_transition = self._clock()
            if cursor.blinkwait is not None and cursor.blinkwait != 0:
                self.state = BlinkState.WAITING
            else:
                self.state = BlinkState.ON

        if 0 in (cursor.blinkwait, cursor.blinkoff, cursor.blinkon):
            return True

        delay = self._delay_for_state(cursor)
        if delay is not None and delay > 0:
            if self.last_transition + delay / 1000.0 < self._clock():
                self.state = _NEXT_STATE[self.state]
                self.last_transition = self._clock()

        scheduled = self._delay_for_state(cursor)
        if scheduled is not None and self._schedule is not None:
            self._schedule(self.last_transition + scheduled / 1000.0)

        return self.state is not BlinkState.OFF