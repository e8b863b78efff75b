"""Selection state of an on-screen list with a short slide animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from gigasound.input import Key

LIST_ANIMATION_STEPS = 5


class _KeySource(Protocol):
    def was_key_pressed(self, key) -> bool: ...


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass
class ListAnimation:
    """Which list entry is selected, and how far the move from the old one has progressed."""

    old_selection: int = 0
    selected: int = 0
    animation_frame: int = 0

    def animate(self, start: int, end: int) -> int:
        """Return the current position between `start` and `end`, advancing one frame."""
        if self.old_selection == self.selected:
            return end
        position = (start + _trunc_div((end - start) * self.animation_frame, LIST_ANIMATION_STEPS)) & 0xFF
        self.animation_frame += 1
        if self.animation_frame == LIST_ANIMATION_STEPS:
            self.old_selection = self.selected
            self.animation_frame = 0
        return position

    def animate_list(self, keys: _KeySource, limit: int) -> bool:
        """Move the selection on UP or DOWN, wrapping within `limit`; return whether it moved."""
        if keys.was_key_pressed(Key.UP):
            step = limit - 1
        elif keys.was_key_pressed(Key.DOWN):
            step = 1
        else:
            return False
        self.old_selection = self.selected
        self.selected = (self.selected + step) % limit
        self.animation_frame = 0
        return True