"""Tracking of touch (or mouse) presses and where they started."""

from __future__ import annotations


class Touchscreen:
    """Keeps the current touch position, press state and press origin.

    Each call to ``poll`` feeds one sample: a position and a pressure.
    A sample with zero pressure means nothing is touching the screen, and
    the last known position is kept.
    """

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.start_x = 0
        self.start_y = 0
        self._pressure = 0
        self._was_pressed = False
        self._handled = False

    def poll(self, x: int, y: int, pressure: int) -> bool:
        """Take a new sample; return whether the screen is pressed."""
        self._was_pressed = self.pressed
        if pressure > 0:
            self.x = x
            self.y = y
            self._pressure = pressure
        else:
            self._pressure = 0
        self._handled = False

        if not self._was_pressed and self.pressed:
            self.start_x = self.x
            self.start_y = self.y
        return self.pressed

    @property
    def pressed(self) -> bool:
        """True while touched and the press has not been handled."""
        return not self._handled and self._pressure > 0

    @property
    def released(self) -> bool:
        """True on the sample where a press ended."""
        return not self.pressed and self._was_pressed

    @property
    def handled(self) -> bool:
        """True once the current press has been consumed."""
        return self._handled

    def set_handled(self) -> None:
        """Mark the current press as consumed."""
        self._was_pressed = False
        self._handled = True

    def in_rect(self, x: int, y: int, w: int, h: int) -> bool:
        """True if the current position lies in the rectangle (edges included)."""
        return (not self._handled and y <= self.y <= y + h
                and x <= self.x <= x + w)

    def started_in_rect(self, x: int, y: int, w: int, h: int) -> bool:
        """True if the current press began in the rectangle (edges included)."""
        return (not self._handled and y <= self.start_y <= y + h
                and x <= self.start_x <= x + w)