"""Button and joystick input with debouncing, driven by ADC samples and a millisecond clock."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import IntEnum

from gigasound.calibrate import JoyconCalibration

ADC_CHANNELS = 11
ADC_AXIS_X = 10
ADC_AXIS_Y = 9
ADC_KNOB = 8

DEBOUNCE_BUTTON_TIME_MS = 150
DEBOUNCE_JOYCON_TIME_MS = 250

_TICK_MASK = 0xFFFFFFFF


class Key(IntEnum):
    PLAY = 0
    STOP = 1
    MODE = 2
    JOYC = 3
    RIGHT = 4
    LEFT = 5
    UP = 6
    DOWN = 7


BUTTON_KEYS = (Key.PLAY, Key.STOP, Key.MODE, Key.JOYC)
AXIS_KEYS = (Key.RIGHT, Key.LEFT, Key.UP, Key.DOWN)


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000) & _TICK_MASK


class InputState:
    """Tracks physical buttons, ADC samples and latched key presses."""

    def __init__(self, calibration: JoyconCalibration | None = None, clock: Callable[[], int] = _monotonic_ms):
        self.calibration = calibration if calibration is not None else JoyconCalibration()
        self.adc = [0] * ADC_CHANNELS
        self._clock = clock
        self._buttons_down: set[Key] = set()
        self._pressed: set[Key] = set()
        self._timers = dict.fromkeys(Key, 0)

    def _elapsed(self, key: Key) -> int:
        return (self._clock() - self._timers[key]) & _TICK_MASK

    def set_button(self, key, down: bool) -> None:
        """Record the level of a physical button."""
        key = Key(key)
        if key not in BUTTON_KEYS:
            raise ValueError(f"{key.name} is not a physical button")
        if down:
            self._buttons_down.add(key)
        else:
            self._buttons_down.discard(key)

    def button_interrupt(self, key) -> None:
        """Handle a falling edge on a button, latching the press unless it bounces."""
        key = Key(key)
        if key not in BUTTON_KEYS:
            raise ValueError(f"{key.name} has no button interrupt")
        if self._timers[key] != 0 and self._elapsed(key) < DEBOUNCE_BUTTON_TIME_MS:
            return
        self._timers[key] = self._clock()
        self._pressed.add(key)

    def is_key_down(self, key) -> bool:
        """Return whether a button is held or the joystick points in a direction."""
        key = Key(key)
        cal = self.calibration
        if key in BUTTON_KEYS:
            return key in self._buttons_down
        if key is Key.RIGHT:
            return self.adc[ADC_AXIS_X] > cal.x_max - 300
        if key is Key.LEFT:
            return self.adc[ADC_AXIS_X] < cal.x_min + 100
        if key is Key.UP:
            return self.adc[ADC_AXIS_Y] < cal.y_min + 50
        return self.adc[ADC_AXIS_Y] > cal.y_max - 50

    def update_axis_states(self) -> None:
        """Latch joystick directions, at most once per debounce period each."""
        for key in AXIS_KEYS:
            if self.is_key_down(key) and self._elapsed(key) >= DEBOUNCE_JOYCON_TIME_MS:
                self._timers[key] = self._clock()
                self._pressed.add(key)

    def clear_pressed(self) -> None:
        """Forget every latched press."""
        self._pressed.clear()

    def was_key_pressed(self, key) -> bool:
        """Return whether a press was latched for `key`, consuming it."""
        key = Key(key)
        if key in self._pressed:
            self._pressed.discard(key)
            return True
        return False

    def knob_step(self) -> int:
        """Return the knob position as an octave step, as an unsigned byte."""
        return (7 - (self.adc[ADC_KNOB] + 300) // 512) & 0xFF