"""Joystick calibration: track the extremes of both axes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

X_AXIS = 10
Y_AXIS = 9

ADC_MAX = 4095


@dataclass(frozen=True)
class JoyconCalibration:
    """Observed axis ranges of the joystick."""

    calibrated: bool = False
    x_min: int = 0
    x_max: int = 0
    y_min: int = 0
    y_max: int = 0


def calibrate_joycon(readings: Iterable[Sequence[int]]) -> JoyconCalibration:
    """Return the axis extremes seen over a series of ADC buffers.

    The caller ends calibration by ending the iteration.
    """
    x_min, x_max = ADC_MAX, 0
    y_min, y_max = ADC_MAX, 0
    for buffer in readings:
        x, y = buffer[X_AXIS], buffer[Y_AXIS]
        x_min, x_max = min(x_min, x), max(x_max, x)
        y_min, y_max = min(y_min, y), max(y_max, y)
    return JoyconCalibration(True, x_min, x_max, y_min, y_max)