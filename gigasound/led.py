"""WS2812-style LED strip encoding: each data bit becomes a 3-bit SPI symbol."""

from __future__ import annotations

from dataclasses import dataclass

N_LED = 19
RESET_SYMBOLS_N = 25
BYTES_PER_LED = 9
LED_BUFF_N = N_LED * BYTES_PER_LED + RESET_SYMBOLS_N

LED_KNOB_BASE = 0
LED_PLAY = 8
LED_STOP = 9
LED_MODE = 10
LED_BUTTON_BASE = 11

_ONE = 0b110
_ZERO = 0b100


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"colour channel out of range: {channel}")

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def scaled(self, brightness: float) -> Color:
        """Return the colour with each channel multiplied by `brightness`, truncated."""
        return Color(*(min(0xFF, max(0, int(c * brightness))) for c in self.rgb))


RED = Color(255, 0, 0)
ORANGE = Color(255, 140, 0)
YELLOW = Color(255, 255, 0)
L_GREEN = Color(0, 255, 0)
TEAL = Color(0, 220, 180)
CYAN = Color(0, 180, 255)
SKY_BLUE = Color(80, 180, 255)
BLUE = Color(0, 0, 255)
PURPLE = Color(180, 70, 255)
MAGENTA = Color(255, 0, 180)
PINK = Color(255, 105, 180)
OFF = Color(0, 0, 0)


def _encode_channel(value: int) -> bytes:
    symbols = 0
    for bit in range(7, -1, -1):
        symbols = (symbols << 3) | (_ONE if (value >> bit) & 1 else _ZERO)
    return symbols.to_bytes(3, "big")


def encode_color(color: Color, brightness: float = 1.0) -> bytes:
    """Encode a colour at a brightness as the 9 wire bytes of one LED (G, R, B order)."""
    scaled = color.scaled(brightness)
    return _encode_channel(scaled.g) + _encode_channel(scaled.r) + _encode_channel(scaled.b)


class LedStrip:
    """The transmit buffer for the whole strip, followed by reset symbols."""

    def __init__(self):
        self._buffer = bytearray(LED_BUFF_N)

    def set_led(self, index: int, color: Color, brightness: float = 1.0) -> None:
        """Set one LED's colour at the given brightness."""
        if not 0 <= index < N_LED:
            raise IndexError(f"LED index must be in 0..{N_LED - 1}, got {index}")
        offset = index * BYTES_PER_LED
        self._buffer[offset:offset + BYTES_PER_LED] = encode_color(color, brightness)

    def clear(self) -> None:
        """Turn every LED off."""
        for index in range(N_LED):
            self.set_led(index, OFF, 0.0)

    def to_bytes(self) -> bytes:
        """Return the full buffer as sent over SPI."""
        return bytes(self._buffer)