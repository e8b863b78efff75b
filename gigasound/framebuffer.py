"""Monochrome 128x64 framebuffer in SSD1306 page layout, with drawing primitives."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

WIDTH = 128
HEIGHT = 64
PAGES = HEIGHT // 8

BLACK = False
WHITE = True

FONT_GLYPHS = 62
FONT_ROWS = 11
_SPACE_ADVANCE = 6


@dataclass(frozen=True)
class Sprite:
    """Raw page data: `height` page rows of `stride` bytes each."""

    height: int
    stride: int
    data: bytes


@dataclass(frozen=True)
class Icon:
    """A 1-bit icon, rows packed MSB first, `width` bits per row."""

    width: int
    height: int
    data: bytes


class Framebuffer:
    """A 128x64 one-bit framebuffer stored as 8 pages of 128 column bytes."""

    def __init__(self):
        self._pages = [bytearray(WIDTH) for _ in range(PAGES)]

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise IndexError(f"pixel {x},{y} is outside the {WIDTH}x{HEIGHT} framebuffer")

    def set_pixel(self, x: int, y: int, color) -> None:
        """Set or clear the pixel at (x, y)."""
        self._check(x, y)
        mask = 1 << (y & 7)
        if color:
            self._pages[y >> 3][x] |= mask
        else:
            self._pages[y >> 3][x] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is lit."""
        self._check(x, y)
        return bool(self._pages[y >> 3][x] & (1 << (y & 7)))

    def draw_line_h(self, x: int, y: int, length: int, color, thickness: int) -> None:
        """Draw a horizontal line `thickness` pixels tall, growing downward."""
        for i in range(length):
            for j in range(thickness):
                self.set_pixel(x + i, y + j, color)

    def draw_line_v(self, x: int, y: int, length: int, color, thickness: int) -> None:
        """Draw a vertical line `thickness` pixels wide, growing rightward."""
        for i in range(length):
            for j in range(thickness):
                self.set_pixel(x + j, y + i, color)

    def draw_rect(self, x: int, y: int, width: int, height: int, color) -> None:
        """Draw a one-pixel rectangle outline."""
        self.draw_line_h(x, y, width, color, 1)
        self.draw_line_h(x, y + height - 1, width, color, 1)
        self.draw_line_v(x, y + 1, height - 2, color, 1)
        self.draw_line_v(x + width - 1, y + 1, height - 2, color, 1)

    def draw_rect_fill(self, x: int, y: int, width: int, height: int, color) -> None:
        """Fill a rectangle."""
        for i in range(height):
            self.draw_line_h(x, y + i, width, color, 1)

    @staticmethod
    def _corner_color(color, delete) -> bool:
        return bool(color) if delete else not color

    def draw_rect_round(self, x: int, y: int, width: int, height: int, color, delete) -> None:
        """Draw a two-pixel outline with rounded corners."""
        thickness = 2
        self.draw_line_h(x, y, width, color, thickness)
        self.draw_line_h(x, y + height - thickness, width, color, thickness)
        self.draw_line_v(x, y + thickness, height - thickness * 2, color, thickness)
        self.draw_line_v(x + width - thickness, y + thickness, height - thickness * 2, color, thickness)

        negative = self._corner_color(color, delete)
        right, bottom = x + width - 1, y + height - 1

        self.set_pixel(x, y, negative)
        self.set_pixel(x + 1, y, negative)
        self.set_pixel(x, y + 1, negative)
        self.set_pixel(x + 2, y + 2, color)

        self.set_pixel(right, y, negative)
        self.set_pixel(right - 1, y, negative)
        self.set_pixel(right, y + 1, negative)
        self.set_pixel(right - 2, y + 2, color)

        self.set_pixel(right, bottom, negative)
        self.set_pixel(right - 1, bottom, negative)
        self.set_pixel(right, bottom - 1, negative)
        self.set_pixel(right - 2, bottom - 2, color)

        self.set_pixel(x, bottom, negative)
        self.set_pixel(x + 1, bottom, negative)
        self.set_pixel(x, bottom - 1, negative)
        self.set_pixel(x + 2, bottom - 2, color)

    def draw_rect_round_fill(self, x: int, y: int, width: int, height: int, color, delete) -> None:
        """Fill a rectangle and cut its corners."""
        self.draw_rect_fill(x, y, width, height, color)

        negative = self._corner_color(color, delete)
        right, bottom = x + width - 1, y + height - 1
        corners = (
            (x, y), (x + 1, y), (x, y + 1),
            (right, y), (right - 1, y), (right, y + 1),
            (right, bottom), (right - 1, bottom), (right, bottom - 1),
            (x, bottom), (x + 1, bottom), (x, bottom - 1),
        )
        for px, py in corners:
            self.set_pixel(px, py, negative)

    def draw_sprite(self, x: int, y: int, sprite: Sprite) -> None:
        """Copy raw page bytes; `x` is a column and `y` a page index."""
        for j in range(sprite.height):
            row = sprite.data[j * sprite.stride:(j + 1) * sprite.stride]
            page = y + j
            if not (0 <= page < PAGES and 0 <= x and x + sprite.stride <= WIDTH):
                raise IndexError(f"sprite row {j} does not fit at column {x}, page {page}")
            self._pages[page][x:x + sprite.stride] = row

    def draw_icon(self, x: int, y: int, icon: Icon, invert) -> None:
        """Draw the set bits of an icon, lighting them or toggling them if `invert`."""
        for j in range(icon.height):
            row_start = (j * icon.width) // 8
            for i in range(icon.width):
                if icon.data[row_start + i // 8] & (0x80 >> (i % 8)):
                    self._plot(x + i, y + j, invert)

    def _plot(self, x: int, y: int, invert) -> None:
        if invert:
            self.set_pixel(x, y, not self.get_pixel(x, y))
        else:
            self.set_pixel(x, y, True)

    @staticmethod
    def _glyph_index(char: str) -> int:
        code = ord(char)
        if code > 0xFF:
            raise ValueError(f"character {char!r} is not in the font")
        if code < ord("9"):
            return (code - ord("0") + 52) & 0xFF
        if code & 0x20:
            return (code - ord("a")) & 0xFF
        return (code - ord("A") + 26) & 0xFF

    def draw_text(self, x: int, y: int, text: str, font: Sequence[Sequence[int]], invert) -> None:
        """Draw text with an 11-row, 5-column bitmap font of 62 glyphs (a-z, A-Z, 0-9)."""
        advance = 0
        for char in text:
            if char == " ":
                advance += _SPACE_ADVANCE
                continue
            index = self._glyph_index(char)
            if index >= len(font):
                raise ValueError(f"character {char!r} is not in the font")
            first, last = (1, 4) if char == "i" else (0, 5)
            glyph = font[index]
            for j in range(FONT_ROWS):
                for i in range(first, last):
                    if glyph[j] & (0x80 >> i):
                        self._plot(x + i + advance, y + j, invert)
            advance += last - first + 1

    def clear(self) -> None:
        """Turn every pixel off."""
        for page in self._pages:
            page[:] = bytes(WIDTH)

    def copy_from(self, other: Framebuffer) -> None:
        """Replace this framebuffer's contents with another's."""
        for mine, theirs in zip(self._pages, other._pages):
            mine[:] = theirs

    def to_bytes(self) -> bytes:
        """Return the 1024 display bytes, page after page."""
        return b"".join(bytes(page) for page in self._pages)