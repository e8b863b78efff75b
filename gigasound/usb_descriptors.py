"""USB device and string descriptors for the MIDI keyboard."""

from __future__ import annotations

import struct

CFG_TUD_CDC = 0
CFG_TUD_MSC = 0
CFG_TUD_HID = 0
CFG_TUD_MIDI = 1
CFG_TUD_VENDOR = 0
CFG_TUD_ENDPOINT0_SIZE = 64

TUSB_DESC_DEVICE = 0x01
TUSB_DESC_STRING = 0x03

VENDOR_ID = 0xCAFE
BCD_USB = 0x0200
BCD_DEVICE = 0x0100

STRID_LANGID = 0
STRID_MANUFACTURER = 1
STRID_PRODUCT = 2
STRID_SERIAL = 3

LANGID_ENGLISH = 0x0409
MANUFACTURER = "GIGAsound"
PRODUCT = "polyphonic keyboard"

MAX_STRING_CHARS = 32

_STRINGS = {STRID_MANUFACTURER: MANUFACTURER, STRID_PRODUCT: PRODUCT}
_STRING_COUNT = 4

_DEVICE = struct.Struct("<BBHBBBBHHHBBBB")


def product_id() -> int:
    """Return the product id, with one bit per enabled interface class."""
    return (
        0x4000
        | CFG_TUD_CDC << 0
        | CFG_TUD_MSC << 1
        | CFG_TUD_HID << 2
        | CFG_TUD_MIDI << 3
        | CFG_TUD_VENDOR << 4
    )


def device_descriptor() -> bytes:
    """Return the 18-byte device descriptor."""
    return _DEVICE.pack(
        _DEVICE.size,
        TUSB_DESC_DEVICE,
        BCD_USB,
        0x00,
        0x00,
        0x00,
        CFG_TUD_ENDPOINT0_SIZE,
        VENDOR_ID,
        product_id(),
        BCD_DEVICE,
        STRID_MANUFACTURER,
        STRID_PRODUCT,
        STRID_SERIAL,
        0x01,
    )


def _utf16(text: str) -> list[int]:
    units = []
    for char in text[:MAX_STRING_CHARS]:
        code = ord(char)
        if code > 0xFFFF:
            raise ValueError(f"character {char!r} does not fit in one UTF-16 unit")
        units.append(code)
    return units


def string_descriptor(index: int, serial: str | None = None) -> bytes | None:
    """Return the string descriptor for `index`, or None if there is no such string.

    Strings are capped at 32 characters. `serial` supplies the serial number string.
    """
    if index == STRID_LANGID:
        units = [LANGID_ENGLISH]
    elif index == STRID_SERIAL:
        if serial is None:
            raise ValueError("a serial number is needed for the serial string")
        units = _utf16(serial)
    elif 0 <= index < _STRING_COUNT:
        units = _utf16(_STRINGS[index])
    else:
        return None
    header = (TUSB_DESC_STRING << 8) | (2 * len(units) + 2)
    return struct.pack(f"<{len(units) + 1}H", header, *units)