"""Simulated on-chip flash holding the two sectors used for EEPROM emulation."""

from __future__ import annotations

from enum import IntEnum

PAGE_SIZE = 0x20000
EEPROM_START_ADDRESS = 0x08040000

PAGE0 = 0x0000
PAGE1 = 0x0001
PAGES = (PAGE0, PAGE1)

PAGE0_BASE_ADDRESS = EEPROM_START_ADDRESS
PAGE0_END_ADDRESS = EEPROM_START_ADDRESS + PAGE_SIZE - 1
PAGE1_BASE_ADDRESS = EEPROM_START_ADDRESS + PAGE_SIZE
PAGE1_END_ADDRESS = EEPROM_START_ADDRESS + 2 * PAGE_SIZE - 1

PAGE0_ID = 6
PAGE1_ID = 7

NO_VALID_PAGE = 0x00AB
PAGE_FULL = 0x80
NB_OF_VAR = 0x03

_ERASED_BYTE = 0xFF


class FlashError(Exception):
    """Raised when a flash access or programming operation fails."""


class PageStatus(IntEnum):
    """Header values marking the state of an EEPROM page."""

    ERASED = 0xFFFF
    RECEIVE_DATA = 0xEEEE
    VALID_PAGE = 0x0000


def page_base_address(page: int) -> int:
    """Return the first address of an EEPROM page."""
    if page not in PAGES:
        raise FlashError(f"no such page: {page}")
    return EEPROM_START_ADDRESS + page * PAGE_SIZE


class FlashMemory:
    """Two flash pages that erase to all ones and can only clear bits when programmed."""

    def __init__(self):
        self._data = bytearray([_ERASED_BYTE]) * (2 * PAGE_SIZE)
        self.erase_counts = dict.fromkeys(PAGES, 0)

    def _offset(self, address: int, size: int) -> int:
        if address % size:
            raise FlashError(f"address {address:#010x} is not aligned to {size} bytes")
        offset = address - EEPROM_START_ADDRESS
        if not 0 <= offset <= len(self._data) - size:
            raise FlashError(f"address {address:#010x} is outside the EEPROM area")
        return offset

    def read_halfword(self, address: int) -> int:
        """Return the 16-bit little-endian value at `address`."""
        offset = self._offset(address, 2)
        return int.from_bytes(self._data[offset:offset + 2], "little")

    def read_word(self, address: int) -> int:
        """Return the 32-bit little-endian value at `address`."""
        offset = self._offset(address, 4)
        return int.from_bytes(self._data[offset:offset + 4], "little")

    def program_halfword(self, address: int, value: int) -> None:
        """Program a halfword; flash can only turn bits from one to zero."""
        if not 0 <= value <= 0xFFFF:
            raise FlashError(f"halfword value out of range: {value}")
        offset = self._offset(address, 2)
        current = int.from_bytes(self._data[offset:offset + 2], "little")
        if current & value != value:
            raise FlashError(
                f"cannot program {value:#06x} over {current:#06x} at {address:#010x} without erasing"
            )
        self._data[offset:offset + 2] = value.to_bytes(2, "little")

    def _page_slice(self, page: int) -> slice:
        start = page_base_address(page) - EEPROM_START_ADDRESS
        return slice(start, start + PAGE_SIZE)

    def erase_page(self, page: int) -> None:
        """Erase a whole page back to all ones."""
        region = self._page_slice(page)
        self._data[region] = bytes([_ERASED_BYTE]) * PAGE_SIZE
        self.erase_counts[page] += 1

    def is_page_erased(self, page: int) -> bool:
        """Check the first halfword of every word in the page for the erased value."""
        content = self._data[self._page_slice(page)]
        expected = bytes([_ERASED_BYTE]) * (PAGE_SIZE // 4)
        return content[0::4] == expected and content[1::4] == expected

    def page_status(self, page: int) -> PageStatus | int:
        """Return the page header as a PageStatus, or the raw value if it is not one."""
        raw = self.read_halfword(page_base_address(page))
        try:
            return PageStatus(raw)
        except ValueError:
            return raw