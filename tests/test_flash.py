import pytest

from gigasound.flash import (
    EEPROM_START_ADDRESS,
    PAGE0,
    PAGE0_BASE_ADDRESS,
    PAGE0_END_ADDRESS,
    PAGE1,
    PAGE1_BASE_ADDRESS,
    PAGE1_END_ADDRESS,
    PAGE_SIZE,
    FlashError,
    FlashMemory,
    PageStatus,
    page_base_address,
)


@pytest.fixture
def flash():
    return FlashMemory()


def test_page_addresses_follow_layout():
    assert PAGE0_BASE_ADDRESS == 0x08040000
    assert PAGE1_BASE_ADDRESS == PAGE0_BASE_ADDRESS + PAGE_SIZE
    assert PAGE0_END_ADDRESS + 1 == PAGE1_BASE_ADDRESS
    assert PAGE1_END_ADDRESS == EEPROM_START_ADDRESS + 2 * PAGE_SIZE - 1
    assert page_base_address(PAGE1) == PAGE1_BASE_ADDRESS


def test_page_status_values_read_from_headers(flash):
    assert flash.page_status(PAGE0) == 0xFFFF
    flash.program_halfword(PAGE0_BASE_ADDRESS, 0xEEEE)
    assert flash.page_status(PAGE0) is PageStatus.RECEIVE_DATA
    flash.program_halfword(PAGE0_BASE_ADDRESS, 0x0000)
    assert flash.page_status(PAGE0) is PageStatus.VALID_PAGE


def test_fresh_flash_is_erased(flash):
    assert flash.read_halfword(PAGE0_BASE_ADDRESS) == 0xFFFF
    assert flash.read_word(PAGE1_BASE_ADDRESS + 8) == 0xFFFFFFFF
    assert flash.is_page_erased(PAGE0)
    assert flash.is_page_erased(PAGE1)
    assert flash.page_status(PAGE0) is PageStatus.ERASED


def test_program_and_read_back(flash):
    flash.program_halfword(PAGE0_BASE_ADDRESS + 4, 0x1234)
    assert flash.read_halfword(PAGE0_BASE_ADDRESS + 4) == 0x1234
    assert flash.read_halfword(PAGE0_BASE_ADDRESS + 6) == 0xFFFF


def test_read_word_is_little_endian(flash):
    flash.program_halfword(PAGE0_BASE_ADDRESS, 0x1234)
    flash.program_halfword(PAGE0_BASE_ADDRESS + 2, 0x5678)
    assert flash.read_word(PAGE0_BASE_ADDRESS) == 0x56781234


def test_receive_then_valid_header(flash):
    flash.program_halfword(PAGE1_BASE_ADDRESS, PageStatus.RECEIVE_DATA)
    assert flash.page_status(PAGE1) is PageStatus.RECEIVE_DATA
    flash.program_halfword(PAGE1_BASE_ADDRESS, PageStatus.VALID_PAGE)
    assert flash.page_status(PAGE1) is PageStatus.VALID_PAGE


def test_setting_bits_requires_erase(flash):
    flash.program_halfword(PAGE0_BASE_ADDRESS, PageStatus.VALID_PAGE)
    with pytest.raises(FlashError):
        flash.program_halfword(PAGE0_BASE_ADDRESS, PageStatus.RECEIVE_DATA)
    assert flash.page_status(PAGE0) is PageStatus.VALID_PAGE


def test_reprogramming_same_value_is_allowed(flash):
    flash.program_halfword(PAGE0_BASE_ADDRESS + 10, 0x00F0)
    flash.program_halfword(PAGE0_BASE_ADDRESS + 10, 0x00F0)
    assert flash.read_halfword(PAGE0_BASE_ADDRESS + 10) == 0x00F0


def test_unknown_header_returns_raw_value(flash):
    flash.program_halfword(PAGE0_BASE_ADDRESS, 0x1234)
    status = flash.page_status(PAGE0)
    assert status == 0x1234
    assert not isinstance(status, PageStatus)


def test_erase_restores_page_and_counts(flash):
    flash.program_halfword(PAGE0_BASE_ADDRESS, PageStatus.VALID_PAGE)
    flash.program_halfword(PAGE0_BASE_ADDRESS + 100, 0x0042)
    assert not flash.is_page_erased(PAGE0)
    flash.erase_page(PAGE0)
    assert flash.is_page_erased(PAGE0)
    assert flash.read_halfword(PAGE0_BASE_ADDRESS + 100) == 0xFFFF
    assert flash.erase_counts[PAGE0] == 1
    assert flash.erase_counts[PAGE1] == 0


def test_pages_are_independent(flash):
    flash.program_halfword(PAGE1_BASE_ADDRESS + 20, 0x0001)
    assert flash.is_page_erased(PAGE0)
    assert not flash.is_page_erased(PAGE1)
    flash.erase_page(PAGE0)
    assert flash.read_halfword(PAGE1_BASE_ADDRESS + 20) == 0x0001


def test_erase_check_looks_at_first_halfword_of_each_word(flash):
    flash.program_halfword(PAGE0_BASE_ADDRESS + 2, 0x0000)
    assert flash.is_page_erased(PAGE0)
    flash.program_halfword(PAGE0_BASE_ADDRESS + 4, 0x0000)
    assert not flash.is_page_erased(PAGE0)


def test_last_word_of_page_is_checked(flash):
    flash.program_halfword(PAGE1_END_ADDRESS - 3, 0x0000)
    assert not flash.is_page_erased(PAGE1)


@pytest.mark.parametrize("address", [PAGE0_BASE_ADDRESS - 2, PAGE1_END_ADDRESS + 1])
def test_out_of_range_address_raises(flash, address):
    with pytest.raises(FlashError):
        flash.read_halfword(address)
    with pytest.raises(FlashError):
        flash.program_halfword(address, 0)


def test_misaligned_access_raises(flash):
    with pytest.raises(FlashError):
        flash.read_halfword(PAGE0_BASE_ADDRESS + 1)
    with pytest.raises(FlashError):
        flash.read_word(PAGE0_BASE_ADDRESS + 2)


def test_value_out_of_range_raises(flash):
    with pytest.raises(FlashError):
        flash.program_halfword(PAGE0_BASE_ADDRESS, 0x10000)
    assert flash.read_halfword(PAGE0_BASE_ADDRESS) == 0xFFFF


def test_unknown_page_raises(flash):
    with pytest.raises(FlashError):
        flash.erase_page(2)
    with pytest.raises(FlashError):
        flash.page_status(-1)