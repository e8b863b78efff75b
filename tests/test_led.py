import pytest

from gigasound.led import (
    BLUE,
    LED_BUFF_N,
    N_LED,
    OFF,
    PURPLE,
    RED,
    RESET_SYMBOLS_N,
    Color,
    LedStrip,
    encode_color,
)


def decode_channel(data):
    bits = int.from_bytes(data, "big")
    value = 0
    for shift in range(21, -1, -3):
        symbol = (bits >> shift) & 0b111
        assert symbol in (0b100, 0b110)
        value = (value << 1) | (symbol == 0b110)
    return value


def decode_led(data):
    g = decode_channel(data[0:3])
    r = decode_channel(data[3:6])
    b = decode_channel(data[6:9])
    return Color(r, g, b)


def test_off_is_all_zero_symbols():
    assert encode_color(OFF, 1.0) == bytes([0x92, 0x49, 0x24]) * 3


@pytest.mark.parametrize("color", [RED, BLUE, PURPLE, Color(1, 128, 77)])
def test_encode_round_trip(color):
    data = encode_color(color, 1.0)
    assert len(data) == 9
    assert decode_led(data) == color


def test_green_is_sent_first():
    data = encode_color(Color(0, 255, 0), 1.0)
    assert data[0:3] == encode_color(Color(255, 0, 0), 1.0)[3:6]
    assert data[3:9] == encode_color(OFF, 1.0)[3:9]


def test_brightness_scales_and_truncates():
    assert decode_led(encode_color(Color(200, 100, 3), 0.5)) == Color(100, 50, 1)
    assert decode_led(encode_color(RED, 0.0)) == OFF


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_strip_buffer_length():
    strip = LedStrip()
    assert len(strip.to_bytes()) == LED_BUFF_N == N_LED * 9 + RESET_SYMBOLS_N


def test_set_led_writes_its_slot_only():
    strip = LedStrip()
    strip.set_led(3, PURPLE, 1.0)
    data = strip.to_bytes()
    assert decode_led(data[27:36]) == PURPLE
    assert data[:27] == bytes(27)
    assert data[36:] == bytes(LED_BUFF_N - 36)


def test_clear_sets_every_led_off_and_keeps_reset_tail():
    strip = LedStrip()
    strip.set_led(0, RED, 1.0)
    strip.clear()
    data = strip.to_bytes()
    for index in range(N_LED):
        assert decode_led(data[index * 9:(index + 1) * 9]) == OFF
    assert data[-RESET_SYMBOLS_N:] == bytes(RESET_SYMBOLS_N)


@pytest.mark.parametrize("index", [-1, N_LED])
def test_set_led_rejects_bad_index(index):
    strip = LedStrip()
    with pytest.raises(IndexError):
        strip.set_led(index, RED, 1.0)