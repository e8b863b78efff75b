"""MIDI output over a byte stream, including the MPE setup the keyboard uses."""

from __future__ import annotations

from collections.abc import Callable

MIDI_STOP = 0xFC
MIDI_START = 0xFA
MIDI_CONTINUE = 0xFB

MASTER_CHANNEL = 0

CC_101_MSB = 0x65
CC_100_LSB = 0x64
MPE_CONFIGURATION_RPN = 0x06
MPE_CHANNELS = 0x08

MIDI_MODULATION_MSB = 0x01
MIDI_MODULATION_LSB = 0x21

_NOTE_OFF = 0x80
_NOTE_ON = 0x90
_CONTROL_CHANGE = 0xB0
_CHANNEL_PRESSURE = 0xD0
_PITCH_BEND = 0xE0


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly map `x` from one 16-bit range to another, with 16-bit wraparound.

    Returns 0 when the input range is empty.
    """
    x, in_min, in_max, out_min, out_max = (v & 0xFFFF for v in (x, in_min, in_max, out_min, out_max))
    span = in_max - in_min
    if span == 0:
        return 0
    return (_trunc_div((x - in_min) * (out_max - out_min), span) + out_min) & 0xFFFF


class MidiOut:
    """Builds MIDI messages and hands them to a stream writer.

    `write` receives each message as bytes. `read_packet`, if given, returns
    the next incoming packet or None when nothing is waiting.
    """

    def __init__(self, write: Callable[[bytes], object], read_packet: Callable[[], bytes | None] | None = None):
        self._write = write
        self._read_packet = read_packet

    @staticmethod
    def _channel(channel: int) -> int:
        if not 0 <= channel <= 0x0F:
            raise ValueError(f"MIDI channel must be in 0..15, got {channel}")
        return channel

    def _send(self, *data: int) -> None:
        self._write(bytes(data))

    def _send_cc(self, channel: int, cc_num: int, value: int) -> None:
        self._send(_CONTROL_CHANGE | self._channel(channel), cc_num, value)

    def discard_packets(self) -> int:
        """Read and drop every pending incoming packet; return how many were dropped."""
        if self._read_packet is None:
            return 0
        dropped = 0
        while self._read_packet() is not None:
            dropped += 1
        return dropped

    def mpe_init(self) -> None:
        """Configure the MPE zone on the master channel with eight member channels."""
        self.discard_packets()
        self._send_cc(MASTER_CHANNEL, CC_101_MSB, 0x00)
        self._send_cc(MASTER_CHANNEL, CC_100_LSB, MPE_CONFIGURATION_RPN)
        self._send_cc(MASTER_CHANNEL, MPE_CONFIGURATION_RPN, MPE_CHANNELS)

    def set_pitch_bend_sensitivity(self, sensitivity: int) -> None:
        """Set the global pitch bend sensitivity via RPN 0."""
        self._send_cc(MASTER_CHANNEL, CC_101_MSB, 0x00)
        self._send_cc(MASTER_CHANNEL, CC_100_LSB, 0x00)
        self._send_cc(MASTER_CHANNEL, MPE_CONFIGURATION_RPN, sensitivity & 0x7F)

    def set_pitch_bend(self, pitch: int) -> None:
        """Send a 14-bit pitch bend on the master channel."""
        self._send(_PITCH_BEND | MASTER_CHANNEL, pitch & 0x7F, (pitch >> 7) & 0x7F)

    def set_channel_pressure(self, channel: int, pressure: int) -> None:
        """Send channel aftertouch."""
        self._send(_CHANNEL_PRESSURE | self._channel(channel), pressure & 0x7F)

    def note_on(self, channel: int, note: int, velocity: int) -> None:
        """Reset the channel pressure, then start a note."""
        self.set_channel_pressure(channel, 0)
        self._send(_NOTE_ON | self._channel(channel), note, velocity)

    def note_off(self, channel: int, note: int) -> None:
        """Stop a note."""
        self._send(_NOTE_OFF | self._channel(channel), note, 0)

    def send_cmd(self, cmd: int) -> None:
        """Send a single-byte real-time command such as MIDI_START."""
        self._send(cmd)

    def send_modulation(self, value: int) -> None:
        """Send a 14-bit modulation wheel value as MSB then LSB controllers."""
        self._send_cc(MASTER_CHANNEL, MIDI_MODULATION_MSB, (value >> 7) & 0x7F)
        self._send_cc(MASTER_CHANNEL, MIDI_MODULATION_LSB, value & 0x7F)