"""Musical scales and the mapping from keyboard buttons to MIDI notes."""

from __future__ import annotations

from enum import IntEnum

BUTTONS = 8


class Scale(IntEnum):
    MAJOR = 0
    MAJOR_HARMONIC = 1
    BLUES = 2
    MINOR_NATURAL = 3
    MINOR_HARMONIC = 4
    MINOR_MELODIC_ASCENDING = 5


class Tone(IntEnum):
    DO = 0
    DO_SHARP = 1
    RE = 2
    RE_SHARP = 3
    MI = 4
    FA = 5
    FA_SHARP = 6
    SOL = 7
    SOL_SHARP = 8
    LA = 9
    LA_SHARP = 10
    SI = 11


_SCALE_NAMES = {
    Scale.MAJOR: "Major",
    Scale.MAJOR_HARMONIC: "Major Harmonic",
    Scale.BLUES: "Blues",
    Scale.MINOR_NATURAL: "Minor Natural",
    Scale.MINOR_HARMONIC: "Minor Harmonic",
    Scale.MINOR_MELODIC_ASCENDING: "Minor Melodic",
}

_TONE_NAMES = ("Do", "DoD", "Re", "ReD", "Mi", "Fa", "FaD", "Sol", "SolD", "La", "LaD", "Si")

_T = Tone
_INTERVALS = {
    Scale.MAJOR: (_T.DO, _T.RE, _T.MI, _T.FA, _T.SOL, _T.LA, _T.SI, _T.DO + 12),
    Scale.MAJOR_HARMONIC: (_T.DO, _T.RE, _T.MI, _T.FA, _T.SOL, _T.SOL_SHARP, _T.SI, _T.DO + 12),
    Scale.BLUES: (_T.DO, _T.RE_SHARP, _T.MI, _T.FA_SHARP, _T.FA_SHARP, _T.SOL, _T.LA, _T.DO + 12),
    Scale.MINOR_NATURAL: (_T.DO, _T.RE, _T.RE_SHARP, _T.FA, _T.SOL, _T.SOL_SHARP, _T.LA_SHARP, _T.DO + 12),
    Scale.MINOR_HARMONIC: (_T.DO, _T.RE, _T.RE_SHARP, _T.FA, _T.SOL, _T.SOL_SHARP, _T.SI, _T.DO + 12),
    Scale.MINOR_MELODIC_ASCENDING: (_T.DO, _T.RE, _T.RE_SHARP, _T.FA, _T.SOL, _T.LA, _T.SI, _T.DO + 12),
}


def button_to_midi(octave: int, scale, tone, button: int) -> int:
    """Return the MIDI note for `button` (0-7) of `scale` rooted at `tone` in `octave`."""
    if not 0 <= button < BUTTONS:
        raise ValueError(f"button must be in 0..{BUTTONS - 1}, got {button}")
    intervals = _INTERVALS[Scale(scale)]
    return (int(Tone(tone)) + octave * 12 + int(intervals[button])) & 0xFF


def scale_name(scale) -> str:
    """Return the display name of a scale."""
    return _SCALE_NAMES[Scale(scale)]


def tone_name(tone) -> str:
    """Return the display name of a tone."""
    return _TONE_NAMES[Tone(tone)]