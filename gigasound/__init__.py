"""Scales, MIDI messages, LED encoding, input handling, a 1-bit framebuffer, simulated flash and USB descriptors for a polyphonic MIDI keyboard."""

__version__ = "0.1.0"