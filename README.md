# gigasound

This package holds the logic of a polyphonic MIDI keyboard that does not depend
on any device. It is pure Python and has no runtime dependencies. All hardware
access comes from outside as plain callables or plain values.

## Modules

- `gigasound.framebuffer`: `Framebuffer` is a 128x64 one-bit framebuffer. It
  is stored as 8 pages of 128 column bytes, the layout SSD1306 displays use.
  - It draws pixels (`set_pixel`, `get_pixel`) and lines (`draw_line_h`,
    `draw_line_v`).
  - It draws rectangles, plain or with rounded corners (`draw_rect`,
    `draw_rect_fill`, `draw_rect_round`, `draw_rect_round_fill`).
  - It draws raw page data from a `Sprite` and MSB-first bitmaps from an
    `Icon`.
  - It draws text with an 11-row font of 62 glyphs (`draw_text`).
  - `clear`, `copy_from` and `to_bytes` complete the class. `to_bytes` returns
    the 1024 display bytes.
  - Coordinates outside the screen raise `IndexError`.
- `gigasound.scale`:
  - The `Scale` and `Tone` enums.
  - `button_to_midi(octave, scale, tone, button)` maps buttons 0 to 7 to a MIDI
    note.
  - `scale_name()` and `tone_name()` give display names.
- `gigasound.led`:
  - `Color` is an RGB value. The module has named constants such as `RED` and
    `OFF`.
  - `encode_color()` returns the 9 wire bytes for one WS2812 LED, in G, R, B
    order, with each bit sent as a 3-bit SPI symbol.
  - `LedStrip` holds the transmit buffer for 19 LEDs, followed by the reset
    symbols.
- `gigasound.midi`:
  - `MidiOut` builds MIDI messages and passes each one as `bytes` to a `write`
    callable. The messages are note on/off, channel pressure, pitch bend,
    modulation, single-byte commands, MPE zone setup and pitch bend
    sensitivity.
  - An optional `read_packet` callable lets `discard_packets()` drop pending
    input.
  - `map_range()` does linear mapping with 16-bit arithmetic.
- `gigasound.calibrate`: `calibrate_joycon(readings)` takes an iterable of ADC
  buffers and returns the axis extremes as a `JoyconCalibration`.
- `gigasound.input`: `InputState` holds the state of the buttons (`Key`), the
  ADC samples and the latched presses.
  - Button interrupts are debounced over 150 ms.
  - Joystick directions are latched at most once every 250 ms by
    `update_axis_states()`.
  - `was_key_pressed()` returns a latched press and clears it.
  - `knob_step()` turns the knob reading into a step.
  - The millisecond clock is injectable.
- `gigasound.list_animation`: `ListAnimation` keeps a list selection.
  - `animate_list()` moves the selection with UP and DOWN and wraps around at
    the ends.
  - `animate()` returns the position of the sliding highlight, which takes 5
    frames.
- `gigasound.flash`: `FlashMemory` simulates the two 128 KiB flash pages set
  aside for settings.
  - Pages erase to all ones, and programming a halfword can only clear bits.
  - `erase_page`, `is_page_erased` and `page_status` work on whole pages. The
    page header values are in `PageStatus`.
  - Faults raise `FlashError`.
- `gigasound.usb_descriptors`:
  - `product_id()` and `device_descriptor()` return the 18-byte USB device
    descriptor.
  - `string_descriptor(index, serial)` returns the UTF-16 string descriptors,
    capped at 32 characters.

## Example

```python
from gigasound.scale import Scale, Tone, button_to_midi
from gigasound.midi import MidiOut

sent = []
midi = MidiOut(write=sent.append, read_packet=lambda: None)

note = button_to_midi(4, Scale.MAJOR, Tone.DO, 0)   # 48
midi.note_on(0, note, 127)
midi.note_off(0, note)
# sent == [b"\xd0\x00", b"\x90\x30\x7f", b"\x80\x30\x00"]
```

## What it does not do

- It does not store or load settings. `FlashMemory` gives you the simulated
  pages, but the package has no EEPROM emulation on top of them and no
  versioned configuration record. Colours, calibration and enabled scales must
  be kept by the caller.
- It has no command and no main loop that ties the screens together.
- It does not talk to any display, LED chain, ADC or USB stack. It only
  produces and consumes the bytes and values involved.

## Installing

```
pip install .
pip install ".[test]" && pytest
```