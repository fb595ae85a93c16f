# midikit

Small helpers for MIDI 1.0 data. They need nothing outside the Python standard library.

## Modules

- `midikit.utils` has the byte-level helpers.
  - Status bytes: `parse_status` returns `(type, channel)`. There are also `is_status_byte`, `is_channel_message`, `has_bit` and `clear_bit`.
  - Variable-length quantities: `vlq_encode`, `vlq_decode`, `read_var_length` and `read_var_length_data`.
  - Readers for binary streams: `read_byte`, `read_n_bytes`, `read_uint16`, `read_uint24`, `read_uint32` and `read_text`. The number readers are big-endian. `parse_uint16` builds a 16-bit value from two bytes.
  - 7- and 14-bit values: `parse_uint7`, `parse_two_uint7`, `parse_pitch_wheel_vals`, `msb_lsb_signed` and `msb_lsb_unsigned`.
  - Keys: `key_from_sharps_or_flats` takes a count of sharps (positive) or flats (negative) and a mode (0 major, 1 minor). It returns a key from 0 to 11.
  - `control_change(channel, controller, value)` returns the 3 bytes of a control change message. Values that are too large are clamped.
- `midikit.runningstatus` handles running status.
  - `LiveReader` and `SMFReader` track the current status byte. Their `read(byte)` returns `(status, changed)`.
  - `SMFWriter.write(raw)` returns the bytes to store and leaves out a repeated channel status byte. `reset_status()` clears the stored status.
  - `LiveWriter(stream).write(message)` writes the message to a binary stream in the same way. Real-time messages pass through without touching the stored status.
- `midikit.note` works with MIDI keys and intervals.
  - `c(octave)`, `db`, `d`, `eb`, `e`, `f`, `gb`, `g`, `ab`, `a`, `bb` and `b` each return a MIDI key.
    - Octaves above 10 are treated as 10.
    - A key that would pass 127 is moved down an octave.
  - `Note` is an `int` subclass that accepts values from 0 to 255. It has these methods:
    - `interval`
    - `transpose`, which never goes below 0
    - `base`
    - `name`
    - `octave`
    - `matches`, which compares note names and ignores the octave
  - `str(Note(60))` gives `"C5"`.
  - `Interval` is a signed 8-bit semitone count that wraps around. It has named constants such as `Interval.FIFTH` and `Interval.DOUBLE_OCTAVE`. `str(Interval(-7))` gives `"Fifth down"`.
- `midikit.mmc` builds and parses MIDI Machine Control SysEx messages.
  - It has a `Command` enum and the dataclasses `Message`, `GoTo` and `Identity`.
  - Each class has a `sysex()` method and a `parse(data)` class method.
- `midikit.rpn` and `midikit.nrpn` return the list of control change messages for registered and non-registered parameter numbers. Each list ends with the null (reset) sequence.

## Errors

| Situation | Exception |
| --- | --- |
| Parsing malformed MMC data | `ValueError` |
| A truncated `vlq_decode` input | `ValueError` |
| A value over 16383 given to `msb_lsb_unsigned` | `ValueError` |
| A `Note` outside 0–255 | `ValueError` |
| A negative octave | `ValueError` |
| A stream that ends early in the stream readers | `midikit.utils.UnexpectedEOFError`, a subclass of `EOFError` |

## Examples

```python
from midikit.utils import vlq_encode, vlq_decode

assert vlq_encode(0x2000) == b"\xc0\x00"
assert vlq_decode(b"\xff\x7f") == 0x3FFF
```

```python
from midikit.note import Note, Interval, c, g

key = Note(c(5))
print(key)                              # C5
print(key.transpose(Interval.FIFTH))    # G5
print(key.interval(Note(g(5))))         # Fifth up
print(key.matches(Note(c(8))))          # True
```

```python
from midikit.runningstatus import SMFWriter
from midikit.utils import control_change

writer = SMFWriter()
out = b"".join(
    writer.write(m)
    for m in (control_change(2, 48, 96), control_change(2, 58, 0))
)
assert out.hex(" ").upper() == "B2 30 60 3A 00"
```

```python
from midikit import rpn

# pitch bend range of two semitones on channel 0
messages = rpn.pitch_bend_sensitivity(0, 2, 0)
assert messages[0] == bytes([0xB0, 101, 0])
assert len(messages) == 6
```

```python
from midikit.mmc import Command, Message, GoTo

play = Message(device_id=0x7F, command=Command.PLAY)
assert play.sysex() == bytes([0xF0, 0x7F, 0x7F, 0x06, 0x02, 0xF7])

locate = GoTo.parse(bytes([0xF0, 0x7F, 0x01, 0x06, 0x44, 0x06, 0x01, 1, 2, 3, 4, 0, 0xF7]))
print(locate.hour, locate.minute)  # 1 2
```

## What it does not do

- It does not open MIDI ports or talk to any device or driver. You pass the bytes to your own input and output code.
- It does not read or write Standard MIDI Files as a whole.
- It has no general message type. The only channel message it builds is the control change from `control_change`.
- It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```