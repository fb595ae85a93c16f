"""Low level helpers for MIDI bytes: status parsing, bit twiddling and VLQ coding."""

from __future__ import annotations

from typing import BinaryIO

_VLQ_CONTINUE = 0x80
_VLQ_MASK = 0x7F

_MAJOR_MODE = 0
_MINOR_MODE = 1

_UINT32_MASK = 0xFFFFFFFF


class UnexpectedEOFError(EOFError):
    """Raised when a stream ends before the expected data was read."""

    def __init__(self, message: str = "Unexpected End of File found.") -> None:
        super().__init__(message)


def _to_int8(value: int) -> int:
    return ((value + 0x80) & 0xFF) - 0x80


def key_from_sharps_or_flats(sharps_or_flats: int, mode: int) -> int:
    """Return the key (0-11) for a number of sharps (positive) or flats (negative).

    ``mode`` is 0 for major and 1 for minor.
    """
    tmp = _to_int8(sharps_or_flats * 7)
    if mode == _MINOR_MODE:
        tmp -= 3
    return tmp % 12


def has_bit(n: int, pos: int) -> bool:
    """Return whether the bit at ``pos`` is set in ``n``."""
    return n & (1 << pos) > 0


def is_channel_message(b: int) -> bool:
    """Return whether the given status byte belongs to a channel message."""
    return not has_bit(b, 6)


def is_status_byte(b: int) -> bool:
    """Return whether the given byte is a status byte."""
    return has_bit(b, 7)


def parse_status(b: int) -> tuple[int, int]:
    """Split a status byte into message type and channel."""
    return (b & 0xF0) >> 4, b & 0x0F


def read_n_bytes(n: int, stream: BinaryIO) -> bytes:
    """Read exactly ``n`` bytes from ``stream``."""
    data = stream.read(n)
    if data is None or len(data) != n:
        raise UnexpectedEOFError()
    return data


def read_byte(stream: BinaryIO) -> int:
    """Read a single byte from ``stream``."""
    return read_n_bytes(1, stream)[0]


def read_uint16(stream: BinaryIO) -> int:
    """Read a big-endian 16 bit unsigned integer."""
    return int.from_bytes(read_n_bytes(2, stream), "big")


def parse_uint16(b1: int, b2: int) -> int:
    """Combine two bytes (most significant first) into a 16 bit integer."""
    return ((b1 & 0xFF) << 8) | (b2 & 0xFF)


def read_uint24(stream: BinaryIO) -> int:
    """Read a big-endian 24 bit unsigned integer."""
    return int.from_bytes(read_n_bytes(3, stream), "big")


def read_uint32(stream: BinaryIO) -> int:
    """Read a big-endian 32 bit unsigned integer."""
    return int.from_bytes(read_n_bytes(4, stream), "big")


def read_var_length(stream: BinaryIO) -> int:
    """Read a variable length quantity (up to 32 bits) from ``stream``."""
    result = 0
    while True:
        chunk = stream.read(1)
        if not chunk:
            raise UnexpectedEOFError()
        byte = chunk[0]
        result = ((result << 7) | (byte & _VLQ_MASK)) & _UINT32_MASK
        if not byte & _VLQ_CONTINUE:
            return result


def read_var_length_data(stream: BinaryIO) -> bytes:
    """Read data that is prefixed by its length as a variable length quantity."""
    length = read_var_length(stream)
    data = stream.read(length)
    if data is None or len(data) != length:
        raise UnexpectedEOFError()
    return data


def read_text(stream: BinaryIO) -> str:
    """Read length-prefixed text from ``stream``."""
    return read_var_length_data(stream).decode("utf-8", errors="replace")


def vlq_encode(n: int) -> bytes:
    """Encode ``n`` as a MIDI variable length quantity."""
    quo, rem = divmod(n, _VLQ_CONTINUE)
    out = [rem]
    while quo > 0:
        out.append((quo & 0xFF) | _VLQ_CONTINUE)
        quo //= _VLQ_CONTINUE
    return bytes(reversed(out))


def vlq_decode(source: bytes) -> int:
    """Decode variable length quantities in ``source``; several are summed up."""
    total = 0
    it = iter(source)
    for byte in it:
        n = byte & _VLQ_MASK
        while byte & _VLQ_CONTINUE:
            try:
                byte = next(it)
            except StopIteration:
                raise ValueError("truncated variable length quantity") from None
            n = n * 128 + (byte & _VLQ_MASK)
        total = (total + n) & _UINT32_MASK
    return total


def clear_bit(n: int, pos: int) -> int:
    """Return ``n`` with the bit at ``pos`` cleared."""
    return n & ~(1 << pos)


def parse_two_uint7(b1: int, b2: int) -> tuple[int, int]:
    """Mask two bytes down to their 7 bit data values."""
    return b1 & 0x7F, b2 & 0x7F


def parse_uint7(b: int) -> int:
    """Mask a byte down to its 7 bit data value."""
    return b & 0x7F


def parse_pitch_wheel_vals(b1: int, b2: int) -> tuple[int, int]:
    """Return the (relative, absolute) pitch wheel value of LSB ``b1`` and MSB ``b2``."""
    absolute = ((b2 & 0x7F) << 7) | (b1 & 0x7F)
    return absolute - 0x2000, absolute


def msb_lsb_signed(n: int) -> int:
    """Return the padded 16 bit value for a signed 14 bit number."""
    return msb_lsb_unsigned((n + 8192) & 0xFFFF)


def msb_lsb_unsigned(n: int) -> int:
    """Pad a 14 bit unsigned number to 16 bits as used by e.g. pitch bend."""
    if n > 16383:
        raise ValueError("n must not overflow 14bits (max 16383)")
    lsb = (n << 8) & 0xFFFF
    lsb = clear_bit(lsb, 15)
    lsb = clear_bit(lsb, 7)
    msb = 0x7F & (n >> 7)
    return lsb | msb


def control_change(channel: int, controller: int, value: int) -> bytes:
    """Build a control change message; out-of-range values are clamped."""
    channel = min(channel, 15)
    controller = min(controller, 127)
    value = min(value, 127)
    return bytes((0xB0 | channel, controller, value))