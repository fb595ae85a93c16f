"""Reading and writing of MIDI status bytes with running status."""

from __future__ import annotations

from typing import BinaryIO


def _is_channel_status(status: int) -> bool:
    return 0x80 <= status <= 0xEF


class _StatusReader:
    def __init__(self) -> None:
        self.status = 0

    def _read(self, canary: int) -> tuple[int, bool]:
        changed = False
        if _is_channel_status(canary):
            self.status = canary
            changed = True
        return self.status, changed


class LiveReader(_StatusReader):
    """Running status tracker for live MIDI data."""

    def read(self, canary: int) -> tuple[int, bool]:
        """Return the current status for ``canary`` and whether it changed."""
        if 0xF0 <= canary <= 0xF7:
            self.status = 0
            return self.status, True
        return self._read(canary)


class SMFReader(_StatusReader):
    """Running status tracker for Standard MIDI File data."""

    def read(self, canary: int) -> tuple[int, bool]:
        """Return the current status for ``canary`` and whether it changed."""
        if canary in (0xFF, 0xF0, 0xF7):
            self.status = 0
            return self.status, True
        return self._read(canary)


class SMFWriter:
    """Strips repeated status bytes from messages written to a MIDI file."""

    def __init__(self) -> None:
        self.status = 0

    def reset_status(self) -> None:
        """Forget the running status."""
        self.status = 0

    def write(self, raw: bytes) -> bytes:
        """Return the bytes of ``raw`` to write, omitting a repeated status byte."""
        raw = bytes(raw)
        if not raw:
            raise ValueError("empty message")
        first = raw[0]
        if not _is_channel_status(first):
            self.status = 0
            return raw
        if first != self.status:
            self.status = first
            return raw
        return raw[1:]


class LiveWriter:
    """Writes messages to a binary stream using running status."""

    def __init__(self, output: BinaryIO) -> None:
        self.output = output
        self.status = 0

    def write(self, message: bytes) -> int:
        """Write ``message`` and return the number of bytes written."""
        message = bytes(message)
        if not message:
            raise ValueError("empty message")
        first = message[0]
        if first > 0xF7:
            return self.output.write(message)
        if not _is_channel_status(first):
            self.status = 0
            return self.output.write(message)
        if first != self.status:
            self.status = first
            return self.output.write(message)
        return self.output.write(message[1:])