"""Reading and writing of MIDI Universal Real Time SysEx commands (MIDI Machine Control)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Command(IntEnum):
    """MIDI Machine Control commands."""

    STOP = 0x01
    PLAY = 0x02
    DEFERRED_PLAY = 0x03
    FAST_FORWARD = 0x04
    REWIND = 0x05
    RECORD_STROBE = 0x06
    PUNCH_IN = 0x06
    RECORD_EXIT = 0x07
    PUNCH_OUT = 0x07
    RECORD_PAUSE = 0x08
    PAUSE = 0x09
    EJECT = 0x0A
    CHASE = 0x0B
    RESET = 0x0D
    WRITE = 0x40
    RECORD_READY = 0x40
    ARM_TRACK = 0x40
    GOTO = 0x44
    LOCATE = 0x44
    SHUTTLE = 0x47

    def __str__(self) -> str:
        return _command_name(self.value)


_COMMAND_LABELS = {
    0x01: "StopCmd",
    0x02: "PlayCmd",
    0x03: "DeferredPlayCmd",
    0x04: "FastForward",
    0x05: "RewindCmd",
    0x06: "RecordStrobeCmd/PunchInCmd",
    0x07: "RecordExitCmd/PunchOutCmd",
    0x08: "RecordPauseCmd",
    0x09: "PauseCmd",
    0x0A: "EjectCmd",
    0x0B: "ChaseCmd",
    0x0D: "ResetCmd",
    0x40: "WriteCmd/RecordReadyCmd/ArmTrackCmd",
    0x44: "GotoCmd/LocateCmd",
    0x47: "ShuttleCmd",
}


def _command_name(value: int) -> str:
    return _COMMAND_LABELS.get(int(value), "unknownCmd")


def _as_command(value: int) -> int:
    try:
        return Command(value)
    except ValueError:
        return value


@dataclass
class Message:
    """A MIDI Machine Control command or response."""

    device_id: int = 0
    command: int = 0
    is_response: bool = False
    data: bytes | None = None

    @classmethod
    def parse(cls, data: bytes) -> Message:
        """Parse an MMC sysex message; raises ValueError on malformed input."""
        raw = bytes(data)
        if len(raw) < 5:
            raise ValueError(f"wrong length: {len(raw)} (must be >= 5)")
        if raw[0] != 0xF0:
            raise ValueError("wrong byte 0")
        if raw[1] != 0x7F:
            raise ValueError("wrong byte 1")
        if raw[-1] != 0xF7:
            raise ValueError("wrong last byte")

        message = cls(device_id=raw[2])
        if raw[3] == 0x06:
            if len(raw) < 7:
                raise ValueError(
                    f"wrong length for command: {len(raw)} (must be >= 7)"
                )
            message.command = _as_command(raw[4])
            if raw[4] >= 0x40:
                if len(raw) < 8:
                    raise ValueError(
                        f"wrong length for {_command_name(raw[4])} command: "
                        f"{len(raw)} (must be >= 8)"
                    )
                message.data = raw[5:-2]
        elif raw[3] == 0x07:
            message.is_response = True
            message.data = raw[4:-2] if len(raw) > 5 else None
        return message

    def sysex(self) -> bytes:
        """Return the command as sysex bytes; device 0 or >127 becomes 127 (all)."""
        device_id = self.device_id
        if device_id == 0 or device_id > 127:
            device_id = 127
        return bytes((0xF0, 0x7F, device_id, 0x06, int(self.command), 0xF7))

    def __str__(self) -> str:
        return f"MMC device: {self.device_id} command: {_command_name(self.command)}"


@dataclass
class GoTo:
    """The MMC Goto (Locate) command with its time code."""

    device_id: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    frame: int = 0
    sub_frame: int = 0

    def sysex(self) -> bytes:
        """Return the command as sysex bytes."""
        return bytes(
            (
                0xF0, 0x7F, self.device_id, 0x06, 0x44, 0x06, 0x01,
                self.hour, self.minute, self.second, self.frame, self.sub_frame,
                0xF7,
            )
        )

    @classmethod
    def parse(cls, data: bytes) -> GoTo:
        """Parse a Goto sysex message; raises ValueError on malformed input."""
        raw = bytes(data)
        if len(raw) != 13:
            raise ValueError(f"wrong length: {len(raw)} (must be 13)")
        expected = {0: 0xF0, 1: 0x7F, 3: 0x06, 4: 0x44, 5: 0x06, 6: 0x01, 12: 0xF7}
        for pos, value in expected.items():
            if raw[pos] != value:
                raise ValueError(f"wrong byte {pos}")
        return cls(
            device_id=raw[2],
            hour=raw[7],
            minute=raw[8],
            second=raw[9],
            frame=raw[10],
            sub_frame=raw[11],
        )


@dataclass
class Identity:
    """The universal non-real-time identity request."""

    channel: int = 0

    def sysex(self) -> bytes:
        """Return the request as sysex bytes."""
        return bytes((0xF0, 0x7E, self.channel, 0x06, 0x01, 0xF7))

    @classmethod
    def parse(cls, data: bytes) -> Identity:
        """Parse an identity request; raises ValueError on malformed input."""
        raw = bytes(data)
        if len(raw) != 6:
            raise ValueError(f"wrong length: {len(raw)} (must be 6)")
        expected = {0: 0xF0, 1: 0x7E, 3: 0x06, 4: 0x01, 5: 0xF7}
        for pos, value in expected.items():
            if raw[pos] != value:
                raise ValueError(f"wrong byte {pos}")
        return cls(channel=raw[2])