import pytest
from hypothesis import given
from hypothesis import strategies as st

from midikit.mmc import Command, GoTo, Identity, Message

seven_bit = st.integers(min_value=0, max_value=127)


def test_command_labels_and_aliases():
    assert str(Message(device_id=1, command=Command.STOP)) == "MMC device: 1 command: StopCmd"
    parsed = Message.parse(bytes((0xF0, 0x7F, 0x01, 0x06, 0x06, 0x00, 0xF7)))
    assert parsed.command is Command.PUNCH_IN
    assert parsed.command is Command.RECORD_STROBE
    assert str(parsed) == "MMC device: 1 command: RecordStrobeCmd/PunchInCmd"
    assert str(Message(device_id=1, command=Command.LOCATE)) == "MMC device: 1 command: GotoCmd/LocateCmd"


@pytest.mark.parametrize("device_id", [0, 128, 200])
def test_sysex_uses_all_devices_for_zero_or_large_id(device_id):
    raw = Message(device_id=device_id, command=Command.PLAY).sysex()
    assert raw[2] == 0x7F


@given(device_id=st.integers(min_value=1, max_value=127), cmd=st.sampled_from(list(Command)))
def test_sysex_layout(device_id, cmd):
    raw = Message(device_id=device_id, command=cmd).sysex()
    assert raw[:2] == b"\xF0\x7F"
    assert raw[2] == device_id
    assert raw[4] == cmd
    assert raw[-1] == 0xF7
    assert len(raw) == 6


def test_parsing_own_short_sysex_is_too_short_for_command():
    raw = Message(device_id=3, command=Command.PLAY).sysex()
    with pytest.raises(ValueError, match="wrong length for command"):
        Message.parse(raw)


@given(device_id=seven_bit, cmd=st.sampled_from([c for c in Command if c < 0x40]))
def test_parse_simple_command(device_id, cmd):
    raw = bytes((0xF0, 0x7F, device_id, 0x06, cmd, 0x00, 0xF7))
    message = Message.parse(raw)
    assert message.device_id == device_id
    assert message.command is cmd
    assert message.is_response is False
    assert message.data is None


def test_parse_long_command_keeps_data():
    raw = GoTo(device_id=1, hour=1, minute=2, second=3, frame=4, sub_frame=5).sysex()
    message = Message.parse(raw)
    assert message.command is Command.GOTO
    assert message.data == raw[5:-2]


def test_parse_long_command_too_short():
    with pytest.raises(ValueError, match="ShuttleCmd"):
        Message.parse(bytes((0xF0, 0x7F, 0x01, 0x06, 0x47, 0x00, 0xF7)))


def test_parse_response():
    raw = bytes((0xF0, 0x7F, 0x01, 0x07, 0x10, 0x20, 0xF7))
    message = Message.parse(raw)
    assert message.is_response is True
    assert message.data == raw[4:-2]


def test_parse_short_response_has_no_data():
    message = Message.parse(bytes((0xF0, 0x7F, 0x01, 0x07, 0xF7)))
    assert message.is_response is True
    assert message.data is None


@pytest.mark.parametrize(
    "raw, text",
    [
        (b"\xF0\x7F\x01", "wrong length"),
        (b"\xF1\x7F\x01\x06\x01\x00\xF7", "wrong byte 0"),
        (b"\xF0\x7E\x01\x06\x01\x00\xF7", "wrong byte 1"),
        (b"\xF0\x7F\x01\x06\x01\x00\xF6", "wrong last byte"),
    ],
)
def test_parse_errors(raw, text):
    with pytest.raises(ValueError, match=text):
        Message.parse(raw)


def test_message_str_with_unknown_command():
    message = Message.parse(bytes((0xF0, 0x7F, 0x02, 0x06, 0x20, 0x00, 0xF7)))
    assert str(message).endswith("unknownCmd")
    assert message.command == 0x20


def test_message_str():
    assert str(Message(device_id=3, command=Command.PLAY)) == "MMC device: 3 command: PlayCmd"


@given(
    device_id=seven_bit,
    hour=seven_bit,
    minute=seven_bit,
    second=seven_bit,
    frame=seven_bit,
    sub_frame=seven_bit,
)
def test_goto_round_trip(device_id, hour, minute, second, frame, sub_frame):
    goto = GoTo(device_id, hour, minute, second, frame, sub_frame)
    raw = goto.sysex()
    assert len(raw) == 13
    assert GoTo.parse(raw) == goto


@pytest.mark.parametrize("pos", [0, 1, 3, 4, 5, 6, 12])
def test_goto_wrong_byte(pos):
    raw = bytearray(GoTo(device_id=1).sysex())
    raw[pos] ^= 0x01
    with pytest.raises(ValueError, match=f"wrong byte {pos}"):
        GoTo.parse(bytes(raw))


def test_goto_wrong_length():
    with pytest.raises(ValueError, match="must be 13"):
        GoTo.parse(GoTo().sysex()[:-1])


@given(channel=seven_bit)
def test_identity_round_trip(channel):
    raw = Identity(channel).sysex()
    assert raw[:2] == b"\xF0\x7E"
    assert Identity.parse(raw) == Identity(channel)


@pytest.mark.parametrize("pos", [0, 1, 3, 4, 5])
def test_identity_wrong_byte(pos):
    raw = bytearray(Identity(1).sysex())
    raw[pos] ^= 0x01
    with pytest.raises(ValueError, match=f"wrong byte {pos}"):
        Identity.parse(bytes(raw))


def test_identity_wrong_length():
    with pytest.raises(ValueError, match="must be 6"):
        Identity.parse(b"\xF0\x7E\x00\x06\xF7")