"""Registered parameter number (RPN) message sequences."""

from __future__ import annotations

from midikit.utils import control_change


def reset(channel: int) -> list[bytes]:
    """Return the RPN null sequence that deselects any parameter."""
    return [
        control_change(channel, 101, 127),
        control_change(channel, 100, 127),
    ]


def rpn(channel: int, val101: int, val100: int, msb_val: int, lsb_val: int) -> list[bytes]:
    """Set the RPN identified by ``val101``/``val100`` to the given MSB and LSB."""
    return [
        control_change(channel, 101, val101),
        control_change(channel, 100, val100),
        control_change(channel, 6, msb_val),
        control_change(channel, 38, lsb_val),
        *reset(channel),
    ]


def pitch_bend_sensitivity(channel: int, msb_val: int, lsb_val: int) -> list[bytes]:
    """Set the pitch bend range (MSB in half steps)."""
    return rpn(channel, 0, 0, msb_val, lsb_val)


def fine_tuning(channel: int, msb_val: int, lsb_val: int) -> list[bytes]:
    """Set the channel fine tuning."""
    return rpn(channel, 0, 1, msb_val, lsb_val)


def coarse_tuning(channel: int, msb_val: int, lsb_val: int) -> list[bytes]:
    """Set the channel coarse tuning."""
    return rpn(channel, 0, 2, msb_val, lsb_val)


def tuning_program_select(channel: int, msb_val: int, lsb_val: int) -> list[bytes]:
    """Select a tuning program."""
    return rpn(channel, 0, 3, msb_val, lsb_val)


def tuning_bank_select(channel: int, msb_val: int, lsb_val: int) -> list[bytes]:
    """Select a tuning bank."""
    return rpn(channel, 0, 4, msb_val, lsb_val)


def increment(channel: int, val101: int, val100: int) -> list[bytes]:
    """Increment the value of the given RPN."""
    return [
        control_change(channel, 101, val101),
        control_change(channel, 100, val100),
        control_change(channel, 96, 0),
        *reset(channel),
    ]


def decrement(channel: int, val101: int, val100: int) -> list[bytes]:
    """Decrement the value of the given RPN."""
    return [
        control_change(channel, 101, val101),
        control_change(channel, 100, val100),
        control_change(channel, 97, 0),
        *reset(channel),
    ]