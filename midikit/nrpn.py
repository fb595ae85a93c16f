"""Non-registered parameter number (NRPN) message sequences."""

from __future__ import annotations

from midikit.utils import control_change


def reset(channel: int) -> list[bytes]:
    """Return the NRPN null sequence that deselects any parameter."""
    return [
        control_change(channel, 99, 127),
        control_change(channel, 98, 127),
    ]


def increment(channel: int, val99: int, val98: int) -> list[bytes]:
    """Increment the value of the given NRPN."""
    return [
        control_change(channel, 99, val99),
        control_change(channel, 98, val98),
        control_change(channel, 96, 0),
        *reset(channel),
    ]


def decrement(channel: int, val99: int, val98: int) -> list[bytes]:
    """Decrement the value of the given NRPN."""
    return [
        control_change(channel, 99, val99),
        control_change(channel, 98, val98),
        control_change(channel, 97, 0),
        *reset(channel),
    ]


def nrpn(channel: int, val99: int, val98: int, msb_val: int, lsb_val: int) -> list[bytes]:
    """Set the NRPN identified by ``val99``/``val98`` to the given MSB and LSB."""
    return [
        control_change(channel, 99, val99),
        control_change(channel, 98, val98),
        control_change(channel, 6, msb_val),
        control_change(channel, 38, lsb_val),
        *reset(channel),
    ]