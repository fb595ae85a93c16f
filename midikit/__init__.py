"""MIDI 1.0 byte helpers: running status, VLQ, notes and intervals, MMC, RPN and NRPN."""

__version__ = "0.1.0"
__all__ = ["utils", "runningstatus", "note", "mmc", "rpn", "nrpn"]