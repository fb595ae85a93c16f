"""Musical notes and intervals on top of MIDI key numbers."""

from __future__ import annotations

from typing import ClassVar

_INTERVAL_NAMES = (
    "Unison",
    "MinorSecond",
    "MajorSecond",
    "MinorThird",
    "MajorThird",
    "Fourth",
    "Tritone",
    "Fifth",
    "MinorSixth",
    "MajorSixth",
    "MinorSeventh",
    "MajorSeventh",
    "Octave",
    "MinorNinth",
    "MajorNinth",
    "MinorTenth",
    "MajorTenth",
    "Eleventh",
    "DiminishedTwelfth",
    "Twelfth",
    "MinorThirteenth",
    "MajorThirteenth",
    "MinorFourteenth",
    "MajorFourteenth",
    "DoubleOctave",
)

_NOTE_NAMES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

_MAX_OCTAVE = 10


def _to_int8(value: int) -> int:
    return ((value + 0x80) & 0xFF) - 0x80


class Interval(int):
    """A signed distance between two notes in semitones (8 bit, wrapping)."""

    __slots__ = ()

    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]
    MINOR_NINTH: ClassVar[Interval]
    MAJOR_NINTH: ClassVar[Interval]
    MINOR_TENTH: ClassVar[Interval]
    MAJOR_TENTH: ClassVar[Interval]
    ELEVENTH: ClassVar[Interval]
    DIMINISHED_TWELFTH: ClassVar[Interval]
    TWELFTH: ClassVar[Interval]
    MINOR_THIRTEENTH: ClassVar[Interval]
    MAJOR_THIRTEENTH: ClassVar[Interval]
    MINOR_FOURTEENTH: ClassVar[Interval]
    MAJOR_FOURTEENTH: ClassVar[Interval]
    DOUBLE_OCTAVE: ClassVar[Interval]

    def __new__(cls, value: int = 0) -> Interval:
        return super().__new__(cls, _to_int8(int(value)))

    def __neg__(self) -> Interval:
        return Interval(-int(self))

    def __add__(self, other: object) -> Interval:
        if isinstance(other, int):
            return Interval(int(self) + int(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Interval:
        if isinstance(other, int):
            return Interval(int(self) - int(other))
        return NotImplemented

    def __rsub__(self, other: object) -> Interval:
        if isinstance(other, int):
            return Interval(int(other) - int(self))
        return NotImplemented

    def __str__(self) -> str:
        value = int(self)
        direction = "down" if value < 0 else "up"
        return f"{_INTERVAL_NAMES[abs(value) % 24]} {direction}"

    def __repr__(self) -> str:
        return f"Interval({int(self)})"


Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)
Interval.MINOR_NINTH = Interval(13)
Interval.MAJOR_NINTH = Interval(14)
Interval.MINOR_TENTH = Interval(15)
Interval.MAJOR_TENTH = Interval(16)
Interval.ELEVENTH = Interval(17)
Interval.DIMINISHED_TWELFTH = Interval(18)
Interval.TWELFTH = Interval(19)
Interval.MINOR_THIRTEENTH = Interval(20)
Interval.MAJOR_THIRTEENTH = Interval(21)
Interval.MINOR_FOURTEENTH = Interval(22)
Interval.MAJOR_FOURTEENTH = Interval(23)
Interval.DOUBLE_OCTAVE = Interval(24)


class Note(int):
    """A MIDI key number (0-255) with musical helpers."""

    __slots__ = ()

    def __new__(cls, value: int) -> Note:
        value = int(value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"note out of range: {value}")
        return super().__new__(cls, value)

    def interval(self, other: int) -> Interval:
        """Return the interval from this note to ``other``."""
        return Interval(_to_int8(int(other)) - _to_int8(int(self)))

    def transpose(self, interval: int) -> Note:
        """Return this note moved by ``interval`` semitones; never below 0."""
        result = _to_int8(_to_int8(int(self)) + _to_int8(int(interval)))
        return Note(max(result, 0))

    def base(self) -> int:
        """Return the position of the note within its octave (0-11)."""
        return int(self) % 12

    def name(self) -> str:
        """Return the note name without octave, e.g. ``"Eb"``."""
        return _NOTE_NAMES[int(self) % 12]

    def octave(self) -> int:
        """Return the octave of the note."""
        return int(self) // 12

    def matches(self, other: int) -> bool:
        """Return whether both notes have the same name, in any octave."""
        return int(self) % 12 == int(other) % 12

    def __str__(self) -> str:
        return f"{self.name()}{self.octave()}"

    def __repr__(self) -> str:
        return f"Note({int(self)})"


def _key(base: int, octave: int) -> int:
    if octave < 0:
        raise ValueError(f"octave must not be negative: {octave}")
    octave = min(octave, _MAX_OCTAVE)
    if octave == 0:
        return base
    result = base + 12 * octave
    if result > 127:
        result -= 12
    return result


def c(octave: int) -> int:
    """Return the key of C in the given octave."""
    return _key(0, octave)


def db(octave: int) -> int:
    """Return the key of Db in the given octave."""
    return _key(1, octave)


def d(octave: int) -> int:
    """Return the key of D in the given octave."""
    return _key(2, octave)


def eb(octave: int) -> int:
    """Return the key of Eb in the given octave."""
    return _key(3, octave)


def e(octave: int) -> int:
    """Return the key of E in the given octave."""
    return _key(4, octave)


def f(octave: int) -> int:
    """Return the key of F in the given octave."""
    return _key(5, octave)


def gb(octave: int) -> int:
    """Return the key of Gb in the given octave."""
    return _key(6, octave)


def g(octave: int) -> int:
    """Return the key of G in the given octave."""
    return _key(7, octave)


def ab(octave: int) -> int:
    """Return the key of Ab in the given octave."""
    return _key(8, octave)


def a(octave: int) -> int:
    """Return the key of A in the given octave."""
    return _key(9, octave)


def bb(octave: int) -> int:
    """Return the key of Bb in the given octave."""
    return _key(10, octave)


def b(octave: int) -> int:
    """Return the key of B in the given octave."""
    return _key(11, octave)