"""Data models for parsed Scala scales.

This module defines the immutable result of parsing a ``.scl`` file: a
``Scale`` holding a description and an ordered tuple of notes, where each
note is either a ``Ratio`` or a ``Cents`` value.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

# Cents in one octave (frequency ratio 2/1)
CENTS_PER_OCTAVE = 1200


@dataclass(frozen=True)
class Ratio:
    """An interval given as a frequency ratio.

    The values are captured exactly as written; they are neither reduced
    nor checked for zero.

    Parameters
    ----------
    numerator : int
        Unsigned 64-bit numerator.
    denominator : int
        Unsigned 64-bit denominator.

    Examples
    --------
    >>> Ratio(3, 2).ratio
    1.5
    >>> round(Ratio(2, 1).cents, 6)
    1200.0
    """

    numerator: int
    denominator: int

    @property
    def ratio(self) -> float:
        """Return the frequency multiplier ``numerator / denominator``.

        Raises
        ------
        ValueError
            If the denominator is zero.
        """
        if self.denominator == 0:
            msg = f"Ratio {self} has a zero denominator"
            raise ValueError(msg)
        return self.numerator / self.denominator

    @property
    def cents(self) -> float:
        """Return the interval size in cents.

        Raises
        ------
        ValueError
            If the numerator or denominator is zero.
        """
        if self.numerator == 0 or self.denominator == 0:
            msg = f"Ratio {self} has no size in cents"
            raise ValueError(msg)
        return CENTS_PER_OCTAVE * (math.log2(self.numerator) - math.log2(self.denominator))

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class Cents:
    """An interval given as a signed offset in cents.

    Parameters
    ----------
    value : float
        The offset, taken verbatim from the source text and kept at double
        precision rather than narrowed to 32 bits.

    Examples
    --------
    >>> Cents(1200.0).ratio
    2.0
    """

    value: float

    @property
    def ratio(self) -> float:
        """Return the frequency multiplier ``2 ** (value / 1200)``."""
        return 2.0 ** (self.value / CENTS_PER_OCTAVE)

    @property
    def cents(self) -> float:
        """Return the offset in cents."""
        return self.value

    def __str__(self) -> str:
        return repr(self.value)


Note = Ratio | Cents


@dataclass(frozen=True)
class Scale:
    """A parsed Scala scale.

    Parameters
    ----------
    description : str
        The description line, trimmed. May be empty.
    notes : tuple[Note, ...]
        The intervals in file order; the unison is implicit.

    Examples
    --------
    >>> scale = Scale.from_text("Pythagorean fifth\\n1\\n3/2\\n")
    >>> scale.description
    'Pythagorean fifth'
    >>> scale.notes
    (Ratio(numerator=3, denominator=2),)
    """

    description: str
    notes: tuple[Note, ...]

    @classmethod
    def from_text(cls, text: str) -> Scale:
        """Parse a scale from the decoded text of a ``.scl`` file.

        Many files in the Scala archive are encoded in ISO-8859-1; decoding
        them to ``str`` is left to the caller.

        Raises
        ------
        ScaleParseError
            If the text is not a well-formed scale.
        """
        from scala_tune.parser import parse_scale

        return parse_scale(text)

    def cents(self) -> np.ndarray:
        """Return the size of every note in cents.

        Returns
        -------
        np.ndarray
            Float array of shape (len(notes),).

        Raises
        ------
        ValueError
            If a ratio note has a zero numerator or denominator.
        """
        return np.array([note.cents for note in self.notes], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)
