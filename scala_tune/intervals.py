"""Interval (note line) parsing.

A note line holds either a cents value (``701.955``, ``-5``, ``1.2e3``) or a
ratio of two unsigned integers (``3/2``). The cents grammar is tried first:
a bare integer is a valid cents value, and only the ``/`` separator, which
no float may contain, makes a line a ratio.
"""

from __future__ import annotations

import re

from scala_tune.errors import IncompleteInputError, ScaleParseError
from scala_tune.models import Cents, Note, Ratio
from scala_tune.tokenizer import error_at, skip_space, take_line

# Largest value of a ratio term or of the note count
U64_MAX = 2**64 - 1

RATIO_SEPARATOR = "/"

# Optionally signed decimal with optional fraction and exponent
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Text that a complete cents value could still start with
FLOAT_PREFIX_RE = re.compile(
    r"[+-]?(?:\.|[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?)?|\.[0-9]+(?:[eE][+-]?)?)?"
)

UINT_RE = re.compile(r"[0-9]+")


def check_terminated(text: str, pos: int, what: str, *, partial: bool) -> None:
    """Require whitespace, a line break or the end of input at ``pos``."""
    if pos == len(text):
        if partial:
            raise error_at(text, pos, f"{what} may continue", incomplete=True)
        return
    if not text[pos].isspace():
        raise error_at(text, pos, f"unexpected {text[pos]!r} after {what}")


def uint(
    text: str, pos: int, *, what: str = "an unsigned integer", partial: bool = False
) -> tuple[int, int]:
    """Parse an unsigned 64-bit decimal integer.

    Parameters
    ----------
    text : str
        The input text.
    pos : int
        Offset of the first digit.
    what : str, optional
        Name of the expected value used in error messages.
    partial : bool, optional
        Whether more text may follow the end of ``text``, by default False.

    Returns
    -------
    tuple[int, int]
        The offset past the last digit and the value.

    Raises
    ------
    ScaleParseError
        If no digits start at ``pos`` (a sign is not accepted) or the value
        exceeds ``U64_MAX``.

    Examples
    --------
    >>> uint("81/64", 0)
    (2, 81)
    """
    match = UINT_RE.match(text, pos)
    if match is None:
        if partial and pos == len(text):
            raise error_at(text, pos, f"expected {what}", incomplete=True)
        raise error_at(text, pos, f"expected {what}")
    value = int(match.group())
    if value > U64_MAX:
        raise error_at(text, pos, f"{what} {match.group()} does not fit in 64 bits")
    return match.end(), value


def note_cents(text: str, pos: int, *, partial: bool = False) -> tuple[int, Cents]:
    """Parse a cents value and discard the rest of its line."""
    if partial and FLOAT_PREFIX_RE.fullmatch(text, pos):
        raise error_at(text, len(text), "cents value may continue", incomplete=True)
    match = FLOAT_RE.match(text, pos)
    if match is None:
        raise error_at(text, pos, "expected a cents value")
    check_terminated(text, match.end(), "cents value", partial=partial)
    pos, _ = take_line(text, match.end(), partial=partial)
    return pos, Cents(float(match.group()))


def note_ratio(text: str, pos: int, *, partial: bool = False) -> tuple[int, Ratio]:
    """Parse a ``numerator/denominator`` ratio and discard the rest of its line."""
    pos, numerator = uint(text, pos, partial=partial)
    if not text.startswith(RATIO_SEPARATOR, pos):
        if partial and pos == len(text):
            raise error_at(text, pos, "expected '/' in ratio", incomplete=True)
        raise error_at(text, pos, "expected '/' in ratio")
    pos, denominator = uint(text, pos + len(RATIO_SEPARATOR), partial=partial)
    check_terminated(text, pos, "ratio", partial=partial)
    pos, _ = take_line(text, pos, partial=partial)
    return pos, Ratio(numerator, denominator)


def note(text: str, pos: int, *, partial: bool = False) -> tuple[int, Note]:
    """Parse one note line as cents or, failing that, as a ratio.

    Leading spaces and tabs are skipped first.

    Returns
    -------
    tuple[int, Note]
        The offset of the next line and the parsed note.

    Raises
    ------
    ScaleParseError
        If the line is neither a cents value nor a ratio; the error
        describes where the ratio reading failed.

    Examples
    --------
    >>> note("  3/2 ! fifth\\n", 0)
    (14, Ratio(numerator=3, denominator=2))
    >>> note("150\\n", 0)
    (4, Cents(value=150.0))
    """
    pos = skip_space(text, pos)
    try:
        return note_cents(text, pos, partial=partial)
    except IncompleteInputError:
        raise
    except ScaleParseError:
        pass
    if UINT_RE.match(text, pos) is None:
        raise error_at(text, pos, "expected a cents value or a ratio")
    return note_ratio(text, pos, partial=partial)
