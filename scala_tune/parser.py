"""Scala file parser orchestration.

This module provides the main parse_scale() function that reads a complete
scale: leading comments, the description line, the note count and then
exactly that many notes, each of which may be preceded by comments.
"""

from __future__ import annotations

import logging

from scala_tune.intervals import check_terminated, note, uint
from scala_tune.models import Note, Scale
from scala_tune.tokenizer import many_comments, skip_space, take_line

logger = logging.getLogger(__name__)


def parse_header(text: str, pos: int = 0, *, partial: bool = False) -> tuple[int, str, int]:
    """Parse the description and note count.

    Parameters
    ----------
    text : str
        The input text.
    pos : int, optional
        Offset to start from, by default 0.
    partial : bool, optional
        Whether more text may follow the end of ``text``, by default False.

    Returns
    -------
    tuple[int, str, int]
        The offset of the first note entry, the description and the count.
    """
    pos, _ = many_comments(text, pos, partial=partial)
    pos, description = take_line(text, pos, partial=partial)
    pos, _ = many_comments(text, pos, partial=partial)
    pos = skip_space(text, pos)
    pos, count = uint(text, pos, what="a note count", partial=partial)
    check_terminated(text, pos, "note count", partial=partial)
    pos, _ = take_line(text, pos, partial=partial)
    return pos, description, count


def parse_notes(text: str, pos: int, count: int, *, partial: bool = False) -> tuple[int, list[Note]]:
    """Parse exactly ``count`` note entries, skipping comments before each.

    Returns
    -------
    tuple[int, list[Note]]
        The offset past the last note and the notes in order.
    """
    notes: list[Note] = []
    for _ in range(count):
        pos, _comments = many_comments(text, pos, partial=partial)
        pos, value = note(text, pos, partial=partial)
        notes.append(value)
    return pos, notes


def parse_scale(text: str, *, partial: bool = False) -> Scale:
    """Parse the text of a Scala ``.scl`` file.

    This is the main entry point. Anything after the declared number of
    notes is ignored.

    Parameters
    ----------
    text : str
        The decoded file contents.
    partial : bool, optional
        Treat ``text`` as a prefix of a longer input, so that running out
        of text raises ``IncompleteInputError``, by default False.

    Returns
    -------
    Scale
        The parsed scale.

    Raises
    ------
    TypeError
        If ``text`` is not a str.
    ScaleParseError
        If the text is not a well-formed scale.

    Examples
    --------
    >>> text = '''! meantone.scl
    ... Quarter-comma meantone fifth and octave
    ... 2
    ...  696.578
    ...  2/1
    ... '''
    >>> scale = parse_scale(text)
    >>> scale.description
    'Quarter-comma meantone fifth and octave'
    >>> scale.notes
    (Cents(value=696.578), Ratio(numerator=2, denominator=1))
    """
    if not isinstance(text, str):
        msg = f"Expected str, got {type(text).__name__}; decode the file first"
        raise TypeError(msg)

    pos, description, count = parse_header(text, partial=partial)
    logger.debug("Parsed header %r with %d notes", description, count)

    pos, notes = parse_notes(text, pos, count, partial=partial)
    if pos < len(text):
        logger.debug("Ignoring %d characters after the last note", len(text) - pos)

    return Scale(description=description, notes=tuple(notes))


def parse(text: str, *, partial: bool = False) -> Scale:
    """Alias of parse_scale()."""
    return parse_scale(text, partial=partial)
