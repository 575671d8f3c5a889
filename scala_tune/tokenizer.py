"""Line-oriented primitives for Scala files.

Every primitive takes the full input text and a 0-based offset into it and
returns the offset just past what it consumed, together with the consumed
value. Offsets stand in for "the remaining input", so no text is copied
while scanning.

When ``partial`` is true the text is treated as a prefix of a longer input:
running out of text before a line terminator raises ``IncompleteInputError``
instead of ending the line.
"""

from __future__ import annotations

from scala_tune.errors import IncompleteInputError, ScaleParseError

# First character of a comment line
COMMENT_MARKER = "!"

NEWLINE = "\n"

# Horizontal whitespace skipped before counts and notes
SPACE = " \t"


def line_col(text: str, pos: int) -> tuple[int, int]:
    """Return the 1-based line and column of an offset.

    Examples
    --------
    >>> line_col("abc\\ndef", 5)
    (2, 2)
    """
    line = text.count(NEWLINE, 0, pos) + 1
    column = pos - (text.rfind(NEWLINE, 0, pos) + 1) + 1
    return line, column


def error_at(text: str, pos: int, message: str, *, incomplete: bool = False) -> ScaleParseError:
    """Build a parse error located at ``pos``.

    Parameters
    ----------
    text : str
        The input being parsed.
    pos : int
        Offset of the failure point.
    message : str
        What was expected there.
    incomplete : bool, optional
        Build an ``IncompleteInputError`` instead, by default False.

    Returns
    -------
    ScaleParseError
        The error, ready to raise.
    """
    line, column = line_col(text, pos)
    cls = IncompleteInputError if incomplete else ScaleParseError
    return cls(message, position=pos, line=line, column=column)


def skip_space(text: str, pos: int) -> int:
    """Skip spaces and tabs, returning the first offset past them."""
    n = len(text)
    while pos < n and text[pos] in SPACE:
        pos += 1
    return pos


def take_line(text: str, pos: int, *, partial: bool = False) -> tuple[int, str]:
    """Consume the rest of the current line.

    Parameters
    ----------
    text : str
        The input text.
    pos : int
        Offset to start from.
    partial : bool, optional
        Whether more text may follow the end of ``text``, by default False.

    Returns
    -------
    tuple[int, str]
        The offset past the line terminator and the line content with
        surrounding whitespace (including a legacy ``\\r``) trimmed.

    Raises
    ------
    IncompleteInputError
        If ``partial`` is set and no line terminator remains.

    Examples
    --------
    >>> take_line("  5-limit just \\r\\n4\\n", 0)
    (17, '5-limit just')
    >>> take_line("last line", 0)
    (9, 'last line')
    """
    end = text.find(NEWLINE, pos)
    if end == -1:
        if partial:
            raise error_at(text, len(text), "expected end of line", incomplete=True)
        return len(text), text[pos:].strip()
    return end + 1, text[pos:end].strip()


def comment(text: str, pos: int, *, partial: bool = False) -> tuple[int, str | None]:
    """Consume a single comment line if one starts at ``pos``.

    Returns
    -------
    tuple[int, str | None]
        The offset past the comment and its trimmed body, or ``pos``
        unchanged and None when the line is not a comment.
    """
    if not text.startswith(COMMENT_MARKER, pos):
        return pos, None
    return take_line(text, pos + len(COMMENT_MARKER), partial=partial)


def many_comments(text: str, pos: int, *, partial: bool = False) -> tuple[int, list[str]]:
    """Consume zero or more consecutive comment lines.

    Stops at the first line that does not begin with ``!`` without
    consuming it.

    Returns
    -------
    tuple[int, list[str]]
        The offset past the last comment and the comment bodies.

    Examples
    --------
    >>> many_comments("! a\\n!b\\n12\\n", 0)
    (7, ['a', 'b'])
    >>> many_comments("12\\n", 0)
    (0, [])
    """
    comments: list[str] = []
    while True:
        pos, body = comment(text, pos, partial=partial)
        if body is None:
            return pos, comments
        comments.append(body)
