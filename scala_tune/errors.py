"""Exceptions raised while parsing Scala tuning files."""

from __future__ import annotations


class ScaleParseError(ValueError):
    """The input is not a well-formed Scala scale.

    Parameters
    ----------
    message : str
        Description of what was expected at the failure point.
    position : int
        0-based character offset of the failure point.
    line : int
        1-based line number of the failure point.
    column : int
        1-based column of the failure point.

    Examples
    --------
    >>> err = ScaleParseError("expected a note count", position=8, line=2, column=1)
    >>> str(err)
    'expected a note count at line 2, column 1'
    """

    def __init__(self, message: str, position: int, line: int, column: int) -> None:
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")

    def __reduce__(self):
        return self.__class__, (self.message, self.position, self.line, self.column)


class IncompleteInputError(ScaleParseError):
    """The input ended before a required line terminator or token.

    Only raised when parsing with ``partial=True``: more text may still
    arrive, so the content seen so far is not known to be malformed.
    """
