"""Parser for Scala (.scl) musical tuning files.

This library reads the text of a Scala scale file into an immutable
``Scale``: a description plus an ordered tuple of notes, each either a
frequency ratio or an offset in cents.

Examples
--------
>>> from scala_tune import Cents, Ratio, parse_scale

>>> scale = parse_scale('''! 12-tet.scl
... 12-tone equal temperament
... 2
... 100.0
... 2/1
... ''')
>>> scale.description
'12-tone equal temperament'
>>> scale.notes == (Cents(100.0), Ratio(2, 1))
True

>>> # Decoding is left to the caller
>>> # parse_scale(path.read_text(encoding="iso-8859-1"))
"""

from scala_tune.errors import IncompleteInputError, ScaleParseError
from scala_tune.models import Cents, Note, Ratio, Scale
from scala_tune.parser import parse, parse_scale

__all__ = [
    "Cents",
    "IncompleteInputError",
    "Note",
    "Ratio",
    "Scale",
    "ScaleParseError",
    "parse",
    "parse_scale",
]
