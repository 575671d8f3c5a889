"""Tests for line and comment primitives."""

import pytest

from scala_tune import IncompleteInputError
from scala_tune.tokenizer import line_col, many_comments, skip_space, take_line


class TestTakeLine:
    """Line consumption tests."""

    def test_consumes_terminator(self) -> None:
        """The newline is consumed but not returned."""
        assert take_line("hello\nworld\n", 0) == (6, "hello")

    def test_trims_whitespace(self) -> None:
        """Leading and trailing whitespace is trimmed."""
        assert take_line("  spaced out \t\nx", 0) == (15, "spaced out")

    def test_trims_carriage_return(self) -> None:
        """A legacy CR before the newline is trimmed."""
        assert take_line("dos line\r\nnext", 0) == (10, "dos line")

    def test_starts_at_offset(self) -> None:
        """Scanning starts at the given offset."""
        assert take_line("first\nsecond\n", 6) == (13, "second")

    def test_empty_line(self) -> None:
        """An empty line yields an empty string."""
        assert take_line("\nrest", 0) == (1, "")

    def test_end_of_input_ends_line(self) -> None:
        """Without partial, end of input terminates the last line."""
        assert take_line("no newline", 0) == (10, "no newline")

    def test_partial_without_terminator(self) -> None:
        """With partial, a missing terminator means more input is needed."""
        with pytest.raises(IncompleteInputError):
            take_line("no newline", 0, partial=True)

    def test_partial_with_terminator(self) -> None:
        """With partial, a terminated line is consumed normally."""
        assert take_line("done\n", 0, partial=True) == (5, "done")


class TestManyComments:
    """Comment skipping tests."""

    def test_no_comments(self) -> None:
        """Nothing is consumed when the line is not a comment."""
        assert many_comments("12\n", 0) == (0, [])

    def test_single_comment(self) -> None:
        """A single comment is consumed with its body trimmed."""
        assert many_comments("! test.scl\n12\n", 0) == (11, ["test.scl"])

    def test_consecutive_comments(self) -> None:
        """Consecutive comments are consumed greedily."""
        text = "! one\n!\n!three\ndescription\n"
        pos, comments = many_comments(text, 0)
        assert comments == ["one", "", "three"]
        assert text[pos:] == "description\n"

    def test_indented_marker_is_not_comment(self) -> None:
        """The marker must be the first character of the line."""
        assert many_comments(" ! indented\n", 0) == (0, [])

    def test_comment_at_end_of_input(self) -> None:
        """An unterminated final comment is consumed."""
        assert many_comments("!last", 0) == (5, ["last"])

    def test_partial_unterminated_comment(self) -> None:
        """With partial, an unterminated comment needs more input."""
        with pytest.raises(IncompleteInputError):
            many_comments("! cut of", 0, partial=True)


class TestSkipSpace:
    """Horizontal whitespace skipping tests."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("abc", 0),
            ("   abc", 3),
            ("\t 3/2", 2),
            ("  \nabc", 2),
            ("   ", 3),
        ],
    )
    def test_skip(self, text: str, expected: int) -> None:
        """Spaces and tabs are skipped, newlines are not."""
        assert skip_space(text, 0) == expected


class TestLineCol:
    """Offset to line/column conversion tests."""

    @pytest.mark.parametrize(
        ("pos", "expected"),
        [
            (0, (1, 1)),
            (2, (1, 3)),
            (4, (2, 1)),
            (6, (2, 3)),
            (8, (3, 1)),
        ],
    )
    def test_positions(self, pos: int, expected: tuple[int, int]) -> None:
        """Lines and columns are 1-based."""
        assert line_col("abc\ndef\nghi", pos) == expected
