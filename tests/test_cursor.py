"""Tests for the character cursor."""

from quickaccount.cursor import EOF_CHAR, Cursor, Position


class TestCursorMovement:
    def test_peek_does_not_consume(self) -> None:
        cursor = Cursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) == EOF_CHAR

    def test_advance_tracks_line_and_column(self) -> None:
        cursor = Cursor("ab\ncd")
        assert cursor.position() == Position(1, 1)
        assert cursor.advance() == "a"
        assert cursor.position() == Position(1, 2)
        cursor.advance()
        assert cursor.advance() == "\n"
        assert cursor.position() == Position(2, 1)
        cursor.advance()
        assert cursor.position() == Position(2, 2)

    def test_advance_past_end_returns_sentinel(self) -> None:
        cursor = Cursor("x")
        cursor.advance()
        assert cursor.at_end
        assert cursor.advance() == EOF_CHAR
        assert cursor.position() == Position(1, 2)

    def test_tabs_count_as_one_column(self) -> None:
        cursor = Cursor("\t\tx")
        cursor.skip_whitespace()
        assert cursor.position() == Position(1, 3)


class TestCursorScanning:
    def test_consume_while_returns_maximal_run(self) -> None:
        cursor = Cursor("3010..4000")
        assert cursor.consume_while(str.isdigit) == "3010"
        assert cursor.peek() == "."
        assert cursor.consume_while(str.isdigit) == ""

    def test_skip_whitespace_crosses_lines(self) -> None:
        cursor = Cursor("  \r\n\t (")
        cursor.skip_whitespace()
        assert cursor.peek() == "("
        assert cursor.position() == Position(2, 3)

    def test_skip_blanks_stops_at_newline(self) -> None:
        cursor = Cursor(" \t\nx")
        cursor.skip_blanks()
        assert cursor.peek() == "\n"

    def test_checkpoint_and_restore(self) -> None:
        cursor = Cursor("12\n34")
        cursor.advance()
        checkpoint = cursor.checkpoint()
        cursor.consume_while(lambda c: c != "4")
        assert cursor.position() == Position(2, 2)
        cursor.restore(checkpoint)
        assert cursor.position() == Position(1, 2)
        assert cursor.peek() == "2"


class TestCurrentLineText:
    def test_returns_whole_line_around_cursor(self) -> None:
        cursor = Cursor("first\n  second line\nthird")
        cursor.consume_while(lambda c: c != "e")
        assert cursor.position() == Position(2, 4)
        assert cursor.current_line_text() == "  second line"

    def test_line_end_and_crlf(self) -> None:
        cursor = Cursor("abc\r\ndef")
        cursor.consume_while(lambda c: c != "\r")
        assert cursor.current_line_text() == "abc"

    def test_empty_last_line(self) -> None:
        cursor = Cursor("abc\n")
        cursor.skip_whitespace()
        cursor.consume_while(lambda c: True)
        assert cursor.position() == Position(2, 1)
        assert cursor.current_line_text() == ""

    def test_skips_unicode_whitespace(self) -> None:
        cursor = Cursor("\xa0\x0c x\n")
        cursor.skip_whitespace()
        assert cursor.peek() == "x"
        cursor.advance()
        cursor.skip_blanks()
        assert cursor.peek() == "\n"
        cursor = Cursor("\xa0\t\x0b\ny")
        cursor.skip_blanks()
        assert cursor.position() == Position(1, 4)
