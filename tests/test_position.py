from symbolic.position import END_OF_TEXT, Position


def test_advance_tracks_row_and_column():
    pos = Position("ab\ncd")
    pos = pos.advance()
    assert (pos.index, pos.row, pos.column) == (1, 1, 2)
    pos = pos.advance()
    assert pos.peek() == "\n"
    pos = pos.advance()
    assert (pos.index, pos.row, pos.column) == (3, 2, 1)
    assert pos.peek() == "c"


def test_advance_at_end_is_noop():
    pos = Position("a").advance()
    assert pos.at_end()
    assert pos.peek() == END_OF_TEXT
    assert pos.advance() is pos


def test_end_bound_hides_rest_of_text():
    pos = Position("x\ny", end=2)
    pos = pos.advance().advance()
    assert pos.at_end()
    assert pos.peek() == END_OF_TEXT
    assert (pos.row, pos.column) == (2, 1)


def test_positions_are_values():
    start = Position("abc")
    moved = start.advance()
    assert start.index == 0
    assert moved == Position("abc", 1, 1, 2)


def test_skip_while_and_substring():
    pos = Position("   name42 rest")
    pos = pos.skip_while(str.isspace)
    assert pos.index == 3
    end = pos.skip_while(str.isalnum)
    assert pos.substring(end.index - pos.index) == "name42"


def test_substring_is_clamped():
    assert Position("abc", 1).substring(10) == "bc"
    assert Position("abc\ndef", 0, end=4).substring(10) == "abc\n"


def test_str_reports_row_and_column():
    assert str(Position("a\nb").advance().advance()) == "row: 2; column: 1"
