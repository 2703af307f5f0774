from hypothesis import given
from hypothesis import strategies as st

from packrat.Config import ParserConfig
from packrat.Position import ParseError, Position


def slow_reference_line_col(text, index):
    line, col = 1, 1
    i = 0
    while i < index:
        if text[i] == "\r" and i + 1 < index and text[i + 1] == "\n":
            i += 1
        if text[i] == "\n":
            line, col = line + 1, 1
        else:
            col += 1
        i += 1
    return line, col


@given(st.text(alphabet="ab\n\r"), st.data())
def test_line_col_matches_reference(text, data):
    index = data.draw(st.integers(min_value=0, max_value=len(text)))
    pos = Position(text, index)
    assert (pos.line(), pos.column()) == slow_reference_line_col(text, index)


def test_line_and_column():
    pos = Position("a\nb\nc", 2)
    assert pos.line() == 2
    assert pos.column() == 1


def test_start_of_input():
    pos = Position("abc", 0)
    assert pos.line() == 1
    assert pos.column() == 1


def test_crlf_counts_as_one_break():
    pos = Position("a\r\nb\r\nc", 6)
    assert pos.line() == 3
    assert pos.column() == 1


def test_as_lines():
    pos = Position("one\r\ntwo\nthree", 0)
    assert pos.as_lines(0, 14) == ["one", "two", "three"]


def test_context_window():
    text = "l1\nl2\nl3\nl4\nl5"
    pos = Position(text, text.index("l3"))
    assert pos.context(1) == ["l2", "l3", "l4"]
    assert pos.context(0) == ["l3"]
    assert pos.context(10) == ["l1", "l2", "l3", "l4", "l5"]


def test_render_diagnostic():
    text = "ab\ncd\nef"
    pos = Position(text, 4)
    assert str(pos) == "line 2, column 2:\nab\ncd\n ^\nef"


def test_render_respects_config():
    text = "l1\nl2\nl3\nl4\nl5"
    config = ParserConfig(context_depth=1, marker="~", source_name="demo.txt")
    pos = Position(text, text.index("l3") + 1, config)
    assert str(pos) == "demo.txt line 3, column 2:\nl2\nl3\n ~\nl4"


def test_render_empty_input():
    assert str(Position("", 0)) == ""


def test_token_input_is_single_line():
    pos = Position(["x", 1, "y"], 2)
    assert pos.line() == 1
    assert pos.column() == 3


def test_parse_error_rendering():
    err = ParseError.of("Expected \"x\"", Position("abc", 0))
    assert str(err) == 'Parser Exception: Expected "x"\nline 1, column 1:\nabc\n^'


def test_caret_under_multi_character_token():
    assert str(Position(["foo", "bar"], 1)) == "line 1, column 2:\nfoo bar\n    ^"
    assert str(Position(["foo", "bar"], 0)) == "line 1, column 1:\nfoo bar\n^"
    assert str(Position(["foo", 42, "x"], 2)) == "line 1, column 3:\nfoo 42 x\n       ^"


@given(st.lists(st.sampled_from(["l1", "longer", ""]), min_size=1, max_size=8), st.data(),
       st.integers(min_value=0, max_value=3))
def test_rendered_block_is_context_window(lines, data, depth):
    text = "\n".join(lines)
    if not text:
        return
    index = data.draw(st.integers(min_value=0, max_value=len(text)))
    pos = Position(text, index, ParserConfig(context_depth=depth))
    rendered = str(pos).split("\n")
    caret = next(i for i, l in enumerate(rendered) if i > 0 and l.endswith("^") and not l.strip(" ^"))
    assert rendered[1:caret] + rendered[caret + 1:] == pos.context(depth)
