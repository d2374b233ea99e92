import io

import pytest

from indentprint.printing import (
    Basename,
    Concat,
    Cond,
    Hex,
    HexView,
    Pad,
    basename,
    concat,
    cond,
    format_pair,
    pad,
    spaces,
    tos,
    tosn,
    tostr,
)


def test_concat_two_parts():
    assert str(concat("boeing", 777)) == "boeing777"


def test_concat_single_returns_argument():
    obj = object()
    assert concat(obj) is obj


def test_concat_many_parts_matches_join():
    parts = ("a", 1, "b", 2.5)
    result = concat(*parts)
    assert isinstance(result, Concat)
    assert str(result) == "".join(str(p) for p in parts)


@pytest.mark.parametrize(
    "condition, if_true, if_false, expected",
    [
        (True, "yes", "no", "yes"),
        (False, "yes", "no", "no"),
        (True, 42, "none", "42"),
        (False, 42, "none", "none"),
    ],
)
def test_cond(condition, if_true, if_false, expected):
    assert str(cond(condition, if_true, if_false)) == expected


def test_cond_uses_truthiness():
    ptr = None
    c = cond(ptr, 123, "null")
    assert isinstance(c, Cond)
    assert c.condition is False
    assert c.selected == "null"
    assert str(c) == "null"


@pytest.mark.parametrize(
    "path, expected",
    [("foo", "foo"), ("/foo", "foo"), ("/foo/bar", "bar")],
)
def test_basename(path, expected):
    assert str(basename(path)) == expected


def test_basename_empty():
    assert str(Basename("")) == ""


def test_basename_trailing_slash_kept():
    assert str(basename("/foo/bar/")) == "bar/"


def test_hex_round_trip_all_bytes():
    for value in range(256):
        text = str(Hex(value))
        assert len(text) == 2
        assert text == text.lower()
        assert int(text, 16) == value


def test_hex_with_char_printable():
    assert str(Hex(ord("o"), True)) == "6f(o)"


def test_hex_with_char_non_printable():
    assert str(Hex(10, True)).endswith("(?)")
    assert str(Hex(10, True))[:2] == str(Hex(10))


@pytest.mark.parametrize("value", [-1, 256])
def test_hex_out_of_range(value):
    with pytest.raises(ValueError):
        Hex(value)


def test_hex_view_plain():
    assert str(HexView(b"hello")) == "[68 65 6c 6c 6f]"


def test_hex_view_as_text():
    assert str(HexView("hello", True)) == "[68(h) 65(e) 6c(l) 6c(l) 6f(o)]"


def test_hex_view_empty():
    assert str(HexView(b"")) == "[]"


def test_hex_view_round_trip():
    data = bytes(range(0, 256, 7))
    text = str(HexView(data))
    assert bytes.fromhex(text[1:-1].replace(" ", "")) == data


def test_pad_spaces():
    assert ":" + str(pad(8)) + ":" == ":        :"


def test_pad_char():
    assert str(pad(16, "-")) == "----------------"


def test_spaces_equals_pad():
    assert spaces(5) == Pad(5, " ")
    assert str(spaces(0)) == ""


def test_pad_invalid():
    with pytest.raises(ValueError):
        pad(-1)
    with pytest.raises(ValueError):
        pad(3, "ab")


def test_format_pair():
    assert format_pair(("x", 7)) == "[x 7]"


def test_tos_writes_in_order_and_returns_stream():
    buf = io.StringIO()
    assert tos(buf, "a", 1, pad(2, ".")) is buf
    assert buf.getvalue() == "a1.."


def test_tosn_appends_newline():
    buf = io.StringIO()
    tosn(buf, "x", "y")
    assert buf.getvalue() == "xy\n"


def test_tostr_matches_tos():
    args = ("n=", 3, basename("/a/b"))
    buf = io.StringIO()
    tos(buf, *args)
    assert tostr(*args) == buf.getvalue()
    assert tostr() == ""