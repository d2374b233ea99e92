import os

import pytest

from indentprint.streambuf import LogStreamBuf, RewindState


STEPS = [
    ("\n", 1, 0),
    ("abcd", 5, 4),
    ("abcd\nefg\nhij", 17, 3),
    ("klmnopqrstuvwxyz", 33, 19),
]


def test_empty_buffer():
    sbuf = LogStreamBuf(16, False)
    assert sbuf.debug_flag() is False
    assert sbuf.capacity() == 16
    assert sbuf.pos() == 0
    assert sbuf.solpos() == 0
    assert sbuf.lpos() == 0
    assert sbuf.getvalue() == ""


def test_single_newline():
    sbuf = LogStreamBuf(16, False)
    sbuf.write("\n")
    assert sbuf.capacity() == 16
    assert sbuf.pos() == 1
    assert sbuf.solpos() in (0, 1)
    assert sbuf.lpos() == 0


@pytest.mark.parametrize("capacity", [64, 32, 16, 8, 4])
def test_steps(capacity):
    sbuf = LogStreamBuf(capacity, False)
    assert sbuf.capacity() == capacity
    assert sbuf.pos() == 0
    assert sbuf.lpos() == 0
    for text, expect_pos, expect_lpos in STEPS:
        assert sbuf.write(text) == len(text)
        assert sbuf.capacity() >= capacity
        assert sbuf.pos() == expect_pos
        assert sbuf.lpos() == expect_lpos
    assert sbuf.getvalue() == "".join(text for text, _, _ in STEPS)


def test_expansion_preserves_contents():
    sbuf = LogStreamBuf(16, False)
    text = "empty log_streambuf"
    sbuf.write(text)
    assert sbuf.capacity() == 32
    assert str(sbuf) == text
    assert sbuf.pos() == len(text)
    assert sbuf.solpos() == 0
    assert sbuf.lpos() == len(text)
    sbuf.write("\n")
    assert sbuf.pos() == len(text) + 1
    assert sbuf.lpos() == 0
    assert sbuf.solpos() == len(text) + 1


def test_single_char_on_full_buffer_doubles():
    sbuf = LogStreamBuf(4, False)
    sbuf.write("abcd")
    assert sbuf.capacity() == 4
    sbuf.write("e")
    assert sbuf.capacity() == 8
    assert sbuf.getvalue() == "abcde"


def test_zero_capacity_grows():
    sbuf = LogStreamBuf(0)
    sbuf.write("x")
    sbuf.write("yz")
    assert sbuf.getvalue() == "xyz"
    assert sbuf.capacity() >= 3


def test_color_escape_not_visible():
    sbuf = LogStreamBuf(64)
    sbuf.write("\033[31;34mbar\033[0m")
    assert sbuf.lpos() == len("bar")
    assert sbuf.lpos() == sbuf.pos() - sbuf.solpos() - sbuf.color_escape_chars()


def test_color_escape_split_across_writes():
    sbuf = LogStreamBuf(4)
    for piece in ["\033[38;", "5;196", "mbar", "\033[0", "m"]:
        sbuf.write(piece)
    assert sbuf.lpos() == len("bar")


def test_incomplete_escape_counts_as_visible():
    sbuf = LogStreamBuf(16)
    sbuf.write("\033xab")
    assert sbuf.color_escape_chars() == 0
    assert sbuf.lpos() == sbuf.pos()


def test_newline_resets_escape_count():
    sbuf = LogStreamBuf(16)
    sbuf.write("\033[0mab\ncd")
    assert sbuf.color_escape_chars() == 0
    assert sbuf.lpos() == len("cd")


def test_carriage_return_starts_line():
    sbuf = LogStreamBuf(16)
    sbuf.write("abc\rde")
    assert sbuf.lpos() == len("de")


def test_checkpoint_rewind_round_trip():
    sbuf = LogStreamBuf(8)
    sbuf.write("ab\ncd")
    saved = sbuf.checkpoint()
    assert saved == RewindState(sbuf.solpos(), sbuf.color_escape_chars(), sbuf.pos())
    sbuf.write("efgh\nijklmnop")
    sbuf.rewind_to(saved)
    assert sbuf.pos() == saved.pos
    assert sbuf.lpos() == len("cd")
    assert sbuf.getvalue() == "ab\ncd"
    sbuf.write("X")
    assert sbuf.getvalue() == "ab\ncdX"
    assert sbuf.lpos() == len("cdX")


def test_rewind_out_of_range():
    sbuf = LogStreamBuf(4)
    with pytest.raises(ValueError):
        sbuf.rewind_to(RewindState(0, 0, 100))


def test_reset():
    sbuf = LogStreamBuf(4)
    sbuf.write("hello\nworld")
    capacity = sbuf.capacity()
    sbuf.reset()
    assert sbuf.pos() == 0
    assert sbuf.lpos() == 0
    assert sbuf.getvalue() == ""
    assert sbuf.capacity() == capacity
    sbuf.write("ok")
    assert sbuf.getvalue() == "ok"


def test_seek_start_and_current():
    sbuf = LogStreamBuf(16)
    sbuf.write("ab\ncdef")
    assert sbuf.seek(0, os.SEEK_SET) == 0
    assert sbuf.lpos() == 0
    assert sbuf.seek(4, os.SEEK_CUR) == 4
    assert sbuf.getvalue() == "ab\nc"
    assert sbuf.lpos() == len("c")


def test_seek_end():
    sbuf = LogStreamBuf(16)
    assert sbuf.seek(0, os.SEEK_END) == sbuf.capacity()


def test_seek_errors():
    sbuf = LogStreamBuf(8)
    with pytest.raises(ValueError):
        sbuf.seek(-1, os.SEEK_SET)
    with pytest.raises(ValueError):
        sbuf.seek(9, os.SEEK_SET)
    with pytest.raises(ValueError):
        sbuf.seek(0, 7)


def test_negative_capacity():
    with pytest.raises(ValueError):
        LogStreamBuf(-1)


def test_debug_flag_does_not_change_result():
    plain = LogStreamBuf(4, False)
    debug = LogStreamBuf(4, True)
    assert debug.debug_flag() is True
    for sbuf in (plain, debug):
        sbuf.write("abc\n\033[1mde")
    assert plain.getvalue() == debug.getvalue()
    assert plain.lpos() == debug.lpos() == len("de")