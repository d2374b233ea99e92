# indentprint

This package provides small building blocks for readable diagnostic output. It has no dependencies beyond the standard library.

## Modules

### `indentprint.streambuf`

`LogStreamBuf(capacity, debug_flag=False)` is a text buffer that grows as needed. Its storage doubles when a write does not fit.

- `write(text)` appends text. `getvalue()` and `str()` return the text written so far.
- `pos()` returns the number of characters written. `capacity()` returns the current size of the storage.
- `lpos()` returns the visible column on the current line. It counts from the last `\n` or `\r`. Characters inside completed ANSI color escapes (`\033` ... `m`) are not counted. `solpos()` and `color_escape_chars()` expose the line state that `lpos()` uses.
- `checkpoint()` returns a `RewindState`. `rewind_to(state)` restores that position and line state.
- `reset()` discards the text. `seek(offset, whence)` moves the write position. It accepts `os.SEEK_SET`, `os.SEEK_CUR` or `os.SEEK_END`, and raises `ValueError` when the position is out of range.
- When `debug_flag` is set, the buffer logs its internal steps through `logging` at debug level.

### `indentprint.printing`

These are small value wrappers that render with `str()`:

- `concat(*args)` returns a `Concat` that prints its parts back to back. A single argument is returned unchanged.
- `cond(condition, if_true, if_false)` returns a `Cond` that prints one branch, chosen by the truth of `condition`.
- `basename(path)` returns a `Basename` that prints the last component of a unix path. Trailing slashes are ignored.
- `Hex(value, with_char=False)` prints one byte as two lower-case hex digits. With `with_char`, the byte's ASCII character follows in parentheses, or `?` when the byte is not printable.
- `HexView(data, as_text=False)` prints a sequence of bytes, such as `[68 65 6c 6c 6f]`. Text is encoded as UTF-8 first.
- `pad(n, pad_char=" ")` and `spaces(n)` return a `Pad` that prints `n` copies of a character.
- `format_pair(pair)` formats a pair as `[first second]`.
- The writing helpers are:
  - `tos(stream, *args)` writes each argument to a stream.
  - `tosn(stream, *args)` does the same, then adds a newline and flushes the stream.
  - `tostr(*args)` joins the arguments into a string.

### `indentprint.ppconfig`

- `PPConfig` holds the settings `right_margin` (default 80), `indent_width` (default 2) and `assert_indent_threshold` (default 10000).
- `PPConfig.ugly()` returns a configuration whose margin is so far away that output stays on one line.
- `PPIndentInfo` carries `pps`, `ci0`, `ci1` and `upto` down through a pretty-printing call.

### `indentprint.pretty`

- `PPState(ci, config, scratch)` pretty-prints into a `LogStreamBuf`.
- `PPStateStandalone(output, ci, config)` owns its scratch buffer. It writes finished output to `output` when the outermost `pretty`/`prettyn` call ends.
- `pretty(x)` first tries to print `x` on the rest of the current line. If `x` goes past `right_margin` or contains a newline, the buffer rewinds and `x` is printed again in multi-line mode.
- `prettyn(x)` does the same as `pretty(x)` and then adds a newline.
- `print_pretty(ppii, x)` chooses how to print a value:
  - An object with a `pretty_print(ppii)` method prints itself.
  - A `Cond` prints its selected branch.
  - Anything else is printed as a single unit with `print_atomic`.
- `pretty_struct(ppii, name, *members)` lays a struct out in one of two forms:
  - `<name m1 m2 ...>` on one line.
  - One member per indented line.

  Members whose `present` attribute is false are skipped.
- Other helpers:
  - `print_upto(x)`
  - `newline_indent(tab)`
  - `avail_margin()`
  - `has_budget(n)`
  - `scan_no_newline(start)`
  - `committing()`, a context manager for nesting calls

### `indentprint.timeutil`

Time points are `datetime` values; naive ones are treated as UTC. Durations are `timedelta` values.

- `now()`, `epoch()`, `ymd_hms(ymd, hms)`, `ymd_midnight(ymd)` and `ymd_hms_usec(ymd, hms, usec)` build time points. `ymd` and `hms` are packed integers such as `20220610` and `162905`.
- `utc_split_vs_midnight(t0)` and `local_split_vs_midnight(t0)` return a pair: midnight of the same day, and the time of day. `utc_split_tm(t0)` returns the calendar fields together with the microseconds.
- The formatters are:
  - `format_hms_msec` gives `hh:mm:ss.mmm`.
  - `format_hms_usec` gives `hh:mm:ss.uuuuuu`.
  - `format_utc_hms_msec` gives the UTC time of day of a time point as `hh:mm:ss.mmm`.
  - `format_utc_ymd_hms_usec` gives `yyyymmdd:hh:mm:ss.uuuuuu`.
  - `format_iso8601` gives `2012-04-23T18:25:43.511Z`.
- The wrappers `Iso8601`, `HmsMsec` and `HmsUsec` render these formats with `str()`. `HmsMsec` and `HmsUsec` also have `utc(t0)` and `local(t0)` constructors.

## Examples

```python
import io
from indentprint.printing import basename, cond, tostr, Hex, HexView
from indentprint.streambuf import LogStreamBuf
from indentprint.ppconfig import PPConfig
from indentprint.pretty import PPStateStandalone
from indentprint.timeutil import ymd_hms_usec, format_iso8601

tostr(basename("/path/to/file.py"), " ", cond(True, 42, "none"))  # 'file.py 42'
str(Hex(16 + 63))                                                  # '4f'
str(HexView(b"hi", True))                                          # '[68(h) 69(i)]'

buf = LogStreamBuf(16)
buf.write("abc\n\033[31mred\033[0m")
buf.lpos()                                                         # 3

format_iso8601(ymd_hms_usec(20120423, 182543, 511000))             # '2012-04-23T18:25:43.511Z'


class Point:
    def __init__(self, x, y):
        self.x, self.y = x, y

    def pretty_print(self, ppii):
        return ppii.pps.pretty_struct(ppii, "Point", f":x {self.x}", f":y {self.y}")


out = io.StringIO()
PPStateStandalone(out, 0, PPConfig(right_margin=80)).pretty(Point(1, 2))
out.getvalue()                                                     # '<Point :x 1 :y 2>'

out = io.StringIO()
PPStateStandalone(out, 0, PPConfig(right_margin=10)).pretty(Point(1, 2))
out.getvalue()                                                     # '<Point\n  :x 1\n  :y 2>'
```

## What this package does not do

- The pretty printer has no built-in layout for lists, dicts or other containers. Such values are printed as one unit using their `str()`. To get a multi-line layout, give an object a `pretty_print(ppii)` method.
- The package has no call-scope logger, no log levels and no global logging configuration. It provides the buffers and formatting pieces that such a logger would use.

## Tests

```
pip install .[test]
pytest
```