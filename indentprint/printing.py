"""Small stream inserters: concatenation, conditionals, basenames, hex, padding, pairs."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, TextIO, Tuple, Union


@dataclass(frozen=True)
class Concat:
    """Prints its parts one after another, with no separator.

    Meant for short string-like things whose structure should stay
    invisible to the pretty-printer, e.g. ``concat("boeing", 777)``.
    """

    parts: Tuple[Any, ...]

    def __str__(self) -> str:
        return "".join(str(part) for part in self.parts)


def concat(*args: Any) -> Any:
    """Join ``args`` for printing; a single argument is returned unchanged."""
    if len(args) == 1:
        return args[0]
    return Concat(tuple(args))


@dataclass(frozen=True)
class Cond:
    """Prints ``if_true`` when ``condition`` holds, otherwise ``if_false``."""

    condition: bool
    if_true: Any
    if_false: Any

    @property
    def selected(self) -> Any:
        """The value that this conditional prints."""
        return self.if_true if self.condition else self.if_false

    def __str__(self) -> str:
        return str(self.selected)


def cond(condition: Any, if_true: Any, if_false: Any) -> Cond:
    """Create a conditional inserter; ``condition`` is taken for its truth value."""
    return Cond(bool(condition), if_true, if_false)


def _exclude_dirname(path: str) -> int:
    """Index where the last path component starts, ignoring trailing slashes."""
    stripped = path.rstrip("/")
    if not stripped:
        return 0
    return stripped.rfind("/") + 1


@dataclass(frozen=True)
class Basename:
    """Prints the last component of a unix path, e.g. ``/path/to/file.cpp`` -> ``file.cpp``."""

    path: str

    def __str__(self) -> str:
        return self.path[_exclude_dirname(self.path):]


def basename(path: str) -> Basename:
    """Create an inserter printing the basename of ``path``."""
    return Basename(path)


def _is_print(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


class Hex:
    """A single byte printed as two lower-case hexadecimal digits.

    With ``with_char`` the ASCII character follows in parentheses,
    or ``?`` when it is not printable: ``Hex(0x6f, True)`` -> ``6f(o)``.
    """

    __slots__ = ("value", "with_char")

    def __init__(self, value: int, with_char: bool = False) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        self.value = value
        self.with_char = with_char

    def __repr__(self) -> str:
        return f"Hex({self.value!r}, with_char={self.with_char!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hex):
            return NotImplemented
        return (self.value, self.with_char) == (other.value, other.with_char)

    def __hash__(self) -> int:
        return hash((self.value, self.with_char))

    def __str__(self) -> str:
        text = f"{self.value:02x}"
        if self.with_char:
            ch = chr(self.value) if _is_print(self.value) else "?"
            text += f"({ch})"
        return text


class HexView:
    """A range of bytes printed in hexadecimal, space separated inside brackets.

    ``HexView(b"hello")`` -> ``[68 65 6c 6c 6f]``;
    ``HexView(b"hello", True)`` -> ``[68(h) 65(e) 6c(l) 6c(l) 6f(o)]``.
    Text is encoded as UTF-8 first.
    """

    __slots__ = ("data", "as_text")

    def __init__(self, data: Union[bytes, bytearray, memoryview, str], as_text: bool = False) -> None:
        self.data = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self.as_text = as_text

    def __repr__(self) -> str:
        return f"HexView({self.data!r}, as_text={self.as_text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexView):
            return NotImplemented
        return (self.data, self.as_text) == (other.data, other.as_text)

    def __hash__(self) -> int:
        return hash((self.data, self.as_text))

    def __str__(self) -> str:
        return "[" + " ".join(str(Hex(b, self.as_text)) for b in self.data) + "]"


@dataclass(frozen=True)
class Pad:
    """Prints ``n`` copies of ``pad_char``."""

    n: int
    pad_char: str = " "

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"pad width must be non-negative, got {self.n}")
        if len(self.pad_char) != 1:
            raise ValueError(f"pad character must be a single character, got {self.pad_char!r}")

    def __str__(self) -> str:
        return self.pad_char * self.n


def pad(n: int, pad_char: str = " ") -> Pad:
    """Create an inserter printing ``n`` copies of ``pad_char``."""
    return Pad(n, pad_char)


def spaces(n: int) -> Pad:
    """Create an inserter printing ``n`` spaces."""
    return Pad(n, " ")


def format_pair(pair: Tuple[Any, Any]) -> str:
    """Format a two-element pair as ``[first second]``."""
    first, second = pair
    return f"[{first} {second}]"


def tos(stream: TextIO, *args: Any) -> TextIO:
    """Write each argument's text to ``stream`` in order; return ``stream``."""
    for arg in args:
        stream.write(str(arg))
    return stream


def tosn(stream: TextIO, *args: Any) -> TextIO:
    """Like :func:`tos`, followed by a newline; the stream is flushed when it can be."""
    tos(stream, *args)
    stream.write("\n")
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()
    return stream


def tostr(*args: Any) -> str:
    """Concatenate the text of all arguments into a string."""
    buf = io.StringIO()
    tos(buf, *args)
    return buf.getvalue()