"""Pretty-printer configuration and per-call indentation state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class PPConfig:
    """Pretty-printer control parameters.

    ``right_margin``: newlines are introduced where needed to stay left of this column.
    ``indent_width``: extra indent per nesting level.
    ``assert_indent_threshold``: indenting this far or more is an error.
    """

    right_margin: int = 80
    indent_width: int = 2
    assert_indent_threshold: int = 10000

    @classmethod
    def ugly(cls) -> "PPConfig":
        """Configuration whose right margin is so far away that output stays on one line."""
        return cls(right_margin=99999999, indent_width=0, assert_indent_threshold=10)


class PPIndentInfo:
    """Pretty-printing state passed down while traversing an object graph.

    ``upto`` true means print on the remainder of the current line unless
    the right margin is passed; false means pretty-print across lines.
    """

    __slots__ = ("pps", "ci0", "ci1", "upto")

    def __init__(self, pps: Any, ci0: int, indent_width: int, upto: bool) -> None:
        self.pps = pps
        self.ci0 = ci0
        self.ci1 = ci0 + indent_width
        self.upto = upto

    def __repr__(self) -> str:
        return f"PPIndentInfo(ci0={self.ci0}, ci1={self.ci1}, upto={self.upto})"