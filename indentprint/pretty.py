"""Pretty-printer: fit output on the current line, or split it over indented lines."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, TextIO

from .ppconfig import PPConfig, PPIndentInfo
from .printing import Concat, Cond, spaces
from .streambuf import LogStreamBuf

_STANDALONE_BUFFER_SIZE = 1024 * 1024


def print_atomic(ppii: PPIndentInfo, x: Any) -> bool:
    """Print ``x`` as an indivisible unit.

    With ``ppii.upto`` set, return true iff the text fits before the right
    margin and contains no newline.  Otherwise just print it and return false.
    """
    pps = ppii.pps
    if ppii.upto:
        start = pps.pos()
        pps.write(x)
        if not pps.has_margin():
            return False
        return pps.scan_no_newline(start)
    pps.write(x)
    return False


def print_pretty(ppii: PPIndentInfo, x: Any) -> bool:
    """Pretty-print ``x`` according to its kind.

    Objects with a ``pretty_print(ppii)`` method print themselves;
    a :class:`Cond` prints its selected branch; anything else,
    :class:`Concat` included, is printed atomically.
    """
    method = getattr(x, "pretty_print", None)
    if callable(method):
        return bool(method(ppii))
    if isinstance(x, Cond):
        return print_pretty(ppii, x.selected)
    if isinstance(x, Concat):
        return print_atomic(ppii, x)
    return print_atomic(ppii, x)


def _is_present(member: Any) -> bool:
    present = getattr(member, "present", True)
    if callable(present):
        present = present()
    return bool(present)


class PPState:
    """Pretty-printer state writing into a :class:`LogStreamBuf` scratch buffer.

    The scratch buffer tracks the visible column, which drives the
    decision whether output fits before ``config.right_margin``.
    """

    def __init__(self, ci: int, config: PPConfig, scratch: LogStreamBuf) -> None:
        self.scratch = scratch
        self.config = config
        self.current_indent = ci
        self._nesting_level = 0

    # ----- observers -----

    def indent_width(self) -> int:
        return self.config.indent_width

    def indent_info(self, upto: bool) -> PPIndentInfo:
        """Indentation info anchored at the current column."""
        return PPIndentInfo(self, self.lpos(), self.indent_width(), upto)

    def pos(self) -> int:
        """Characters written to the scratch buffer."""
        return self.scratch.pos()

    def lpos(self) -> int:
        """Visible column: position since the last newline, excluding color escapes."""
        return self.scratch.lpos()

    def avail_margin(self) -> int:
        """Space left before the right margin; 0 when already past it."""
        p = self.lpos()
        m = self.config.right_margin
        return m - p if p < m else 0

    def has_margin(self) -> bool:
        return self.avail_margin() > 0

    def has_budget(self, budget: int) -> bool:
        """True if at least ``budget`` characters fit before the right margin."""
        return self.avail_margin() >= budget

    def scan_no_newline(self, start: int) -> bool:
        """True if no newline was written between ``start`` and the current position."""
        return "\n" not in self.scratch.getvalue()[start:self.pos()]

    # ----- writing -----

    def indent(self, tab: int) -> None:
        """Write ``tab`` spaces."""
        if tab >= self.config.assert_indent_threshold:
            raise ValueError(
                f"indent {tab} reaches threshold {self.config.assert_indent_threshold}"
            )
        self.scratch.write(str(spaces(tab)))

    def newline_indent(self, tab: int) -> None:
        """Write a newline followed by ``tab`` spaces."""
        self.scratch.write("\n")
        self.indent(tab)

    def write(self, x: Any) -> None:
        self.scratch.write(str(x))

    def commit(self) -> None:
        """Hand finished output on; a plain state keeps it in the scratch buffer."""

    @contextmanager
    def committing(self) -> Iterator["PPState"]:
        """Nest one pretty call; commit when the outermost call finishes."""
        self._nesting_level += 1
        try:
            yield self
        finally:
            self._nesting_level -= 1
            if self._nesting_level == 0:
                self.commit()

    # ----- pretty-printing -----

    def print_upto(self, x: Any) -> bool:
        """Print ``x`` on the current line; true iff it fits without a newline."""
        saved = self.pos()
        if not self.has_margin():
            return False
        if not print_pretty(self.indent_info(True), x):
            return False
        return self.scan_no_newline(saved)

    def pretty(self, x: Any) -> "PPState":
        """Print ``x`` on one line if it fits, otherwise across several lines."""
        saved = self.scratch.checkpoint()
        with self.committing():
            if not print_pretty(self.indent_info(True), x):
                self.scratch.rewind_to(saved)
                print_pretty(self.indent_info(False), x)
        return self

    def prettyn(self, x: Any) -> "PPState":
        """Like :meth:`pretty`, followed by a newline."""
        saved = self.scratch.checkpoint()
        with self.committing():
            if not print_pretty(self.indent_info(True), x):
                self.scratch.rewind_to(saved)
                print_pretty(self.indent_info(False), x)
            self.newline_indent(0)
        return self

    def pretty_struct(self, ppii: PPIndentInfo, structname: Any, *args: Any) -> bool:
        """Print ``<structname m1 m2 ...>``, or one member per indented line.

        Members whose ``present`` is false are left out.
        """
        members = [m for m in args if _is_present(m)]
        if ppii.upto:
            if not (self.print_upto("<") and self.print_upto(structname)):
                return False
            for member in members:
                if not (self.print_upto(" ") and self.print_upto(member)):
                    return False
            return self.print_upto(">")
        self.write("<")
        self.write(structname)
        for member in members:
            self.newline_indent(ppii.ci1)
            self.pretty(member)
        self.write(">")
        return False


class PPStateStandalone(PPState):
    """Pretty-printer that owns its scratch buffer and sends finished output to a stream."""

    def __init__(self, output: TextIO, ci: int, config: PPConfig) -> None:
        super().__init__(ci, config, LogStreamBuf(_STANDALONE_BUFFER_SIZE))
        self.output = output

    def commit(self) -> None:
        self.output.write(self.scratch.getvalue())
        self.reset_scratch()

    def reset_scratch(self) -> None:
        """Empty the scratch buffer for the next top-level call."""
        self.scratch.reset()