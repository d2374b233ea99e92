"""Self-extending text buffer that tracks the visible column of its write position."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_log = logging.getLogger(__name__)

_ESCAPE = "\033"
_ESCAPE_BODY = frozenset("0123456789[;")


@dataclass(frozen=True)
class RewindState:
    """Snapshot of a :class:`LogStreamBuf` that :meth:`LogStreamBuf.rewind_to` restores."""

    solpos: int
    color_escape_chars: int
    pos: int


class LogStreamBuf:
    """Recycling buffer for logging and pretty-printing.

    Text is written into storage that doubles as needed.  The buffer keeps
    track of the start of the current line (one past the last ``\\n`` or
    ``\\r``) and of the non-printing characters in completed ANSI color
    escapes on that line, so that :meth:`lpos` reports the visible column.
    """

    def __init__(self, capacity: int, debug_flag: bool = False) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._buf: list[str] = ["\0"] * capacity
        self._debug = debug_flag
        self._pos = 0
        self._local_pos = 0
        self._solpos = 0
        self._color_escape_chars = 0
        self._color_escape_start: int | None = None

    # ----- observers -----

    def capacity(self) -> int:
        """Current size of the storage."""
        return len(self._buf)

    def pos(self) -> int:
        """Number of characters written since the start of the buffer."""
        return self._pos

    def solpos(self) -> int:
        """Position one character after the last newline or carriage return."""
        return self._solpos

    def color_escape_chars(self) -> int:
        """Non-printing characters from completed color escapes on the current line."""
        return self._color_escape_chars

    def lpos(self) -> int:
        """Number of visible characters since the start of the current line."""
        self._check_update_local_state()
        return self._pos - self._solpos - self._color_escape_chars

    def debug_flag(self) -> bool:
        return self._debug

    def getvalue(self) -> str:
        """Text written so far."""
        return "".join(self._buf[: self._pos])

    def __str__(self) -> str:
        return self.getvalue()

    # ----- writing -----

    def write(self, text: str) -> int:
        """Append ``text``, growing storage if needed; return the number of characters written."""
        text = str(text)
        n = len(text)
        if n == 0:
            return 0
        if self._pos + n > self.capacity():
            if n == 1:
                new_capacity = max(2 * self.capacity(), 1)
            else:
                new_capacity = max(2 * self.capacity(), self._pos + n + 1)
            self._expand_to(new_capacity)
        if self._debug:
            _log.debug(
                "write: pos=%d n=%d -> %d, capacity=%d",
                self._pos, n, self._pos + n, self.capacity(),
            )
        self._buf[self._pos : self._pos + n] = text
        self._pos += n
        self._check_update_local_state()
        return n

    # ----- positioning -----

    def checkpoint(self) -> RewindState:
        """Capture the current position and line state."""
        self._check_update_local_state()
        return RewindState(self._solpos, self._color_escape_chars, self._pos)

    def rewind_to(self, state: RewindState) -> None:
        """Restore position and line state captured by :meth:`checkpoint`."""
        if not 0 <= state.pos <= self.capacity():
            raise ValueError(f"rewind position {state.pos} outside buffer of capacity {self.capacity()}")
        if self._debug:
            _log.debug(
                "rewind_to: pos %d->%d solpos %d->%d color_esc %d->%d",
                self._pos, state.pos, self._solpos, state.solpos,
                self._color_escape_chars, state.color_escape_chars,
            )
        self._pos = state.pos
        self._local_pos = state.pos
        self._solpos = state.solpos
        self._color_escape_chars = state.color_escape_chars
        self._color_escape_start = None

    def reset(self) -> None:
        """Discard all written text, keeping the storage."""
        self._pos = 0
        self._local_pos = 0
        self._solpos = 0
        self._color_escape_chars = 0
        self._color_escape_start = None

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the write position and return it.

        ``whence`` is ``os.SEEK_SET`` (from the start), ``os.SEEK_CUR``
        (from the current position) or ``os.SEEK_END`` (from the end of storage).
        """
        if whence == os.SEEK_SET:
            target = offset
        elif whence == os.SEEK_CUR:
            target = self._pos + offset
        elif whence == os.SEEK_END:
            target = self.capacity() + offset
        else:
            raise ValueError(f"invalid whence: {whence}")
        if not 0 <= target <= self.capacity():
            raise ValueError(f"seek position {target} outside buffer of capacity {self.capacity()}")
        if self._debug:
            _log.debug("seek: pos %d->%d", self._pos, target)
        self._pos = target
        if target < self._local_pos:
            self._local_pos = 0
            self._solpos = 0
            self._color_escape_chars = 0
            self._color_escape_start = None
        self._check_update_local_state()
        return self._pos

    # ----- internals -----

    def _expand_to(self, new_capacity: int) -> None:
        self._buf.extend("\0" * (new_capacity - len(self._buf)))

    def _update_local_state_char(self, i: int) -> None:
        ch = self._buf[i]
        if ch in "\n\r":
            self._solpos = i + 1
            self._color_escape_chars = 0
            self._color_escape_start = None
        elif ch == _ESCAPE:
            self._color_escape_start = i
        elif self._color_escape_start is not None:
            if ch == "m":
                esc_chars = i + 1 - self._color_escape_start
                self._color_escape_chars += esc_chars
                if self._debug:
                    _log.debug("escape complete at %d: +%d -> %d", i, esc_chars, self._color_escape_chars)
                self._color_escape_start = None
            elif ch not in _ESCAPE_BODY:
                self._color_escape_start = None

    def _check_update_local_state(self) -> None:
        for i in range(self._local_pos, self._pos):
            self._update_local_state_char(i)
        self._local_pos = self._pos
        if self._debug:
            _log.debug(
                "local state: pos=%d solpos=%d color_escape_chars=%d",
                self._pos, self._solpos, self._color_escape_chars,
            )
        assert self._pos >= self._solpos + self._color_escape_chars