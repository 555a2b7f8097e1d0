"""Editor host boundary used by the jump list view.

The view never talks to an editor directly; every buffer, window and
jump-history query goes through an object implementing :class:`EditorHost`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

BACK = "back"
FORWARD = "forward"


@dataclass(frozen=True)
class RawJump:
    """One jump as stored by the editor (oldest-first list item)."""

    bufnr: int
    lnum: int
    col: int = 0


@dataclass(frozen=True)
class HighlightSpan:
    """Highlight group applied to ``[start, end)`` columns of one line."""

    group: str
    start: int
    end: int


class EditorHost(Protocol):
    def get_jumplist(self, winid: int) -> tuple[list[RawJump], int]: ...

    def buffer_exists(self, bufnr: int) -> bool: ...

    def load_buffer(self, bufnr: int) -> None: ...

    def buffer_name(self, bufnr: int) -> str: ...

    def buffer_line(self, bufnr: int, lnum: int) -> str | None: ...

    def current_window(self) -> int: ...

    def window_buffer(self, winid: int) -> int: ...

    def set_buffer(self, winid: int, bufnr: int) -> None: ...

    def set_cursor(self, winid: int, lnum: int, col: int) -> None: ...

    def traverse(self, winid: int, count: int, direction: str) -> None: ...

    def clear_jumps(self, winid: int) -> None: ...

    def create_highlight_scope(self, name: str) -> int: ...

    def open_surface(self, height: int) -> int: ...

    def close_surface(self, winid: int) -> None: ...

    def set_lines(self, winid: int, lines: list[str]) -> None: ...

    def clear_highlights(self, winid: int, scope: int) -> None: ...

    def add_highlight(self, winid: int, scope: int, lnum: int, span: HighlightSpan) -> None: ...

    def get_cursor_line(self, winid: int) -> int: ...

    def set_cursor_line(self, winid: int, lnum: int) -> None: ...

    def set_height(self, winid: int, height: int) -> None: ...

    def flash_cursorline(self, winid: int, timeout: int) -> None: ...
