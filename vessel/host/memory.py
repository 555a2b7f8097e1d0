"""In-memory editor host with Vim jump-list semantics.

Buffers are either given their lines up front or backed by a file that is
read on first load. Windows carry a cursor and their own jump list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .protocol import BACK, FORWARD, HighlightSpan, RawJump

MAX_JUMPS = 100


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


@dataclass
class MemoryBuffer:
    bufnr: int
    name: str
    lines: list[str] | None = None
    path: Path | None = None


@dataclass
class MemoryWindow:
    winid: int
    bufnr: int
    lnum: int = 1
    col: int = 0
    jumps: list[RawJump] = field(default_factory=list)
    jump_idx: int = 0
    height: int = 0
    surface: bool = False
    flashes: list[int] = field(default_factory=list)


class MemoryHost:
    """Headless :class:`~vessel.host.protocol.EditorHost` implementation."""

    def __init__(self, max_jumps: int = MAX_JUMPS) -> None:
        self.max_jumps = max(1, max_jumps)
        self.buffers: dict[int, MemoryBuffer] = {}
        self.windows: dict[int, MemoryWindow] = {}
        self.highlights: dict[tuple[int, int], list[tuple[int, HighlightSpan]]] = {}
        self._scopes: dict[str, int] = {}
        self._next_bufnr = 1
        self._next_winid = 1000
        self._window_stack: list[int] = []

    # buffers
    def add_buffer(self, name: str, lines: list[str] | None = None, path: Path | None = None) -> int:
        bufnr = self._next_bufnr
        self._next_bufnr += 1
        self.buffers[bufnr] = MemoryBuffer(
            bufnr=bufnr,
            name=name,
            lines=list(lines) if lines is not None else None,
            path=path,
        )
        return bufnr

    def open_file(self, path: Path) -> int:
        """Register ``path`` as an unloaded buffer, reusing an existing one."""
        target = path.resolve()
        for buffer in self.buffers.values():
            if buffer.path == target:
                return buffer.bufnr
        return self.add_buffer(str(target), path=target)

    def wipe_buffer(self, bufnr: int) -> None:
        self.buffers.pop(bufnr, None)

    def buffer_exists(self, bufnr: int) -> bool:
        return bufnr in self.buffers

    def load_buffer(self, bufnr: int) -> None:
        buffer = self.buffers[bufnr]
        if buffer.lines is not None:
            return
        if buffer.path is None or not buffer.path.is_file():
            buffer.lines = []
            return
        buffer.lines = read_text(buffer.path).splitlines()

    def buffer_name(self, bufnr: int) -> str:
        return self.buffers[bufnr].name

    def buffer_line(self, bufnr: int, lnum: int) -> str | None:
        """Return line ``lnum`` (1-based) or ``None`` when out of bounds."""
        buffer = self.buffers.get(bufnr)
        if buffer is None:
            return None
        self.load_buffer(bufnr)
        lines = buffer.lines or []
        if not 1 <= lnum <= len(lines):
            return None
        return lines[lnum - 1]

    # windows
    def new_window(self, bufnr: int) -> int:
        winid = self._next_winid
        self._next_winid += 1
        self.windows[winid] = MemoryWindow(winid=winid, bufnr=bufnr)
        self._window_stack.append(winid)
        return winid

    def current_window(self) -> int:
        if not self._window_stack:
            raise LookupError("no window is open")
        return self._window_stack[-1]

    def window_buffer(self, winid: int) -> int:
        return self.windows[winid].bufnr

    def set_buffer(self, winid: int, bufnr: int) -> None:
        if bufnr not in self.buffers:
            raise LookupError(f"buffer {bufnr} does not exist")
        self.windows[winid].bufnr = bufnr

    def set_cursor(self, winid: int, lnum: int, col: int) -> None:
        window = self.windows[winid]
        window.lnum = max(1, lnum)
        window.col = max(0, col)

    # jump list
    def get_jumplist(self, winid: int) -> tuple[list[RawJump], int]:
        window = self.windows[winid]
        return list(window.jumps), window.jump_idx

    def set_jumplist(self, winid: int, jumps: list[RawJump], curpos: int | None = None) -> None:
        """Replace the window's jump list; ``curpos`` defaults to the end."""
        window = self.windows[winid]
        window.jumps = list(jumps[-self.max_jumps:])
        end = len(window.jumps)
        window.jump_idx = end if curpos is None else max(0, min(curpos, end))

    def record_jump(self, winid: int) -> None:
        """Store the window's cursor position as the newest jump."""
        window = self.windows[winid]
        location = RawJump(bufnr=window.bufnr, lnum=window.lnum, col=window.col)
        window.jumps = [
            jump for jump in window.jumps if (jump.bufnr, jump.lnum) != (location.bufnr, location.lnum)
        ]
        window.jumps.append(location)
        overflow = len(window.jumps) - self.max_jumps
        if overflow > 0:
            del window.jumps[:overflow]
        window.jump_idx = len(window.jumps)

    def goto(self, winid: int, bufnr: int, lnum: int, col: int = 0) -> None:
        """Move like a jump command: remember the origin, then move."""
        self.record_jump(winid)
        self.set_buffer(winid, bufnr)
        self.set_cursor(winid, lnum, col)

    def traverse(self, winid: int, count: int, direction: str) -> None:
        window = self.windows[winid]
        if direction == BACK:
            if window.jump_idx == len(window.jumps):
                self.record_jump(winid)
                window.jump_idx -= 1
            target = window.jump_idx - count
        elif direction == FORWARD:
            target = window.jump_idx + count
        else:
            raise ValueError(f"unknown traversal direction: {direction!r}")
        if not 0 <= target < len(window.jumps):
            return
        jump = window.jumps[target]
        if jump.bufnr not in self.buffers:
            return
        window.jump_idx = target
        window.bufnr = jump.bufnr
        self.set_cursor(winid, jump.lnum, jump.col)

    def clear_jumps(self, winid: int) -> None:
        window = self.windows[winid]
        window.jumps = []
        window.jump_idx = 0

    # display surface
    def create_highlight_scope(self, name: str) -> int:
        return self._scopes.setdefault(name, len(self._scopes) + 1)

    def open_surface(self, height: int) -> int:
        bufnr = self.add_buffer("", lines=[""])
        winid = self.new_window(bufnr)
        window = self.windows[winid]
        window.surface = True
        window.height = max(1, height)
        return winid

    def close_surface(self, winid: int) -> None:
        window = self.windows.pop(winid, None)
        if window is None:
            return
        self.buffers.pop(window.bufnr, None)
        self._window_stack = [item for item in self._window_stack if item != winid]
        for key in [key for key in self.highlights if key[0] == winid]:
            del self.highlights[key]

    def set_lines(self, winid: int, lines: list[str]) -> None:
        self.buffers[self.windows[winid].bufnr].lines = list(lines)

    def lines(self, winid: int) -> list[str]:
        return list(self.buffers[self.windows[winid].bufnr].lines or [])

    def clear_highlights(self, winid: int, scope: int) -> None:
        self.highlights.pop((winid, scope), None)

    def add_highlight(self, winid: int, scope: int, lnum: int, span: HighlightSpan) -> None:
        self.highlights.setdefault((winid, scope), []).append((lnum, span))

    def get_cursor_line(self, winid: int) -> int:
        return self.windows[winid].lnum

    def set_cursor_line(self, winid: int, lnum: int) -> None:
        window = self.windows[winid]
        line_count = max(1, len(self.lines(winid)))
        window.lnum = max(1, min(lnum, line_count))
        window.col = 0

    def set_height(self, winid: int, height: int) -> None:
        self.windows[winid].height = max(1, height)

    def flash_cursorline(self, winid: int, timeout: int) -> None:
        self.windows[winid].flashes.append(timeout)
