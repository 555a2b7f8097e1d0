"""Build the displayed jump entries from the editor's raw jump list."""

from __future__ import annotations

from collections.abc import Callable

from ..context import Context
from ..host.protocol import EditorHost
from .jump import Jump, absolute_position, current_marker, relative_offset

FilterFunc = Callable[[Jump, Context], bool]


def passes_filter(
    jump: Jump,
    context: Context,
    filter_func: FilterFunc | None = None,
    *,
    filter_empty_lines: bool = True,
) -> bool:
    """Return whether ``jump`` survives the empty-line filter and ``filter_func``."""
    if filter_empty_lines and jump.line.strip() == "":
        return False
    if filter_func is not None and not filter_func(jump, context):
        return False
    return True


def collect_jumps(
    host: EditorHost,
    context: Context,
    filter_func: FilterFunc | None = None,
    *,
    filter_empty_lines: bool = True,
) -> list[Jump]:
    """Return jumps of the caller window, most recent first.

    Jumps whose buffer is gone or whose line no longer exists are dropped.
    The current jump bypasses the filter so the user position stays visible.
    """
    raw_jumps, curpos = host.get_jumplist(context.winid)
    length = len(raw_jumps)
    marker = current_marker(length, curpos)

    jumps: list[Jump] = []
    for index, raw in enumerate(raw_jumps, start=1):
        if not host.buffer_exists(raw.bufnr):
            continue
        host.load_buffer(raw.bufnr)

        line = host.buffer_line(raw.bufnr, raw.lnum)
        if line is None:
            continue

        pos = absolute_position(index, length)
        jump = Jump(
            current=pos == marker,
            pos=pos,
            rel=relative_offset(pos, length, curpos),
            bufnr=raw.bufnr,
            bufpath=host.buffer_name(raw.bufnr),
            lnum=raw.lnum,
            col=raw.col,
            line=line,
        )
        if jump.current or passes_filter(jump, context, filter_func, filter_empty_lines=filter_empty_lines):
            jumps.append(jump)

    jumps.sort(key=lambda jump: jump.pos)
    return jumps
