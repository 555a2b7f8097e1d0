"""Default jump line formatter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..context import Context
from ..host.protocol import HighlightSpan
from ..paths import display_width
from ..syntax import source_line_spans
from .jump import Jump

if TYPE_CHECKING:
    from ..config import Config
    from .render import FormatStats


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


def format_jump(
    jump: Jump,
    stats: FormatStats,
    context: Context,
    config: Config,
) -> tuple[str, list[HighlightSpan]] | None:
    """Return ``(line, spans)`` for one jump.

    Layout: ``<indicator> <steps>  <unique path>  <lnum>:<col>  <source text>``.
    ``steps`` is the real ``rel`` distance when real positions are shown,
    otherwise the distance in list entries from the current jump.
    """
    del context
    jumps_config = config.jumps
    groups = jumps_config.highlights

    if jumps_config.real_positions:
        steps = abs(jump.rel)
        steps_width = len(str(stats.max_rel))
    else:
        steps = abs(stats.current_index - stats.curpos_index) if stats.curpos_index else stats.current_index
        steps_width = len(str(stats.max_index))

    indicator = jumps_config.indicator[0] if jump.current else jumps_config.indicator[1]
    indicator = _pad(indicator, max(display_width(marker) for marker in jumps_config.indicator))
    steps_text = str(steps).rjust(steps_width)
    path_text = _pad(stats.uniques.get(jump.bufpath, jump.bufpath), stats.max_unique)
    lnum_text = str(jump.lnum).rjust(len(str(stats.max_lnum)))
    col_text = str(jump.col).ljust(len(str(stats.max_col)))
    source = jump.line.strip()

    spans: list[HighlightSpan] = []
    parts: list[str] = []
    cursor = 0

    def add(text: str, group: str | None) -> None:
        nonlocal cursor
        if group and text.strip():
            start = cursor + len(text) - len(text.lstrip())
            spans.append(HighlightSpan(group, start, cursor + len(text.rstrip())))
        parts.append(text)
        cursor += len(text)

    add(indicator, groups.indicator if jump.current else None)
    add(" ", None)
    add(steps_text, groups.indicator if jump.current else groups.position)
    add("  ", None)
    add(path_text, groups.path)
    add("  ", None)
    add(lnum_text, groups.lnum)
    add(":", None)
    add(col_text, groups.col)
    add("  ", None)
    if jumps_config.highlight_source:
        spans.extend(source_line_spans(source, jump.bufpath, offset=cursor))
        add(source, None)
    else:
        add(source, groups.line)

    return "".join(parts).rstrip(), spans
