"""Turn collected jumps into display lines and a line-to-jump map.

Rendering is pure: it returns lines, per-line highlight spans and the map.
Writing them to a surface is up to the view.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from .. import logger
from ..context import Context
from ..host.protocol import HighlightSpan
from ..paths import basename, display_width, find_uniques
from .jump import Jump

if TYPE_CHECKING:
    from ..config import Config

_LOCATION_PREFIX_RE = re.compile(r"^\S+:\d+:\s+")

Formatted = tuple[str, Sequence[HighlightSpan] | None] | None
JumpFormatter = Callable[..., Formatted]


@dataclass(frozen=True)
class FormatStats:
    """Column statistics shared by every formatter call of one render.

    ``current_index`` is the line the jump being formatted will occupy and
    ``curpos_index`` the line of the current jump. Both count emitted lines,
    so jumps hidden by the formatter do not shift them.
    """

    current_index: int = 0
    curpos_index: int | None = None
    max_index: int = 0
    max_pos: int = 0
    max_lnum: int = 0
    max_col: int = 0
    max_rel: int = 0
    max_basename: int = 0
    max_unique: int = 0
    uniques: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderResult:
    lines: list[str]
    line_map: dict[int, Jump]
    matches: dict[int, list[HighlightSpan]] = field(default_factory=dict)
    cursor_line: int = 1
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def compute_stats(jumps: Sequence[Jump]) -> FormatStats:
    uniques = find_uniques([jump.bufpath for jump in jumps])
    curpos_index = next((idx for idx, jump in enumerate(jumps, start=1) if jump.current), None)
    return FormatStats(
        curpos_index=curpos_index,
        max_index=len(jumps),
        max_pos=max((jump.pos for jump in jumps), default=0),
        max_lnum=max((jump.lnum for jump in jumps), default=0),
        max_col=max((jump.col for jump in jumps), default=0),
        max_rel=max((abs(jump.rel) for jump in jumps), default=0),
        max_basename=max((display_width(basename(jump.bufpath)) for jump in jumps), default=0),
        max_unique=max((display_width(unique) for unique in uniques.values()), default=0),
        uniques=uniques,
    )


def clean_error_message(exc: BaseException) -> str:
    """Return exception text without a leading ``file:line:`` location."""
    message = str(exc) or type(exc).__name__
    return _LOCATION_PREFIX_RE.sub("", message, count=1)


def render_jumps(
    jumps: Sequence[Jump],
    formatter: JumpFormatter,
    context: Context,
    config: Config,
) -> RenderResult:
    """Format ``jumps`` in order, numbering only the lines actually emitted.

    A formatter returning ``None`` hides the jump. A formatter raising aborts
    the whole render: the error is logged and an empty result is returned.
    """
    if not jumps:
        return RenderResult(lines=[config.jumps.not_found], line_map={})

    stats = compute_stats(jumps)
    lines: list[str] = []
    line_map: dict[int, Jump] = {}
    matches: dict[int, list[HighlightSpan]] = {}

    curpos_index = stats.curpos_index
    seen_current = False
    hidden = 0
    for jump in jumps:
        lnum = len(lines) + 1
        if jump.current:
            seen_current = True
            curpos_index = lnum
        elif not seen_current and curpos_index is not None:
            # jumps hidden so far move the current one up
            curpos_index = stats.curpos_index - hidden
        try:
            formatted = formatter(jump, replace(stats, current_index=lnum, curpos_index=curpos_index), context, config)
        except Exception as exc:
            message = clean_error_message(exc)
            logger.err("jump formatter error: %s", message)
            return RenderResult(lines=[], line_map={}, error=message)
        if formatted is None:
            hidden += 1
            continue
        if isinstance(formatted, str):
            line, spans = formatted, None
        else:
            line, spans = formatted
        lines.append(line)
        line_map[lnum] = jump
        if spans:
            matches[lnum] = list(spans)

    # the current jump may be hidden by the formatter
    cursor_line = next((lnum for lnum, jump in line_map.items() if jump.current), 1)
    return RenderResult(lines=lines, line_map=line_map, matches=matches, cursor_line=cursor_line)
