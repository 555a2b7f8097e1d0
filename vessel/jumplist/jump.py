"""Jump entries and jump-list position arithmetic.

The editor reports its jump list oldest-first together with an index that
equals the list length when no back/forward traversal happened yet. The view
displays the list reversed (most recent at the top), so two numbers are kept
per entry:

- ``pos``: 1-based distance from the most recent end of the list
- ``rel``: signed number of back (negative) or forward (positive) steps from
  the position the user currently occupies in the list

When the list has not been traversed, the current position is considered to
be ``1`` even though the editor index points one past the last item.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..host.protocol import BACK, FORWARD


@dataclass(frozen=True)
class Jump:
    current: bool = False
    pos: int = 0
    rel: int = 0
    bufnr: int = -1
    bufpath: str = ""
    lnum: int = 0
    col: int = 0
    line: str = ""


def absolute_position(index: int, length: int) -> int:
    """Return ``pos`` for the 1-based oldest-first raw ``index``."""
    return length - index + 1


def current_marker(length: int, curpos: int) -> int:
    """Return the ``pos`` value considered current."""
    return max(length - curpos, 1)


def relative_offset(pos: int, length: int, curpos: int) -> int:
    if length == curpos:
        return -pos
    return current_marker(length, curpos) - pos


@dataclass(frozen=True)
class RealCount:
    """Outcome of translating a displayed count into a real traversal count."""

    count: int = 0
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def real_count(line_map: Mapping[int, Jump], count: int, direction: str, line_count: int) -> RealCount:
    """Translate ``count`` displayed steps into real jump-list steps.

    Entries dropped by filtering make the displayed distance differ from the
    distance in the editor's list, so the target is located by displayed line
    and its own ``rel`` is used instead.
    """
    line = 0
    for lnum in range(1, line_count + 1):
        jump = line_map.get(lnum)
        if jump is not None and jump.current:
            line = lnum
            break

    # older jumps are further down
    if direction == BACK:
        line += count
    elif direction == FORWARD:
        line -= count

    target = line_map.get(line)
    if line < 1 or line > line_count or target is None:
        return RealCount(error=f"invalid count (out of bound): {count}")
    return RealCount(count=abs(target.rel))
