"""ANSI rendering of highlighted list lines for terminal output."""

from __future__ import annotations

from collections.abc import Iterable

from .host.protocol import HighlightSpan

RESET = "\033[0m"

GROUP_SGR: dict[str, str] = {
    "Special": "1;38;5;81",
    "Number": "38;5;229",
    "Directory": "38;5;75",
    "LineNr": "38;5;244",
    "Comment": "38;5;242",
    "String": "38;5;114",
    "Keyword": "38;5;204",
    "Function": "38;5;81",
    "Type": "38;5;180",
    "Operator": "38;5;203",
}


def colorize_line(line: str, spans: Iterable[HighlightSpan]) -> str:
    """Wrap span ranges of ``line`` in SGR sequences.

    Spans are applied left to right; a span overlapping an earlier one and
    groups without a known color are skipped.
    """
    out: list[str] = []
    cursor = 0
    for span in sorted(spans, key=lambda item: (item.start, item.end)):
        sgr = GROUP_SGR.get(span.group)
        start = max(span.start, 0)
        end = min(span.end, len(line))
        if sgr is None or start < cursor or end <= start:
            continue
        out.append(line[cursor:start])
        out.append(f"\033[{sgr}m{line[start:end]}{RESET}")
        cursor = end
    out.append(line[cursor:])
    return "".join(out)
