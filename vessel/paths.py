"""Path helpers shared by list formatters."""

from __future__ import annotations

import os
import unicodedata


def display_width(text: str) -> int:
    """Return terminal cell width of ``text`` (wide East Asian chars count 2)."""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1
    return width


def basename(path: str) -> str:
    return os.path.basename(path.rstrip(os.sep)) or path


def _components(path: str) -> list[str]:
    return [part for part in path.split(os.sep) if part]


def find_uniques(paths: list[str]) -> dict[str, str]:
    """Map each path to its shortest trailing component run unique in ``paths``.

    ``/a/x/init.py`` and ``/b/y/init.py`` become ``x/init.py`` and
    ``y/init.py``; a path that is a suffix of another keeps all of its
    components.
    """
    distinct = list(dict.fromkeys(paths))
    split = {path: _components(path) for path in distinct}
    uniques: dict[str, str] = {}
    for path, parts in split.items():
        if not parts:
            uniques[path] = path
            continue
        depth = 1
        while depth < len(parts):
            suffix = parts[-depth:]
            clash = any(
                other != path and other_parts[-depth:] == suffix
                for other, other_parts in split.items()
            )
            if not clash:
                break
            depth += 1
        uniques[path] = os.sep.join(parts[-depth:])
    return uniques
