"""Caller context captured when a list window is opened."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Context:
    """Window and buffer the list was opened from."""

    winid: int
    bufnr: int
    bufpath: str = ""
