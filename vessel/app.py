"""List window controller shared by vessel views."""

from __future__ import annotations

from typing import Protocol

from . import logger
from .config import Config
from .context import Context
from .host.protocol import EditorHost


class ListView(Protocol):
    def get_count(self) -> tuple[int, int]: ...


class App:
    """Owns the list window of one view invocation.

    The caller context is captured at construction, before any list window
    exists, so actions can target the window the list was opened from.
    """

    def __init__(self, host: EditorHost, config: Config) -> None:
        self.host = host
        self.config = config
        winid = host.current_window()
        bufnr = host.window_buffer(winid)
        self.context = Context(winid=winid, bufnr=bufnr, bufpath=host.buffer_name(bufnr))
        self.winid: int | None = None

    def _window_height(self, view: ListView) -> int:
        count, _pages = view.get_count()
        return max(1, min(count, self.config.window.max_height))

    def open_window(self, view: ListView) -> tuple[int, bool]:
        """Open the list window sized for ``view``; return ``(winid, ok)``."""
        if self.winid is not None:
            return self.winid, True
        try:
            self.winid = self.host.open_surface(self._window_height(view))
        except Exception as exc:
            logger.err("cannot open list window: %s", exc)
            self.winid = None
            return -1, False
        return self.winid, True

    def close_window(self) -> None:
        if self.winid is None:
            return
        winid = self.winid
        self.winid = None
        self.host.close_surface(winid)

    def fit_content(self, line_count: int) -> None:
        """Resize the list window to ``line_count`` rows within ``max_height``."""
        if self.winid is None:
            return
        self.host.set_height(self.winid, max(1, min(line_count, self.config.window.max_height)))
