"""Jump list window: rendering plus key actions bound to the rendered lines."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .. import logger
from ..host.protocol import BACK, FORWARD
from .collect import FilterFunc, collect_jumps
from .jump import Jump, real_count
from .render import render_jumps

if TYPE_CHECKING:
    from ..app import App

HIGHLIGHT_SCOPE = "__vessel__"
BUFFER_MODE = "buffer"
ACTION_NAMES = ("close", "clear", "jump", "ctrl_o", "ctrl_i")


def normalize_key(key: str) -> str:
    """Lower-case special key names so ``<CR>`` and ``<cr>`` match."""
    if len(key) > 2 and key.startswith("<") and key.endswith(">"):
        return key.lower()
    return key


class Jumplist:
    """Jump list view bound to one :class:`~vessel.app.App`.

    The line map of the latest render is the only source used to translate
    the cursor line into a jump. Every render replaces it, so actions never
    see a map from before a refresh.
    """

    def __init__(self, app: App, filter_func: FilterFunc | None = None) -> None:
        self._app = app
        self._host = app.host
        self._scope = app.host.create_highlight_scope(HIGHLIGHT_SCOPE)
        self._winid = -1
        self._jumps: list[Jump] = []
        self._map: dict[int, Jump] = {}
        self._line_count = 0
        self._filter_func = filter_func
        self._actions: dict[str, Callable[[int], None]] = {
            "close": self._action_close,
            "clear": self._action_clear,
            "jump": self._action_jump,
            "ctrl_o": lambda count: self._action_passthrough(count, BACK),
            "ctrl_i": lambda count: self._action_passthrough(count, FORWARD),
        }
        mappings = app.config.jumps.mappings
        self._keymap = {
            normalize_key(key): name
            for name in ACTION_NAMES
            for key in getattr(mappings, name)
        }

    @property
    def winid(self) -> int:
        return self._winid

    @property
    def jumps(self) -> list[Jump]:
        return list(self._jumps)

    @property
    def line_map(self) -> dict[int, Jump]:
        return dict(self._map)

    def init(self) -> Jumplist:
        """Collect jumps without displaying them."""
        self._jumps = collect_jumps(
            self._host,
            self._app.context,
            self._filter_func,
            filter_empty_lines=self._app.config.jumps.filter_empty_lines,
        )
        return self

    def open(self) -> None:
        """Collect jumps, open the list window and render into it."""
        self.init()
        winid, ok = self._app.open_window(self)
        if ok:
            self._winid = winid
            self._render()

    def get_count(self) -> tuple[int, int]:
        return len(self._jumps), 1

    # dispatch
    def handle_key(self, key: str, count: int = 1) -> bool:
        """Run the action mapped to ``key``; return whether one was found."""
        name = self._keymap.get(normalize_key(key))
        if name is None:
            return False
        return self.dispatch(name, count)

    def dispatch(self, name: str, count: int = 1) -> bool:
        if self._app.winid is None:
            return False
        self._actions[name](max(1, count))
        return True

    # actions
    def _selected(self) -> Jump | None:
        return self._map.get(self._host.get_cursor_line(self._winid))

    def _action_close(self, count: int = 1) -> None:
        del count
        self._app.close_window()

    def _action_jump(self, count: int = 1) -> None:
        del count
        selected = self._selected()
        if selected is None:
            return
        if not self._host.buffer_exists(selected.bufnr):
            logger.warn("buffer %s no longer exists", selected.bufnr)
            return

        self._action_close()

        config = self._app.config
        context = self._app.context
        if selected.rel == 0:
            self._host.set_buffer(context.winid, selected.bufnr)
            self._host.set_cursor(context.winid, selected.lnum, selected.col)
        else:
            direction = BACK if selected.rel < 0 else FORWARD
            self._host.traverse(context.winid, abs(selected.rel), direction)

        if config.jump_callback is not None:
            config.jump_callback(BUFFER_MODE, context)
        if config.highlight_on_jump:
            self._host.flash_cursorline(context.winid, config.highlight_timeout)

    def _action_clear(self, count: int = 1) -> None:
        """Clear the caller window's jump history and redraw the list."""
        del count
        if self._selected() is None:
            return
        self._host.clear_jumps(self._app.context.winid)
        self._refresh()

    def _action_passthrough(self, count: int, direction: str) -> None:
        """Replay a back/forward traversal in the caller window.

        Running it from the list window would record a new jump for the list
        buffer itself.
        """
        if not self._app.config.jumps.real_positions:
            result = real_count(self._map, count, direction, self._line_count)
            if not result.ok:
                logger.warn(result.error)
                return
            count = result.count
        self._action_close()
        self._host.traverse(self._app.context.winid, count, direction)

    # rendering
    def _refresh(self) -> dict[int, Jump]:
        line = self._host.get_cursor_line(self._winid)
        self.init()
        line_map = self._render()
        if self._app.winid is not None:
            self._host.set_cursor_line(self._winid, max(1, min(line, self._line_count)))
        return line_map

    def _render(self) -> dict[int, Jump]:
        """Render jumps into the list window and return the new line map."""
        self._host.clear_highlights(self._winid, self._scope)
        config = self._app.config
        result = render_jumps(self._jumps, config.jumps.formatters.jump, self._app.context, config)
        if not result.ok:
            self._map = {}
            self._line_count = 0
            self._app.close_window()
            return {}

        self._host.set_lines(self._winid, result.lines)
        for lnum, spans in result.matches.items():
            for span in spans:
                self._host.add_highlight(self._winid, self._scope, lnum, span)
        self._map = result.line_map
        self._line_count = len(result.lines)
        self._app.fit_content(self._line_count)
        self._host.set_cursor_line(self._winid, result.cursor_line)
        return self._map
