"""Entry points for opening vessel views from an editor integration."""

from __future__ import annotations

from collections.abc import Mapping

from . import config as vessel_config
from .app import App
from .context import Context
from .host.protocol import EditorHost
from .jumplist import Jump, Jumplist
from .jumplist.collect import FilterFunc


def view_jumps(
    host: EditorHost,
    opts: Mapping[str, object] | None = None,
    filter_func: FilterFunc | None = None,
) -> Jumplist:
    """Open the jump list window for the host's current window."""
    app = App(host, vessel_config.get(opts))
    jumplist = Jumplist(app, filter_func)
    jumplist.open()
    return jumplist


def _same_buffer(jump: Jump, context: Context) -> bool:
    return jump.bufnr == context.bufnr


def view_local_jumps(host: EditorHost, opts: Mapping[str, object] | None = None) -> Jumplist:
    """Open the jump list window with only jumps in the current buffer."""
    return view_jumps(host, opts, _same_buffer)


def setup(opts: Mapping[str, object] | None = None) -> vessel_config.Config:
    """Load user options; later calls may still override them per call."""
    return vessel_config.load(opts)
