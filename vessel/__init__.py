"""Public package surface for vessel.

Exports the view entry points and ``main`` for the CLI.
Implementation lives in submodules under ``vessel``.
"""

from __future__ import annotations


def view_jumps(*args, **kwargs):
    """Lazily import the API to keep package imports lightweight."""
    from .api import view_jumps as _view_jumps

    return _view_jumps(*args, **kwargs)


def view_local_jumps(*args, **kwargs):
    from .api import view_local_jumps as _view_local_jumps

    return _view_local_jumps(*args, **kwargs)


def setup(*args, **kwargs):
    from .api import setup as _setup

    return _setup(*args, **kwargs)


def main(*args, **kwargs):
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main", "setup", "view_jumps", "view_local_jumps"]
