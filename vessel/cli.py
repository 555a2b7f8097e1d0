"""Command-line front door for vessel.

Loads a jump list captured from an editor as JSON, rebuilds it in an
in-memory host backed by the files on disk and prints the rendered list.

Capture format::

    {
      "jumplist": [{"bufnr": 1, "lnum": 10, "col": 0}, ...],
      "curpos": 3,
      "buffers": {"1": "src/main.py"},
      "bufnr": 1
    }

``jumplist``/``curpos`` are what ``getjumplist()`` returns; ``bufnr`` is the
buffer the list is shown for (used by ``--local``).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import api
from . import config as vessel_config
from .ansi import colorize_line
from .host.memory import MemoryHost
from .host.protocol import RawJump

# host buffer numbers start at 1
MISSING_BUFNR = 0


def _int_field(item: dict, key: str) -> int:
    value = item.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"jump field {key!r} must be an integer")
    return value


def build_host(capture: dict, base_dir: Path) -> MemoryHost:
    """Rebuild the captured window, buffers and jump list in a ``MemoryHost``."""
    buffers = capture.get("buffers", {})
    raw_jumps = capture.get("jumplist", [])
    if not isinstance(buffers, dict) or not isinstance(raw_jumps, list):
        raise ValueError("capture needs a 'buffers' object and a 'jumplist' array")

    host = MemoryHost()
    bufnrs: dict[int, int] = {}
    for key, name in buffers.items():
        if not isinstance(name, str):
            raise ValueError(f"buffer {key} path must be a string")
        path = Path(name).expanduser()
        if not path.is_absolute():
            path = base_dir / path
        bufnrs[int(key)] = host.open_file(path)

    jumps: list[RawJump] = []
    for item in raw_jumps:
        if not isinstance(item, dict):
            raise ValueError("jumplist items must be objects")
        bufnr = bufnrs.get(_int_field(item, "bufnr"), MISSING_BUFNR)
        jumps.append(RawJump(bufnr=bufnr, lnum=_int_field(item, "lnum"), col=_int_field(item, "col")))

    current = capture.get("bufnr")
    current_bufnr = bufnrs.get(current) if isinstance(current, int) else None
    if current_bufnr is None:
        current_bufnr = next(iter(bufnrs.values()), None)
    if current_bufnr is None:
        current_bufnr = host.add_buffer("", lines=[])

    winid = host.new_window(current_bufnr)
    curpos = capture.get("curpos")
    host.set_jumplist(winid, jumps, curpos if isinstance(curpos, int) and not isinstance(curpos, bool) else None)
    return host


def render_capture(capture: dict, base_dir: Path, opts: dict, *, local: bool, no_color: bool) -> str | None:
    """Render the captured jump list; ``None`` when rendering failed."""
    host = build_host(capture, base_dir)
    view = api.view_local_jumps(host, opts) if local else api.view_jumps(host, opts)
    if view.winid not in host.windows:
        return None

    spans_by_line: dict[int, list] = {}
    for key, items in host.highlights.items():
        if key[0] != view.winid:
            continue
        for lnum, span in items:
            spans_by_line.setdefault(lnum, []).append(span)

    out: list[str] = []
    for lnum, line in enumerate(host.lines(view.winid), start=1):
        out.append(line if no_color else colorize_line(line, spans_by_line.get(lnum, [])))
        out.append("\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the rendered jump list."""
    parser = argparse.ArgumentParser(description="Render an editor jump list capture.")
    parser.add_argument("capture", help="Path to a JSON jump list capture.")
    parser.add_argument("--local", action="store_true", help="Only show jumps in the captured current buffer.")
    parser.add_argument("--real-positions", action="store_true", help="Show real jump list distances.")
    parser.add_argument("--all-lines", action="store_true", help="Keep jumps to blank lines.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="vessel: %(message)s")

    capture_path = Path(args.capture)
    try:
        capture = json.loads(capture_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Cannot read capture {capture_path}: {exc}") from exc
    if not isinstance(capture, dict):
        raise SystemExit(f"Capture must be a JSON object: {capture_path}")

    jumps_opts: dict[str, object] = {}
    if args.real_positions:
        jumps_opts["real_positions"] = True
    if args.all_lines:
        jumps_opts["filter_empty_lines"] = False
    opts: dict[str, object] = {"jumps": jumps_opts}

    vessel_config.load()
    no_color = args.no_color or not sys.stdout.isatty()
    try:
        rendered = render_capture(capture, capture_path.parent, opts, local=args.local, no_color=no_color)
    except ValueError as exc:
        raise SystemExit(f"Invalid capture {capture_path}: {exc}") from exc
    if rendered is None:
        raise SystemExit(1)
    sys.stdout.write(rendered)
