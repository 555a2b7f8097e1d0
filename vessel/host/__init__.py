"""Editor host interface and the bundled in-memory host."""

from .memory import MemoryHost
from .protocol import BACK, FORWARD, EditorHost, HighlightSpan, RawJump

__all__ = [
    "BACK",
    "FORWARD",
    "EditorHost",
    "HighlightSpan",
    "MemoryHost",
    "RawJump",
]
