"""Jump list reconstruction, rendering and actions."""

from .jump import Jump, RealCount, real_count
from .view import Jumplist

__all__ = ["Jump", "Jumplist", "RealCount", "real_count"]
