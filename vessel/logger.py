"""Fire-and-forget user-facing warnings and errors."""

from __future__ import annotations

import logging

logger = logging.getLogger("vessel")
logger.addHandler(logging.NullHandler())


def warn(msg: str, *args: object) -> None:
    logger.warning(msg, *args)


def err(msg: str, *args: object) -> None:
    logger.error(msg, *args)
