"""Logging setup for applications embedding localdate."""

from __future__ import annotations

import logging
from typing import Final

LIBRARY_LOGGER: Final[str] = "localdate"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    *,
    level: int = logging.INFO,
    library_level: int | None = None,
    force: bool = False,
) -> None:
    """Attach a root handler and set the level of the ``localdate`` loggers.

    Overflow saturation warnings come from ``localdate.domain``; scan rejections
    and dialect fallbacks are debug records from ``localdate.adapters``. Use
    ``library_level`` to see those without lowering the root level.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    logging.getLogger(LIBRARY_LOGGER).setLevel(level if library_level is None else library_level)
