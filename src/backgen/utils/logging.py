"""Logging utilities for backgen.

All submodules log through the single ``backgen`` logger.  By default the
logger is silent (a ``NullHandler`` is installed); front ends enable output
with :func:`init_logging`.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("backgen")
logger.addHandler(logging.NullHandler())

_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_FMT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def configure_logging(enabled: bool = True, level: int = logging.WARNING) -> None:
    """Replace the handlers of the ``backgen`` logger.

    With ``enabled`` a timestamped ``StreamHandler`` on stderr reports records
    from ``level`` up; otherwise every record is dropped.
    """
    logger.handlers.clear()
    if enabled:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FMT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(level)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)


def init_logging(level: int | str | None = None) -> None:
    """Enable output of the ``backgen`` logger.

    Accepts a numeric level or one of ``none``/``error``/``warning``/``info``/
    ``debug``; ``none`` silences the logger.  Repeated calls only change the
    level.
    """
    if isinstance(level, str) and level.strip().lower() == "none":
        configure_logging(enabled=False)
        return
    if level is None or isinstance(level, str):
        lvl = _LEVEL_MAP.get((level or "").strip().lower(), logging.WARNING)
    else:
        lvl = int(level)

    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        logger.setLevel(lvl)
    else:
        configure_logging(enabled=True, level=lvl)


__all__ = ["logger", "configure_logging", "init_logging"]
