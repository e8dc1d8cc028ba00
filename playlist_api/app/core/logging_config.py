"""
Logging set up from ``Settings``.

``setup_logging`` attaches a console handler and, when
``settings.log_file`` is set, a file handler to the root logger.  The
format, date format and level all come from the settings
(``LOG_FORMAT``, ``LOG_DATE_FORMAT``, ``LOG_LEVEL``).

Handlers installed here carry a ``playlist.`` name.  Calling
``setup_logging`` again replaces them instead of stacking duplicates,
and leaves handlers installed by others (pytest, uvicorn) alone.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

HANDLER_PREFIX = "playlist."


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> List[logging.Handler]:
    """Configure the root logger for the playlist service.

    Returns the handlers that were installed.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()

    root.setLevel(_resolve_level(settings.log_level))
    formatter = logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)

    console = logging.StreamHandler()
    console.set_name(HANDLER_PREFIX + "console")
    handlers: List[logging.Handler] = [console]

    if settings.log_file:
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return handlers
