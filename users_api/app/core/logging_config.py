"""
Logging configuration for the Users API.

``setup_logging`` attaches a console handler (and, when ``LOG_FILE`` is
set, a file handler) to the root logger.  The handlers are named
``users_api.*``; a second call finds them and leaves the configuration
alone, so building several apps in one process (as the test suite does)
does not duplicate output.  Handlers installed by other tools, such as
uvicorn or pytest, are not touched.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_PREFIX = "users_api."


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    handlers[0].set_name(HANDLER_PREFIX + "console")
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def is_configured(logger: Optional[logging.Logger] = None) -> bool:
    """Whether ``setup_logging`` already installed its handlers."""
    logger = logger or logging.getLogger()
    return any((handler.get_name() or "").startswith(HANDLER_PREFIX) for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    root = logging.getLogger()
    if is_configured(root):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in _build_handlers(logfile):
        root.addHandler(handler)
