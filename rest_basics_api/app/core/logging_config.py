"""
Logging configuration for the API process.

``setup_logging`` is called by ``create_app`` and by ``run.py``.  It
installs a console handler, plus a UTF‑8 file handler when ``LOG_FILE``
is set, on the root logger.  When something else (uvicorn, pytest) has
already configured the root logger it leaves it alone.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; default ``INFO``."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Level name, case insensitive.  Unknown names mean ``INFO``.
    logfile : Optional[str]
        Also write records to this file.  Relative paths are resolved
        against the current working directory.
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=_handlers(logfile),
    )
