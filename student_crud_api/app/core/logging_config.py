"""
Logging setup for the Student CRUD API.

``setup_logging`` is called by ``create_app`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Records go to the console and,
when a log file is configured, to that file as well.  Store mutations
are logged at DEBUG, so they only show up with ``LOG_LEVEL=DEBUG``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """Attach the API's handlers to ``logger`` (the root logger by default).

    A logger that already has handlers is left alone: uvicorn, pytest or
    an earlier ``create_app`` call may have configured it.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; case insensitive, unknown names
        mean ``INFO``.
    logfile : Optional[str]
        File to append records to, resolved against the working
        directory.  No file handler when omitted.
    logger : Optional[logging.Logger]
        Logger to configure.

    Returns
    -------
    logging.Logger
        The logger that was (or already had been) configured.
    """
    target = logger if logger is not None else logging.getLogger()
    if target.handlers:
        return target

    target.setLevel(_resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        target.addHandler(handler)
    return target
