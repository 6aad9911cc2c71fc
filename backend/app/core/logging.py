"""Application-wide logging setup.

Every module asks for a named logger::

    from app.core.logging import get_logger
    logger = get_logger(__name__)

``setup_logging`` installs a single stdout handler on the root logger. It is
safe to call more than once (uvicorn --reload, test app factories).
"""

import logging
import sys

_FMT = "%(asctime)s [%(levelname)-5s] %(name)s.%(funcName)s:%(lineno)d - %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"

_APP_HANDLER_MARKER = "_is_app_log_handler"


def setup_logging(level: str = "INFO") -> None:
    """Register the app handler on the root logger (idempotent)."""
    root = logging.getLogger()
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root.setLevel(resolved)
    for handler in root.handlers:
        if getattr(handler, _APP_HANDLER_MARKER, False):
            handler.setLevel(resolved)
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FMT, datefmt=_DATE_FMT))
    handler.setLevel(resolved)
    setattr(handler, _APP_HANDLER_MARKER, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger."""
    return logging.getLogger(name)
