from __future__ import annotations

import logging

from casedash.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.
    Streamlit re-executes the page script on every event, so this only adds
    the handler once and otherwise just updates the level.
    """
    pkg_logger = logging.getLogger("casedash")
    pkg_logger.setLevel(level or LOG_LEVEL)
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        pkg_logger.addHandler(handler)
    return pkg_logger
