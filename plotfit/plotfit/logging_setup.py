"""Process-wide logging configuration for the Streamlit app."""
from __future__ import annotations

import logging

from .constants import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure root logging once and return the package logger.

    Streamlit reruns the app script on every interaction; ``basicConfig`` is a
    no-op when the root logger already has handlers, so repeated calls are safe.
    """
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logger = logging.getLogger("plotfit")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger


__all__ = ["configure_logging"]
