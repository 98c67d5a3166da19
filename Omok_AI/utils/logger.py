"""Lightweight logging utilities for matches and debugging."""

import logging

LOGGER_NAME = "Omok_AI"
_FORMAT = "[%(asctime)s] %(message)s"
_DATEFMT = "%H:%M:%S"


def get_logger(name=None):
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure(level=logging.INFO):
    """Attach a single stream handler to the package logger."""
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
        root.addHandler(handler)
    root.setLevel(level)
    return root


def log_event(message):
    get_logger("game").info(message)
