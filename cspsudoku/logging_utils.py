"""Logging setup shared by the cspsudoku package."""

from __future__ import annotations

import logging

LOGGER_NAME = "cspsudoku"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return a logger in the package hierarchy.

    Pass a module's ``__name__`` to get a child logger. The first call
    attaches a stream handler to the package logger so that messages show
    up on the console. Level defaults to WARNING; the CLI raises it with
    ``set_level``.
    """
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    return logging.getLogger(name)


def set_level(level: int) -> None:
    get_logger().setLevel(level)
