"""Logging setup for the HTTP entrypoint.

The library itself only creates module loggers; handlers are installed here.
"""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "local_rag.stdout"


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a single stdout handler to the `local_rag` logger."""
    package_logger = logging.getLogger("local_rag")
    package_logger.setLevel(level)

    if any(handler.get_name() == _HANDLER_NAME for handler in package_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(handler)
