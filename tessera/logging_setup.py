"""
Configures logging for the Tessera engine.

Engine and session modules log through module-level loggers; this sets
up the root logger once for the CLI and the API app. The level comes
from the TESSERA_LOG_LEVEL environment variable unless given.
"""

import logging
import os
import sys

__all__ = ["setup_logging"]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
HANDLER_NAME = "tessera"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger with a console handler."""
    level_name = (level or os.getenv("TESSERA_LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if not any(h.get_name() == HANDLER_NAME for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root_logger.addHandler(handler)
