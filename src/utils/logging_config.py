"""Structured logger setup shared across Lambdas."""

import logging
import sys
from typing import List

from pythonjsonlogger.json import JsonFormatter


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Every record is a single line on stdout carrying ``timestamp``, ``level``
    and ``message`` plus whatever was passed through ``extra=``. The Lambda
    runtime forwards stdout to CloudWatch as-is.
    """
    logger = logging.getLogger(name)
    if json_handlers(logger):
        return logger

    handler = logging.StreamHandler(sys.stdout)
    formatter = JsonFormatter(
        "%(levelname)s %(message)s",
        rename_fields={"levelname": "level"},
        timestamp=True,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def json_handlers(logger: logging.Logger) -> List[logging.StreamHandler]:
    """Handlers installed by get_logger, ignoring any added by test runners."""
    return [
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and isinstance(handler.formatter, JsonFormatter)
    ]
