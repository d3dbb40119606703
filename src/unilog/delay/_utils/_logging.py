# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
from __future__ import annotations

import logging
import sys
from typing import IO, Optional

from ._constants import _LOG_FORMAT

_VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def level_for_verbosity(verbosity: int) -> int:
    """
    Maps the number of -v flags given on the command line to a logging level.
    Anything past the last known level is clamped to DEBUG.
    """
    verbosity = max(verbosity, 0)
    return _VERBOSITY_LEVELS[min(verbosity, len(_VERBOSITY_LEVELS) - 1)]


def init_logging(
    package: str, *, verbosity: int = 0, stream: Optional[IO[str]] = None
) -> logging.StreamHandler:
    """
    Attaches a stream handler to the package logger and sets its level.

    Args:
        package (str): Name of the logger to configure.
        verbosity (int): Number of -v flags. 0 is WARNING, 1 is INFO, 2 or more is DEBUG.
        stream (IO[str], optional): Where log records go. Defaults to sys.stderr, since stdout
            carries the fixture's output.

    Returns:
        logging.StreamHandler: The handler that was attached.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    package_logger = logging.getLogger(package)
    package_logger.setLevel(level_for_verbosity(verbosity))
    package_logger.addHandler(handler)

    return handler
