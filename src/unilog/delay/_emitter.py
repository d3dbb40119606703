# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

"""Module for the DelayedEmitter class"""
from __future__ import annotations

import logging
import sys
import time
from typing import IO, Callable, Optional

from ._settings import DelaySettings

__all__ = ["DelayedEmitter"]

_logger = logging.getLogger(__name__)


class DelayedEmitter:
    """
    Writes the message in three phases: num_lines full copies, one copy written a character at a
    time with a pause before every newline, then num_lines full copies again.

    Every write is flushed before the next one starts so a reader on the other end of a pipe sees
    exactly what has been written so far.
    """

    def __init__(
        self,
        settings: DelaySettings,
        *,
        stream: Optional[IO[bytes]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        """
        Args:
            settings (DelaySettings): The validated settings to emit with.
            stream (IO[bytes], optional): Binary stream to write to. Defaults to the binary
                buffer behind sys.stdout.
            sleep (Callable[[float], None], optional): Function used to pause. Defaults to
                time.sleep.
        """
        self._settings = settings
        self._stream = stream if stream is not None else sys.stdout.buffer
        self._sleep = sleep if sleep is not None else time.sleep

    @property
    def settings(self) -> DelaySettings:
        return self._settings

    def emit(self) -> None:
        """Runs all three phases to completion."""
        _logger.info(f"Writing {self._settings.num_lines} lines before the delayed line")
        self._write_lines()

        _logger.info("Writing the delayed line one character at a time")
        self._write_slowly()

        _logger.info(f"Writing {self._settings.num_lines} lines after the delayed line")
        self._write_lines()

        _logger.debug("Emission complete")

    def _write(self, data: bytes) -> None:
        self._stream.write(data)
        self._stream.flush()

    def _write_lines(self) -> None:
        encoded = self._settings.message.encode("utf-8")
        for _ in range(self._settings.num_lines):
            self._write(encoded)

    def _write_slowly(self) -> None:
        for char in self._settings.message:
            if char == "\n":
                _logger.info(f"Sleeping {self._settings.delay}s before writing the newline")
                self._sleep(self._settings.delay)
            self._write(char.encode("utf-8"))
