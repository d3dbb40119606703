# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

from __future__ import annotations

import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from typing import List, NoReturn, Optional

import yaml

from ._emitter import DelayedEmitter
from ._settings import DelaySettings
from ._utils._constants import DEFAULT_DELAY
from ._utils._logging import init_logging
from ._version import __version__
from .exceptions import UsageError

__all__ = ["EntryPoint"]

_CLI_HELP_TEXT = {
    "num_lines": "Number of full lines to write before and after the delayed line.",
    "delay": (
        "Seconds to pause before writing the newline of the delayed line. "
        f"Default is {DEFAULT_DELAY}."
    ),
    "show_config": "Prints the effective settings as YAML, then the program exits.",
    "verbose": "Log progress to stderr. Repeat for debug output.",
}

_logger = logging.getLogger(__name__)


class _ParsedArgs(Namespace):
    num_lines: Optional[str]
    delay: Optional[str]
    show_config: bool
    verbose: int


class _UsageArgumentParser(ArgumentParser):
    """
    ArgumentParser that raises UsageError instead of printing its own message and exiting with
    status 2.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


class EntryPoint:
    """
    The main entry point of the delay fixture.
    """

    def __init__(self, prog: str = "delay") -> None:
        self.prog = prog

    @property
    def usage(self) -> str:
        return f"Delay usage:\n{self.prog} <num lines> [delay (default: {DEFAULT_DELAY}s)]"

    def start(self, argv: Optional[List[str]] = None) -> None:
        """
        Parses the command line and runs the emitter. Usage errors print the usage text and exit
        with status 1 before anything else is written to stdout.

        Args:
            argv (List[str], optional): Arguments without the program name. Defaults to
                sys.argv[1:].
        """
        parser = self._build_argparser()
        handler: Optional[logging.Handler] = None
        try:
            try:
                parsed_args = parser.parse_intermixed_args(
                    sys.argv[1:] if argv is None else argv, _ParsedArgs()
                )
                handler = init_logging(__package__, verbosity=parsed_args.verbose)
                settings = DelaySettings.from_args(parsed_args.num_lines, parsed_args.delay)
            except UsageError as e:
                _logger.debug(f"Usage error: {e}")
                self._exit_with_usage()

            _logger.debug(f"Running with num_lines={settings.num_lines} delay={settings.delay}s")

            if parsed_args.show_config:
                return print(yaml.dump(settings.to_dict(), indent=2))

            self._handle_emit(settings)
        finally:
            if handler is not None:
                logging.getLogger(__package__).removeHandler(handler)

    def _handle_emit(self, settings: DelaySettings) -> None:
        try:
            DelayedEmitter(settings).emit()
        except BrokenPipeError:
            _logger.debug("stdout was closed by the reader, stopping")
            # Point stdout at devnull so the interpreter's final flush doesn't fail again
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(1)

    def _exit_with_usage(self) -> NoReturn:
        print(self.usage)
        sys.exit(1)

    def _build_argparser(self) -> ArgumentParser:
        parser = _UsageArgumentParser(
            prog=self.prog,
            add_help=True,
            usage=f"{self.prog} [num_lines] [delay]",
        )
        parser.add_argument("num_lines", nargs="?", default=None, help=_CLI_HELP_TEXT["num_lines"])
        parser.add_argument("delay", nargs="?", default=None, help=_CLI_HELP_TEXT["delay"])
        parser.add_argument(
            "--show-config", action="store_true", default=False, help=_CLI_HELP_TEXT["show_config"]
        )
        parser.add_argument(
            "-v", "--verbose", action="count", default=0, help=_CLI_HELP_TEXT["verbose"]
        )
        parser.add_argument(
            "-V", "--version", action="version", version=f"This is delay v{__version__}"
        )
        return parser
