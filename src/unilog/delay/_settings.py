# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

"""Module for the DelaySettings class"""
from __future__ import annotations

import dataclasses
from typing import Any, Dict, Optional

from ._utils._constants import DEFAULT_DELAY, DEFAULT_MESSAGE, DEFAULT_NUM_LINES, MAX_VALUE
from .exceptions import UsageError

__all__ = ["DelaySettings"]


def _parse_positive(name: str, value: Optional[str], default: int) -> int:
    if value is None:
        return default

    try:
        parsed = int(value)
    except ValueError:
        # Non-numeric input counts as zero
        parsed = 0

    if not 0 < parsed <= MAX_VALUE:
        raise UsageError(f"{name} must be an integer from 1 to {MAX_VALUE}, got {value!r}")
    return parsed


@dataclasses.dataclass(frozen=True)
class DelaySettings:
    """The validated settings for a single run of the fixture."""

    num_lines: int = DEFAULT_NUM_LINES
    delay: int = DEFAULT_DELAY
    message: str = DEFAULT_MESSAGE

    def __post_init__(self) -> None:
        for name in ("num_lines", "delay"):
            value = getattr(self, name)
            if not 0 < value <= MAX_VALUE:
                raise UsageError(f"{name} must be an integer from 1 to {MAX_VALUE}, got {value}")

    @classmethod
    def from_args(
        cls, num_lines: Optional[str] = None, delay: Optional[str] = None
    ) -> "DelaySettings":
        """
        Builds settings from raw command line values. None means the value was not given and
        the default is used.

        Raises:
            UsageError: If a value is not an integer from 1 to MAX_VALUE.
        """
        return cls(
            num_lines=_parse_positive("num_lines", num_lines, DEFAULT_NUM_LINES),
            delay=_parse_positive("delay", delay, DEFAULT_DELAY),
        )

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)
