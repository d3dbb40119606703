# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

from ._emitter import DelayedEmitter
from ._entrypoint import EntryPoint
from ._settings import DelaySettings
from ._version import __version__
from .exceptions import UsageError

__all__ = ["DelayedEmitter", "DelaySettings", "EntryPoint", "UsageError", "__version__"]
