# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

__all__ = ["UsageError"]


class UsageError(ValueError):
    """Raised when the fixture is invoked with an invalid argument count or value."""
