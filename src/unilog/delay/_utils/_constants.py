# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

DEFAULT_NUM_LINES = 5
DEFAULT_DELAY = 5
DEFAULT_MESSAGE = "this is a default (sheddableplus)\n"

# Upper bound for num_lines and delay, the signed 32-bit int range
MAX_VALUE = 2**31 - 1

_LOG_FORMAT = "%(levelname)s: %(message)s"
