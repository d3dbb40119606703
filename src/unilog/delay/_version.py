# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

__version__ = "0.1.0"
