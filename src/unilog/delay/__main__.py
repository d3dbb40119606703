# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.

from ._entrypoint import EntryPoint


def main(prog: str = "unilog-delay") -> None:
    EntryPoint(prog=prog).start()


if __name__ == "__main__":
    main(prog="python -m unilog.delay")
