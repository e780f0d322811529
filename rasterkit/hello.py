"""A greeting printer."""

from __future__ import annotations

import sys
from typing import TextIO

GREETING = "Hello, World!"


def hello(stream: TextIO | None = None) -> int:
    """Print the greeting; return 0 on success and 1 if the stream fails."""
    out = sys.stdout if stream is None else stream
    try:
        out.write(GREETING + "\n")
        out.flush()
    except (OSError, ValueError):
        return 1
    return 0


def main(argv=None) -> int:
    """Command entry point; returns the process exit status."""
    return hello()


if __name__ == "__main__":
    raise SystemExit(main())