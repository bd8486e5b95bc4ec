"""Minimal printf-style informational logging to standard output."""

from __future__ import annotations

import sys


def info(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to standard output.

    The message is expected to end with a newline, as none is added.
    """
    sys.stdout.write(fmt % args)
    sys.stdout.flush()