"""Peek at the first or last lines of a text file."""
import os
from collections import deque
from typing import List, Tuple

from .utils import verbose, warn


def peek_lines(inputpath, filename, n: int = 10, rev: bool = False) -> List[Tuple[int, str]]:
    """
    Up to ``n`` (position, line) pairs from ``inputpath/filename``.

    Positions are 1-based. With ``rev`` the lines come from the end of the
    file, last line first, numbered from the end.
    """
    path = os.path.join(inputpath, filename)
    if n <= 0:
        return []
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        if rev:
            tail = deque((line.rstrip("\r\n") for line in fh), maxlen=n)
            lines = list(reversed(tail))
        else:
            lines = []
            for line in fh:
                lines.append(line.rstrip("\r\n"))
                if len(lines) == n:
                    break
    if len(lines) < n:
        warn(f"'{path}' has only {len(lines)} line(s); {n} requested.")
    verbose(f"Read {len(lines)} line(s) from '{path}'{' (from the end)' if rev else ''}.")
    return list(enumerate(lines, 1))


def peekfile(inputpath, filename, n: int = 10, rev: bool = False) -> None:
    """Print the first ``n`` lines of a text file, or the last ``n`` in reverse with ``rev``."""
    for i, line in peek_lines(inputpath, filename, n=n, rev=rev):
        print(f"{i}  {line}")
