"""Send whatever a report prints to a text file instead of the console."""
from contextlib import redirect_stdout
from enum import Enum
from typing import Callable, Union

from .utils import verbose


class WriteMode(str, Enum):
    APPEND = "a"
    TRUNCATE = "w"


def _parse_mode(mode: Union[str, WriteMode]) -> WriteMode:
    try:
        return WriteMode(mode)
    except ValueError:
        choices = [m.value for m in WriteMode]
        raise ValueError(f"Error: Invalid write mode '{mode}'. Use one of {choices}.")


def append_output(f: Callable[[], object], filename, mode: Union[str, WriteMode] = "a",
                  prepend: str = "", append: str = "") -> None:
    """
    Run ``f`` with stdout pointed at ``filename``.

    The file receives ``prepend`` and a newline, everything ``f`` prints, then
    ``append`` and a newline. ``mode`` is "a" (append) or "w" (create/truncate).
    The file is closed and stdout restored even when ``f`` raises; the
    exception is re-raised unchanged.
    """
    write_mode = _parse_mode(mode)
    verbose(f"Writing output of {getattr(f, '__name__', f)!r} to '{filename}' (mode '{write_mode.value}').")
    with open(filename, write_mode.value, encoding="utf-8") as io, redirect_stdout(io):
        print(prepend)
        f()
        print(append)
