"""Runtime settings for tblpeek, seeded from the environment."""
import os

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"Error: {name} must be an integer, got '{val}'.")


VERBOSE = _env_flag("TBLPEEK_VERBOSE")

# Digits shown for percentages in the top-N category tables.
FLOAT_PRECISION = _env_int("TBLPEEK_FLOAT_PRECISION", 1)


def set_verbose(flag: bool = True) -> None:
    global VERBOSE
    VERBOSE = bool(flag)
