"""Information about the kernel random pool, under ``/proc/sys/kernel/random``."""

from __future__ import annotations

from .procfile import NotFoundError, read_value, write_value

_ROOT = "kernel/random"


def entropy_avail() -> int:
    """Available entropy in bits, between 0 and 4096."""
    return read_value(f"{_ROOT}/entropy_avail", int)


def poolsize() -> int:
    """Size of the entropy pool in bits."""
    return read_value(f"{_ROOT}/poolsize", int)


def read_wakeup_threshold() -> int:
    """Entropy bits needed to wake readers of /dev/random.

    Falls back to ``write_wakeup_threshold`` when the read threshold file is absent.
    """
    try:
        return read_value(f"{_ROOT}/read_wakeup_threshold", int)
    except NotFoundError:
        return read_value(f"{_ROOT}/write_wakeup_threshold", int)


def write_wakeup_threshold(new_value: int) -> None:
    """Set the entropy bits below which writers to /dev/random are woken."""
    write_value(f"{_ROOT}/write_wakeup_threshold", new_value)


def uuid() -> str:
    """A fresh random 128-bit UUID."""
    return read_value(f"{_ROOT}/uuid", str)


def boot_id() -> str:
    """The 128-bit UUID generated at boot."""
    return read_value(f"{_ROOT}/boot_id", str)