"""The epoll limit under ``/proc/sys/fs/epoll``."""

from __future__ import annotations

from .procfile import read_value, write_value

_PATH = "fs/epoll/max_user_watches"


def max_user_watches() -> int:
    """Limit on file descriptors a user can register across all epoll instances."""
    return read_value(_PATH, int)


def set_max_user_watches(val: int) -> None:
    """Set the per-user limit on registered epoll file descriptors."""
    write_value(_PATH, val)