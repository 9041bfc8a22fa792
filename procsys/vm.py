"""Virtual memory tuning under ``/proc/sys/vm``."""

from __future__ import annotations

import enum
import re

from .procfile import ParseError, read_value, write_value

_INTEGER = re.compile(r"[+-]?[0-9]+")


def admin_reserve_kbytes() -> int:
    """Free memory, in kilobytes, reserved for users with CAP_SYS_ADMIN."""
    return read_value("vm/admin_reserve_kbytes", int)


def set_admin_reserve_kbytes(kbytes: int) -> None:
    """Set the free memory, in kilobytes, reserved for users with CAP_SYS_ADMIN."""
    write_value("vm/admin_reserve_kbytes", kbytes)


def compact_memory() -> None:
    """Compact all zones so that free memory is in contiguous blocks where possible."""
    write_value("vm/compact_memory", 1)


class DropCache(enum.IntEnum):
    """What ``vm/drop_caches`` should release from memory."""

    DEFAULT = 0
    PAGE_CACHE = 1
    INODES = 2
    ALL = 3
    DISABLE = 4

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, text: str) -> DropCache:
        """Parse the numeric form of a drop cache setting."""
        if not _INTEGER.fullmatch(text):
            raise ParseError("Fail to parse drop cache")
        try:
            return cls(int(text))
        except ValueError as error:
            raise ParseError("Unknown drop cache value") from error


def drop_caches(drop: DropCache) -> None:
    """Ask the kernel to drop clean caches, dentries and inodes from memory."""
    write_value("vm/drop_caches", DropCache(drop))


def max_map_count() -> int:
    """Maximum number of memory map areas a process may have."""
    return read_value("vm/max_map_count", int)


def set_max_map_count(count: int) -> None:
    """Set the maximum number of memory map areas a process may have."""
    write_value("vm/max_map_count", count)