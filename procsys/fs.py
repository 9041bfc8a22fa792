"""Kernel variables related to filesystems, under ``/proc/sys/fs``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta

from .procfile import ParseError, read_file, read_value, write_value

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _unsigned(text: str, bits: int, what: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseError(f"Failed to parse {what} from {text!r}")
    value = int(text)
    if value >= 1 << bits:
        raise ParseError(f"{what} value {text!r} is out of range")
    return value


def _fields(text: str, names: tuple[str, ...], bits: int) -> list[int]:
    parts = text.split()
    if len(parts) < len(names):
        raise ParseError(f"Missing {names[len(parts)]}")
    return [_unsigned(part, bits, name) for name, part in zip(names, parts)]


@dataclass(frozen=True)
class DEntryState:
    """Status of the directory cache (dcache)."""

    nr_dentry: int
    nr_unused: int
    age_limit: timedelta
    want_pages: bool

    @classmethod
    def parse(cls, text: str) -> DEntryState:
        """Parse the whitespace separated contents of ``fs/dentry-state``."""
        nr_dentry, nr_unused, age_limit, want_pages = _fields(
            text, ("nr_dentry", "nr_unused", "age_limit", "want_pages"), 32
        )
        return cls(
            nr_dentry=nr_dentry,
            nr_unused=nr_unused,
            age_limit=timedelta(seconds=age_limit),
            want_pages=want_pages != 0,
        )


def dentry_state() -> DEntryState:
    """Current status of the directory cache."""
    return DEntryState.parse(read_file("fs/dentry-state"))


def file_max() -> int:
    """System-wide limit on the number of open files for all processes."""
    return read_value("fs/file-max", int)


def set_file_max(maximum: int) -> None:
    """Set the system-wide limit on the number of open files."""
    write_value("fs/file-max", maximum)


@dataclass(frozen=True)
class FileState:
    """Counts of file handles, from ``fs/file-nr``."""

    allocated: int
    free: int
    max: int

    @classmethod
    def parse(cls, text: str) -> FileState:
        """Parse the whitespace separated contents of ``fs/file-nr``."""
        allocated, free, maximum = _fields(text, ("allocated", "free", "max"), 64)
        return cls(allocated=allocated, free=free, max=maximum)


def file_nr() -> FileState:
    """Current counts of allocated, free and maximum file handles."""
    return FileState.parse(read_file("fs/file-nr"))