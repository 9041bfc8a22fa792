"""Reading and writing the small text files under ``/proc/sys``."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")

#: Directory that relative paths given to this module are resolved against.
SYS_ROOT = Path("/proc/sys")


class ProcError(Exception):
    """Base class for every error raised while accessing a kernel variable."""

    def __init__(self, message: str, path: os.PathLike | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class NotFoundError(ProcError):
    """The kernel variable does not exist on this system."""


class PermissionDeniedError(ProcError):
    """The caller is not allowed to read or change the kernel variable."""


class ParseError(ProcError, ValueError):
    """The contents of a kernel variable could not be understood."""


def _resolve(path: os.PathLike | str) -> Path:
    candidate = Path(path)
    return candidate if candidate.is_absolute() else SYS_ROOT / candidate


def _translate(error: OSError, path: Path) -> ProcError:
    if isinstance(error, FileNotFoundError):
        return NotFoundError(f"{path} not found", path)
    if isinstance(error, PermissionError):
        return PermissionDeniedError(f"permission denied for {path}", path)
    return ProcError(f"cannot access {path}: {error}", path)


def read_file(path: os.PathLike | str) -> str:
    """Return the whole text of a file; relative paths are taken under SYS_ROOT."""
    target = _resolve(path)
    try:
        return target.read_text()
    except OSError as error:
        raise _translate(error, target) from error


def read_value(path: os.PathLike | str, parse: Callable[[str], T]) -> T:
    """Read a file, strip surrounding whitespace and convert it with ``parse``."""
    text = read_file(path).strip()
    try:
        return parse(text)
    except ParseError:
        raise
    except ValueError as error:
        raise ParseError(f"cannot parse {text!r}: {error}", _resolve(path)) from error


def write_value(path: os.PathLike | str, value: object) -> None:
    """Write the string form of ``value`` to a file."""
    target = _resolve(path)
    try:
        with target.open("w") as handle:
            handle.write(str(value))
    except OSError as error:
        raise _translate(error, target) from error