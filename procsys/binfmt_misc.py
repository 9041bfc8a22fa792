"""Registered miscellaneous binary formats, under ``/proc/sys/fs/binfmt_misc``."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path

from . import procfile
from .procfile import (
    NotFoundError,
    ParseError,
    PermissionDeniedError,
    ProcError,
    read_file,
    read_value,
)

_HEX = re.compile(r"[0-9a-fA-F]*")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_SKIPPED = frozenset({"status", "register"})


def enabled() -> bool:
    """True if the miscellaneous binary formats system is enabled."""
    return read_value("fs/binfmt_misc/status", str) == "enabled"


def hex_to_bytes(hex_string: str) -> bytes:
    """Decode a string of hex digit pairs."""
    if len(hex_string) % 2:
        raise ParseError(f"Hex string {hex_string!r} has non-even length")
    if not _HEX.fullmatch(hex_string):
        raise ParseError(f"Hex string {hex_string!r} holds non-hex characters")
    return bytes.fromhex(hex_string)


class BinFmtFlags(enum.IntFlag):
    """Key flags of a binary format entry."""

    P = 0x01  # preserve argv[0]
    O = 0x02  # open binary  # noqa: E741
    C = 0x04  # credentials of the binary
    F = 0x08  # fix binary

    @classmethod
    def parse(cls, text: str) -> BinFmtFlags:
        """Collect the flag letters found in ``text``, ignoring any others."""
        flags = cls(0)
        for char in text:
            if char in cls.__members__:
                flags |= cls[char]
        return flags


@dataclass(frozen=True)
class BinFmtExtension:
    """An entry matched by file extension (without the period)."""

    extension: str


@dataclass(frozen=True)
class BinFmtMagic:
    """An entry matched by a magic byte string at an offset."""

    offset: int
    magic: bytes
    mask: bytes


@dataclass(frozen=True)
class BinFmtEntry:
    """A registered binary format."""

    name: str
    enabled: bool
    interpreter: str
    flags: BinFmtFlags
    data: BinFmtExtension | BinFmtMagic

    @classmethod
    def from_string(cls, name: str, data: str) -> BinFmtEntry:
        """Parse the contents of one entry file."""
        is_enabled = False
        interpreter = ""
        extension: str | None = None
        offset = 0
        magic = b""
        mask = b""
        flags = BinFmtFlags(0)

        for line in data.splitlines():
            if line == "enabled":
                is_enabled = True
            elif line.startswith("interpreter "):
                interpreter = line[len("interpreter "):]
            elif line.startswith("flags:"):
                flags = BinFmtFlags.parse(line[len("flags:"):])
            elif line.startswith("extension ."):
                extension = line[len("extension ."):]
            elif line.startswith("offset "):
                offset = _parse_offset(line[len("offset "):])
            elif line.startswith("magic "):
                magic = hex_to_bytes(line[len("magic "):])
            elif line.startswith("mask "):
                mask = hex_to_bytes(line[len("mask "):])

        if magic and not mask:
            mask = b"\xff" * len(magic)

        payload: BinFmtExtension | BinFmtMagic
        if extension is not None:
            payload = BinFmtExtension(extension)
        else:
            payload = BinFmtMagic(offset=offset, magic=magic, mask=mask)
        return cls(name, is_enabled, interpreter, flags, payload)


def _parse_offset(text: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > 0xFF:
        raise ParseError(f"Failed to parse offset {text!r}")
    return int(text)


def list_entries(root: os.PathLike | str | None = None) -> list[BinFmtEntry]:
    """All registered entries, ordered by name."""
    directory = Path(root) if root is not None else procfile.SYS_ROOT / "fs" / "binfmt_misc"
    try:
        names = sorted(child.name for child in directory.iterdir())
    except FileNotFoundError as error:
        raise NotFoundError(f"{directory} not found", directory) from error
    except PermissionError as error:
        raise PermissionDeniedError(f"permission denied for {directory}", directory) from error
    except OSError as error:
        raise ProcError(f"cannot access {directory}: {error}", directory) from error

    return [
        BinFmtEntry.from_string(name, read_file(directory / name))
        for name in names
        if name not in _SKIPPED
    ]