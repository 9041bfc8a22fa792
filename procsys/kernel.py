"""Global kernel information and tuning under ``/proc/sys/kernel``."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from .procfile import ParseError, ProcError, read_value, write_value

#: Smallest value accepted by ``threads-max`` on Linux 4.1 or later.
THREADS_MIN = 20
#: Largest value accepted by ``threads-max`` on Linux 4.1 or later.
THREADS_MAX = 0x3FFF_FFFF

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _unsigned(text: str, bits: int, message: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseError(message)
    value = int(text)
    if value >= 1 << bits:
        raise ParseError(message)
    return value


@dataclass(frozen=True, order=True)
class Version:
    """A kernel version in major.minor.patch form."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for part in (self.major, self.minor, self.patch):
            if not 0 <= part <= 255:
                raise ValueError(f"version component {part} is out of range")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string; anything after the leading digits and dots is ignored."""
        match = re.match(r"[0-9.]*", text)
        parts = match.group(0).split(".")
        names = ("major", "minor", "patch")
        if len(parts) < 3:
            raise ParseError(f"Missing {names[len(parts)]} version component")
        values = [
            _unsigned(part, 8, f"Failed to parse {name} version")
            for name, part in zip(names, parts)
        ]
        return cls(*values)

    @classmethod
    def current(cls) -> Version:
        """Version of the running kernel, from ``kernel/osrelease``."""
        return read_value("kernel/osrelease", cls.parse)


def pid_max() -> int:
    """The maximum process ID number."""
    return read_value("kernel/pid_max", int)


@dataclass(frozen=True)
class SemaphoreLimits:
    """The System V semaphore limits from ``kernel/sem``."""

    semmsl: int
    semmns: int
    semopm: int
    semmni: int

    @classmethod
    def parse(cls, text: str) -> SemaphoreLimits:
        """Parse four whitespace separated numbers."""
        fields = text.split()
        names = ("SEMMSL", "SEMMNS", "SEMOPM", "SEMMNI")
        if len(fields) < len(names):
            raise ParseError(f"Missing {names[len(fields)]}")
        values = [
            _unsigned(value, 64, f"Failed to parse {name}")
            for name, value in zip(names, fields)
        ]
        return cls(*values)

    @classmethod
    def current(cls) -> SemaphoreLimits:
        """The limits currently in force."""
        return read_value("kernel/sem", cls.parse)


def shmall() -> int:
    """System-wide limit on the total number of pages of System V shared memory."""
    return read_value("kernel/shmall", int)


def shmmax() -> int:
    """Limit on the size of a System V shared memory segment."""
    return read_value("kernel/shmmax", int)


def set_shmmax(new_value: int) -> None:
    """Set the limit on the size of a System V shared memory segment."""
    write_value("kernel/shmmax", new_value)


def shmmni() -> int:
    """System-wide maximum number of System V shared memory segments."""
    return read_value("kernel/shmmni", int)


class AllowedFunctions(enum.IntFlag):
    """SysRq functions that may be enabled individually."""

    ENABLE_CONTROL_LOG_LEVEL = 2
    ENABLE_CONTROL_KEYBOARD = 4
    ENABLE_DEBUGGING_DUMPS = 8
    ENABLE_SYNC_COMMAND = 16
    ENABLE_REMOUNT_READ_ONLY = 32
    ENABLE_SIGNALING_PROCESSES = 64
    ALLOW_REBOOT_POWEROFF = 128
    ALLOW_NICING_REAL_TIME_TASKS = 256


_ALL_FUNCTIONS = 0
for _flag in AllowedFunctions:
    _ALL_FUNCTIONS |= _flag.value


class SysRqMode(enum.Enum):
    """How the SysRq key is configured."""

    DISABLE = "disable"
    ENABLE = "enable"
    ALLOWED_FUNCTIONS = "allowed_functions"


@dataclass(frozen=True)
class SysRq:
    """Functions allowed to be invoked by the SysRq key."""

    mode: SysRqMode
    allowed: AllowedFunctions = field(default=AllowedFunctions(0))

    @classmethod
    def parse(cls, text: str) -> SysRq:
        """Parse the numeric form used by ``kernel/sysrq``."""
        value = _unsigned(text.strip(), 16, f"Failed to parse sysrq value {text!r}")
        if value == 0:
            return cls(SysRqMode.DISABLE)
        if value == 1:
            return cls(SysRqMode.ENABLE)
        if value & ~_ALL_FUNCTIONS:
            raise ParseError("Invalid value")
        return cls(SysRqMode.ALLOWED_FUNCTIONS, AllowedFunctions(value))

    def to_number(self) -> int:
        """The numeric form written to ``kernel/sysrq``."""
        if self.mode is SysRqMode.DISABLE:
            return 0
        if self.mode is SysRqMode.ENABLE:
            return 1
        return int(self.allowed)


def sysrq() -> SysRq:
    """Functions currently allowed to be invoked by the SysRq key."""
    return read_value("kernel/sysrq", SysRq.parse)


def set_sysrq(new: SysRq) -> None:
    """Set the functions allowed to be invoked by the SysRq key."""
    write_value("kernel/sysrq", new.to_number())


def threads_max() -> int:
    """System-wide limit on the number of threads."""
    return read_value("kernel/threads-max", int)


def set_threads_max(new_limit: int) -> None:
    """Set the system-wide thread limit, checking its range on Linux 4.1 or later."""
    kernel = Version.current()
    if (
        kernel.major >= 4
        and kernel.minor >= 1
        and not THREADS_MIN <= new_limit <= THREADS_MAX
    ):
        raise ProcError(f"{new_limit} is outside the THREADS_MIN..=THREADS_MAX range")
    write_value("kernel/threads-max", new_limit)