"""Limits of the in-kernel key management facility, under ``/proc/sys/kernel/keys``."""

from __future__ import annotations

from .procfile import read_value, write_value

_ROOT = "kernel/keys"


def gc_delay() -> int:
    """Seconds after which revoked and expired keys are garbage collected."""
    return read_value(f"{_ROOT}/gc_delay", int)


def persistent_keyring_expiry() -> int:
    """Seconds to which a persistent keyring's expiry timer is reset on access."""
    return read_value(f"{_ROOT}/persistent_keyring_expiry", int)


def maxbytes() -> int:
    """Maximum payload bytes a non-root user may hold in keys."""
    return read_value(f"{_ROOT}/maxbytes", int)


def set_maxbytes(nbytes: int) -> None:
    """Set the maximum payload bytes a non-root user may hold in keys."""
    write_value(f"{_ROOT}/maxbytes", nbytes)


def maxkeys() -> int:
    """Maximum number of keys a non-root user may own."""
    return read_value(f"{_ROOT}/maxkeys", int)


def set_maxkeys(keys: int) -> None:
    """Set the maximum number of keys a non-root user may own."""
    write_value(f"{_ROOT}/maxkeys", keys)


def root_maxbytes() -> int:
    """Maximum payload bytes the root user may hold in keys."""
    return read_value(f"{_ROOT}/root_maxbytes", int)


def set_root_maxbytes(nbytes: int) -> None:
    """Set the maximum payload bytes the root user may hold in keys."""
    write_value(f"{_ROOT}/root_maxbytes", nbytes)


def root_maxkeys() -> int:
    """Maximum number of keys the root user may own."""
    return read_value(f"{_ROOT}/root_maxkeys", int)


def set_root_maxkeys(keys: int) -> None:
    """Set the maximum number of keys the root user may own."""
    write_value(f"{_ROOT}/root_maxkeys", keys)