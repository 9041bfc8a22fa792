# procsys

Read and change Linux kernel variables through the `/proc/sys` directory,
with no need for the `sysctl` tool.

Every reader opens the matching file under `/proc/sys`, parses what it finds and
returns a Python value. Every `set_*` function writes the new value back as
text. Writing usually needs root.

## Installation

```
pip install procsys
```

## Modules

- `procsys.procfile`: `read_file`, `read_value` and `write_value`, plus the
  error classes. Relative paths are resolved under `procfile.SYS_ROOT`
  (`/proc/sys`).
- `procsys.kernel`: `Version`, `pid_max`, `SemaphoreLimits`, `shmall`,
  `shmmax`, `set_shmmax`, `shmmni`, `SysRq` (with `SysRqMode` and
  `AllowedFunctions`), `sysrq`, `set_sysrq`, `threads_max`,
  `set_threads_max`, and the bounds `THREADS_MIN` and `THREADS_MAX`.
- `procsys.keys`: key retention limits such as `gc_delay`,
  `persistent_keyring_expiry`, `maxbytes`, `maxkeys`, `root_maxbytes`,
  `root_maxkeys` and their setters.
- `procsys.fs`: `DEntryState`, `dentry_state`, `file_max`, `set_file_max`,
  `FileState` and `file_nr`.
- `procsys.epoll`: `max_user_watches` and `set_max_user_watches`.
- `procsys.binfmt_misc`: `enabled`, `hex_to_bytes`, `BinFmtFlags`,
  `BinFmtEntry` (whose `data` is a `BinFmtExtension` or a `BinFmtMagic`) and
  `list_entries`.
- `procsys.vm`: `admin_reserve_kbytes`, `set_admin_reserve_kbytes`,
  `compact_memory`, `DropCache`, `drop_caches`, `max_map_count` and
  `set_max_map_count`.
- `procsys.random_pool`: `entropy_avail`, `poolsize`,
  `read_wakeup_threshold`, `write_wakeup_threshold`, `uuid` and `boot_id`.

## Examples

```python
from procsys import binfmt_misc, epoll, fs, kernel, keys, random_pool, vm

# Running kernel version; versions compare by major, minor, patch
current = kernel.Version.current()
if current >= kernel.Version.parse("4.1.0"):
    print("modern kernel", current)

print(kernel.pid_max())
print(kernel.SemaphoreLimits.current())
print(kernel.sysrq())

# Filesystem counters
print(fs.dentry_state())
print(fs.file_nr())
print(epoll.max_user_watches())

# Memory management
print(vm.max_map_count())
vm.drop_caches(vm.DropCache.PAGE_CACHE)  # root only

# Key retention limits
print(keys.maxkeys(), keys.root_maxkeys())

# Kernel random pool
print(random_pool.entropy_avail(), random_pool.boot_id())

# Registered binary formats, ordered by name
if binfmt_misc.enabled():
    for entry in binfmt_misc.list_entries():
        print(entry.name, entry.interpreter, entry.flags)
```

`random_pool.read_wakeup_threshold` reads `kernel/random/read_wakeup_threshold`
and falls back to `write_wakeup_threshold` when the first file does not exist.

`kernel.set_threads_max` refuses values outside `THREADS_MIN..THREADS_MAX` when
the running kernel reports major version 4 or more and minor version 1 or more.

## Parsing without /proc

Several parsers work on plain strings and never touch the filesystem:
`kernel.Version.parse`, `kernel.SemaphoreLimits.parse`, `kernel.SysRq.parse`,
`fs.DEntryState.parse`, `fs.FileState.parse`, `vm.DropCache.parse`,
`binfmt_misc.BinFmtFlags.parse`, `binfmt_misc.hex_to_bytes` and
`binfmt_misc.BinFmtEntry.from_string`.

```python
from procsys.kernel import Version

assert Version.parse("3.16.0-6-amd64") == Version(3, 16, 0)
```

`binfmt_misc.list_entries` also takes an optional directory, so entries can be
read from a copy of `/proc/sys/fs/binfmt_misc` anywhere on disk.

## Errors

Failures raise `procsys.procfile.ProcError` or one of its subclasses:

- `NotFoundError` when the file does not exist on this kernel,
- `PermissionDeniedError` when the caller may not read or write it,
- `ParseError` (also a `ValueError`) when the contents cannot be understood.

## What it does not do

This is a library only. It has no command-line tool, and it does not list or
walk every variable under `/proc/sys`; it covers the variables named above.

## Running the tests

```
pip install procsys[test]
pytest
```