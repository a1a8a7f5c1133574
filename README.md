# fsmodel

`fsmodel` models the bookkeeping of simulated file systems. Partitions hold
directories and files. They track file sizes, free space, open-file reference
counts and dates. When space runs out, a partition can evict files in FIFO or
LRU order. Storages work out how a read or write of a given size is split
across their disks, and which network transfer and parity computation it
needs.

## Installation

```
pip install .
```

To also install what the tests need:

```
pip install .[test]
```

## Modules

### `fsmodel.path_util`

Plain string functions for paths:

- `simplify_path_string(path)` treats `path` as absolute or relative to `/`.
  It drops empty and `.` components and resolves `..`, which never goes above
  the root. Trailing slashes are removed.
- `remove_trailing_slashes(path)` strips trailing slashes but keeps a lone `/`.
- `split_path(path)` returns `(directory, file)`. A path with no slash has an
  empty directory. A file directly under the root has `/` as its directory.
- `is_at_mount_point(path, mount_point)` tells whether `path` starts with
  `mount_point`.
- `path_at_mount_point(path, mount_point)` returns the rest of `path` after
  `mount_point`. It raises `ValueError` if `path` does not start with it.

### `fsmodel.metadata`

- `FileMetadata` is the per-file record. Its fields are `current_size`,
  `future_size`, the creation, modification and access dates,
  `file_refcount`, `evictable` and `sequence_number`. Its methods are:
  - `increase_file_refcount()` and `decrease_file_refcount()`. Decreasing
    past zero raises `ValueError`.
  - `notify_write_start(write_id, new_size)` and `notify_write_end(write_id)`,
    which track writes in progress.
  - `stat()`, which returns a frozen `FileStat` with `size_in_bytes`,
    `last_access_date`, `last_modification_date` and `refcount`.

### `fsmodel.partition`

- `Partition(name, storage, size, clock=None)` is a partition of `size`
  bytes. `clock` is a callable that returns the current simulated time and
  defaults to a clock that is always `0.0`.
  - It exposes `free_space`, `num_files`, `file_metadata()`,
    `create_new_file()`, `delete_file()`, `move_file()` and
    `truncate_file()`.
  - For directories it has `create_new_directory()`, `directory_exists()`,
    `list_files_in_directory()` (sorted names) and `delete_directory()`.
  - `make_file_evictable()` controls whether a file may be evicted.
  - When a new file does not fit, a plain `Partition` raises
    `NotEnoughSpaceError`.
- `FIFOCachingPartition` makes room by evicting closed, evictable files,
  oldest created first. It raises `NotEnoughSpaceError` if even that cannot
  free enough space.
- `LRUCachingPartition` evicts the least recently used file first. The
  partition does not record uses on its own: the caller reports a read or
  write by calling `on_file_accessed(metadata)`.
- `CachingScheme` (`NONE`, `FIFO`, `LRU`) names the three behaviours.

### `fsmodel.storage`

- `Disk(name, host=None, read_bandwidth=0.0, write_bandwidth=0.0)` describes
  a disk.
- `OneDiskStorage(name, disk)` is a single local disk.
- `OneRemoteDiskStorage(name, disk)` is a single disk reached through a
  network `Transfer`.
- `JBODStorage(name, disks, raid_level=RAID.RAID0)` stripes data across its
  disks according to its `RAID` level.
  - Setting `raid_level` checks the number of disks: RAID4 and RAID5 need at
    least 3, RAID6 needs at least 4. Otherwise it raises `ValueError`.
  - RAID2 and RAID3 can be set, but planning a read or write with them raises
    `ValueError`.
  - With RAID5 and RAID6, the parity disk (`parity_disk_index`) rotates on
    every write.
  - With RAID1, reads go to each disk in turn.
  - RAID6 reads log the parity disks and the disks read from, at debug level,
    on the `fsmodel.storage` logger.
- Every storage has `read_plan(size, requester_host=None)` and
  `write_plan(size, requester_host=None)`. They return an `IoPlan` with:
  - `disk_ios`, a tuple of `DiskIo` with a disk, an `OpType` and a size;
  - an optional `transfer`;
  - `parity_flops` and `parity_host`;
  - `total_disk_bytes()`.
- `start_controller(host, func)` runs `func` in a daemon thread and records
  `host` as the controller host. From then on, transfers start or end at the
  controller host instead of the first disk's host.

### `fsmodel.exceptions`

All errors derive from `FileSystemError`. Their message is the class prefix,
followed by `": "` and the detail when there is one. The classes are:

- `FileNotFoundInPartitionError`
- `NotEnoughSpaceError`
- `FileIsOpenError`
- `DirectoryAlreadyExistsError`
- `DirectoryDoesNotExistError`
- `TooManyOpenFilesError`
- `FileAlreadyExistsError`
- `InvalidSeekError`
- `InvalidMoveError`
- `InvalidTruncateError`
- `InvalidPathError`

## Example

```python
from fsmodel.path_util import simplify_path_string, split_path, path_at_mount_point
from fsmodel.partition import LRUCachingPartition
from fsmodel.storage import Disk, JBODStorage, RAID

path = simplify_path_string("/dev/a//foo/../bar.txt")   # "/dev/a/bar.txt"
inner = path_at_mount_point(path, "/dev/a")             # "/bar.txt"
directory, name = split_path(inner)                     # ("/", "bar.txt")

disks = [Disk(f"disk{i}", host="server") for i in range(4)]
storage = JBODStorage("jbod", disks, RAID.RAID5)

partition = LRUCachingPartition("/dev/a", storage, 100_000_000, clock=lambda: 0.0)
metadata = partition.create_new_file(directory, name, 10_000)
print(partition.free_space)          # 99990000
print(metadata.stat().size_in_bytes) # 10000

plan = storage.write_plan(12_000_000, requester_host="client")
print(plan.total_disk_bytes())       # 16000000: 4 MB on each of 4 disks
print(plan.parity_flops)             # 4000000.0
```

## What it does not do

- There is no file system object that mounts partitions at mount points, and
  there are no open file handles with read, write, seek and close.
- The caller resolves paths with `fsmodel.path_util` and works on partitions
  directly.
- Nothing here runs a simulation or advances time. An `IoPlan` describes the
  work an I/O needs; it does not carry out that work or say how long it takes.
- There is no command-line program.

## Running the tests

```
pytest
```