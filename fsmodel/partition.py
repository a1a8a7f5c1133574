"""Partitions: the directories and files stored on a slice of a storage."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .exceptions import (
    DirectoryAlreadyExistsError,
    DirectoryDoesNotExistError,
    FileAlreadyExistsError,
    FileIsOpenError,
    FileNotFoundInPartitionError,
    InvalidTruncateError,
    NotEnoughSpaceError,
)
from .metadata import FileMetadata


class CachingScheme(Enum):
    """How a partition behaves when it runs out of space."""

    NONE = 0
    """No caching: a lack of space is an error."""
    FIFO = 1
    """Evict closed, evictable files, oldest created first."""
    LRU = 2
    """Evict closed, evictable files, least recently used first."""


def _zero_clock() -> float:
    return 0.0


class Partition:
    """A fixed-size partition holding directories of files.

    Sizes are in bytes. The clock is a callable giving the current
    simulated time, used to stamp file dates.
    """

    def __init__(
        self,
        name: str,
        storage: Any,
        size: int,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.name = name
        self.storage = storage
        self.size = size
        self.free_space = size
        self.clock = clock if clock is not None else _zero_clock
        self._content: dict[str, dict[str, FileMetadata]] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, size={self.size}, "
            f"free_space={self.free_space})"
        )

    @property
    def num_files(self) -> int:
        """Number of files stored in the partition."""
        return sum(len(files) for files in self._content.values())

    def file_metadata(self, dir_path: str, file_name: str) -> FileMetadata | None:
        """Return a file's metadata, or None if the directory or file is missing."""
        return self._content.get(dir_path, {}).get(file_name)

    def _require_metadata(self, dir_path: str, file_name: str, context: str = "") -> FileMetadata:
        metadata = self.file_metadata(dir_path, file_name)
        if metadata is None:
            raise FileNotFoundInPartitionError(f"{context}{dir_path}/{file_name}")
        return metadata

    def create_new_file(self, dir_path: str, file_name: str, size: int) -> FileMetadata:
        """Create a file of the given size, making space first if needed."""
        if self.file_metadata(dir_path, file_name) is not None:
            raise FileAlreadyExistsError(f"{dir_path}/{file_name}")
        if self.free_space < size:
            self.create_space(size - self.free_space)

        now = self.clock()
        metadata = FileMetadata(size, self, dir_path, file_name)
        metadata.creation_date = now
        metadata.modification_date = now
        metadata.access_date = now
        self._content.setdefault(dir_path, {})[file_name] = metadata
        self.free_space -= size
        self.on_file_created(metadata)
        return metadata

    def delete_file(self, dir_path: str, file_name: str) -> None:
        """Delete a closed file and give its space back."""
        metadata = self._require_metadata(dir_path, file_name, "delete: ")
        if metadata.file_refcount > 0:
            raise FileIsOpenError(f"delete: {dir_path}/{file_name}")
        self.on_file_deleted(metadata)
        self.free_space += metadata.current_size
        del self._content[dir_path][file_name]

    def move_file(
        self,
        src_dir_path: str,
        src_file_name: str,
        dst_dir_path: str,
        dst_file_name: str,
    ) -> None:
        """Move a closed file, replacing any closed file at the destination."""
        src = self._require_metadata(src_dir_path, src_file_name)
        dst = self.file_metadata(dst_dir_path, dst_file_name)

        if src is dst:
            return

        if src.file_refcount > 0:
            raise FileIsOpenError(f"move: {src_dir_path}/{src_file_name}")
        if dst is not None and dst.file_refcount > 0:
            raise FileIsOpenError(f"move: {dst_dir_path}/{dst_file_name}")

        if dst is not None:
            self.free_space += dst.current_size
            self.on_file_deleted(dst)

        del self._content[src_dir_path][src_file_name]
        self.on_file_deleted(src)
        src.dir_path = dst_dir_path
        src.file_name = dst_file_name
        src.modification_date = self.clock()
        self._content.setdefault(dst_dir_path, {})[dst_file_name] = src
        self.on_file_created(src)
        src.access_date = self.clock()

    def list_files_in_directory(self, dir_path: str) -> list[str]:
        """Return the sorted names of the files in a directory."""
        if dir_path not in self._content:
            raise DirectoryDoesNotExistError(dir_path)
        return sorted(self._content[dir_path])

    def create_new_directory(self, dir_path: str) -> None:
        """Create an empty directory."""
        if dir_path in self._content:
            raise DirectoryAlreadyExistsError(dir_path)
        self._content[dir_path] = {}

    def directory_exists(self, dir_path: str) -> bool:
        """Tell whether the directory exists."""
        return dir_path in self._content

    def delete_directory(self, dir_path: str) -> None:
        """Delete a directory and all its files, none of which may be open."""
        if dir_path not in self._content:
            raise DirectoryDoesNotExistError(dir_path)
        files = self._content[dir_path]
        for file_name, metadata in files.items():
            if metadata.file_refcount != 0:
                raise FileIsOpenError(
                    f"No content deleted in directory because file {file_name} is open"
                )
        freed_space = sum(metadata.current_size for metadata in files.values())
        for metadata in files.values():
            self.on_file_deleted(metadata)
        del self._content[dir_path]
        self.free_space += freed_space

    def truncate_file(self, dir_path: str, file_name: str, num_bytes: int) -> None:
        """Remove up to num_bytes from the end of a closed file."""
        metadata = self._require_metadata(dir_path, file_name, "truncate: ")
        if metadata.file_refcount > 0:
            raise InvalidTruncateError("Cannot truncate a file that is opened")
        num_bytes = min(num_bytes, metadata.current_size)
        new_size = metadata.current_size - num_bytes
        metadata.current_size = new_size
        metadata.future_size = new_size
        self.free_space += num_bytes

    def make_file_evictable(self, dir_path: str, file_name: str, evictable: bool) -> None:
        """Allow or forbid the eviction of a file by a caching scheme."""
        self._require_metadata(dir_path, file_name).evictable = evictable

    def create_space(self, num_bytes: int) -> None:
        """Free num_bytes of space; a plain partition cannot, so it raises."""
        raise NotEnoughSpaceError()

    def on_file_created(self, metadata: FileMetadata) -> None:
        """Hook called when a file appears in the partition."""

    def on_file_accessed(self, metadata: FileMetadata) -> None:
        """Hook called when a file is read or written."""

    def on_file_deleted(self, metadata: FileMetadata) -> None:
        """Hook called when a file leaves the partition."""


class FIFOCachingPartition(Partition):
    """A partition that evicts the oldest closed, evictable files to make space."""

    def __init__(
        self,
        name: str,
        storage: Any,
        size: int,
        clock: Callable[[], float] | None = None,
    ) -> None:
        super().__init__(name, storage, size, clock)
        self._sequence_number = 0
        # Keyed by sequence number; numbers only grow, so insertion order is priority order.
        self._priority: dict[int, FileMetadata] = {}

    def _next_sequence_number(self) -> int:
        number = self._sequence_number
        self._sequence_number += 1
        return number

    def create_space(self, num_bytes: int) -> None:
        """Evict files in priority order until num_bytes are free."""
        victims: list[FileMetadata] = []
        reclaimable = 0
        for metadata in self._priority.values():
            if metadata.file_refcount > 0 or not metadata.evictable:
                continue
            victims.append(metadata)
            reclaimable += metadata.current_size
            if reclaimable >= num_bytes:
                break
        if reclaimable < num_bytes:
            raise NotEnoughSpaceError("Unable to evict files to create enough space")
        for metadata in victims:
            self.delete_file(metadata.dir_path, metadata.file_name)

    def on_file_created(self, metadata: FileMetadata) -> None:
        metadata.sequence_number = self._next_sequence_number()
        self._priority[metadata.sequence_number] = metadata

    def on_file_accessed(self, metadata: FileMetadata) -> None:
        pass

    def on_file_deleted(self, metadata: FileMetadata) -> None:
        self._priority.pop(metadata.sequence_number, None)


class LRUCachingPartition(FIFOCachingPartition):
    """A partition that evicts the least recently used closed, evictable files."""

    def on_file_accessed(self, metadata: FileMetadata) -> None:
        self._priority.pop(metadata.sequence_number, None)
        metadata.sequence_number = self._next_sequence_number()
        self._priority[metadata.sequence_number] = metadata