"""Per-file bookkeeping kept by partitions, and the stat record given to users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FileStat:
    """A snapshot of a file's state."""

    size_in_bytes: int
    last_access_date: float
    last_modification_date: float
    refcount: int


@dataclass(eq=False)
class FileMetadata:
    """Sizes, dates and usage counters of one file in a partition.

    Instances compare by identity, since a partition tracks each file
    through its own metadata object.
    """

    current_size: int
    partition: Any = field(default=None, repr=False)
    dir_path: str = ""
    file_name: str = ""
    creation_date: float = 0.0
    modification_date: float = 0.0
    access_date: float = 0.0
    file_refcount: int = 0
    sequence_number: int = 0
    evictable: bool = True
    future_size: int = field(init=False)
    _ongoing_writes: dict[int, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.future_size = self.current_size

    def increase_file_refcount(self) -> None:
        """Record that the file has been opened once more."""
        self.file_refcount += 1

    def decrease_file_refcount(self) -> None:
        """Record that one opening of the file has been closed."""
        if self.file_refcount == 0:
            raise ValueError(f"file {self.dir_path}/{self.file_name} is not open")
        self.file_refcount -= 1

    def notify_write_start(self, write_id: int, new_size: int) -> None:
        """Register a write that will leave the file with new_size bytes."""
        self._ongoing_writes[write_id] = new_size
        self.future_size = max(new_size, self.future_size)

    def notify_write_end(self, write_id: int) -> None:
        """Complete a registered write; raises KeyError for an unknown write."""
        self.current_size = self._ongoing_writes.pop(write_id)

    def stat(self) -> FileStat:
        """Return a snapshot of the file's current state."""
        return FileStat(
            size_in_bytes=self.current_size,
            last_access_date=self.access_date,
            last_modification_date=self.modification_date,
            refcount=self.file_refcount,
        )