"""Storages and the I/O plans they produce for reads and writes.

A storage does not move data itself: for each read or write it returns an
``IoPlan`` that tells which disks perform which I/O, which network transfer
carries the data between the requesting host and the storage, and how much
parity computation the controller must do.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class OpType(Enum):
    """The direction of an I/O operation."""

    READ = "read"
    WRITE = "write"


@dataclass(frozen=True)
class Disk:
    """A disk attached to a host. Bandwidths are in bytes per second."""

    name: str
    host: str | None = None
    read_bandwidth: float = 0.0
    write_bandwidth: float = 0.0


@dataclass(frozen=True)
class DiskIo:
    """An I/O of ``size`` bytes performed on one disk."""

    disk: Disk
    op_type: OpType
    size: int


@dataclass(frozen=True)
class Transfer:
    """A network transfer of ``size`` bytes between two hosts."""

    name: str
    source: str | None
    destination: str | None
    size: int


@dataclass(frozen=True)
class IoPlan:
    """Everything a storage needs done to serve one read or write."""

    name: str
    op_type: OpType
    disk_ios: tuple[DiskIo, ...]
    transfer: Transfer | None = None
    parity_flops: float = 0.0
    parity_host: str | None = None

    def total_disk_bytes(self) -> int:
        """Return the number of bytes read or written over all disks."""
        return sum(io.size for io in self.disk_ios)


class Storage(ABC):
    """A named set of disks, optionally driven by a controller."""

    def __init__(self, name: str, disks: Sequence[Disk]) -> None:
        self.name = name
        self._disks: list[Disk] = list(disks)
        self.controller_host: str | None = None
        self.controller: threading.Thread | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, disks={self._disks!r})"

    @property
    def disks(self) -> list[Disk]:
        """A copy of the list of disks used by the storage."""
        return list(self._disks)

    @property
    def num_disks(self) -> int:
        """Number of disks used by the storage."""
        return len(self._disks)

    @property
    def first_disk(self) -> Disk:
        """The first disk of the storage."""
        return self._disks[0]

    def disk_at(self, position: int) -> Disk:
        """Return the disk at the given index; raises IndexError if out of range."""
        if position < 0:
            raise IndexError(f"disk position {position} out of range")
        return self._disks[position]

    def start_controller(self, host: str, func: Callable[[], None]) -> threading.Thread:
        """Run ``func`` as the storage's controller, placed on ``host``."""
        self.controller_host = host
        self.controller = threading.Thread(
            target=func, name=f"{self.name}_controller", daemon=True
        )
        self.controller.start()
        return self.controller

    def _endpoint_host(self) -> str | None:
        if self.controller_host is not None:
            return self.controller_host
        return self.first_disk.host

    @abstractmethod
    def read_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        """Plan a read of ``size`` bytes on behalf of ``requester_host``."""

    @abstractmethod
    def write_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        """Plan a write of ``size`` bytes on behalf of ``requester_host``."""


class OneDiskStorage(Storage):
    """A storage made of a single disk local to the requester."""

    def __init__(self, name: str, disk: Disk) -> None:
        super().__init__(name, [disk])

    def read_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        return IoPlan(
            name=f"{self.name} read",
            op_type=OpType.READ,
            disk_ios=(DiskIo(self.first_disk, OpType.READ, size),),
        )

    def write_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        return IoPlan(
            name=f"{self.name} write",
            op_type=OpType.WRITE,
            disk_ios=(DiskIo(self.first_disk, OpType.WRITE, size),),
        )


class OneRemoteDiskStorage(Storage):
    """A storage made of a single disk reached over the network."""

    def __init__(self, name: str, disk: Disk) -> None:
        super().__init__(name, [disk])

    def read_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        return IoPlan(
            name=f"{self.name} read",
            op_type=OpType.READ,
            disk_ios=(DiskIo(self.first_disk, OpType.READ, size),),
            transfer=Transfer("Stream from remote disk", self._endpoint_host(), requester_host, size),
        )

    def write_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        return IoPlan(
            name=f"{self.name} write",
            op_type=OpType.WRITE,
            disk_ios=(DiskIo(self.first_disk, OpType.WRITE, size),),
            transfer=Transfer("Stream to remote disk", requester_host, self._endpoint_host(), size),
        )


class RAID(Enum):
    """RAID levels a JBOD storage can be set to. Levels 2 and 3 cannot do I/O."""

    RAID0 = 0
    RAID1 = 1
    RAID2 = 2
    RAID3 = 3
    RAID4 = 4
    RAID5 = 5
    RAID6 = 6


_UNSUPPORTED = "Unsupported RAID level. Supported level are: 0, 1, 4, 5, and 6"


class JBODStorage(Storage):
    """A "Just a Bunch Of Disks" storage striped according to a RAID level."""

    def __init__(self, name: str, disks: Sequence[Disk], raid_level: RAID = RAID.RAID0) -> None:
        super().__init__(name, disks)
        self._parity_disk_index = self.num_disks - 1
        self._read_disk_index = -1
        self._raid_level = RAID.RAID0
        self.raid_level = raid_level

    @property
    def raid_level(self) -> RAID:
        """The RAID level; setting it checks that there are enough disks."""
        return self._raid_level

    @raid_level.setter
    def raid_level(self, raid_level: RAID) -> None:
        if raid_level in (RAID.RAID4, RAID.RAID5) and self.num_disks < 3:
            raise ValueError(f"RAID{raid_level.value}  requires at least 3 disks")
        if raid_level is RAID.RAID6 and self.num_disks < 4:
            raise ValueError(f"RAID{raid_level.value}  requires at least 4 disks")
        self._raid_level = raid_level

    @property
    def parity_disk_index(self) -> int:
        """Index of the disk holding the (first) parity block."""
        return self._parity_disk_index

    def _rotate_parity_disk(self) -> None:
        self._parity_disk_index = (self._parity_disk_index - 1) % self.num_disks

    def _next_read_disk_index(self) -> int:
        self._read_disk_index += 1
        return self._read_disk_index % self.num_disks

    def read_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        n = self.num_disks
        parity = self._parity_disk_index
        level = self._raid_level
        targets = self.disks

        if level is RAID.RAID0:
            read_size = size // n
        elif level is RAID.RAID1:
            read_size = size
            targets = [self.disk_at(self._next_read_disk_index())]
        elif level is RAID.RAID4:
            read_size = size // (n - 1)
            targets.pop()
        elif level is RAID.RAID5:
            read_size = size // (n - 1)
            del targets[(parity + 1) % n]
        elif level is RAID.RAID6:
            read_size = size // (n - 2)
            if parity + 1 == n:
                targets = targets[1:-1]
            else:
                del targets[parity:parity + 2]
            message = (
                f"Parity disks are #{parity} and #{(parity + 1) % n}. Reading From: "
                + "".join(f"{disk.name} " for disk in targets)
            )
            logger.debug("%s", message)
        else:
            raise ValueError(_UNSUPPORTED)

        return IoPlan(
            name="JBOD Read Completion",
            op_type=OpType.READ,
            disk_ios=tuple(DiskIo(disk, OpType.READ, read_size) for disk in targets),
            transfer=Transfer("Transfer from JBod", self._endpoint_host(), requester_host, size),
        )

    def write_plan(self, size: int, requester_host: str | None = None) -> IoPlan:
        n = self.num_disks
        level = self._raid_level

        if level is RAID.RAID0:
            write_size = size // n
        elif level is RAID.RAID1:
            write_size = size
        elif level is RAID.RAID4:
            write_size = size // (n - 1)
        elif level is RAID.RAID5:
            self._rotate_parity_disk()
            write_size = size // (n - 1)
        elif level is RAID.RAID6:
            self._rotate_parity_disk()
            write_size = size // (n - 2)
        else:
            raise ValueError(_UNSUPPORTED)

        # One flop per byte per parity block.
        if level is RAID.RAID6:
            parity_flops = float(2 * write_size)
        elif level in (RAID.RAID4, RAID.RAID5):
            parity_flops = float(write_size)
        else:
            parity_flops = 0.0

        destination = self._endpoint_host()
        return IoPlan(
            name="JBOD Write Completion",
            op_type=OpType.WRITE,
            disk_ios=tuple(DiskIo(disk, OpType.WRITE, write_size) for disk in self._disks),
            transfer=Transfer("Transfer to JBod", requester_host, destination, size),
            parity_flops=parity_flops,
            parity_host=destination,
        )