"""Partitions with FIFO/LRU caching, file metadata, path helpers and disk storage I/O plans for simulation."""

__version__ = "0.1.0"
__all__ = ["exceptions", "path_util", "metadata", "partition", "storage"]