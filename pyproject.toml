[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsmodel"
version = "0.1.0"
description = "Models of partitions with FIFO/LRU caching and of disk storages (single disk, remote disk, JBOD/RAID) for file system simulation."
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "simulation", "storage", "raid", "jbod", "caching", "lru", "fifo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fsmodel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
