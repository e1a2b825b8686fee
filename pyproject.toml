[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dupfinder"
version = "0.1.0"
description = "Find duplicate files by content hash and delete, move or hard-link them."
requires-python = ">=3.10"
dependencies = []
keywords = ["duplicates", "files", "hash", "md5", "sha256", "deduplication"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dupfinder = "dupfinder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dupfinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
