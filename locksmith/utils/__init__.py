"""Utility functions and helpers for Locksmith."""

from .logging import setup_logging, get_logger
from .path_utils import (
    LOCKFILE_NAMES,
    LockfileLocator,
    find_and_parse_lockfile,
    find_lockfile,
    parse_lockfile_file,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LOCKFILE_NAMES",
    "LockfileLocator",
    "find_and_parse_lockfile",
    "find_lockfile",
    "parse_lockfile_file",
]
