"""Core detection, parsing and normalization logic for Locksmith."""

from .detector import detect_lockfile_format
from .dispatch import parse_lockfile, parse_lockfile_as
from .models import DependencySets, Ecosystem, LockfileDocument, LockfileFormat, PackageEntry
from .parsers import (
    parse_npm_lockfile,
    parse_pnpm_lockfile,
    parse_yarn_berry_lockfile,
    parse_yarn_classic_lockfile,
)

__all__ = [
    "DependencySets",
    "Ecosystem",
    "LockfileDocument",
    "LockfileFormat",
    "PackageEntry",
    "detect_lockfile_format",
    "parse_lockfile",
    "parse_lockfile_as",
    "parse_npm_lockfile",
    "parse_pnpm_lockfile",
    "parse_yarn_berry_lockfile",
    "parse_yarn_classic_lockfile",
]
