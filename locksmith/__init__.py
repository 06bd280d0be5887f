"""Locksmith - detect and normalize JavaScript package-manager lockfiles."""

__version__ = "0.1.0"

from .core import (
    DependencySets,
    Ecosystem,
    LockfileDocument,
    LockfileFormat,
    PackageEntry,
    detect_lockfile_format,
    parse_lockfile,
    parse_lockfile_as,
    parse_npm_lockfile,
    parse_pnpm_lockfile,
    parse_yarn_berry_lockfile,
    parse_yarn_classic_lockfile,
)
from .exceptions import (
    DetectionError,
    JsonSyntaxError,
    LockfileNotFoundError,
    LockfileSyntaxError,
    LocksmithError,
    SchemaError,
    UnsupportedVersionError,
    YamlSyntaxError,
)
from .utils.path_utils import find_and_parse_lockfile, find_lockfile, parse_lockfile_file

__all__ = [
    "DependencySets",
    "DetectionError",
    "Ecosystem",
    "JsonSyntaxError",
    "LockfileDocument",
    "LockfileFormat",
    "LockfileNotFoundError",
    "LockfileSyntaxError",
    "LocksmithError",
    "PackageEntry",
    "SchemaError",
    "UnsupportedVersionError",
    "YamlSyntaxError",
    "detect_lockfile_format",
    "find_and_parse_lockfile",
    "find_lockfile",
    "parse_lockfile",
    "parse_lockfile_as",
    "parse_lockfile_file",
    "parse_npm_lockfile",
    "parse_pnpm_lockfile",
    "parse_yarn_berry_lockfile",
    "parse_yarn_classic_lockfile",
]
