"""Parser for Yarn Classic (v1) yarn.lock files.

Yarn v1 writes its own indentation-significant format rather than JSON or
YAML. Structure is carried entirely by indentation depth::

    # yarn lockfile v1

    "@babel/code-frame@^7.0.0", "@babel/code-frame@^7.10.4":
      version "7.10.4"
      resolved "https://registry.yarnpkg.com/..."
      integrity sha512-...
      dependencies:
        "@babel/highlight" "^7.10.4"

Depth 0 opens a package block, depth 2 holds scalar fields and section
headers, depth 4 holds dependency edges of the active section.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from .base import BaseParser
from ..models import DependencySets, Ecosystem, LockfileDocument, LockfileFormat, PackageEntry
from ...exceptions import SchemaError, UnsupportedVersionError

YARN_V1_HEADER = "# yarn lockfile v1"
NEWER_HEADER_PATTERN = re.compile(r"^# yarn lockfile v(?:[2-9]|\d{2,})\b", re.MULTILINE)
BERRY_METADATA_PATTERN = re.compile(r"^__metadata:", re.MULTILINE)
SPECIFIER_PATTERN = re.compile(r'"[^"]*"|[^,]+')
SCALAR_FIELDS = ("version", "resolved", "integrity")
DEPENDENCY_SECTIONS = ("dependencies", "optionalDependencies", "peerDependencies")


class LineKind(Enum):
    """Shape of a single yarn.lock line."""

    BLANK = "blank"
    COMMENT = "comment"
    PACKAGE_HEADER = "package_header"
    SECTION_HEADER = "section_header"
    FIELD = "field"
    DEPENDENCY = "dependency"
    OTHER = "other"


@dataclass(frozen=True)
class ScannedLine:
    """A classified line with its extracted key and value."""

    kind: LineKind
    number: int
    key: str = ""
    value: Optional[str] = None


class LineScanner:
    """Single-pass scanner classifying yarn.lock lines by depth and shape."""

    PAIR_PATTERN = re.compile(r"^(\S+)\s+(.+)$")

    def __init__(self, text: str) -> None:
        self._lines = text.splitlines()
        self._position = 0

    def __iter__(self) -> Iterator[ScannedLine]:
        return self

    def __next__(self) -> ScannedLine:
        if self._position >= len(self._lines):
            raise StopIteration
        line = self._lines[self._position].rstrip()
        self._position += 1
        return self._classify(line, self._position)

    def _classify(self, line: str, number: int) -> ScannedLine:
        if not line.strip():
            return ScannedLine(LineKind.BLANK, number)
        if line.startswith("#"):
            return ScannedLine(LineKind.COMMENT, number)

        depth = _indent_depth(line)
        content = line.strip()

        if depth == 0:
            if content.endswith(":"):
                return ScannedLine(LineKind.PACKAGE_HEADER, number, key=_package_key(content[:-1]))
            return ScannedLine(LineKind.OTHER, number)

        if depth == 2 and content.endswith(":"):
            return ScannedLine(LineKind.SECTION_HEADER, number, key=content[:-1])

        if depth in (2, 4):
            match = self.PAIR_PATTERN.match(content)
            if match:
                kind = LineKind.FIELD if depth == 2 else LineKind.DEPENDENCY
                return ScannedLine(kind, number, key=_unquote(match.group(1)), value=_unquote(match.group(2)))

        return ScannedLine(LineKind.OTHER, number)


class _State(Enum):
    OUTSIDE = "outside"
    IN_PACKAGE = "in_package"
    IN_DEPENDENCY_SECTION = "in_dependency_section"


@dataclass
class _DraftPackage:
    """Mutable package record filled while a block is being read."""

    scalars: Dict[str, Optional[str]] = field(default_factory=lambda: dict.fromkeys(SCALAR_FIELDS))
    sections: Dict[str, Dict[str, str]] = field(default_factory=dict)
    flags: Dict[str, Any] = field(default_factory=dict)

    def build(self) -> PackageEntry:
        return PackageEntry(
            version=self.scalars["version"],
            resolved_source=self.scalars["resolved"],
            integrity=self.scalars["integrity"],
            dependency_sets=DependencySets.from_mapping(self.sections),
            ecosystem_flags=dict(self.flags),
        )


class YarnClassicLockfileParser(BaseParser):
    """Parser for Yarn v1 yarn.lock files."""

    ecosystem = Ecosystem.YARN
    lockfile_format = LockfileFormat.YARN_CLASSIC

    def parse(self, text: str) -> LockfileDocument:
        """Parse yarn.lock v1 content.

        Args:
            text: Raw yarn.lock content

        Returns:
            Normalized lockfile document

        Raises:
            UnsupportedVersionError: If the file was written by Yarn 2 or later
            SchemaError: If the v1 header is missing
        """
        if NEWER_HEADER_PATTERN.search(text) or BERRY_METADATA_PATTERN.search(text):
            raise UnsupportedVersionError("This parser only supports Yarn lockfile version 1")

        if YARN_V1_HEADER not in text:
            raise SchemaError(f'Invalid Yarn lockfile: missing "{YARN_V1_HEADER}" header')

        drafts: Dict[str, _DraftPackage] = {}
        current: Optional[_DraftPackage] = None
        section: Optional[str] = None
        state = _State.OUTSIDE
        dropped: List[int] = []

        for line in LineScanner(text):
            if line.kind is LineKind.PACKAGE_HEADER:
                current = _DraftPackage()
                drafts[line.key] = current
                section = None
                state = _State.IN_PACKAGE

            elif state is _State.OUTSIDE:
                continue

            elif line.kind is LineKind.SECTION_HEADER:
                if line.key in DEPENDENCY_SECTIONS:
                    section = line.key
                    current.sections.setdefault(section, {})
                    state = _State.IN_DEPENDENCY_SECTION
                else:
                    section = None
                    state = _State.IN_PACKAGE

            elif line.kind is LineKind.FIELD:
                if line.key in SCALAR_FIELDS:
                    current.scalars[line.key] = line.value
                else:
                    current.flags[line.key] = line.value
                section = None
                state = _State.IN_PACKAGE

            elif line.kind is LineKind.DEPENDENCY:
                if state is _State.IN_DEPENDENCY_SECTION:
                    current.sections[section][line.key] = line.value
                else:
                    dropped.append(line.number)

        if dropped:
            self.logger.debug(f"Dropped {len(dropped)} dependency lines outside a section: {dropped}")

        packages = {key: draft.build() for key, draft in drafts.items()}
        self.logger.debug(f"Parsed {len(packages)} Yarn v1 packages")

        return LockfileDocument(
            ecosystem=self.ecosystem,
            ecosystem_version=1,
            lockfile_format=self.lockfile_format,
            packages=packages,
        )


def _indent_depth(line: str) -> Optional[int]:
    """Return 0, 2 or 4 for recognised indentation, otherwise None."""
    for depth in (0, 2, 4):
        if line[:depth] == " " * depth and line[depth:depth + 1] not in (" ", "\t"):
            return depth
    return None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _package_key(header: str) -> str:
    """Strip quotes from each specifier of a block header, keeping one key.

    Commas inside a quoted specifier do not split it, so
    ``"foo@https://host/a,b.tgz"`` stays one specifier while
    ``"@a/b@^1.0", "@a/b@^1.1"`` becomes ``@a/b@^1.0, @a/b@^1.1``.
    """
    parts = [_unquote(part.strip()) for part in SPECIFIER_PATTERN.findall(header)]
    return ", ".join(part for part in parts if part)
