"""Parser for pnpm pnpm-lock.yaml files.

Two layouts exist on disk. Up to lockfile schema 6 a single ``packages``
section carries both resolution metadata and dependency edges. From schema 9
``packages`` keeps resolution, engine and platform data while a parallel
``snapshots`` section, keyed the same way, carries the edges.
"""

import re
from typing import Any, Dict, Optional

from .base import BaseParser, as_text
from ..models import Ecosystem, LockfileDocument, LockfileFormat, PackageEntry
from ...exceptions import SchemaError

PNPM_FLAG_FIELDS = ("engines", "dev", "optional", "cpu", "os", "libc", "hasBin", "requiresBuild")
PNPM_METADATA_FIELDS = ("settings", "importers", "dependencies", "devDependencies", "specifiers")

# "lodash@4.17.21", "/lodash@4.17.21", "@scope/pkg@1.2.3-beta.1+build.5"
AT_VERSION_PATTERN = re.compile(r"@([\d.]+(?:-[a-z0-9.-]+)?(?:\+[a-z0-9.-]+)?)$", re.IGNORECASE)
# "/lodash/4.17.21"
SLASH_SEGMENT_PATTERN = re.compile(r"/([^/@]+)$")


def version_from_key(key: str) -> Optional[str]:
    """Derive a package version from a pnpm package key.

    A trailing ``@<version>`` wins; otherwise the last ``/`` segment is used
    only when it starts with a digit.

    Args:
        key: Package key from the ``packages`` section

    Returns:
        Version string, or None if the key carries no recognisable version
    """
    match = AT_VERSION_PATTERN.search(key)
    if match:
        return match.group(1)

    match = SLASH_SEGMENT_PATTERN.search(key)
    if match and match.group(1)[:1].isdigit():
        return match.group(1)

    return None


class PnpmLockfileParser(BaseParser):
    """Parser for pnpm-lock.yaml files (schema 5.x through 9.x)."""

    ecosystem = Ecosystem.PNPM
    lockfile_format = LockfileFormat.PNPM

    def parse(self, text: str) -> LockfileDocument:
        """Parse pnpm-lock.yaml content.

        Args:
            text: Raw YAML content

        Returns:
            Normalized lockfile document

        Raises:
            YamlSyntaxError: If the content is not valid YAML
            SchemaError: If ``lockfileVersion`` is missing
        """
        data = self._load_yaml(text)

        if not isinstance(data, dict) or data.get("lockfileVersion") in (None, ""):
            raise SchemaError("Invalid pnpm lockfile: missing lockfileVersion field")

        lockfile_version = as_text(data["lockfileVersion"])
        snapshots = data.get("snapshots") or {}
        if not isinstance(snapshots, dict):
            snapshots = {}

        section = data.get("packages")
        packages = {}
        for key, record in (section if isinstance(section, dict) else {}).items():
            key = str(key)
            record = record if isinstance(record, dict) else {}
            snapshot = snapshots.get(key)
            packages[key] = self._create_entry(key, record, snapshot if isinstance(snapshot, dict) else {})

        self.logger.debug(
            f"Parsed {len(packages)} pnpm packages (lockfileVersion {lockfile_version}, "
            f"{len(snapshots)} snapshots)"
        )

        raw_metadata = {name: data[name] for name in PNPM_METADATA_FIELDS if name in data}
        if "snapshots" in data:
            raw_metadata["snapshots"] = data["snapshots"]

        return LockfileDocument(
            ecosystem=self.ecosystem,
            ecosystem_version=lockfile_version,
            lockfile_format=self.lockfile_format,
            packages=packages,
            raw_metadata=raw_metadata,
        )

    def _create_entry(self, key: str, record: Dict[str, Any], snapshot: Dict[str, Any]) -> PackageEntry:
        """Merge a ``packages`` record with its snapshot into one entry.

        Dependency kinds come from the snapshot first; flags come from the
        package record first.
        """
        version = as_text(record.get("version")) or version_from_key(key)
        if version is None:
            self.logger.debug(f"No version derivable from pnpm key {key!r}")

        resolution = record.get("resolution")
        if not isinstance(resolution, dict):
            resolution = {}

        flags = self._pick_flags(snapshot, PNPM_FLAG_FIELDS)
        flags.update(self._pick_flags(record, PNPM_FLAG_FIELDS))

        return PackageEntry(
            version=version,
            resolved_source=as_text(resolution.get("tarball")),
            integrity=as_text(resolution.get("integrity")),
            dependency_sets=self._dependency_sets(snapshot, record),
            ecosystem_flags=flags,
        )
