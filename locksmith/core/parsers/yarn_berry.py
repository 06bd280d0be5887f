"""Parser for Yarn Berry (v2+) yarn.lock files."""

from typing import Any, Dict

from .base import BaseParser, as_text
from ..models import Ecosystem, LockfileDocument, LockfileFormat, PackageEntry
from ...exceptions import SchemaError

METADATA_KEY = "__metadata"
BERRY_FLAG_FIELDS = (
    "languageName",
    "linkType",
    "bin",
    "conditions",
    "dependenciesMeta",
    "peerDependenciesMeta",
)

# Highest lockfile schema version written by each Yarn generation.
GENERATION_THRESHOLDS = (
    (4, 2),
    (6, 3),
)
LATEST_GENERATION = 4


def yarn_generation(schema_version: int) -> int:
    """Map a ``__metadata.version`` to the Yarn major version that wrote it.

    Args:
        schema_version: Lockfile schema version from ``__metadata``

    Returns:
        Yarn generation (2, 3 or 4)
    """
    for highest_schema, generation in GENERATION_THRESHOLDS:
        if schema_version <= highest_schema:
            return generation
    return LATEST_GENERATION


class YarnBerryLockfileParser(BaseParser):
    """Parser for YAML yarn.lock files written by Yarn 2, 3 and 4."""

    ecosystem = Ecosystem.YARN
    lockfile_format = LockfileFormat.YARN_BERRY

    def parse(self, text: str) -> LockfileDocument:
        """Parse Yarn Berry yarn.lock content.

        Args:
            text: Raw YAML content

        Returns:
            Normalized lockfile document

        Raises:
            YamlSyntaxError: If the content is not valid YAML
            SchemaError: If ``__metadata`` or its version is missing
        """
        data = self._load_yaml(text)

        if not isinstance(data, dict) or METADATA_KEY not in data:
            raise SchemaError(f"Invalid Yarn lockfile: missing {METADATA_KEY} field")

        metadata = data[METADATA_KEY]
        schema_version = self._schema_version(metadata)
        generation = yarn_generation(schema_version)

        packages = {}
        for key, record in data.items():
            if key == METADATA_KEY:
                continue
            if not isinstance(record, dict):
                self.logger.debug(f"Skipping non-package entry {key!r}")
                continue
            packages[str(key)] = self._create_entry(record)

        self.logger.debug(
            f"Parsed {len(packages)} Yarn packages (schema {schema_version}, Yarn {generation})"
        )

        return LockfileDocument(
            ecosystem=self.ecosystem,
            ecosystem_version=generation,
            lockfile_format=self.lockfile_format,
            packages=packages,
            raw_metadata=metadata,
        )

    def _schema_version(self, metadata: Any) -> int:
        version = metadata.get("version") if isinstance(metadata, dict) else None
        try:
            return int(version)
        except (TypeError, ValueError):
            raise SchemaError(f"Invalid Yarn lockfile: unreadable {METADATA_KEY}.version {version!r}")

    def _create_entry(self, record: Dict[str, Any]) -> PackageEntry:
        return PackageEntry(
            version=as_text(record.get("version")),
            resolved_source=as_text(record.get("resolution")),
            integrity=as_text(record.get("checksum")),
            dependency_sets=self._dependency_sets(record),
            ecosystem_flags=self._pick_flags(
                record,
                ("engines",) + BERRY_FLAG_FIELDS,
                defaults={"engines": {}},
            ),
        )
