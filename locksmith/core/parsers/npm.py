"""Parser for npm package-lock.json files."""

from typing import Any, Dict

from .base import BaseParser, as_text
from ..models import Ecosystem, LockfileDocument, LockfileFormat, PackageEntry
from ...exceptions import SchemaError

NPM_FLAG_FIELDS = ("license", "bin", "funding", "cpu", "os", "dev", "optional", "devOptional", "peer")
NPM_METADATA_FIELDS = ("name", "version", "dependencies", "requires")


class NpmLockfileParser(BaseParser):
    """Parser for npm package-lock.json (and npm-shrinkwrap.json) files."""

    ecosystem = Ecosystem.NPM
    lockfile_format = LockfileFormat.NPM

    def parse(self, text: str) -> LockfileDocument:
        """Parse package-lock.json content.

        Args:
            text: Raw JSON content

        Returns:
            Normalized lockfile document

        Raises:
            JsonSyntaxError: If the content is not valid JSON
            SchemaError: If the content is not an npm lockfile
        """
        data = self._load_json(text)

        if not isinstance(data, dict) or data.get("lockfileVersion") in (None, ""):
            raise SchemaError("Invalid npm lockfile: missing lockfileVersion or packages field")

        section = data.get("packages")
        packages = {}
        for key, record in (section if isinstance(section, dict) else {}).items():
            packages[key] = self._create_entry(record if isinstance(record, dict) else {})

        self.logger.debug(f"Parsed {len(packages)} npm packages (lockfileVersion {data['lockfileVersion']})")

        return LockfileDocument(
            ecosystem=self.ecosystem,
            ecosystem_version=data["lockfileVersion"],
            lockfile_format=self.lockfile_format,
            packages=packages,
            raw_metadata={name: data[name] for name in NPM_METADATA_FIELDS if name in data},
        )

    def _create_entry(self, record: Dict[str, Any]) -> PackageEntry:
        """Create a PackageEntry from one ``packages`` record."""
        return PackageEntry(
            version=as_text(record.get("version")),
            resolved_source=as_text(record.get("resolved")),
            integrity=as_text(record.get("integrity")),
            dependency_sets=self._dependency_sets(record),
            ecosystem_flags=self._pick_flags(
                record,
                ("engines",) + NPM_FLAG_FIELDS,
                defaults={"engines": {}},
            ),
        )
