"""Canonical data models for parsed lockfiles."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


class Ecosystem(str, Enum):
    """Package-manager family that produced a lockfile."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class LockfileFormat(str, Enum):
    """On-disk grammar of a lockfile, as reported by the detector."""

    NPM = "npm"
    YARN_CLASSIC = "yarn-classic"
    YARN_BERRY = "yarn-berry"
    PNPM = "pnpm"
    UNKNOWN = "unknown"


DEPENDENCY_KINDS = (
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "peerDependencies",
)


@dataclass(frozen=True)
class DependencySets:
    """The four named dependency edge sets declared by a package.

    Each set maps a dependency name to the range string declared for it.
    Sets are local edge lists, not a flattened graph.
    """

    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)
    optional_dependencies: Dict[str, str] = field(default_factory=dict)
    peer_dependencies: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Dict[str, Dict[str, str]]) -> "DependencySets":
        """Build from a mapping keyed by the native camelCase kind names.

        Args:
            data: Mapping such as ``{"devDependencies": {...}}``

        Returns:
            Dependency sets with missing kinds defaulted to empty dicts
        """
        return cls(
            dependencies=dict(data.get("dependencies") or {}),
            dev_dependencies=dict(data.get("devDependencies") or {}),
            optional_dependencies=dict(data.get("optionalDependencies") or {}),
            peer_dependencies=dict(data.get("peerDependencies") or {}),
        )

    def total(self) -> int:
        """Return the number of edges across all four sets."""
        return (
            len(self.dependencies)
            + len(self.dev_dependencies)
            + len(self.optional_dependencies)
            + len(self.peer_dependencies)
        )


@dataclass(frozen=True)
class PackageEntry:
    """One resolved package instance within a lockfile."""

    version: Optional[str] = None
    resolved_source: Optional[str] = None
    integrity: Optional[str] = None
    dependency_sets: DependencySets = field(default_factory=DependencySets)
    ecosystem_flags: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LockfileDocument:
    """Normalized result of parsing a single lockfile."""

    ecosystem: Ecosystem
    ecosystem_version: Union[int, str]
    lockfile_format: LockfileFormat
    packages: Dict[str, PackageEntry] = field(default_factory=dict)
    raw_metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Reject documents without an ecosystem version."""
        if self.ecosystem_version is None or self.ecosystem_version == "":
            raise ValueError("LockfileDocument requires an ecosystem version")

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary of the document."""
        data = asdict(self)
        data["ecosystem"] = self.ecosystem.value
        data["lockfile_format"] = self.lockfile_format.value
        return data
