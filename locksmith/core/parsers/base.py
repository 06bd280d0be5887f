"""Base parser class and shared normalization helpers."""

import json
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

import yaml

from ..models import DEPENDENCY_KINDS, DependencySets, Ecosystem, LockfileDocument, LockfileFormat
from ...exceptions import JsonSyntaxError, YamlSyntaxError
from ...utils.logging import get_logger

YAML_BOOL_TAG = "tag:yaml.org,2002:bool"
YAML_FLOAT_TAG = "tag:yaml.org,2002:float"
YAML_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class LockfileYamlLoader(yaml.SafeLoader):
    """Safe loader that resolves plain scalars closer to YAML 1.2.

    Only ``true``/``false`` become booleans, and floats and timestamps are
    never inferred, so names like ``yes`` and versions like ``1.10`` load as
    strings.
    """


LockfileYamlLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag not in (YAML_BOOL_TAG, YAML_FLOAT_TAG, YAML_TIMESTAMP_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
LockfileYamlLoader.add_implicit_resolver(
    YAML_BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class BaseParser(ABC):
    """Abstract base class for lockfile parsers.

    Parsers hold no per-call state: every ``parse`` call works on locals and
    returns a freshly built document, so one instance can be shared freely.
    """

    ecosystem: Ecosystem
    lockfile_format: LockfileFormat

    def __init__(self) -> None:
        """Initialize the parser."""
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def parse(self, text: str) -> LockfileDocument:
        """Parse lockfile text.

        Args:
            text: Raw lockfile content

        Returns:
            Normalized lockfile document
        """
        pass

    def _load_json(self, text: str) -> Any:
        """Decode JSON text, wrapping decoder failures.

        Raises:
            JsonSyntaxError: If the text is not valid JSON
        """
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise JsonSyntaxError(f"Failed to parse JSON: {e}") from e

    def _load_yaml(self, text: str) -> Any:
        """Load YAML text with ``LockfileYamlLoader``, wrapping loader failures.

        PyYAML keeps the last value for a repeated mapping key instead of
        rejecting the document.

        Raises:
            YamlSyntaxError: If the text is not valid YAML
        """
        try:
            return yaml.load(text, Loader=LockfileYamlLoader)
        except (yaml.YAMLError, RecursionError) as e:
            raise YamlSyntaxError(f"Failed to parse YAML: {e}") from e

    def _dependency_sets(self, *sources: Dict[str, Any]) -> DependencySets:
        """Collect the four dependency kinds from one or more native records.

        For each kind the first source that declares it wins.

        Args:
            sources: Native package records in priority order

        Returns:
            Dependency sets with empty defaults
        """
        collected = {}
        for kind in DEPENDENCY_KINDS:
            for source in sources:
                if kind in source and source[kind] is not None:
                    collected[kind] = _string_mapping(source[kind])
                    break
        return DependencySets.from_mapping(collected)

    def _pick_flags(
        self,
        record: Dict[str, Any],
        names: Iterable[str],
        defaults: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Copy ecosystem-specific extras that are present in a record.

        Args:
            record: Native package record
            names: Field names to preserve
            defaults: Values used when a field is absent

        Returns:
            Dictionary of preserved fields
        """
        flags = dict(defaults or {})
        for name in names:
            if record.get(name) is not None:
                flags[name] = record[name]
        return flags


def as_text(value: Any) -> Optional[str]:
    """Return a scalar as a string, keeping None as None.

    Integers such as ``__metadata.version`` are stringified; versions and
    hashes are always treated as text.
    """
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _string_mapping(value: Any) -> Dict[str, str]:
    """Coerce a native dependency set to ``{name: range}``."""
    if not isinstance(value, dict):
        return {}
    return {str(name): as_text(spec) or "" for name, spec in value.items()}
