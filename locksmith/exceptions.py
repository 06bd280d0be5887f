"""Exception hierarchy for Locksmith."""


class LocksmithError(Exception):
    """Base exception for all Locksmith operations."""


class DetectionError(LocksmithError):
    """Raised when text matches none of the known lockfile signatures."""


class LockfileSyntaxError(LocksmithError):
    """Raised when text is not well-formed in its underlying format."""


class JsonSyntaxError(LockfileSyntaxError):
    """Raised when JSON decoding fails."""


class YamlSyntaxError(LockfileSyntaxError):
    """Raised when YAML loading fails."""


class SchemaError(LocksmithError):
    """Raised when a lockfile is well-formed but lacks required marker fields."""


class UnsupportedVersionError(LocksmithError):
    """Raised when a lockfile belongs to a generation the parser cannot read."""


class LockfileNotFoundError(LocksmithError):
    """Raised when no candidate lockfile exists in a directory."""
