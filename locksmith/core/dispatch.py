"""Single entry point for parsing lockfile text of unknown format."""

from .detector import detect_lockfile_format
from .models import LockfileDocument, LockfileFormat
from .parsers import (
    parse_npm_lockfile,
    parse_pnpm_lockfile,
    parse_yarn_berry_lockfile,
    parse_yarn_classic_lockfile,
)
from ..exceptions import DetectionError


def parse_lockfile(text: str) -> LockfileDocument:
    """Detect the format of lockfile text and parse it.

    Parser errors propagate unchanged so callers can tell a corrupt file
    from an unrecognised one.

    Args:
        text: Raw lockfile content

    Returns:
        Normalized lockfile document

    Raises:
        DetectionError: If the format cannot be determined
    """
    lockfile_format = detect_lockfile_format(text)
    if lockfile_format is LockfileFormat.UNKNOWN:
        raise DetectionError("Unable to determine lockfile format")
    return parse_lockfile_as(text, lockfile_format)


def parse_lockfile_as(text: str, lockfile_format: LockfileFormat) -> LockfileDocument:
    """Parse lockfile text with an explicitly chosen format.

    Args:
        text: Raw lockfile content
        lockfile_format: Format to parse as; UNKNOWN runs detection first

    Returns:
        Normalized lockfile document
    """
    if lockfile_format is LockfileFormat.NPM:
        return parse_npm_lockfile(text)
    elif lockfile_format is LockfileFormat.YARN_CLASSIC:
        return parse_yarn_classic_lockfile(text)
    elif lockfile_format is LockfileFormat.YARN_BERRY:
        return parse_yarn_berry_lockfile(text)
    elif lockfile_format is LockfileFormat.PNPM:
        return parse_pnpm_lockfile(text)
    elif lockfile_format is LockfileFormat.UNKNOWN:
        return parse_lockfile(text)

    raise ValueError(f"Unhandled lockfile format: {lockfile_format!r}")
