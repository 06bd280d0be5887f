"""Lockfile format detection from raw text."""

import json
import re

from .models import LockfileFormat
from ..utils.logging import get_logger

YARN_CLASSIC_MARKER = "# yarn lockfile v1"
YARN_BERRY_MARKER = "__metadata:"
PNPM_VERSION_PATTERN = re.compile(r"lockfileVersion:\s*['\"]?[\d.]+")

logger = get_logger("LockfileDetector")


def _looks_like_npm(text: str) -> bool:
    """Check whether text is a JSON object carrying npm's marker fields."""
    if not text.strip().startswith("{"):
        return False

    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        # Full parsing reports JSON errors; detection just moves on.
        return False

    return (
        isinstance(data, dict)
        and data.get("lockfileVersion") is not None
        and data.get("packages") is not None
    )


def detect_lockfile_format(text: str) -> LockfileFormat:
    """Identify which package manager produced a lockfile.

    Probes run in a fixed order and the first match wins. Yarn Berry's
    ``__metadata:`` marker is checked before the ``lockfileVersion:`` key
    because pnpm and Berry share YAML surface syntax.

    Args:
        text: Raw lockfile content

    Returns:
        Detected format, or ``LockfileFormat.UNKNOWN``
    """
    if _looks_like_npm(text):
        detected = LockfileFormat.NPM
    elif YARN_CLASSIC_MARKER in text:
        detected = LockfileFormat.YARN_CLASSIC
    elif YARN_BERRY_MARKER in text:
        detected = LockfileFormat.YARN_BERRY
    elif PNPM_VERSION_PATTERN.search(text):
        detected = LockfileFormat.PNPM
    else:
        detected = LockfileFormat.UNKNOWN

    logger.debug(f"Detected lockfile format: {detected.value}")
    return detected
