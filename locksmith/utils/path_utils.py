"""Path utilities for locating lockfiles in a project directory."""

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional, Tuple, Union

from ..exceptions import LockfileNotFoundError
from .logging import get_logger

if TYPE_CHECKING:
    from ..core.models import LockfileDocument

# Preference order: first existing file wins
LOCKFILE_NAMES: Tuple[str, ...] = (
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
)

logger = get_logger("LockfileLocator")


class LockfileLocator:
    """Finds and reads the lockfile of a project directory."""

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        """Initialize the locator.

        Args:
            names: Candidate file names in preference order
        """
        self.names: Tuple[str, ...] = tuple(names) if names is not None else LOCKFILE_NAMES
        if not self.names:
            raise ValueError("At least one lockfile name is required")

    def find(self, directory: Union[str, Path]) -> Path:
        """Return the path of the preferred lockfile in a directory.

        Args:
            directory: Directory to search (not recursive)

        Returns:
            Path to the first candidate that exists as a file

        Raises:
            LockfileNotFoundError: If no candidate exists
        """
        directory = Path(directory)

        for name in self.names:
            candidate = directory / name
            if candidate.is_file():
                logger.debug(f"Found lockfile {candidate}")
                return candidate

        raise LockfileNotFoundError(f"No lockfile found in directory: {directory}")

    def read(self, path: Union[str, Path]) -> str:
        """Read lockfile content as UTF-8 text."""
        with open(path, "r", encoding="utf-8") as f:
            return f.read()


def find_lockfile(directory: Union[str, Path], names: Optional[Iterable[str]] = None) -> Path:
    """Convenience function to locate a lockfile.

    Args:
        directory: Directory to search
        names: Optional candidate names in preference order

    Returns:
        Path to the lockfile
    """
    return LockfileLocator(names).find(directory)


def parse_lockfile_file(path: Union[str, Path]) -> "LockfileDocument":
    """Read a lockfile and parse it, detecting its format.

    Args:
        path: Path to a lockfile

    Returns:
        Parsed LockfileDocument
    """
    from ..core.dispatch import parse_lockfile

    return parse_lockfile(LockfileLocator().read(path))


def find_and_parse_lockfile(
    directory: Union[str, Path],
    names: Optional[Iterable[str]] = None,
) -> "LockfileDocument":
    """Locate the lockfile in a directory, read it and parse it.

    Args:
        directory: Directory to search
        names: Optional candidate names in preference order

    Returns:
        Parsed LockfileDocument

    Raises:
        LockfileNotFoundError: If no lockfile exists in the directory
    """
    from ..core.dispatch import parse_lockfile

    locator = LockfileLocator(names)
    return parse_lockfile(locator.read(locator.find(directory)))
