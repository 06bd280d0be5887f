"""Lockfile parsers for the supported package managers."""

from .base import BaseParser
from .npm import NpmLockfileParser
from .pnpm import PnpmLockfileParser, version_from_key
from .yarn_berry import YarnBerryLockfileParser, yarn_generation
from .yarn_classic import LineKind, LineScanner, ScannedLine, YarnClassicLockfileParser
from ..models import LockfileDocument

# Parsers are stateless between calls, so one shared instance each is enough
npm_parser = NpmLockfileParser()
yarn_classic_parser = YarnClassicLockfileParser()
yarn_berry_parser = YarnBerryLockfileParser()
pnpm_parser = PnpmLockfileParser()


def parse_npm_lockfile(text: str) -> LockfileDocument:
    """Parse package-lock.json content without format detection."""
    return npm_parser.parse(text)


def parse_yarn_classic_lockfile(text: str) -> LockfileDocument:
    """Parse Yarn v1 yarn.lock content without format detection."""
    return yarn_classic_parser.parse(text)


def parse_yarn_berry_lockfile(text: str) -> LockfileDocument:
    """Parse Yarn 2+ yarn.lock content without format detection."""
    return yarn_berry_parser.parse(text)


def parse_pnpm_lockfile(text: str) -> LockfileDocument:
    """Parse pnpm-lock.yaml content without format detection."""
    return pnpm_parser.parse(text)


__all__ = [
    "BaseParser",
    "LineKind",
    "LineScanner",
    "NpmLockfileParser",
    "PnpmLockfileParser",
    "ScannedLine",
    "YarnBerryLockfileParser",
    "YarnClassicLockfileParser",
    "parse_npm_lockfile",
    "parse_pnpm_lockfile",
    "parse_yarn_berry_lockfile",
    "parse_yarn_classic_lockfile",
    "version_from_key",
    "yarn_generation",
]
