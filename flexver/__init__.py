"""
flexver - Best-effort version string parsing.

Turns arbitrary dot-separated strings into four-component versions
(major.minor.build.revision), salvaging the longest valid prefix and
reporting what could not be parsed.

Key modules:
- parser: FlexibleVersionParser and parse_flexible_version
- version: VersionValue and the strict converter
- numeric: Safe numeric converters for each precision tier
- splitter: Literal string splitting
- compare: Comparison of loosely formatted version strings
- config: Configuration management
"""

import os
import re
import subprocess
from typing import Optional

from flexver.compare import UnparseableVersionError, compare_versions, is_newer
from flexver.parser import (
    FlexibleVersionParser,
    FlexibleVersionResult,
    InvariantViolation,
    LeftoverRecord,
    ParseOutcome,
    parse_flexible_version,
)
from flexver.version import UNSET, VersionValue, try_convert_to_version


FALLBACK_VERSION = "v0.0.0-dev+unknown"

# "git describe --long" output: <tag>-<commits since tag>-g<hash>
DESCRIBE_PATTERN = re.compile(r"(?P<tag>.+?)-(?P<commits>\d+)-g(?P<hash>[0-9a-f]+)")


def _git(*args: str) -> Optional[str]:
    """Output of a git command, or None if git is missing, fails or hangs."""
    try:
        completed = subprocess.run(
            ("git",) + args, capture_output=True, text=True, check=True, timeout=5
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
        return None
    return completed.stdout.strip()


def _version_from_git() -> Optional[str]:
    """
    Describe the checkout as "v1.2.3", "v1.2.3-dev.5+a1b2c3d" (ahead of a tag)
    or "v0.0.0-dev+a1b2c3d" (no tags yet).
    """
    described = _git("describe", "--tags", "--long", "--always")
    if not described:
        return None

    match = DESCRIBE_PATTERN.fullmatch(described)
    if match is None:
        # Untagged repository: describe printed only the hash
        short_hash = _git("rev-parse", "--short", "HEAD")
        return f"v0.0.0-dev+{short_hash}" if short_hash else None

    commits = int(match["commits"])
    if commits == 0:
        return match["tag"]
    return f"{match['tag']}-dev.{commits}+{match['hash']}"


def _get_version() -> str:
    """Resolve the version: FLEXVER_VERSION, then flexver._version, then git."""
    pinned = os.environ.get("FLEXVER_VERSION")
    if pinned:
        return pinned

    try:
        from flexver._version import __version__ as built_version
    except ImportError:
        return _version_from_git() or FALLBACK_VERSION
    return built_version


__version__ = _get_version()

__all__ = [
    "FlexibleVersionParser",
    "FlexibleVersionResult",
    "InvariantViolation",
    "LeftoverRecord",
    "ParseOutcome",
    "UNSET",
    "UnparseableVersionError",
    "VersionValue",
    "compare_versions",
    "is_newer",
    "parse_flexible_version",
    "try_convert_to_version",
]
