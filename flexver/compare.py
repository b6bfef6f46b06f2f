"""
Comparison of loosely formatted version strings.

Typical use is deciding whether an available release is newer than the
installed one when either side may carry suffixes such as "-beta3" or
excess segments. Only the salvaged version values are compared; leftovers
are ignored.
"""

from typing import Optional

from flexver.parser import FlexibleVersionParser, ParseOutcome, parse_flexible_version
from flexver.version import VersionValue


class UnparseableVersionError(ValueError):
    """Raised when a version string yields no version at all."""

    def __init__(self, text: str):
        super().__init__(f"Unparseable version string: {text!r}")
        self.text = text


def _salvage(text: str, parser: Optional[FlexibleVersionParser]) -> VersionValue:
    result = parser.parse(text) if parser is not None else parse_flexible_version(text)
    if result.outcome is ParseOutcome.UNPARSEABLE:
        raise UnparseableVersionError(text)
    return result.version


def compare_versions(
    left: str, right: str, parser: Optional[FlexibleVersionParser] = None
) -> int:
    """
    Compare two version strings.

    Args:
        left: First version string
        right: Second version string
        parser: Parser to use (default parser if None)

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right

    Raises:
        UnparseableVersionError: If either string yields no version
    """
    left_version = _salvage(left, parser)
    right_version = _salvage(right, parser)

    if left_version < right_version:
        return -1
    if left_version > right_version:
        return 1
    return 0


def is_newer(
    candidate: str, baseline: str, parser: Optional[FlexibleVersionParser] = None
) -> bool:
    """Check whether ``candidate`` is strictly newer than ``baseline``."""
    return compare_versions(candidate, baseline, parser) > 0
