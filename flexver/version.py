"""
Four-component version value and its strict converter.

A version is ``major.minor[.build[.revision]]`` where every component is a
non-negative 32-bit integer. Components that were not given are UNSET (-1),
which is distinct from 0 and sorts before it: ``1.2 < 1.2.0 < 1.2.0.0``.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from flexver.numeric import INT32_MAX

UNSET = -1

COMPONENT_NAMES = ("major", "minor", "build", "revision")

# Two to four dot-separated runs of ASCII digits, used with fullmatch
STRICT_VERSION_PATTERN = re.compile(r"[0-9]+(\.[0-9]+){1,3}")


@dataclass(frozen=True, order=True)
class VersionValue:
    """
    Immutable major.minor.build.revision version.

    Attributes:
        major: Major component (always set)
        minor: Minor component (always set)
        build: Build component, or UNSET
        revision: Revision component, or UNSET (only set if build is set)
    """

    major: int
    minor: int
    build: int = UNSET
    revision: int = UNSET

    def __post_init__(self) -> None:
        for name in ("major", "minor"):
            value = getattr(self, name)
            if not 0 <= value <= INT32_MAX:
                raise ValueError(f"{name} must be between 0 and {INT32_MAX}, got: {value}")
        for name in ("build", "revision"):
            value = getattr(self, name)
            if value != UNSET and not 0 <= value <= INT32_MAX:
                raise ValueError(f"{name} must be UNSET or between 0 and {INT32_MAX}, got: {value}")
        if self.build == UNSET and self.revision != UNSET:
            raise ValueError("revision cannot be set without build")

    @classmethod
    def from_components(cls, components) -> "VersionValue":
        """Build a version from a sequence of 2 to 4 integers."""
        components = tuple(components)
        if not 2 <= len(components) <= 4:
            raise ValueError(
                f"A version needs 2 to 4 components, got: {len(components)}"
            )
        return cls(*components)

    @classmethod
    def parse(cls, text: str) -> "VersionValue":
        """
        Strictly parse a canonical version string.

        Raises:
            ValueError: If ``text`` is not 2-4 dot-separated components
                each within the 32-bit range
        """
        version, ok = try_convert_to_version(text)
        if not ok:
            raise ValueError(f"Invalid version string: {text!r}")
        return version

    @property
    def component_count(self) -> int:
        """Number of explicitly set components (2, 3 or 4)."""
        if self.build == UNSET:
            return 2
        if self.revision == UNSET:
            return 3
        return 4

    @property
    def components(self) -> Tuple[int, ...]:
        """The explicitly set components, in order."""
        return (self.major, self.minor, self.build, self.revision)[: self.component_count]

    def to_dict(self) -> dict:
        """Serialize to a dict, with UNSET components as None."""
        return {
            name: (value if value != UNSET else None)
            for name, value in zip(
                COMPONENT_NAMES, (self.major, self.minor, self.build, self.revision)
            )
        }

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)


def try_convert_to_version(text: str) -> Tuple[Optional[VersionValue], bool]:
    """
    Attempt strict conversion of ``text`` into a VersionValue.

    Args:
        text: Candidate in ``N.N``, ``N.N.N`` or ``N.N.N.N`` form

    Returns:
        Tuple of (version, ok); version is None when ok is False
    """
    if not isinstance(text, str) or not STRICT_VERSION_PATTERN.fullmatch(text):
        return None, False

    components = []
    for part in text.split("."):
        digits = part.lstrip("0") or "0"
        if len(digits) > len(str(INT32_MAX)):
            return None, False
        value = int(digits)
        if value > INT32_MAX:
            return None, False
        components.append(value)

    return VersionValue.from_components(components), True
