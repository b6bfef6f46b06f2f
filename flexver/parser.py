"""
Best-effort version string parser.

Converts an arbitrary dot-separated string into the longest valid
major.minor[.build[.revision]] version it starts with, and reports exactly
where and how parsing degraded:

- the ParseOutcome code names the component that had to be truncated
  (or whether excess segments past the fourth were dropped)
- the LeftoverRecord holds what could not be consumed, per component

Examples:
    "1.2.3.4"           -> SUCCESS, 1.2.3.4
    "1.2.3.4.5"         -> SUCCESS_WITH_EXCESS, 1.2.3.4, excess "5"
    "1.2.3.4-beta3"     -> REVISION_TRUNCATED, 1.2.3.4, revision "-beta3"
    "1.2.2147483700.4"  -> BUILD_TRUNCATED, 1.2.2147483647, build "53", revision "4"

The parser never raises for any input string; it holds no mutable state and
is safe to share between threads.
"""

import logging
import re
from enum import IntEnum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from flexver.numeric import (
    CONVERTERS,
    INT32_MAX,
    NumericTier,
    escalation_order,
    to_decimal_string,
    try_int32,
)
from flexver.splitter import split_literal
from flexver.version import VersionValue, try_convert_to_version

logger = logging.getLogger("flexver.parser")

SEGMENT_DELIMITER = "."
MAX_COMPONENTS = 4
LEFTOVER_SLOT_COUNT = 5
EXCESS_SEGMENTS_SLOT = 4

# Leading run of ASCII digits (match), whole component (fullmatch)
DIGIT_RUN_PATTERN = re.compile(r"[0-9]+")
COMPONENT_PATTERN = re.compile(r"[0-9]+")


class InvariantViolation(RuntimeError):
    """Raised when a component already proven convertible fails version construction."""

    pass


class ParseOutcome(IntEnum):
    """Result code of a flexible version parse."""

    UNPARSEABLE = -1
    SUCCESS = 0
    MAJOR_TRUNCATED = 1
    MINOR_TRUNCATED = 2
    BUILD_TRUNCATED = 3
    REVISION_TRUNCATED = 4
    SUCCESS_WITH_EXCESS = 5

    @classmethod
    def truncated_at(cls, index: int) -> "ParseOutcome":
        """Get the truncation outcome for a zero-based component index."""
        return cls(index + 1)

    @property
    def has_version(self) -> bool:
        """Whether a version value accompanies this outcome."""
        return self is not ParseOutcome.UNPARSEABLE


class LeftoverRecord(NamedTuple):
    """
    Unconsumed input, one slot per version component plus excess segments.

    Slot 0-3 hold what was left of major, minor, build and revision. A slot
    past the first truncated component holds that segment verbatim, since
    nothing after the truncation point is parsed. Slot 4 holds the segments
    beyond the fourth, joined with dots.
    """

    excess_major: str = ""
    excess_minor: str = ""
    excess_build: str = ""
    excess_revision: str = ""
    excess_segments: str = ""

    @property
    def is_empty(self) -> bool:
        """True when every slot is empty."""
        return not any(self)

    def non_empty(self) -> dict:
        """Get the populated slots keyed by slot name."""
        return {name: value for name, value in self._asdict().items() if value}


class FlexibleVersionResult(NamedTuple):
    """Version (None when unparseable), leftovers and outcome of one parse."""

    version: Optional[VersionValue]
    leftovers: LeftoverRecord
    outcome: ParseOutcome

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {
            "version": str(self.version) if self.version is not None else None,
            "components": self.version.to_dict() if self.version is not None else None,
            "outcome": self.outcome.name,
            "code": int(self.outcome),
            "leftovers": self.leftovers._asdict(),
        }


UNPARSEABLE_RESULT = FlexibleVersionResult(None, LeftoverRecord(), ParseOutcome.UNPARSEABLE)


class FlexibleVersionParser:
    """
    Parses arbitrary strings into best-effort versions.

    Strategy:
    1. The whole string as a strict version
    2. Split on '.'; fewer than two segments is unparseable
    3. Set aside segments past the fourth; the first four as a strict version
    4. Walk back from the last remaining segment to the second, looking for
       the longest strictly valid prefix, then salvage the leading digits of
       the segment right after it

    A digit run is converted at the narrowest numeric tier that holds it.
    Values past the 32-bit range are capped at INT32_MAX and the overflow is
    reported as leftover.
    """

    def __init__(self, big_integer: bool = True):
        """
        Initialize the parser.

        Args:
            big_integer: Use arbitrary-precision integers for oversized digit
                runs. When False, a lossy double is used instead.
        """
        self._tiers = escalation_order(big_integer)

    @classmethod
    def from_config(cls, config) -> "FlexibleVersionParser":
        """Build a parser from a ParserConfig."""
        return cls(big_integer=config.big_integer)

    @property
    def tiers(self) -> Tuple[NumericTier, ...]:
        """Numeric tiers attempted for a digit run, narrowest first."""
        return self._tiers

    def parse(self, text: str) -> FlexibleVersionResult:
        """
        Parse ``text`` into a best-effort version.

        Args:
            text: Any string

        Returns:
            FlexibleVersionResult with the version, leftovers and outcome
        """
        if not isinstance(text, str):
            logger.debug(f"Not a string, unparseable: {text!r}")
            return UNPARSEABLE_RESULT

        version, ok = try_convert_to_version(text)
        if ok:
            return FlexibleVersionResult(version, LeftoverRecord(), ParseOutcome.SUCCESS)

        segments = split_literal(text, SEGMENT_DELIMITER)
        if len(segments) < 2:
            logger.debug(f"Fewer than two segments, unparseable: {text!r}")
            return UNPARSEABLE_RESULT

        slots = [""] * LEFTOVER_SLOT_COUNT

        if len(segments) > MAX_COMPONENTS:
            slots[EXCESS_SEGMENTS_SLOT] = SEGMENT_DELIMITER.join(segments[MAX_COMPONENTS:])
            segments = segments[:MAX_COMPONENTS]
            logger.debug(f"Excess segments set aside: {slots[EXCESS_SEGMENTS_SLOT]!r}")

            version, ok = try_convert_to_version(SEGMENT_DELIMITER.join(segments))
            if ok:
                return FlexibleVersionResult(
                    version, LeftoverRecord(*slots), ParseOutcome.SUCCESS_WITH_EXCESS
                )

        # The prefix segments[:index] is the longest valid one the first time
        # it validates, since segments[:index + 1] failed on the step before.
        for index in range(len(segments) - 1, 0, -1):
            if not self._is_valid_prefix(segments[:index]):
                continue
            result = self._truncate_at(segments, index, slots)
            if result is not None:
                return result
            break

        logger.debug(f"No numeric prefix could be salvaged: {text!r}")
        return UNPARSEABLE_RESULT

    def _is_valid_prefix(self, prefix: Sequence[str]) -> bool:
        if len(prefix) == 1:
            # A lone major is not a version, but can start one
            return bool(COMPONENT_PATTERN.fullmatch(prefix[0])) and try_int32(prefix[0])[1]
        _, ok = try_convert_to_version(SEGMENT_DELIMITER.join(prefix))
        return ok

    def _truncate_at(
        self, segments: List[str], index: int, slots: List[str]
    ) -> Optional[FlexibleVersionResult]:
        """
        Salvage the leading digits of ``segments[index]``.

        ``segments[:index]`` is known to be valid. Returns None when nothing
        usable can be built, i.e. the segment has no convertible digits and
        the prefix alone is a bare major.

        So "1.x" is UNPARSEABLE rather than MINOR_TRUNCATED: a lone major
        cannot form a VersionValue, which always has at least two components.
        """
        segment = segments[index]
        prefix = SEGMENT_DELIMITER.join(segments[:index])

        match = DIGIT_RUN_PATTERN.match(segment)
        converted = self._convert_digit_run(match.group(0)) if match else None

        if converted is None:
            if index < 2:
                return None
            version, _ = try_convert_to_version(prefix)
            leftover = segment
        else:
            component, remainder = converted
            version, ok = try_convert_to_version(f"{prefix}{SEGMENT_DELIMITER}{component}")
            if not ok:
                raise InvariantViolation(
                    f"Component {component} after valid prefix {prefix!r} "
                    f"failed version construction"
                )
            leftover = remainder + segment[match.end():]

        slots[index] = leftover
        for later in range(index + 1, len(segments)):
            slots[later] = segments[later]

        outcome = ParseOutcome.truncated_at(index)
        logger.debug(f"Parsed {version} with outcome {outcome.name}, leftover {leftover!r}")
        return FlexibleVersionResult(version, LeftoverRecord(*slots), outcome)

    def _convert_digit_run(self, digits: str) -> Optional[Tuple[int, str]]:
        """
        Convert a digit run at the narrowest tier that holds it.

        Returns:
            Tuple of (component value, overflow remainder as a decimal string),
            or None if no tier could convert the run
        """
        for tier in self._tiers:
            value, ok = CONVERTERS[tier](digits)
            if not ok:
                continue
            if value <= INT32_MAX:
                return int(value), ""

            logger.debug(f"Digit run {digits[:32]!r} converted at tier {tier.value}")
            return INT32_MAX, to_decimal_string(value - INT32_MAX)

        logger.debug(f"Digit run {digits[:32]!r} not convertible at any tier")
        return None


_default_parser = FlexibleVersionParser()


def parse_flexible_version(text: str, big_integer: bool = True) -> FlexibleVersionResult:
    """
    Parse ``text`` into a best-effort version.

    Args:
        text: Any string
        big_integer: Use arbitrary-precision integers for oversized digit runs

    Returns:
        FlexibleVersionResult(version, leftovers, outcome)
    """
    parser = _default_parser if big_integer else FlexibleVersionParser(big_integer=False)
    return parser.parse(text)
