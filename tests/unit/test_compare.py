"""
Unit tests for version string comparison.
"""

import pytest

from flexver.compare import UnparseableVersionError, compare_versions, is_newer
from flexver.parser import FlexibleVersionParser


class TestCompareVersions:
    """Tests for compare_versions and is_newer."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("1.2.3", "1.2.10", -1),
            ("1.10", "1.9", 1),
            ("1.2.3.4", "1.2.3.4", 0),
            ("1.2", "1.2.0", -1),
            ("1.2.3.4-beta3", "1.2.3.4", 0),
            ("1.2.3.4.5", "1.2.3.4", 0),
            ("2.0-rc1", "1.99.99", 1),
        ],
    )
    def test_compare(self, left, right, expected):
        """Salvaged versions are compared; leftovers are ignored."""
        assert compare_versions(left, right) == expected

    def test_is_newer(self):
        assert is_newer("5.1.0", "5.0.9") is True
        assert is_newer("5.0.9", "5.1.0") is False
        assert is_newer("5.1.0", "5.1.0") is False

    def test_unparseable_raises(self):
        """Either side unparseable raises with the offending text."""
        with pytest.raises(UnparseableVersionError) as exc_info:
            compare_versions("1.2", "latest")

        assert exc_info.value.text == "latest"
        assert isinstance(exc_info.value, ValueError)

    def test_uses_given_parser(self):
        """A configured parser is used for both sides."""
        parser = FlexibleVersionParser(big_integer=False)
        assert compare_versions("1.2.3", "1.2.3.0", parser=parser) == -1
