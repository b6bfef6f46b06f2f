"""
Tests for package version resolution.

Tests version extraction from Git tags, development version suffixes,
the environment override, and the fallback.
"""

import subprocess
from unittest.mock import MagicMock, patch

import flexver


class TestGitVersionExtraction:
    """Tests for extracting version from Git tags"""

    def test_version_on_exact_tag(self, monkeypatch):
        """Version is the bare tag when exactly on it"""
        monkeypatch.delenv('FLEXVER_VERSION', raising=False)

        def mock_run(args, **kwargs):
            result = MagicMock()
            result.stdout = "v1.2.3-0-ga1b2c3d\n"
            result.returncode = 0
            return result

        with patch('subprocess.run', side_effect=mock_run):
            assert flexver._get_version() == "v1.2.3"

    def test_version_ahead_of_tag(self, monkeypatch):
        """Commits past a tag add a dev suffix"""
        monkeypatch.delenv('FLEXVER_VERSION', raising=False)

        def mock_run(args, **kwargs):
            result = MagicMock()
            result.stdout = "v1.2.3-5-ga1b2c3d\n"
            result.returncode = 0
            return result

        with patch('subprocess.run', side_effect=mock_run):
            assert flexver._get_version() == "v1.2.3-dev.5+a1b2c3d"

    def test_version_no_tags_exist(self, monkeypatch):
        """Without tags the commit hash is used"""
        monkeypatch.delenv('FLEXVER_VERSION', raising=False)

        def mock_run(args, **kwargs):
            result = MagicMock()
            if 'describe' in args:
                result.stdout = "a1b2c3d\n"
            elif 'rev-parse' in args:
                result.stdout = "a1b2c3d\n"
            result.returncode = 0
            return result

        with patch('subprocess.run', side_effect=mock_run):
            assert flexver._get_version() == "v0.0.0-dev+a1b2c3d"

    def test_version_git_not_available(self, monkeypatch):
        """Fallback when Git is not installed"""
        monkeypatch.delenv('FLEXVER_VERSION', raising=False)

        with patch('subprocess.run', side_effect=FileNotFoundError("git")):
            assert flexver._get_version() == "v0.0.0-dev+unknown"

    def test_version_git_command_fails(self, monkeypatch):
        """Fallback when Git exits non-zero"""
        monkeypatch.delenv('FLEXVER_VERSION', raising=False)

        def mock_run(args, **kwargs):
            raise subprocess.CalledProcessError(128, args)

        with patch('subprocess.run', side_effect=mock_run):
            assert flexver._get_version() == "v0.0.0-dev+unknown"

    def test_version_git_timeout(self, monkeypatch):
        """Fallback when Git times out"""
        monkeypatch.delenv('FLEXVER_VERSION', raising=False)

        def mock_run(args, **kwargs):
            raise subprocess.TimeoutExpired(args, timeout=5)

        with patch('subprocess.run', side_effect=mock_run):
            assert flexver._get_version() == "v0.0.0-dev+unknown"


class TestEnvironmentVariableOverride:
    """Tests for environment variable override behavior"""

    def test_env_var_overrides_git(self, monkeypatch):
        """FLEXVER_VERSION takes precedence over Git tags"""
        monkeypatch.setenv('FLEXVER_VERSION', 'v2.0.0-prerelease')

        with patch('subprocess.run') as mock_run:
            assert flexver._get_version() == 'v2.0.0-prerelease'
            mock_run.assert_not_called()


class TestModuleExports:
    """Tests for the package's public names"""

    def test_version_is_string(self):
        assert isinstance(flexver.__version__, str)
        assert flexver.__version__

    def test_public_api(self):
        result = flexver.parse_flexible_version("1.2.3.4-beta3")
        assert result.outcome is flexver.ParseOutcome.REVISION_TRUNCATED
        assert result.version == flexver.VersionValue(1, 2, 3, 4)
