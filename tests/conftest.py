"""
Pytest configuration and fixtures for flexver tests.

Provides temporary configuration files, an isolated environment and a
Click CLI runner.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest
import yaml
from click.testing import CliRunner

from flexver.config import (
    ENV_BIG_INTEGER,
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_OUTPUT_FORMAT,
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path) -> Path:
    """
    Keep tests away from the user's real configuration.

    Clears FLEXVER_* overrides and points the default config path at a
    file inside the test's temporary directory.
    """
    for name in (ENV_BIG_INTEGER, ENV_LOG_LEVEL, ENV_OUTPUT_FORMAT):
        monkeypatch.delenv(name, raising=False)
    config_path = tmp_path / "isolated" / "flexver.yaml"
    monkeypatch.setenv(ENV_CONFIG_PATH, str(config_path))
    return config_path


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for configuration files.

    Yields:
        Path to temporary configuration directory
    """
    with tempfile.TemporaryDirectory(prefix="flexver_test_") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def parser_config() -> dict:
    """Sample configuration values."""
    return {
        "log_level": "DEBUG",
        "big_integer": False,
        "output_format": "json",
    }


@pytest.fixture
def parser_config_file(temp_config_dir: Path, parser_config: dict) -> Path:
    """
    Write the sample configuration to a temporary YAML file.

    Returns:
        Path to the configuration file
    """
    config_path = temp_config_dir / "flexver.yaml"
    with open(config_path, "w") as f:
        yaml.dump(parser_config, f)
    return config_path


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()
