"""Shared test fixtures for backtrack tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create a directory with a backtrack.toml whose current version is v0.5.0."""
    config = """[current]
kind = "semantic"
major = 0
minor = 5
patch = 0

[selection]
milestones = "v2023-03-28,v0.5.0,v0.6.0"
"""
    (tmp_path / "backtrack.toml").write_text(config)
    return tmp_path


@pytest.fixture
def post_config_dir(tmp_path: Path) -> Path:
    """Create a directory whose current version is a nightly after v0.8.0."""
    config = """[current]
kind = "post"
target = [9, 0]
revision = 4

[current.base]
major = 0
minor = 8
patch = 0

[output]
json = true
"""
    (tmp_path / "backtrack.toml").write_text(config)
    return tmp_path
