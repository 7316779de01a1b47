"""Configuration management for backtrack."""

import logging
import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import ALL_MILESTONES, CONFIG_FILENAME
from .errors import ConfigError
from .models import Version
from .selection import MilestoneSelection

logger = logging.getLogger(__name__)


class OutputConfig(BaseModel):
    """Default output settings, overridable from the command line."""

    json_output: bool = Field(default=False, alias="json")
    color: bool = True


class SelectionConfig(BaseModel):
    """Milestones reported on by ``backtrack check``."""

    milestones: str = Field(
        default=ALL_MILESTONES, description="'*' or comma-separated milestone names"
    )

    def selection(self) -> MilestoneSelection:
        return MilestoneSelection.parse(self.milestones)


class BacktrackConfig(BaseModel):
    """Root configuration for backtrack.

    ``current`` is the host's running Typst version, given as a table tagged
    with its ``kind`` (``semantic``, ``dated`` or ``post``).
    """

    current: Version | None = None
    output: OutputConfig = Field(default_factory=OutputConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)


def load_config(config_dir: Path) -> BacktrackConfig:
    """Load config from backtrack.toml.

    Args:
        config_dir: Directory containing backtrack.toml

    Returns:
        Loaded configuration, or defaults if backtrack.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = config_dir / CONFIG_FILENAME
    if not config_path.exists():
        logger.debug(f"No {CONFIG_FILENAME} in {config_dir}, using defaults")
        return BacktrackConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return BacktrackConfig.model_validate(data)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{config_path} is not valid TOML: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"{config_path} is invalid: {e}") from e


def write_config_template(config_dir: Path) -> Path:
    """Write default backtrack.toml template.

    Args:
        config_dir: Directory to write backtrack.toml into

    Returns:
        Path to the written config file
    """
    config_path = config_dir / CONFIG_FILENAME
    template = {
        "current": {"kind": "semantic", "major": 0, "minor": 8, "patch": 0},
        "output": {"json": False, "color": True},
        "selection": {"milestones": ALL_MILESTONES},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
