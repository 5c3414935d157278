"""
Config Loader

Loads the run configuration from an optional YAML file and the environment.
Validates statistic names and log level before anything runs.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..stats.registry import DEFAULT_STATS

logger = logging.getLogger(__name__)

ENV_PREFIX = "LEDGERSTATS"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class RunConfig(BaseModel):
    """
    Configuration for one ledgerstats run.

    Attributes:
        validate_graph: Run the connectivity/acyclicity and bipartite checks
        stats: Statistic names to compute, in report order
        log_level: Logging level name for the command-line front-end
    """
    validate_graph: bool = True
    stats: List[str] = Field(default_factory=lambda: list(DEFAULT_STATS))
    log_level: str = "INFO"

    @field_validator("stats")
    @classmethod
    def _known_stats(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in DEFAULT_STATS]
        if unknown:
            raise ValueError(
                f"Unknown statistics: {', '.join(unknown)}. "
                f"Available statistics: {', '.join(DEFAULT_STATS)}"
            )
        if len(set(value)) != len(value):
            raise ValueError(f"Duplicate statistics in {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ConfigLoader:
    """
    Loads RunConfig from YAML and environment variables.

    Precedence, lowest first:
    1. RunConfig defaults
    2. Values from the YAML file, if one is given
    3. LEDGERSTATS_LOG_LEVEL and LEDGERSTATS_NO_VALIDATION

    Command-line flags are applied on top by the caller.

    Example usage:
        loader = ConfigLoader(Path("config/ledgerstats.yaml"))
        config = loader.load()

        config.stats          # ["depths", "in_references", ...]
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: YAML file to read, or None for defaults only
        """
        self.config_path = config_path

    def load(self) -> RunConfig:
        """
        Load and validate the configuration.

        Returns:
            Validated RunConfig

        Raises:
            ValueError: If the file cannot be read or fails validation
        """
        raw = self._read_file() if self.config_path is not None else {}
        raw.update(self._read_env())

        try:
            config = RunConfig(**raw)
        except ValidationError as e:
            source = self.config_path or "environment"
            logger.error(f"Invalid configuration from {source}: {e}")
            raise ValueError(f"Invalid configuration from {source}: {e}")

        logger.debug(f"Loaded configuration: {config}")
        return config

    def _read_file(self) -> dict:
        try:
            with open(self.config_path) as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {self.config_path}: {e}")
            raise ValueError(f"Failed to load {self.config_path}: {e}")

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Failed to load {self.config_path}: expected a mapping, "
                f"got {type(raw).__name__}"
            )

        logger.info(f"Loaded config file {self.config_path}")
        return raw

    @staticmethod
    def _read_env() -> dict:
        overrides = {}

        log_level = os.getenv(f"{ENV_PREFIX}_LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level

        no_validation = os.getenv(f"{ENV_PREFIX}_NO_VALIDATION")
        if no_validation:
            overrides["validate_graph"] = no_validation.strip().lower() not in _TRUE_VALUES

        return overrides
