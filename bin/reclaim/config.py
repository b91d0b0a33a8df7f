#!/usr/bin/env python3
"""Configuration management for reclaim.

Handles loading defaults for the cleanup command from a YAML file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

_LOGGER = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ("mp4", "jpg")


class CleanupConfig(BaseModel):
    """Settings for a violent cleanup run."""

    filter_extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    # 0-100 is the meaningful range; the command line accepts up to 255
    target_use_percentage: int | None = Field(default=None, ge=0, le=255)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def load(cls, config_path: Path | None) -> CleanupConfig:
        """Load configuration from config path.

        Args:
            config_path: Path to a YAML configuration file, or None for defaults

        Returns:
            CleanupConfig with loaded values, or defaults if the file doesn't exist

        Raises:
            ValidationError: If config contains invalid values or unknown keys
        """
        if config_path is None:
            return cls()
        if not config_path.exists():
            _LOGGER.debug("Config file %s does not exist, using defaults", config_path)
            return cls()

        try:
            with config_path.open(encoding="utf-8") as config_file:
                config_data = yaml.safe_load(config_file)

            if config_data is None:
                _LOGGER.warning("Config file %s is empty, using defaults", config_path)
                return cls()

            return cls.model_validate(config_data)

        except ValidationError as e:
            _LOGGER.error("Invalid config in %s: %s", config_path, e)
            raise
        except Exception as e:
            _LOGGER.error("Failed to load config from %s: %s", config_path, e)
            raise

    def with_cli_overrides(
        self,
        filter_extensions: tuple[str, ...] = (),
        target_use_percentage: int | None = None,
    ) -> CleanupConfig:
        """Create a new CleanupConfig with command line values applied on top."""
        config_dict = self.model_dump()
        if filter_extensions:
            config_dict["filter_extensions"] = tuple(filter_extensions)
        if target_use_percentage is not None:
            config_dict["target_use_percentage"] = target_use_percentage
        return self.__class__.model_validate(config_dict)
