"""
Configuration Manager for labdevices

Loads the YAML configuration file into the pydantic models, falling back to
defaults when no file is configured.
"""

import yaml
import logging
from typing import Optional, Union
from pathlib import Path
from labdevices.config import LabConfig

log = logging.getLogger(__name__)


class ConfigurationManager:
    """Manages configuration loading from a YAML file."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None

    def load_config(self) -> LabConfig:
        """Load configuration from config.yaml, or defaults if no path was given."""
        if self.config_path is None:
            log.info("No configuration file given, using defaults")
            config = LabConfig()
        else:
            log.info(f"Loading configuration from {self.config_path}")
            config = self._load_from_file()

        return config

    def _load_from_file(self) -> LabConfig:
        """Load configuration from config.yaml file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            config_dict = yaml.safe_load(f)

        if config_dict is None:
            log.warning(f"Configuration file {self.config_path} is empty, using defaults")
            return LabConfig()
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping, got {type(config_dict).__name__}")

        # "devices:" with no entries parses as None
        if config_dict.get('devices') is None:
            config_dict.pop('devices', None)

        return LabConfig(**config_dict)
