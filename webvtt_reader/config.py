"""
Configuration handling for the WebVTT reader CLI
"""
import copy
import os
import yaml
from typing import Dict, Any, Optional


class ConfigError(Exception):
    """Raised when the YAML configuration file cannot be loaded."""


class Config:
    """Application configuration: defaults < YAML file < CLI arguments"""

    DEFAULT_CONFIG = {
        'input': None,
        'encoding': 'utf-8',
        'all_blocks': False,
        'log_level': 'WARNING',
        'output': {
            'format': 'text',   # text | json
            'indent': 2,        # json only
        },
    }

    # Sections merged key by key instead of being replaced wholesale
    NESTED_KEYS = ('output',)

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        # Deep copy so instances never share the nested defaults
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file

        Args:
            config_file: Path to the configuration file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file: {e}")

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"Configuration file must contain a mapping, got {type(file_config).__name__}")

        for key, value in file_config.items():
            if key in self.NESTED_KEYS and isinstance(value, dict):
                if key not in self.config:
                    self.config[key] = {}
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Deep merge of nested dictionaries

        Args:
            base: Dictionary updated in place
            update: Dictionary with the new values
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update the configuration with CLI arguments.
        CLI arguments take precedence over the configuration file; ``None``
        values are ignored.

        Args:
            args: Dictionary of CLI arguments. A nested dict (e.g. ``output``)
                is merged into the matching section.
        """
        for key, value in args.items():
            if value is None:
                continue
            if key in self.NESTED_KEYS and isinstance(value, dict):
                self._deep_merge(self.config.setdefault(key, {}),
                                 {k: v for k, v in value.items() if v is not None})
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value

        Args:
            key: Configuration key
            default: Value returned when the key is missing

        Returns:
            The configuration value
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Get the whole configuration

        Returns:
            Dictionary with the whole configuration
        """
        return self.config.copy()
