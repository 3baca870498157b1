"""Configuration management for the Todo Menu application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional
import yaml

from .storage import DEFAULT_FILE_NAME


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TODO_MENU_CONFIG"
DEFAULT_CONFIG_PATH = "~/.todo_menu/config.yaml"


@dataclass
class ConfigModel:
    """Global configuration model for Todo Menu."""

    # File paths
    data_file: str = DEFAULT_FILE_NAME  # relative to the working directory

    # Display preferences
    clear_screen: bool = True
    no_color: bool = False

    # Behavior settings
    strict_load: bool = False  # corrupt todo file is an error instead of an empty list

    # Diagnostics
    log_level: str = "WARNING"

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_file": self.data_file,
            "clear_screen": self.clear_screen,
            "no_color": self.no_color,
            "strict_load": self.strict_load,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Config document must be a mapping")

        known = {f.name: f.type for f in fields(cls)}
        unknown = sorted(map(str, set(data) - set(known)))
        if unknown:
            logger.debug(f"Ignoring unknown config keys: {', '.join(unknown)}")

        values = {key: value for key, value in data.items() if key in known}
        for key, value in values.items():
            if not isinstance(value, known[key]):
                raise ValueError(
                    f"Config key '{key}' must be {known[key].__name__}, "
                    f"got {type(value).__name__}"
                )

        return cls(**values)

    def get_data_path(self) -> Path:
        """Get the todo file path."""
        return Path(os.path.expanduser(self.data_file))

    def get_log_level(self) -> int:
        """Get the numeric logging level, falling back to WARNING."""
        level = logging.getLevelName(str(self.log_level).upper())
        return level if isinstance(level, int) else logging.WARNING


def get_config_path() -> Path:
    """Get the default config file path."""
    return Path(os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)))


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, or defaults if there is none."""
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return ConfigModel()

    try:
        with open(config_path, 'r', encoding="utf-8") as f:
            config = ConfigModel.from_yaml(f.read())
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return ConfigModel()

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w', encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.debug(f"Configuration saved to {config_path}")
