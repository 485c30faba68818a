"""Configuration management for the tasklist application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


logger = logging.getLogger(__name__)

DB_ENV_VAR = "TASKLIST_DB"


@dataclass
class ConfigModel:
    """Global configuration model for tasklist."""

    # File paths
    data_dir: str = "~/tasks_db"
    db_filename: str = "tasks.sqlite"
    db_path: Optional[str] = None  # Explicit database file, wins over data_dir

    # Display preferences
    name_width: int = 44
    no_color: bool = False

    # Behavior settings
    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

        return cls(**{k: v for k, v in data.items() if k in known})

    def get_data_dir(self) -> Path:
        """Get the directory holding the database.

        Raises:
            RuntimeError: If the home directory cannot be determined
        """
        return Path(self.data_dir).expanduser()

    def get_db_path(self) -> Path:
        """Get the database file path."""
        if self.db_path:
            return Path(self.db_path).expanduser()
        env = os.getenv(DB_ENV_VAR)
        if env:
            return Path(env).expanduser()
        return self.get_data_dir() / self.db_filename

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return self.get_data_dir() / "config.yaml"


class Config:
    """Configuration manager for tasklist."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, or fall back to defaults.

        The file is only read; a missing file is never created here.
        """
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            try:
                config_path = config.get_config_path()
            except RuntimeError as e:
                logger.debug(f"No config path available: {e}")
                config_path = None

        if config_path is not None and config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    config = ConfigModel.from_yaml(f.read())
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")
                logger.warning("Using default configuration.")
                config = ConfigModel()

        cls._instance = config
        return config

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()
