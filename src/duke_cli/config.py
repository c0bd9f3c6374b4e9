"""Configuration management for the Duke task assistant."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .errors import DukeError, ErrorKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.duke/config.yaml")


@dataclass
class ConfigModel:
    """Global configuration model for Duke."""

    # File paths
    data_dir: str = "~/.duke"
    tasks_file: str = "tasks.md"

    # Behavior settings
    find_ignore_case: bool = False

    # UI and logging
    no_color: bool = False
    show_banner: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        self.data_dir = os.path.expanduser(self.data_dir)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        return yaml.safe_dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("configuration must be a mapping")

        known = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            # bool is a subclass of int, so compare exact types
            if type(value) is not known[key]:
                raise ValueError(
                    f"{key} must be a {known[key].__name__}, got {type(value).__name__}: {value!r}"
                )
            values[key] = value

        level = values.get("log_level")
        if level is not None and not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"log_level must be a logging level name, got {level!r}")
        return cls(**values)

    def get_tasks_path(self) -> Path:
        """Get the file path the task list is stored in."""
        return Path(self.data_dir) / self.tasks_file


class Config:
    """Configuration manager for Duke."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None, strict: bool = False) -> ConfigModel:
        """Load configuration from file, falling back to defaults.

        Args:
            config_path: File to read; defaults to ``~/.duke/config.yaml``.
            strict: Raise instead of falling back when the file is unreadable
                or invalid.

        Raises:
            DukeError: ``CONFIG`` in strict mode when the file cannot be used.
        """
        if cls._instance is not None:
            return cls._instance

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH.expanduser()

        config = ConfigModel()
        if config_path.exists():
            try:
                config = ConfigModel.from_yaml(config_path.read_text(encoding="utf-8"))
                logger.info("Loaded configuration from %s", config_path)
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                if strict:
                    raise DukeError(
                        ErrorKind.CONFIG, f"Failed to load config from {config_path}: {e}"
                    ) from e
                logger.warning("Failed to load config from %s: %s; using defaults", config_path, e)
                config = ConfigModel()
        elif strict:
            raise DukeError(ErrorKind.CONFIG, f"Config file not found: {config_path}")
        else:
            logger.info("No configuration at %s, using defaults", config_path)

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH.expanduser()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config.to_yaml(), encoding="utf-8")
        logger.info("Configuration saved to %s", config_path)

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None, strict: bool = False) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path, strict=strict)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)


def reset_config() -> None:
    """Drop the cached configuration (useful for testing)."""
    Config.reset()
