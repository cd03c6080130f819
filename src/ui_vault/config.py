"""Configuration management for ui-vault."""

import os
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict
import yaml

from .color_engine.schema import ColorMode, WCAGLevel
from .color_engine.utils import is_valid_hex

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConfigModel:
    """Global configuration model for ui-vault."""

    # Palette defaults
    default_seed: str = "#3B82F6"
    default_mode: ColorMode = ColorMode.LIGHT
    target_level: WCAGLevel = WCAGLevel.AA  # AA or AAA for suggestions

    # Engine behavior
    cache_palettes: bool = True
    custom_presets: Dict[str, str] = field(default_factory=dict)  # name -> seed hex

    # File paths
    data_dir: str = "~/.ui_vault"

    # Output
    no_color: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir)

        try:
            self.default_mode = ColorMode(self.default_mode)
        except ValueError:
            logger.warning(f"Unknown default_mode '{self.default_mode}', using light")
            self.default_mode = ColorMode.LIGHT

        try:
            level = WCAGLevel(self.target_level)
        except ValueError:
            level = None
        if level not in (WCAGLevel.AA, WCAGLevel.AAA):
            logger.warning(f"Unsupported target_level '{self.target_level}', using AA")
            level = WCAGLevel.AA
        self.target_level = level

        if not is_valid_hex(self.default_seed):
            logger.warning(f"Invalid default_seed '{self.default_seed}', using #3B82F6")
            self.default_seed = "#3B82F6"

        self.custom_presets = dict(self.custom_presets or {})
        for name, seed in list(self.custom_presets.items()):
            if not is_valid_hex(seed):
                logger.warning(f"Dropping custom preset '{name}': invalid color '{seed}'")
                del self.custom_presets[name]

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            self.log_level = "WARNING"

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "default_seed": self.default_seed,
            "default_mode": self.default_mode.value,
            "target_level": self.target_level.value,
            "cache_palettes": self.cache_palettes,
            "custom_presets": self.custom_presets,
            "data_dir": self.data_dir,
            "no_color": self.no_color,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            logger.warning(f"Config must be a mapping, got {type(data).__name__}; using defaults")
            data = {}

        # Ignore keys this version doesn't know about
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


class Config:
    """Configuration manager for ui-vault."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or fall back to defaults."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using default configuration.")
        else:
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, 'w') as f:
                f.write(config.to_yaml())
            logger.info(f"Configuration saved to {config_path}")
        except OSError as e:
            logger.error(f"Failed to save config to {config_path}: {e}")

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


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to the configuration directory
    """
    config = get_config()
    return Path(config.data_dir)
