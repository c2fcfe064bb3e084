"""
Configuration Management
========================

TOML-based configuration for filecorr.

Configuration files are searched in the following order:
1. Path passed explicitly
2. ./filecorr.toml (current directory)
3. ~/.config/filecorr/config.toml (user config)
4. /etc/filecorr/config.toml (system config)

Example configuration file (filecorr.toml):

    [filesystem]
    encoding = "utf-8"

    [logging]
    level = "WARNING"
    trace = true
    trace_level = "INFO"
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from filecorr.core.logger import resolve_level

logger = logging.getLogger(__name__)

# Use tomli for Python < 3.11, tomllib for Python >= 3.11
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_CONFIG: Dict[str, Any] = {
    "filesystem": {
        "encoding": "utf-8",
    },
    "logging": {
        "level": "INFO",
        "trace": False,
        "trace_level": "DEBUG",
    },
}

CONFIG_LOCATIONS = [
    Path("filecorr.toml"),
    Path("~/.config/filecorr/config.toml").expanduser(),
    Path("/etc/filecorr/config.toml"),
]


@dataclass
class Config:
    """
    Configuration container for filecorr settings.

    Attributes:
        filesystem: Text encoding and other I/O settings
        logging: Log level and call tracing settings
        _source: Path to the config file that was loaded
    """

    filesystem: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)
    _source: Optional[str] = None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_dict = getattr(self, section, {})
        return section_dict.get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        section_dict = getattr(self, section, None)
        if section_dict is not None:
            section_dict[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "filesystem": self.filesystem,
            "logging": self.logging,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Config":
        """Create Config from dictionary."""
        return cls(
            filesystem=data.get("filesystem", {}),
            logging=data.get("logging", {}),
            _source=source,
        )


def load_toml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a TOML configuration file.

    Raises:
        FileNotFoundError: If file doesn't exist
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    with open(path, "rb") as f:
        return tomllib.load(f)


def save_toml(config: Dict[str, Any], filepath: Union[str, Path]) -> str:
    """
    Save configuration to a TOML file.

    Only flat sections of strings, booleans and numbers are written.

    Returns:
        Path to the saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    for section, values in config.items():
        if isinstance(values, dict) and values:
            lines.append(f"[{section}]")
            for key, value in values.items():
                if isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
            lines.append("")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))

    return str(path)


def find_config_file(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Find the configuration file to use.

    Args:
        config_path: Explicit path to config file (highest priority)

    Returns:
        Path to config file, or None if not found
    """
    if config_path:
        path = Path(config_path)
        if path.exists():
            return path
        logger.warning(f"Specified config file not found: {config_path}")
        return None

    for location in CONFIG_LOCATIONS:
        if location.exists():
            return location

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    A file that cannot be parsed is reported and the defaults are used.
    """
    config_data = _deep_copy_dict(DEFAULT_CONFIG)

    config_file = find_config_file(config_path)

    if config_file:
        try:
            file_config = load_toml(config_file)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Error loading config file {config_file}: {e}")
        else:
            config_data = _merge_dicts(config_data, file_config)
            _validate_levels(config_data)
            logger.info(f"Loaded configuration from {config_file}")
            return Config.from_dict(config_data, source=str(config_file))

    return Config.from_dict(config_data)


def _validate_levels(config_data: Dict[str, Any]) -> None:
    """Replace unknown logging level names with their defaults."""
    section = config_data.get("logging", {})
    for key in ("level", "trace_level"):
        try:
            resolve_level(section.get(key, DEFAULT_CONFIG["logging"][key]))
        except ValueError as e:
            logger.warning(f"{e} in [logging] {key}, using {DEFAULT_CONFIG['logging'][key]}")
            section[key] = DEFAULT_CONFIG["logging"][key]


def get_default_config() -> Config:
    """Get the default configuration."""
    return Config.from_dict(_deep_copy_dict(DEFAULT_CONFIG))


def create_default_config_file(filepath: Optional[str] = None) -> str:
    """Write the default configuration (to ./filecorr.toml unless told otherwise)."""
    if filepath is None:
        filepath = "filecorr.toml"

    return save_toml(DEFAULT_CONFIG, filepath)


def _deep_copy_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Create a deep copy of a dictionary."""
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy_dict(value)
        elif isinstance(value, list):
            result[key] = value.copy()
        else:
            result[key] = value
    return result


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two dictionaries, with override taking precedence."""
    result = _deep_copy_dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
