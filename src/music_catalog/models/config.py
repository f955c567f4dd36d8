"""Configuration model for music catalog."""

from pathlib import Path
from typing import Any, Dict
import json
from dataclasses import asdict, dataclass, field, fields, is_dataclass

from ..exceptions import ConfigurationError


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "WARNING"
    show_path: bool = False


@dataclass
class DisplayConfig:
    """Configuration for rendering a catalog."""
    unknown_label: str = "(none)"
    show_summary: bool = True


@dataclass
class Config:
    """Main configuration model."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration."""
        return cls()


def _dict_to_dataclass(data: Dict[str, Any], dataclass_type):
    """Convert dict to dataclass recursively, ignoring unknown keys."""
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected an object for {dataclass_type.__name__}, got {type(data).__name__}"
        )

    kwargs = {}
    for f in fields(dataclass_type):
        if f.name not in data:
            continue
        value = data[f.name]
        if is_dataclass(f.type):
            kwargs[f.name] = _dict_to_dataclass(value, f.type)
        elif isinstance(value, f.type):
            kwargs[f.name] = value
        else:
            raise ConfigurationError(
                f"Invalid value for {dataclass_type.__name__}.{f.name}: "
                f"expected {f.type.__name__}, got {type(value).__name__}"
            )

    return dataclass_type(**kwargs)


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}") from e

    return _dict_to_dataclass(config_data, Config)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    config_dict = asdict(config)

    with open(config_path, 'w') as f:
        json.dump(config_dict, f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(Config.default(), config_path)
