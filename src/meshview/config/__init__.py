"""Configuration module: load display thresholds and rendering options."""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from pydantic import ValidationError
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .models import DisplayConfig, LatencyConfig
from .paths import get_config_path, get_defaults_path, get_project_config_path

logger = get_logger("config")

__all__ = [
    "DisplayConfig",
    "LatencyConfig",
    "load_display_config",
    "get_config_path",
    "get_defaults_path",
    "get_project_config_path",
]


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Read a YAML mapping; an empty file is an empty mapping."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e
    
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a dictionary: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_display_config(config_path: Optional[str] = None) -> DisplayConfig:
    """
    Load display configuration, layering the resolved file over the packaged defaults.
    
    Args:
        config_path: Path to config YAML file. If None, resolves via get_config_path()
        
    Returns:
        Validated DisplayConfig
        
    Raises:
        ConfigError: If config cannot be loaded or fails validation
    """
    defaults_path = get_defaults_path()
    config = _read_yaml(defaults_path)
    
    path = get_config_path(config_path)
    if path != defaults_path:
        _deep_merge(config, _read_yaml(path))
        logger.info(f"Loaded configuration from {path}")
    else:
        logger.debug(f"Using packaged defaults from {path}")
    
    try:
        return DisplayConfig.model_validate(config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
