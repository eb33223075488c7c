"""Config path resolution: explicit path, env var, project file, packaged defaults."""

import os
from pathlib import Path
from typing import Optional


def get_defaults_path() -> Path:
    """Packaged defaults: meshview/config/defaults.yaml"""
    return Path(__file__).parent / "defaults.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .meshview/config.yaml (from current working directory)"""
    project_config = Path.cwd() / ".meshview" / "config.yaml"
    if project_config.exists():
        return project_config
    return None


def get_config_path(config_path: Optional[str] = None) -> Path:
    """
    Resolve config location.
    
    Priority:
    1. Explicit path (if provided)
    2. MESHVIEW_CONFIG environment variable
    3. .meshview/config.yaml in current directory
    4. Packaged defaults.yaml
    
    Returns:
        Path to config file
    """
    if config_path:
        return Path(config_path)
    
    env_path = os.getenv("MESHVIEW_CONFIG")
    if env_path:
        return Path(env_path)
    
    project_config = get_project_config_path()
    if project_config:
        return project_config
    return get_defaults_path()
