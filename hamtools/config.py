"""Unified configuration loader for ham radio tools."""

import logging
from pathlib import Path
from typing import Any

import yaml

from .geo_utils import GeoCoordinate
from .maidenhead import grid_to_latlon

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "callsign": "N0CALL",
    "grid": "JJ00AA",  # Home 6-character locator
    "map_provider": "google",  # google, amap, tencent, baidu, geo
    "map_label": "Location",
}


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file with defaults.

    Searches for config in:
    1. Provided path
    2. local/config/config.yaml (user config, gitignored)
    3. ~/.config/ham-radio-tools/config.yaml (XDG standard)
    4. Falls back to defaults

    Args:
        config_path: Optional path to config file

    Returns:
        Dict with configuration values
    """
    config = DEFAULT_CONFIG.copy()

    search_paths = []

    if config_path:
        search_paths.append(Path(config_path))

    # Local config (gitignored, stays with repo)
    repo_root = Path(__file__).parent.parent
    search_paths.append(repo_root / "local" / "config" / "config.yaml")

    # XDG config
    search_paths.append(Path.home() / ".config" / "ham-radio-tools" / "config.yaml")

    # Load first readable config
    for path in search_paths:
        if path.exists():
            try:
                with open(path) as f:
                    user_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Could not load config from {path}: {e}")
                continue
            if isinstance(user_config, dict):
                config.update(user_config)
            return config

    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration dict to save
        config_path: Optional path to save to (defaults to local/config/config.yaml)
    """
    if config_path is None:
        repo_root = Path(__file__).parent.parent
        config_path = repo_root / "local" / "config" / "config.yaml"

    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def home_coordinate(config: dict[str, Any]) -> GeoCoordinate:
    """Center of the configured home grid.

    Raises:
        LocatorFormatError: If the configured grid is not a 6-character locator
    """
    return grid_to_latlon(config["grid"])
