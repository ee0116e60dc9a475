"""Configuration loader for the grid square calculator."""

import sys
import yaml
from pathlib import Path
from typing import Any


DEFAULT_CONFIG = {
    "unit": "km",      # Default distance unit: km, mi, or nm
    "verbose": False,  # Show coordinates, all units and bearings
}


def config_search_paths(config_path: Path | None = None) -> list[Path]:
    """List config file locations in the order they are tried."""
    search_paths = []

    if config_path:
        search_paths.append(Path(config_path))

    # Local config (gitignored, stays with repo)
    repo_root = Path(__file__).parent.parent
    search_paths.append(repo_root / "local" / "config" / "config.yaml")

    # XDG config
    search_paths.append(Path.home() / ".config" / "gridcalc" / "config.yaml")

    return search_paths


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML file with defaults.

    Searches for config in:
    1. Provided path
    2. local/config/config.yaml (user config, gitignored)
    3. ~/.config/gridcalc/config.yaml (XDG standard)
    4. Falls back to defaults

    Args:
        config_path: Optional path to config file

    Returns:
        Dict with configuration values
    """
    config = DEFAULT_CONFIG.copy()

    for path in config_search_paths(config_path):
        if path.exists():
            try:
                with open(path) as f:
                    user_config = yaml.safe_load(f)
                if user_config is not None and not isinstance(user_config, dict):
                    raise ValueError(f"expected a mapping, got {type(user_config).__name__}")
                if user_config:
                    config.update(user_config)
                return config
            except (OSError, yaml.YAMLError, ValueError) as e:
                print(f"Warning: Could not load config from {path}: {e}", file=sys.stderr)

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

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
