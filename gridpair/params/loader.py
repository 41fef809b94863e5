"""
YAML configuration loading and saving.

Provides utilities to load GridPairConfig from YAML files
and save configurations for reproducibility.
"""

from pathlib import Path
from typing import Any

import yaml

from gridpair.params.schema import GridPairConfig, ValidationError


def load_config(path: str | Path) -> GridPairConfig:
    """
    Load run configuration from a YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        GridPairConfig instance with validated parameters

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValidationError: If any parameter validation fails
        yaml.YAMLError: If the YAML is malformed

    Example:
        config = load_config("configs/default.yaml")
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValidationError(f"Configuration must be a dictionary, got {type(data)}")

    return GridPairConfig.from_dict(data)


def save_config(config: GridPairConfig, path: str | Path) -> None:
    """
    Save run configuration to a YAML file.

    Args:
        config: GridPairConfig instance to save
        path: Path to write YAML file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_config_with_overrides(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> GridPairConfig:
    """
    Load configuration with optional overrides.

    Useful for command-line parameter overrides or test configurations.

    Args:
        path: Optional path to base YAML file (uses defaults if None)
        overrides: Dictionary of parameter overrides to apply

    Returns:
        GridPairConfig with overrides applied

    Example:
        config = load_config_with_overrides(
            path="configs/default.yaml",
            overrides={"search": {"shuffle": True, "seed": 7}}
        )
    """
    if path is not None:
        config = load_config(path)
    else:
        config = GridPairConfig()

    if overrides:
        config = config.with_updates(**overrides)

    return config


def merge_configs(base: GridPairConfig, override: GridPairConfig) -> GridPairConfig:
    """
    Merge two configurations, with override taking precedence.

    Args:
        base: Base configuration
        override: Override configuration

    Returns:
        Merged GridPairConfig
    """
    base_dict = base.to_dict()
    override_dict = override.to_dict()

    for group in override_dict:
        for key, value in override_dict[group].items():
            base_dict[group][key] = value

    return GridPairConfig.from_dict(base_dict)
