"""
Parameter management for gridpair runs.

This module provides:
- Validated, immutable parameter containers (schema.py)
- YAML loading utilities (loader.py)
"""

from gridpair.params.schema import (
    GridPairConfig,
    OracleParams,
    RandomPointsParams,
    SearchParams,
    ValidationError,
)
from gridpair.params.loader import (
    load_config,
    load_config_with_overrides,
    merge_configs,
    save_config,
)

__all__ = [
    # Schema classes
    "GridPairConfig",
    "OracleParams",
    "RandomPointsParams",
    "SearchParams",
    "ValidationError",
    # Loader functions
    "load_config",
    "load_config_with_overrides",
    "merge_configs",
    "save_config",
]
