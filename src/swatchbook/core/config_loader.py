"""
swatchbook.yaml persistence.

Reads and writes the seed configuration a project generates its palettes
from. A missing file means "use the defaults" unless the caller asks
otherwise.

Default location: {project_root}/swatchbook.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .ir.config import SeedSpec, SwatchbookConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "swatchbook.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the swatchbook.yaml file path."""
    return project_root / CONFIG_FILE


def config_exists(project_root: Path) -> bool:
    return get_config_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def create_default_config(
    seeds: list[SeedSpec] | None = None,
    include_global: bool = True,
) -> SwatchbookConfig:
    """Build a config, falling back to the default primary/secondary seeds."""
    if seeds is None:
        return SwatchbookConfig(include_global=include_global)
    return SwatchbookConfig(seeds=seeds, include_global=include_global)


def _parse_config_data(data: Any, config_path: Path) -> SwatchbookConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")
    try:
        return SwatchbookConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid swatchbook config in {config_path}: {e}") from e


def load_config(project_root: Path, *, use_defaults: bool = True) -> SwatchbookConfig:
    """Load the seed configuration from swatchbook.yaml.

    Args:
        project_root: Directory holding swatchbook.yaml.
        use_defaults: If True, return the default config when the file is
            missing or empty.

    Returns:
        SwatchbookConfig instance.

    Raises:
        ConfigError: If the file is missing (when use_defaults=False) or invalid.
    """
    config_path = get_config_path(project_root)

    if not config_path.exists():
        if use_defaults:
            logger.debug("No swatchbook.yaml found, using defaults")
            return create_default_config()
        raise ConfigError(f"Config not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning("Empty swatchbook.yaml at %s, using defaults", config_path)
            return create_default_config()
        raise ConfigError(f"Empty or invalid YAML in {config_path}")

    return _parse_config_data(data, config_path)


def save_config(project_root: Path, config: SwatchbookConfig) -> Path:
    """Save the config to swatchbook.yaml.

    Returns:
        Path to the saved file.
    """
    config_path = get_config_path(project_root)

    config_path.write_text(
        yaml.dump(
            config.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info("Saved swatchbook config to %s", config_path)
    return config_path
