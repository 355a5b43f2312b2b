# src/lessonbank/config.py
"""Configuration loading utilities for lessonbank.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using lessonbank as a library

It handles:
- Finding and loading lessonbank.yaml config files
- Building Settings objects from YAML and LESSONBANK_* environment variables
- Opening the catalog store for a data directory
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lessonbank.settings import ModuleSource, Settings
from lessonbank.stores import SQLiteCatalogStore

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./lessonbank_data"
CATALOG_DB = "catalog.db"
CONFIG_FILES = ["lessonbank.yaml", "lessonbank.yml", ".lessonbankrc"]

VALID_ROOT_KEYS = {"data_dir", "settings"}

VALID_SETTINGS_KEYS = {
    "content_extension",
    "extension",  # alias
    "default_topic_description",
    "modules",
}

VALID_MODULE_KEYS = set(ModuleSource.model_fields)


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the current directory or its parents.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

        modules = settings.get("modules") or []
        if isinstance(modules, list):
            for i, module in enumerate(modules):
                if not isinstance(module, dict):
                    continue
                unknown_module = set(module.keys()) - VALID_MODULE_KEYS
                if unknown_module:
                    warnings.append(
                        f"Unknown keys in modules[{i}]: {', '.join(sorted(unknown_module))}"
                    )

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if isinstance(config, dict):
        for warning in validate_config(config, config_path):
            logger.warning(warning)

    return config


def get_settings_from_env() -> dict[str, Any]:
    """Read settings from LESSONBANK_* environment variables.

    Only explicitly set variables are returned, so YAML values survive
    unless overridden.

    ``LESSONBANK_CONTENT_ROOTS`` is an os.pathsep-separated list that replaces
    the content roots of the first module.
    """
    result: dict[str, Any] = {}

    if os.environ.get("LESSONBANK_CONTENT_EXTENSION"):
        result["content_extension"] = os.environ["LESSONBANK_CONTENT_EXTENSION"]
    if os.environ.get("LESSONBANK_DEFAULT_TOPIC_DESCRIPTION"):
        result["default_topic_description"] = os.environ["LESSONBANK_DEFAULT_TOPIC_DESCRIPTION"]
    if os.environ.get("LESSONBANK_CONTENT_ROOTS"):
        roots = [r for r in os.environ["LESSONBANK_CONTENT_ROOTS"].split(os.pathsep) if r]
        if roots:
            result["content_roots"] = roots

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract settings from the 'settings:' section of a YAML config."""
    result: dict[str, Any] = {}

    yaml_settings = config.get("settings", {}) or {}

    key_mappings = {
        "content_extension": "content_extension",
        "extension": "content_extension",  # alias
        "default_topic_description": "default_topic_description",
        "modules": "modules",
    }

    for yaml_key, settings_key in key_mappings.items():
        if yaml_key in yaml_settings:
            result[settings_key] = yaml_settings[yaml_key]

    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build a Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults

    Raises:
        pydantic.ValidationError: If a value has the wrong type or an
            unknown module category
    """
    merged = get_settings_from_yaml(config or {})
    env = dict(env_settings if env_settings is not None else get_settings_from_env())

    content_roots = env.pop("content_roots", None)
    merged.update(env)

    settings = Settings(**merged)
    if content_roots:
        settings = settings.with_content_roots(content_roots)
    return settings


def get_store(data_dir: str | Path) -> SQLiteCatalogStore:
    """Open the catalog store of a data directory."""
    return SQLiteCatalogStore(str(Path(data_dir) / CATALOG_DB))


def resolve_data_dir(data_dir: str | None, config: dict[str, Any]) -> str:
    """Pick the data directory: explicit override, then YAML, then default."""
    return data_dir or config.get("data_dir") or DEFAULT_DATA_DIR


@dataclass
class LessonbankConfig:
    """Resolved configuration for a command run."""

    data_dir: str
    settings: Settings
    config_path: Path | None = None


def get_lessonbank_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> LessonbankConfig | ConfigError:
    """Resolve data directory and settings, reporting problems as ConfigError."""
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is not None and not path.exists():
        return ConfigError(
            message=f"Config file not found: {path}",
            suggestion="Check the --config path.",
        )

    try:
        config = load_config(path)
    except yaml.YAMLError as e:
        return ConfigError(message=f"Invalid YAML in {path}: {e}")

    if not isinstance(config, dict):
        return ConfigError(message=f"Config file {path} must contain a mapping")

    try:
        settings = build_settings(config)
    except ValidationError as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Check the 'settings:' section of your config file.",
        )

    return LessonbankConfig(
        data_dir=resolve_data_dir(data_dir, config),
        settings=settings,
        config_path=path,
    )
