#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the differ CLI.

The ``DIFFER_CONFIG`` environment variable may name a file directly.
Otherwise configuration files are searched from the working directory
upwards, then in the user's home directory:

- ``.differ.toml``
- ``.differ.yaml`` / ``.differ.yml``
- ``.differ.json``
- ``pyproject.toml`` with a ``[tool.differ]`` table

Recognized keys::

    format = "terminal"          # default output format
    context_lines = 3            # applied to every format
    show_line_numbers = true
    color = "auto"               # terminal colour mode

    [html.class_names]           # per-format option tables
    add = "my-add"
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from differ.constants import DEFAULT_FORMAT, SUPPORTED_FORMATS
from differ.exceptions import ConfigError
from differ.options import BaseDiffRendererOptions, get_options_class

logger = logging.getLogger(__name__)

DEDICATED_CONFIG_FILENAMES = [".differ.toml", ".differ.yaml", ".differ.yml", ".differ.json"]

CONFIG_ENV_VAR = "DIFFER_CONFIG"

# Top-level keys that apply to every format's options
SHARED_OPTION_KEYS = ("context_lines", "show_line_numbers")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.differ]`` section of a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the section is not a table

    """
    data = load_data_file(pyproject_path, file_format="toml")
    config = data.get("tool", {}).get("differ", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.differ] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches parent directories first, then the user's home directory.
    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_data_file(path: Path | str, file_format: Optional[str] = None) -> Any:
    """Load a JSON, TOML, or YAML file.

    Parameters
    ----------
    path : Path or str
        File to load
    file_format : {"json", "toml", "yaml"}, optional
        Format override; detected from the extension when omitted

    Returns
    -------
    Any
        Parsed document

    Raises
    ------
    ConfigError
        If the file is missing, has an unknown extension, or does not parse

    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"File does not exist: {path}", config_path=str(path))

    if file_format is None:
        ext = path.suffix.lower()
        if ext == ".toml":
            file_format = "toml"
        elif ext in (".yaml", ".yml"):
            file_format = "yaml"
        elif ext == ".json":
            file_format = "json"
        else:
            raise ConfigError(f"Unsupported file format: {ext or path.name}. Use .json, .toml, or .yaml", str(path))

    try:
        if file_format == "toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        with open(path, "r", encoding="utf-8") as f:
            if file_format == "yaml":
                return yaml.safe_load(f)
            return json.load(f)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid {file_format.upper()} in {path}: {e}", str(path), original_error=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading {path}: {e}", str(path), original_error=e) from e


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Raises
    ------
    ConfigError
        If the file cannot be read or its root is not a mapping

    """
    config_path = Path(config_path)
    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    config = load_data_file(config_path)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file must contain a mapping at root level, got {type(config).__name__}",
            config_path=str(config_path),
        )
    logger.debug("Loaded configuration from %s", config_path)
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"html": {"class_names": {"add": "a"}}}, {"html": {"wrap_in_container": True}})
    {'html': {'class_names': {'add': 'a'}, 'wrap_in_container': True}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(explicit_path: Optional[str] = None, no_config: bool = False) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. The ``DIFFER_CONFIG`` environment variable
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Path given with ``--config``
    no_config : bool, default False
        Skip the environment variable and discovery (an explicit path is
        still honored)

    """
    if explicit_path:
        return load_config_file(explicit_path)
    if no_config:
        return {}

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        logger.debug("Using configuration from %s=%s", CONFIG_ENV_VAR, env_path)
        return load_config_file(env_path)

    discovered = discover_config_file()
    if discovered is None:
        return {}
    logger.debug("Discovered configuration file %s", discovered)
    return load_config_file(discovered)


def options_from_config(
    format_type: str, config: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None
) -> BaseDiffRendererOptions:
    """Build renderer options for ``format_type`` from a config mapping.

    Shared top-level keys apply first, then the format's own table, then
    ``overrides`` (typically from command-line flags).

    Raises
    ------
    ConfigError
        If the format table is not a mapping or names an unknown option

    """
    options_class = get_options_class(format_type)

    section = config.get(format_type, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{format_type}] config section must be a table, got {type(section).__name__}")
    if overrides:
        section = merge_configs(section, overrides)

    values: Dict[str, Any] = {key: config[key] for key in SHARED_OPTION_KEYS if key in config}
    values.update(section)

    try:
        return options_class(**values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid {format_type} options: {e}", original_error=e) from e


def resolve_format(config: Dict[str, Any], requested: Optional[str]) -> str:
    """Pick the output format from the command line, then config, then default."""
    format_type = requested or config.get("format") or DEFAULT_FORMAT
    if format_type not in SUPPORTED_FORMATS:
        raise ConfigError(f"Unknown format in configuration: '{format_type}'")
    return format_type
