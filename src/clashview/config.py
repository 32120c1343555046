#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/config.py
"""Configuration file discovery and loading for clashview.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and turning them into
:class:`~clashview.options.ClashviewOptions`.

Configuration shape (TOML)::

    color_system = "256"

    [style]
    variable = "bold yellow"
    output_whitespace = "bright_black"

    [markup]
    nesting = "tree"

    [diff]
    show_whitespace = true

"""

import json
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from clashview.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES
from clashview.exceptions import ClashviewError, ConfigError
from clashview.options import ClashviewOptions, DiffOptions, MarkupOptions

logger = logging.getLogger(__name__)

_DEDICATED_FILENAMES = [name for name in CONFIG_FILENAMES if name != "pyproject.toml"]


def _load_pyproject_clashview_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.clashview] section from pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.clashview] section, or empty dict if not found

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", pyproject_path, e) from e
    except OSError as e:
        raise ConfigError(f"Error reading pyproject.toml {pyproject_path}: {e}", pyproject_path, e) from e

    config = data.get("tool", {}).get("clashview", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.clashview] section in {pyproject_path} must be a table, got {type(config).__name__}",
            pyproject_path,
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", config_path, e) from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", config_path, e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"YAML config file must contain a mapping, got {type(config).__name__}", config_path)
    return config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", config_path, e) from e

    if not isinstance(config, dict):
        raise ConfigError(f"JSON config file must contain an object, got {type(config).__name__}", config_path)
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Auto-detects format based on file extension and name:
    - .json files: Loaded as JSON
    - .toml files: Loaded as TOML
    - .yaml/.yml files: Loaded as YAML
    - pyproject.toml: Extracts [tool.clashview] section

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path)
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", config_path)

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()
    logger.debug("Loading configuration from %s", config_path)

    try:
        if filename == "pyproject.toml":
            return _load_pyproject_clashview_section(config_path)
        elif ext == ".toml":
            return _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            return _load_yaml_config(config_path)
        elif ext == ".json":
            return _load_json_config(config_path)
        else:
            raise ConfigError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path)
    except ConfigError:
        raise
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", config_path, e) from e


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from ``start_dir`` to the filesystem root,
    checking each directory for ``.clashview.toml``, ``.clashview.yaml``,
    ``.clashview.yml``, ``.clashview.json``, and finally a ``pyproject.toml``
    with a ``[tool.clashview]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in _DEDICATED_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_clashview_section(pyproject_path):
                    return pyproject_path
            except ConfigError:
                # Unrelated broken pyproject.toml files do not stop the search
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches parent directories first (see :func:`find_config_in_parents`),
    then the user home directory for the dedicated file names.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in _DEDICATED_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _check_keys(section: str, data: Mapping[str, Any], allowed: set[str]) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        where = f"[{section}]" if section else "top level"
        raise ConfigError(f"Unknown configuration keys at {where}: {', '.join(unknown)}")


def _section(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(value).__name__}")
    return value


def options_from_dict(data: Mapping[str, Any]) -> ClashviewOptions:
    """Build options from a loaded configuration dictionary.

    Parameters
    ----------
    data : Mapping[str, Any]
        Configuration as returned by :func:`load_config_file`

    Returns
    -------
    ClashviewOptions
        The options described by ``data``; the stylesheet is built eagerly so
        bad style definitions surface here

    Raises
    ------
    ConfigError
        If keys are unknown or values are invalid

    """
    _check_keys("", data, {f.name for f in fields(ClashviewOptions)})
    markup = _section(data, "markup")
    diff = _section(data, "diff")
    style = _section(data, "style")
    _check_keys("markup", markup, {f.name for f in fields(MarkupOptions)})
    _check_keys("diff", diff, {f.name for f in fields(DiffOptions)})

    try:
        options = ClashviewOptions(
            color_system=str(data.get("color_system", ClashviewOptions.color_system)),
            style=dict(style),
            markup=MarkupOptions(**markup),
            diff=DiffOptions(**diff),
        )
        options.build_stylesheet()
    except ClashviewError as e:
        raise ConfigError(f"Invalid configuration: {e.message}", original_error=e) from e
    return options


def load_options(explicit_path: Optional[str | Path] = None) -> ClashviewOptions:
    """Load options with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path
    2. Path in the ``CLASHVIEW_CONFIG`` environment variable
    3. Auto-discovered config file

    Returns
    -------
    ClashviewOptions
        Loaded options, or defaults when no configuration file exists

    Raises
    ------
    ConfigError
        If a configuration file is found but cannot be loaded

    """
    config_path: Optional[Path | str] = explicit_path or os.environ.get(CONFIG_ENV_VAR) or discover_config_file()
    if not config_path:
        logger.debug("No configuration file found, using defaults")
        return ClashviewOptions()

    try:
        return options_from_dict(load_config_file(config_path))
    except ConfigError as e:
        if e.config_path is None:
            e.config_path = str(config_path)
        raise
