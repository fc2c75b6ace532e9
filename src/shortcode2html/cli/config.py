#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/shortcode2html/cli/config.py
"""Configuration file discovery and loading for the shortcode2html CLI.

A configuration file supplies site settings and tag configuration:

.. code-block:: toml

    base_url = "https://example.com/"
    strict_mode = false
    seed = 42

    [tags.random]
    defaults = { length = "12" }

    [tags.quote]
    enabled = false

    [tags.btn]
    handler = "button"

The same keys can live in ``pyproject.toml`` under ``[tool.shortcode2html]``
or in a YAML or JSON file.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from shortcode2html.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from shortcode2html.options.shortcode import RegistryConfig

CONFIG_KEYS = ("base_url", "strict_mode", "seed", "tags")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.shortcode2html]`` section from pyproject.toml.

    Returns an empty dict when the section is absent.

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for the dedicated config files in priority
    order (``.shortcode2html.toml``, ``.yaml``, ``.yml``, ``.json``) and then
    for a ``pyproject.toml`` carrying a ``[tool.shortcode2html]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Unreadable pyproject.toml, keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Parent directories of ``start_dir`` (default: cwd) are searched first,
    then the user's home directory.
    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def validate_config(config: Dict[str, Any], source: Path | str = "<config>") -> Dict[str, Any]:
    """Check top-level keys and simple value types.

    Tag entries are validated later, when the registry is built.

    Raises
    ------
    argparse.ArgumentTypeError
        On unknown keys or wrongly typed values

    """
    unknown = sorted(set(config) - set(CONFIG_KEYS))
    if unknown:
        raise argparse.ArgumentTypeError(
            f"Unknown keys in {source}: {', '.join(unknown)}. Valid keys: {', '.join(CONFIG_KEYS)}"
        )
    if "base_url" in config and not isinstance(config["base_url"], str):
        raise argparse.ArgumentTypeError(f"'base_url' in {source} must be a string")
    if "strict_mode" in config and not isinstance(config["strict_mode"], bool):
        raise argparse.ArgumentTypeError(f"'strict_mode' in {source} must be a boolean")
    if "seed" in config and (isinstance(config["seed"], bool) or not isinstance(config["seed"], int)):
        raise argparse.ArgumentTypeError(f"'seed' in {source} must be an integer")
    if "tags" in config and not isinstance(config["tags"], dict):
        raise argparse.ArgumentTypeError(f"'tags' in {source} must be a table/mapping")
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid content

    Examples
    --------
    >>> config = load_config_file(".shortcode2html.toml")
    >>> config.get("base_url")
    'https://example.com/'

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json")
    except argparse.ArgumentTypeError:
        raise
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    return validate_config(config, config_path)


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Path named by the ``SHORTCODE2HTML_CONFIG`` environment variable
    3. Auto-discovered config file

    Returns an empty dict when nothing is found.
    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def apply_tag_config(base: RegistryConfig, tags: Dict[str, Any]) -> RegistryConfig:
    """Overlay the ``tags`` table of a configuration file onto ``base``.

    An entry that only toggles ``enabled`` keeps the defaults ``base`` already
    has for that tag. Tags not present in ``base`` are added.

    Raises
    ------
    ConfigurationError
        If an entry has an unsupported shape

    """
    config = base
    for spec in RegistryConfig.from_mapping(tags):
        existing = base.get(spec.name)
        if existing is not None and not spec.defaults:
            spec = spec.create_updated(defaults=existing.defaults)
        config = config.with_tag(spec)
    return config
