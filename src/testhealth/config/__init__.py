"""
testhealth.config - Configuration loading and defaults.

Configuration is read from ``.testhealth.toml`` (found by walking up from
the working directory), deep-merged over DEFAULT_CONFIG. An optional
``.testhealth.local.toml`` next to it is merged on top, and finally
``TESTHEALTH_<SECTION>_<KEY>`` environment variables override single keys.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

CONFIG_FILENAME = ".testhealth.toml"
LOCAL_CONFIG_FILENAME = ".testhealth.local.toml"
ENV_PREFIX = "TESTHEALTH_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "sunburst": {
        "root_name": "Test Results",
    },
    "output": {
        "indent": 2,
        "annotate": False,
    },
    "summary": {
        # 0 = unlimited
        "depth": 0,
    },
}


class ConfigLoader:
    """Read-only view of a merged configuration dict with dotted-key access."""

    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None) -> None:
        self._data = data
        self.path = path

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[Path] = None) -> "ConfigLoader":
        return cls(data, path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dotted key such as ``"sunburst.root_name"``.

        Args:
            key: Dotted path into the config
            default: Returned when any segment is missing

        Returns:
            The configured value or default
        """
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def get_raw(self) -> Dict[str, Any]:
        """Return a deep copy of the underlying dict."""
        return copy.deepcopy(self._data)


def parse_toml(content: str) -> Dict[str, Any]:
    """Parse TOML text into plain Python containers."""
    return parse_toml_document(content).unwrap()


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text into a tomlkit document (preserves formatting)."""
    return tomlkit.parse(content)


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into a copy of base.

    Nested dicts are merged key by key; any other value in override
    replaces the value in base.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def find_config_file(start: Path) -> Optional[Path]:
    """
    Find ``.testhealth.toml`` in start or any parent directory.

    Args:
        start: Directory to search from

    Returns:
        Path to the config file, or None if not found
    """
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _read_toml_file(path: Path) -> Dict[str, Any]:
    try:
        return parse_toml(path.read_text(encoding="utf-8"))
    except TOMLKitError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e


def _try_parse_env_value(value: str) -> Any:
    """
    Parse an environment variable value.

    JSON arrays and objects become lists and dicts, ``true``/``false``
    (any case) become booleans. Anything else, numbers and malformed
    JSON included, is returned as the original string.
    """
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply ``TESTHEALTH_<SECTION>_<KEY>`` environment overrides.

    The first underscore-separated segment names the section; the rest,
    lowercased, is the key (``TESTHEALTH_SUNBURST_ROOT_NAME`` sets
    ``sunburst.root_name``).
    """
    for env_key, raw in os.environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):].lower()
        section, sep, key = remainder.partition("_")
        if not sep or not key:
            continue
        config.setdefault(section, {})
        if isinstance(config[section], dict):
            config[section][key] = _try_parse_env_value(raw)
    return config


def load_config(path: Optional[Path] = None) -> ConfigLoader:
    """
    Load configuration.

    Args:
        path: Explicit config file; when None, defaults plus environment
              overrides are returned

    Returns:
        ConfigLoader over the merged configuration

    Raises:
        ValueError: If a config file is not valid TOML
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path is not None:
        config = merge_configs(config, _read_toml_file(path))
        local = path.parent / LOCAL_CONFIG_FILENAME
        if local.is_file():
            config = merge_configs(config, _read_toml_file(local))

    return ConfigLoader(_apply_env_overrides(config), path)


def get_config(config_path: Optional[Path] = None, start: Optional[Path] = None) -> ConfigLoader:
    """
    Resolve and load configuration the way the CLI does.

    Args:
        config_path: Explicit config file (e.g. from ``--config``)
        start: Directory to search from when config_path is None

    Returns:
        ConfigLoader
    """
    path = config_path or find_config_file(start or Path.cwd())
    return load_config(path)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigLoader",
    "DEFAULT_CONFIG",
    "LOCAL_CONFIG_FILENAME",
    "find_config_file",
    "get_config",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]
