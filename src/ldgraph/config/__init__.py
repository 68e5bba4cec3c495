"""
ldgraph.config - Configuration loading and defaults

Configuration lives in ``.ldgraph.toml`` (discovered upward from the
working directory) with an optional ``.ldgraph.local.toml`` beside it
that deep-merges on top. Environment variables of the form
``LDGRAPH_<SECTION>_<KEY>`` override individual values.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit

CONFIG_FILENAME = ".ldgraph.toml"
LOCAL_CONFIG_FILENAME = ".ldgraph.local.toml"
ENV_PREFIX = "LDGRAPH_"

DEFAULT_CONFIG: dict[str, Any] = {
    "analysis": {
        "max_nodes": 5000,
        "workers": 1,
        "eigenvector_tolerance": 1e-6,
        "eigenvector_max_iterations": 100,
        "max_community_passes": 0,
    },
    "builder": {
        "synthetic_id_prefix": "_:b",
    },
    "logging": {
        "level": "WARNING",
    },
}


class ConfigLoader:
    """Read-only view over a merged configuration dict.

    Values are addressed with dotted keys, e.g. ``analysis.max_nodes``.
    """

    def __init__(self, data: dict[str, Any], path: Path | None = None) -> None:
        self._data = data
        self.path = path

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | None = None) -> ConfigLoader:
        """Create a loader from an already-merged dict."""
        return cls(copy.deepcopy(data), path=path)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key, returning ``default`` when any part is missing."""
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def section(self, name: str) -> dict[str, Any]:
        """Return a copy of one top-level section (empty dict if absent)."""
        value = self._data.get(name, {})
        return dict(value) if isinstance(value, dict) else {}

    def get_raw(self) -> dict[str, Any]:
        """Return a deep copy of the underlying dict."""
        return copy.deepcopy(self._data)


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text, keeping formatting for round-trip edits."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python containers."""
    return parse_toml_document(content).unwrap()


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` onto ``base`` without mutating either.

    Nested dicts merge key by key; any other value in ``override``
    replaces the base value outright (lists are not concatenated).
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def find_git_root(start: Path | None = None) -> Path | None:
    """Walk upward from ``start`` to the directory holding ``.git``.

    A ``.git`` file (worktree pointer) counts as well as a directory.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        if (current / ".git").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def find_config_file(start: Path | None = None) -> Path | None:
    """Find ``.ldgraph.toml`` in ``start`` or its ancestors.

    The search stops at the git root when one is found, so a config file
    outside the repository is never picked up by accident.
    """
    current = (start or Path.cwd()).resolve()
    boundary = find_git_root(current)
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == boundary or current == current.parent:
            return None
        current = current.parent


def _try_parse_env_value(raw: str) -> Any:
    """Interpret an environment string as a typed config value.

    JSON arrays/objects are decoded (malformed JSON stays a string),
    ``true``/``false`` become booleans, integers and floats are converted.
    Anything else is returned unchanged.
    """
    stripped = raw.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        return raw


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply ``LDGRAPH_<SECTION>_<KEY>`` variables to existing sections.

    Section names are matched against the sections already present in
    ``config``; the remainder of the variable name (lower-cased) is the key.
    """
    sections = sorted((name for name in config if isinstance(config[name], dict)), key=len, reverse=True)
    for env_name, raw in os.environ.items():
        if not env_name.startswith(ENV_PREFIX):
            continue
        rest = env_name[len(ENV_PREFIX) :].lower()
        for section in sections:
            prefix = f"{section}_"
            if rest.startswith(prefix) and len(rest) > len(prefix):
                config[section][rest[len(prefix) :]] = _try_parse_env_value(raw)
                break
    return config


def load_config(config_path: Path | None = None, start: Path | None = None) -> ConfigLoader:
    """Load configuration with defaults, local overrides, and env overrides.

    Args:
        config_path: Explicit config file. When omitted, the file is
            discovered from ``start`` (or the working directory).
        start: Directory to start discovery from.

    Returns:
        ConfigLoader over the merged configuration. When no file exists
        the defaults (plus env overrides) are returned.
    """
    path = config_path or find_config_file(start)
    data = copy.deepcopy(DEFAULT_CONFIG)

    if path is not None:
        data = merge_configs(data, parse_toml(Path(path).read_text(encoding="utf-8")))
        local_path = Path(path).parent / LOCAL_CONFIG_FILENAME
        if local_path.is_file():
            data = merge_configs(data, parse_toml(local_path.read_text(encoding="utf-8")))

    data = _apply_env_overrides(data)
    return ConfigLoader(data, path=Path(path) if path else None)


def get_config(config_path: Path | None = None, start: Path | None = None) -> dict[str, Any]:
    """Convenience wrapper returning the merged config as a plain dict."""
    return load_config(config_path, start).get_raw()


__all__ = [
    "CONFIG_FILENAME",
    "LOCAL_CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "ConfigLoader",
    "parse_toml",
    "parse_toml_document",
    "merge_configs",
    "find_git_root",
    "find_config_file",
    "load_config",
    "get_config",
]
