"""Configuration management.

TIER 1: May import from core only.

Supports JSONC (JSON with Comments) for config files, using the same
comment stripper the plugin applies to request bodies.
"""

import json
import os
from pathlib import Path
from typing import Any

from core.errors import ConfigError
from core.jsonc import strip_comments

# Cache for loaded config
_config_cache: dict | None = None
_project_root_cache: Path | None = None

CONFIG_DIR = ".strip-comments"

# Config file names (priority order)
CONFIG_FILES = ["config.jsonc", "config.json"]

# Defaults used when a key is missing from the config file
DEFAULTS: dict[str, Any] = {
    "body_types": ["application/json"],
    "action": {"label": "Send (Strip Comments)", "icon": "check_circle"},
    "variables": {},
    "send": {"timeout": 30.0, "user_agent": None},
    "notify": {"desktop": False},
}


def get_project_root() -> Path:
    """Get the project root directory.

    Looks for .strip-comments/ directory or git root.

    Returns:
        Project root path.

    Raises:
        ConfigError: If project root cannot be found.
    """
    global _project_root_cache

    if _project_root_cache is not None:
        return _project_root_cache

    if env_root := os.environ.get("PROJECT_ROOT"):
        _project_root_cache = Path(env_root)
        return _project_root_cache

    # Walk up from current directory
    current = Path.cwd()
    while current != current.parent:
        if (current / CONFIG_DIR).exists():
            _project_root_cache = current
            return _project_root_cache
        if (current / ".git").exists():
            _project_root_cache = current
            return _project_root_cache
        current = current.parent

    raise ConfigError(f"Could not find project root (no {CONFIG_DIR}/ or .git/ found)")


def get_config_path() -> Path | None:
    """Find config file path.

    Looks for config.jsonc first, then config.json.

    Returns:
        Path to config file, or None if not found.
    """
    config_dir = get_project_root() / CONFIG_DIR

    for filename in CONFIG_FILES:
        config_path = config_dir / filename
        if config_path.exists():
            return config_path

    return None


def load_config() -> dict:
    """Load config from .strip-comments/config.jsonc or config.json.

    Returns:
        Configuration dictionary (empty if no config file exists).

    Raises:
        ConfigError: If the file is not valid JSON after comment removal.
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    config_path = get_config_path()

    if config_path is None:
        _config_cache = {}
        return _config_cache

    try:
        content = config_path.read_text(encoding="utf-8")

        if config_path.suffix == ".jsonc":
            content = strip_comments(content)

        loaded = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid {config_path.name}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path.name}: {e}") from e

    if not isinstance(loaded, dict):
        raise ConfigError(f"Invalid {config_path.name}: top level must be an object")

    _config_cache = loaded
    return _config_cache


def _lookup(config: dict, parts: list[str]) -> tuple[bool, Any]:
    value: Any = config
    for part in parts:
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return False, None
    return True, value


def get(key: str, default: Any = None) -> Any:
    """Get config value by dot notation.

    Falls back to DEFAULTS, then to `default`.

    Args:
        key: Dot-separated key path (e.g., "send.timeout").
        default: Default value if key not found.

    Returns:
        Config value or default.

    Example:
        get("body_types")  # ["application/json"] unless configured
        get("notify.desktop", False)
    """
    parts = key.split(".")

    found, value = _lookup(load_config(), parts)
    if found:
        return value

    found, value = _lookup(DEFAULTS, parts)
    if found and value is not None:
        return value

    return default


def clear_cache() -> None:
    """Clear config cache (for testing)."""
    global _config_cache, _project_root_cache
    _config_cache = None
    _project_root_cache = None


def get_typed(key: str, expected: type | tuple[type, ...], default: Any = None) -> Any:
    """Get config value and check its type.

    None (missing key without default) passes through unchecked.

    Args:
        key: Dot-separated key path.
        expected: Allowed type or tuple of types.
        default: Default value if key not found.

    Returns:
        Config value or default.

    Raises:
        ConfigError: If the value has the wrong type.
    """
    value = get(key, default)
    if value is None:
        return value

    expected_types = expected if isinstance(expected, tuple) else (expected,)
    # bool is an int subclass
    wrong_bool = isinstance(value, bool) and bool not in expected_types
    if wrong_bool or not isinstance(value, expected_types):
        names = " or ".join(t.__name__ for t in expected_types)
        raise ConfigError(f"Invalid {key}: expected {names}, got {type(value).__name__}")
    return value


def get_str_list(key: str, default: list[str] | None = None) -> list[str] | None:
    """Get a config value that must be a list of strings.

    Raises:
        ConfigError: If the value is not a list or holds non-strings.
    """
    value = get_typed(key, list, default)
    if value is not None and not all(isinstance(item, str) for item in value):
        raise ConfigError(f"Invalid {key}: expected a list of strings")
    return value
