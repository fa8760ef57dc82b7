"""
Configuration — loads settings from .coedit.yaml, environment variables,
and built-in defaults (in that priority order: env > YAML > defaults).
"""

import os

import yaml


_DEFAULTS = {
    "fallback_chunk_size": 50,
    "cache_capacity": 1000,
    "cache_evict_fraction": 0.1,
    "diff_context_lines": 3,
    "strict_apply": True,
    "log_level": "WARNING",
}

# Config file search locations
_CONFIG_FILENAMES = [".coedit.yaml", ".coedit.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    # Search CWD first, then home directory
    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


class Config:
    """Engine configuration.

    Settings are resolved in priority order:
    1. Environment variables (``COEDIT_*``)
    2. .coedit.yaml config file
    3. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default
        def _get(env_key: str, yaml_key: str, default, cast=str):
            env_val = os.getenv(env_key)
            if env_val is not None:
                return cast(env_val)
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return cast(yaml_val)
            return default

        def _get_bool(env_key: str, yaml_key: str, default: bool) -> bool:
            env_val = os.getenv(env_key)
            if env_val is not None:
                return env_val.lower() == "true"
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                if isinstance(yaml_val, str):
                    return yaml_val.strip().lower() == "true"
                return bool(yaml_val)
            return default

        # Region engine
        self.FALLBACK_CHUNK_SIZE = _get("COEDIT_FALLBACK_CHUNK_SIZE",
                                        "fallback_chunk_size",
                                        _DEFAULTS["fallback_chunk_size"], cast=int)
        self.CACHE_CAPACITY = _get("COEDIT_CACHE_CAPACITY", "cache_capacity",
                                   _DEFAULTS["cache_capacity"], cast=int)
        self.CACHE_EVICT_FRACTION = _get("COEDIT_CACHE_EVICT_FRACTION",
                                         "cache_evict_fraction",
                                         _DEFAULTS["cache_evict_fraction"],
                                         cast=float)

        # Hunk engine
        self.DIFF_CONTEXT_LINES = _get("COEDIT_DIFF_CONTEXT_LINES",
                                       "diff_context_lines",
                                       _DEFAULTS["diff_context_lines"], cast=int)
        self.STRICT_APPLY = _get_bool("COEDIT_STRICT_APPLY", "strict_apply",
                                      _DEFAULTS["strict_apply"])

        self.LOG_LEVEL = _get("COEDIT_LOG_LEVEL", "log_level",
                              _DEFAULTS["log_level"]).upper()

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
