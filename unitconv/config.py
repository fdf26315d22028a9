"""
Config loader for unitconv.
Reads config.yaml once on first use. All other modules import from here.
A missing config file is not an error: the built-in defaults apply, so the
converter runs from any working directory.
"""

import os
import re
import copy
import yaml
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"

DEFAULTS: dict = {
    "logging": {
        "level": "WARNING",
        "file": "",
    },
    "repl": {
        "prompt": "Enter what you want to convert (or exit):",
    },
    "console": {
        "title": "unitconv console",
    },
}

_config: dict | None = None


def _resolve_env_vars(value: str) -> str:
    """Replace ${ENV_VAR} patterns with actual environment variable values."""
    def replacer(match):
        var_name = match.group(1)
        return os.environ.get(var_name, "")
    return re.sub(r"\$\{(\w+)\}", replacer, value)


def _walk_and_resolve(obj):
    """Recursively resolve env vars in all string values."""
    if isinstance(obj, dict):
        return {k: _walk_and_resolve(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_walk_and_resolve(v) for v in obj]
    elif isinstance(obj, str):
        return _resolve_env_vars(obj)
    return obj


def _merge(base: dict, override: dict) -> dict:
    """Deep-merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def config_path() -> Path:
    """Config path: UNITCONV_CONFIG if set, else config.yaml at the project root."""
    env_path = os.environ.get("UNITCONV_CONFIG")
    return Path(env_path) if env_path else _CONFIG_PATH


def load_config(path: Path | str | None = None) -> dict:
    """Load and cache config from YAML file, layered over DEFAULTS."""
    global _config
    if _config is not None and path is None:
        return _config

    cfg_path = Path(path) if path else config_path()
    raw: dict = {}
    if cfg_path.exists():
        with open(cfg_path) as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {cfg_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Config must be a mapping: {cfg_path}")

    _config = _merge(DEFAULTS, _walk_and_resolve(raw))
    return _config


def get_config() -> dict:
    """Return cached config, loading if necessary."""
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config
    _config = None
