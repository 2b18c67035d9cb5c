"""Config file loading and resolution."""

import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from cytheme.client import DEFAULT_BASE_URL, DEFAULT_MODEL

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "cytheme" / "config.toml"

DEFAULTS: dict[str, Any] = {
    "model": DEFAULT_MODEL,
    "base_url": DEFAULT_BASE_URL,
    "api_key_env": None,
    "status_interval": 2.0,
    "output_dir": None,
    "palette": "default",
}


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from TOML file. Returns empty dict if file doesn't exist."""
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return {}
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def resolve(cli_value: Any, config_value: Any, default: Any) -> Any:
    """Resolve a setting with precedence: CLI flag > config file > default."""
    if cli_value is not None:
        return cli_value
    if config_value is not None:
        return config_value
    return default
