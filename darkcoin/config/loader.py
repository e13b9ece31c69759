"""Configuration loading utilities."""

import json
import os
from pathlib import Path
from typing import Any

from darkcoin.config.schema import Config

# Environment variables understood by the dashd integration setup.
DASHD_ENV_VARS: dict[str, str] = {
    "DASHD_URI": "url",
    "DASHD_USER": "user",
    "DASHD_PASSWORD": "password",
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".darkcoin" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file, then apply DASHD_* environment overrides.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()
    data: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path) as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError("top-level value must be an object")
            data = convert_keys(raw)
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to regenerate defaults."
            ) from e

    _apply_dashd_env_vars(data)
    try:
        return Config(**data)
    except ValueError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _apply_dashd_env_vars(data: dict[str, Any]) -> None:
    """Overlay DASHD_URI / DASHD_USER / DASHD_PASSWORD onto data['dashd'] (env wins)."""
    dashd = data.get("dashd")
    if not isinstance(dashd, dict):
        dashd = {}
    for env_name, field in DASHD_ENV_VARS.items():
        value = os.environ.get(env_name)
        if value:
            dashd[field] = value
    if dashd:
        data["dashd"] = dashd


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = convert_to_camel(config.model_dump())

    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
