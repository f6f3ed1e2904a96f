"""TOML configuration loader with deep merge support."""

import tomllib
from pathlib import Path
from typing import Any


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Args:
        file_path: Path to the TOML file

    Returns:
        Dictionary containing the TOML data

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Nested dictionaries are merged recursively; any other value in
    override replaces the one in base. Neither input is modified.
    """
    result = base.copy()

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config(config_path: Path, environment: str | None = None) -> dict[str, Any]:
    """Load configuration from a TOML file with an optional overlay.

    Loading order:
    1. config_path (required)
    2. <config_path dir>/<environment>.toml (optional)

    Args:
        config_path: Base configuration file
        environment: Name of the environment overlay, if any

    Returns:
        Merged configuration dictionary
    """
    config = load_toml(config_path)

    if environment:
        env_path = config_path.parent / f"{environment}.toml"
        if env_path.exists():
            config = deep_merge(config, load_toml(env_path))

    return config
