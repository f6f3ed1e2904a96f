"""Configuration loading for revision capture.

Configuration is read from a TOML file whose path the host supplies; no
environment variables are consulted.

Usage:
    from revision_recorder.config import load_settings

    settings = load_settings(Path("config/revisions.toml"), environment="production")
    config = settings.revisions.config_for("Invoice")
"""

from pathlib import Path

from revision_recorder.config.loader import load_config
from revision_recorder.config.settings import Settings


def load_settings(config_path: Path, environment: str | None = None) -> Settings:
    """Load and validate settings from TOML.

    Args:
        config_path: Base TOML configuration file
        environment: Optional overlay name (loads <environment>.toml beside it)

    Returns:
        Validated Settings instance

    Raises:
        FileNotFoundError: If config_path doesn't exist
        pydantic.ValidationError: If the configuration is invalid
    """
    return Settings.model_validate(load_config(config_path, environment))


__all__ = ["Settings", "load_settings"]
