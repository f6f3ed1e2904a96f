"""Unit tests for Settings and load_settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from revision_recorder.config import Settings, load_settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "revision-recorder"
        assert list(settings.connections) == ["mongodb"]
        assert settings.revisions.defaults.collection == "revision"
        assert settings.observability.logging.level == "INFO"

    def test_default_connection_matches_revision_default(self) -> None:
        """The default revision config points at a configured connection."""
        settings = Settings()
        assert settings.revisions.defaults.connection in settings.connections


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_loads_full_config(self, test_config_dir: Path, mock_toml_files) -> None:
        """Connections, defaults and model overrides are read from TOML."""
        mock_toml_files({
            "revisions.toml": """
app_name = "billing"

[connections.mongodb]
url = "mongodb://db:27017"
database = "billing"

[connections.archive]
backend = "inmemory"

[revisions.defaults]
collection = "history"

[revisions.models.Invoice]
connection = "archive"
collection = "invoice_history"

[observability.logging]
level = "DEBUG"
format = "console"
""",
        })

        settings = load_settings(test_config_dir / "revisions.toml")

        assert settings.app_name == "billing"
        assert settings.connections["mongodb"].database == "billing"
        assert settings.connections["archive"].backend == "inmemory"
        assert settings.revisions.config_for("User").collection == "history"
        invoice = settings.revisions.config_for("Invoice")
        assert invoice.connection == "archive"
        assert invoice.collection == "invoice_history"
        assert settings.observability.logging.format == "console"

    def test_environment_overlay(self, test_config_dir: Path, mock_toml_files) -> None:
        """The environment overlay is applied."""
        mock_toml_files({
            "revisions.toml": "[connections.mongodb]\ndatabase = 'dev'",
            "production.toml": "[connections.mongodb]\ndatabase = 'prod'",
        })

        settings = load_settings(test_config_dir / "revisions.toml", environment="production")
        assert settings.connections["mongodb"].database == "prod"

    def test_invalid_config_raises(self, test_config_dir: Path, mock_toml_files) -> None:
        """Invalid values fail validation."""
        mock_toml_files({"revisions.toml": "[revisions.defaults]\ncollection = ''"})

        with pytest.raises(ValidationError):
            load_settings(test_config_dir / "revisions.toml")
