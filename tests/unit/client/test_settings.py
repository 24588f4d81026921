"""Unit tests for data source settings loading."""

import pytest

from dbxquery.client import DataSourceSettings, load_settings
from dbxquery.core import ConfigurationError


class TestLoadSettings:
    """Test load_settings with instance settings."""

    def test_json_text_and_secrets(self):
        settings = load_settings(
            '{"workspace": "https://example.cloud.databricks.com/"}',
            {"clientId": "sp-id", "clientSecret": "sp-secret"},
        )

        assert settings.workspace == "https://example.cloud.databricks.com"
        assert settings.client_id == "sp-id"
        assert settings.client_secret.get_secret_value() == "sp-secret"
        assert settings.has_credentials
        assert settings.timeout == 30.0

    def test_mapping_with_timeout(self):
        settings = load_settings({"workspace": "example.cloud.databricks.com", "timeout": 5})

        assert settings.workspace == "https://example.cloud.databricks.com"
        assert settings.timeout == 5.0

    def test_credentials_may_be_missing(self):
        """Test missing credentials load and are reported later."""
        settings = load_settings({"workspace": "example.cloud.databricks.com"})

        assert not settings.has_credentials

    def test_secret_is_masked(self):
        settings = load_settings(
            {"workspace": "w.example.com"}, {"clientId": "id", "clientSecret": "shh"}
        )

        assert "shh" not in repr(settings)

    @pytest.mark.parametrize("json_data", [None, "", "{}", {"workspace": ""}])
    def test_workspace_required(self, json_data):
        with pytest.raises(ConfigurationError, match="load plugin settings: workspace"):
            load_settings(json_data)

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError, match="invalid JSON"):
            load_settings("{workspace")

    def test_not_an_object(self):
        with pytest.raises(ConfigurationError, match="expected a JSON object"):
            load_settings("[1, 2]")

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError, match="timeout"):
            load_settings({"workspace": "w.example.com", "timeout": 0})


class TestFromEnv:
    def test_reads_databricks_variables(self):
        settings = DataSourceSettings.from_env(
            {
                "DATABRICKS_HOST": "https://example.cloud.databricks.com",
                "DATABRICKS_CLIENT_ID": "sp-id",
                "DATABRICKS_CLIENT_SECRET": "sp-secret",
                "DATABRICKS_TIMEOUT": "12.5",
            }
        )

        assert settings.has_credentials
        assert settings.timeout == 12.5

    def test_host_required(self):
        with pytest.raises(ConfigurationError):
            DataSourceSettings.from_env({})
