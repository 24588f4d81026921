"""Data source settings.

Settings arrive in the shape of a dashboard data source instance: a plain
JSON object (``{"workspace": ...}``) plus a decrypted secure object
(``{"clientId": ..., "clientSecret": ...}``). Credentials may be empty here;
they are checked when a client is created or a health check runs.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from ..core.exceptions import ConfigurationError
from .constants import DEFAULT_TIMEOUT


class DataSourceSettings(BaseModel):
    """Connection settings for one Databricks workspace."""

    workspace: str = Field(..., min_length=1)
    client_id: str = ""
    client_secret: SecretStr = SecretStr("")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("workspace")
    @classmethod
    def normalize_workspace(cls, v: str) -> str:
        """Ensure an https scheme and drop trailing slashes."""
        if "://" not in v:
            v = f"https://{v}"
        return v.rstrip("/")

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret.get_secret_value())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DataSourceSettings:
        """Load settings from ``DATABRICKS_*`` environment variables.

        Raises:
            ConfigurationError: If DATABRICKS_HOST is missing or a value is invalid
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            "workspace": env.get("DATABRICKS_HOST", ""),
            "client_id": env.get("DATABRICKS_CLIENT_ID", ""),
            "client_secret": env.get("DATABRICKS_CLIENT_SECRET", ""),
        }
        if env.get("DATABRICKS_TIMEOUT"):
            values["timeout"] = env["DATABRICKS_TIMEOUT"]
        return _validate(values)


def load_settings(
    json_data: str | bytes | Mapping[str, Any] | None,
    secure_json_data: Mapping[str, str] | None = None,
) -> DataSourceSettings:
    """Load settings from data source instance settings.

    Args:
        json_data: Plain settings (JSON text or mapping) with ``workspace``
            and optional ``timeout``
        secure_json_data: Decrypted secrets with ``clientId``/``clientSecret``

    Returns:
        Validated DataSourceSettings

    Raises:
        ConfigurationError: If the settings cannot be parsed or are invalid
    """
    if isinstance(json_data, (str, bytes, bytearray)):
        try:
            json_data = json.loads(json_data) if json_data else {}
        except ValueError as e:
            raise ConfigurationError(f"load plugin settings: invalid JSON: {e}") from e
    if json_data is not None and not isinstance(json_data, Mapping):
        raise ConfigurationError("load plugin settings: expected a JSON object")
    plain = dict(json_data or {})
    secrets = secure_json_data or {}

    values: dict[str, Any] = {
        "workspace": plain.get("workspace") or "",
        "client_id": secrets.get("clientId", ""),
        "client_secret": secrets.get("clientSecret", ""),
    }
    if plain.get("timeout") is not None:
        values["timeout"] = plain["timeout"]
    return _validate(values)


def _validate(values: dict[str, Any]) -> DataSourceSettings:
    try:
        return DataSourceSettings.model_validate(values)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(f"load plugin settings: {field}: {first.get('msg')}") from e
