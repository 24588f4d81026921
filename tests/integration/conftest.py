"""Shared fixtures for integration tests."""

import os

import pytest

from dbxquery.client import DataSourceSettings

# Skip all integration tests unless RUN_DBXQUERY_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_DBXQUERY_NETWORK_TESTS") != "1",
    reason="Requires a Databricks workspace. Set RUN_DBXQUERY_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def live_settings() -> DataSourceSettings:
    """Workspace settings from DATABRICKS_* environment variables."""
    return DataSourceSettings.from_env()
