"""Databricks REST client: settings, HTTP, OAuth and paged listings."""

from .auth import OAuthTokenSource, StaticTokenSource, TokenSource
from .config import DataSourceSettings, load_settings
from .http import HTTPClient
from .listing import Page, RestPagedIterator
from .workspace import WorkspaceClient, create_workspace_client

__all__ = [
    "DataSourceSettings",
    "load_settings",
    "HTTPClient",
    "TokenSource",
    "OAuthTokenSource",
    "StaticTokenSource",
    "Page",
    "RestPagedIterator",
    "WorkspaceClient",
    "create_workspace_client",
]
