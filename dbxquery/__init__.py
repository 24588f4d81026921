"""dbxquery - Databricks jobs and pipelines as tabular dashboard frames."""

from .api import DataSource, HealthCheckResult, HealthStatus
from .client import (
    DataSourceSettings,
    HTTPClient,
    OAuthTokenSource,
    RestPagedIterator,
    WorkspaceClient,
    create_workspace_client,
    load_settings,
)
from .core import (
    ClientAcquisitionError,
    ConfigurationError,
    DataSourceError,
    ErrorClass,
    FieldType,
    QueryCancelledError,
    QueryContext,
    QueryValidationError,
    RemoteAPIError,
    ResourceKind,
    UnknownResourceKindError,
)
from .models import (
    BaseRun,
    DataQuery,
    Frame,
    FrameField,
    ListPipelinesRequest,
    ListRunsRequest,
    ListUpdatesRequest,
    PipelineStateInfo,
    QueryDataRequest,
    QueryDataResponse,
    QueryDescriptor,
    QueryOutcome,
    TimeRange,
    UpdateInfo,
)
from .runtime import (
    PagedIterator,
    QueryRouter,
    ResourceHandler,
    ResourceRegistry,
    fetch_with_limit,
    get_resource_registry,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "DataSource",
    "HealthCheckResult",
    "HealthStatus",
    # Client
    "DataSourceSettings",
    "HTTPClient",
    "OAuthTokenSource",
    "RestPagedIterator",
    "WorkspaceClient",
    "create_workspace_client",
    "load_settings",
    # Core
    "QueryContext",
    "ErrorClass",
    "FieldType",
    "ResourceKind",
    "DataSourceError",
    "ConfigurationError",
    "QueryValidationError",
    "UnknownResourceKindError",
    "ClientAcquisitionError",
    "RemoteAPIError",
    "QueryCancelledError",
    # Models
    "DataQuery",
    "QueryDataRequest",
    "QueryDescriptor",
    "TimeRange",
    "ListRunsRequest",
    "ListPipelinesRequest",
    "ListUpdatesRequest",
    "BaseRun",
    "PipelineStateInfo",
    "UpdateInfo",
    "Frame",
    "FrameField",
    "QueryOutcome",
    "QueryDataResponse",
    # Runtime
    "PagedIterator",
    "fetch_with_limit",
    "QueryRouter",
    "ResourceHandler",
    "ResourceRegistry",
    "get_resource_registry",
]
