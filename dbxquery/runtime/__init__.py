"""Runtime orchestration components."""

from .fetcher import PagedIterator, fetch_with_limit
from .registry import (
    ResourceClient,
    ResourceHandler,
    ResourceRegistry,
    get_resource_registry,
)
from .router import ClientFactory, QueryRouter

__all__ = [
    "PagedIterator",
    "fetch_with_limit",
    "ResourceClient",
    "ResourceHandler",
    "ResourceRegistry",
    "get_resource_registry",
    "ClientFactory",
    "QueryRouter",
]
