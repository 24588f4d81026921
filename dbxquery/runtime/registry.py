"""Resource registry mapping resource kinds to their handlers.

The ResourceRegistry maps each ResourceKind to a ResourceHandler bundling the
four per-kind pieces the router needs: a params model, a request builder, a
listing opener and a frame projector.

Architecture:
    This module implements the Registry pattern so the router never branches
    on resource kind. Adding a kind means writing one resource module and
    registering its handler; the router is untouched.

Design Decisions:
    - Handlers are frozen dataclasses of plain callables (easy to fake in tests)
    - Singleton registry for convenience, injection for testing
    - Default registration is lazy (first ``get_resource_registry()`` call)

See Also:
    - QueryRouter: Uses the registry for dispatch
    - dbxquery.registration: Registers the built-in resource kinds
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel

from ..core.enums import ResourceKind
from ..core.exceptions import UnknownResourceKindError
from ..models.query import TimeRange, parse_params

if TYPE_CHECKING:
    from ..models.frame import Frame
    from ..models.requests import ListPipelinesRequest, ListRunsRequest, ListUpdatesRequest
    from ..models.resources import BaseRun, PipelineStateInfo, UpdateInfo
    from .fetcher import PagedIterator


class ResourceClient(Protocol):
    """Listing capability of an authenticated workspace client."""

    def list_runs(self, request: ListRunsRequest) -> PagedIterator[BaseRun]: ...

    def list_pipelines(self, request: ListPipelinesRequest) -> PagedIterator[PipelineStateInfo]: ...

    def list_updates(self, request: ListUpdatesRequest) -> PagedIterator[UpdateInfo]: ...


@dataclass(frozen=True)
class ResourceHandler:
    """Per-kind builder, listing opener and projector."""

    kind: ResourceKind
    params_model: type[BaseModel]
    build_request: Callable[[Any, TimeRange | None], Any]
    open_listing: Callable[[ResourceClient, Any], PagedIterator[Any]]
    build_frame: Callable[[Sequence[Any]], Frame]

    def parse_params(self, raw: dict[str, Any] | None) -> Any:
        """Validate the opaque params blob against this kind's params model."""
        return parse_params(self.params_model, raw, resource_kind=self.kind)


class ResourceRegistry:
    """Registry of resource handlers keyed by ResourceKind."""

    def __init__(self) -> None:
        self._handlers: dict[ResourceKind, ResourceHandler] = {}

    def register(self, handler: ResourceHandler) -> None:
        """Register a handler.

        Raises:
            ValueError: If the kind is already registered
        """
        if handler.kind in self._handlers:
            raise ValueError(f"Resource kind '{handler.kind.value}' is already registered")
        self._handlers[handler.kind] = handler

    def unregister(self, kind: ResourceKind) -> None:
        """Unregister a handler.

        Raises:
            ValueError: If the kind is not registered
        """
        if kind not in self._handlers:
            raise ValueError(f"Resource kind '{kind.value}' is not registered")
        del self._handlers[kind]

    def get(self, kind: ResourceKind) -> ResourceHandler | None:
        return self._handlers.get(kind)

    def resolve(self, tag: str) -> ResourceHandler:
        """Look up the handler for a resource kind tag.

        Raises:
            UnknownResourceKindError: If the tag is not a registered kind
        """
        kind = ResourceKind.from_str(tag)
        handler = self._handlers.get(kind) if kind is not None else None
        if handler is None:
            raise UnknownResourceKindError(tag)
        return handler

    @property
    def kinds(self) -> list[ResourceKind]:
        return list(self._handlers)

    def __contains__(self, kind: object) -> bool:
        return kind in self._handlers


_default_registry: ResourceRegistry | None = None


def get_resource_registry() -> ResourceRegistry:
    """Get the global registry, registering the built-in kinds on first use."""
    global _default_registry
    if _default_registry is None:
        from ..registration import register_all

        registry = ResourceRegistry()
        register_all(registry)
        _default_registry = registry
    return _default_registry
