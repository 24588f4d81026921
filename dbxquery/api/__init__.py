"""High-level API facade."""

from .datasource import DataSource, HealthCheckResult, HealthStatus

__all__ = [
    "DataSource",
    "HealthCheckResult",
    "HealthStatus",
]
