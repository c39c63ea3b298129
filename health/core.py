# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Base classes for health checks
# PURPOSE: Health check plugin interfaces and result types
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Core Types

Defines the plugin interface and result types for health checks.

Status Hierarchy (worst wins):
- healthy: All systems operational
- degraded: Operational with warnings (e.g. graph store not configured)
- unhealthy: Critical failure (blocks operations)

Categories (execution order by priority):
1. Startup (10): Process and configuration
2. Document store (20): Bootstrapped Cosmos DB containers
3. Graph (30): Gremlin API reachability
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime


class HealthStatus(str, Enum):
    """Health check status values."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @property
    def severity(self) -> int:
        return {
            HealthStatus.HEALTHY: 0,
            HealthStatus.DEGRADED: 1,
            HealthStatus.UNHEALTHY: 2,
        }[self]

    @classmethod
    def aggregate(cls, statuses: List["HealthStatus"]) -> "HealthStatus":
        """Aggregate multiple statuses (worst wins)."""
        if not statuses:
            return cls.HEALTHY
        return max(statuses, key=lambda s: s.severity)


class HealthCheckCategory(str, Enum):
    """Health check categories with default priorities."""
    STARTUP = "startup"                # Priority 10
    DOCUMENT_STORE = "document_store"  # Priority 20
    GRAPH = "graph"                    # Priority 30

    @property
    def default_priority(self) -> int:
        """Get default priority for category."""
        return {
            HealthCheckCategory.STARTUP: 10,
            HealthCheckCategory.DOCUMENT_STORE: 20,
            HealthCheckCategory.GRAPH: 30,
        }[self]


@dataclass
class HealthCheckResult:
    """Result from a single health check."""
    status: HealthStatus
    message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0
    checked_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def healthy(cls, message: str = None, **details) -> "HealthCheckResult":
        return cls(status=HealthStatus.HEALTHY, message=message, details=details)

    @classmethod
    def degraded(cls, message: str, **details) -> "HealthCheckResult":
        return cls(status=HealthStatus.DEGRADED, message=message, details=details)

    @classmethod
    def unhealthy(cls, message: str, **details) -> "HealthCheckResult":
        return cls(status=HealthStatus.UNHEALTHY, message=message, details=details)

    @classmethod
    def from_exception(cls, e: Exception) -> "HealthCheckResult":
        """Create unhealthy result from exception."""
        return cls(
            status=HealthStatus.UNHEALTHY,
            message=str(e),
            details={"exception_type": type(e).__name__},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        result = {
            "status": self.status.value,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.message:
            result["message"] = self.message
        if self.details:
            result["details"] = self.details
        return result


@dataclass
class AggregatedHealthResult:
    """Aggregated result from multiple health checks."""
    status: HealthStatus
    checks: Dict[str, HealthCheckResult]
    total_duration_ms: float
    checked_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "checks": {
                name: result.to_dict()
                for name, result in self.checks.items()
            },
            "total_duration_ms": round(self.total_duration_ms, 2),
            "checked_at": self.checked_at.isoformat() + "Z",
        }


class HealthCheckPlugin(ABC):
    """
    Base class for health check plugins.

    Subclass and implement check(). Register with @register_check or
    registry.register().

    Attributes:
        name: Unique identifier for the check
        category: Check category (determines default priority)
        priority: Execution priority (lower runs first)
        timeout_seconds: Max execution time before timeout
        required_for_ready: If True, failure blocks /readyz
    """

    name: str = "unnamed"
    category: HealthCheckCategory = HealthCheckCategory.STARTUP
    priority: Optional[int] = None
    timeout_seconds: float = 10.0
    required_for_ready: bool = True

    @abstractmethod
    async def check(self) -> HealthCheckResult:
        """Execute health check."""

    def __init_subclass__(cls, **kwargs):
        """Take the category's priority unless one is given."""
        super().__init_subclass__(**kwargs)
        if cls.priority is None:
            cls.priority = cls.category.default_priority
