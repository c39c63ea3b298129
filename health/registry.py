# ============================================================================
# HEALTH CHECK REGISTRY
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Infrastructure - Health check plugin registration
# PURPOSE: Register and discover health check plugins
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Check Registry

Usage:
    @register_check(category="graph")
    class GremlinCheck(HealthCheckPlugin):
        ...

    registry = get_registry()
    checks = registry.get_checks_by_priority()
"""

import logging
from typing import Dict, List, Optional, Type

from health.core import (
    HealthCheckPlugin,
    HealthCheckCategory,
)

logger = logging.getLogger(__name__)


class HealthCheckRegistry:
    """Registry of health check plugin instances, keyed by name."""

    def __init__(self):
        self._checks: Dict[str, HealthCheckPlugin] = {}
        self._initialized = False

    def register(self, check: HealthCheckPlugin) -> None:
        """Register a plugin instance. A check with the same name is replaced."""
        if check.name in self._checks:
            logger.warning(f"Overwriting health check: {check.name}")

        self._checks[check.name] = check
        logger.debug(
            f"Registered health check: {check.name} "
            f"(category={check.category.value}, priority={check.priority})"
        )

    def register_class(self, check_class: Type[HealthCheckPlugin], **kwargs) -> HealthCheckPlugin:
        instance = check_class(**kwargs)
        self.register(instance)
        return instance

    def get(self, name: str) -> Optional[HealthCheckPlugin]:
        return self._checks.get(name)

    def get_checks_by_priority(self) -> List[HealthCheckPlugin]:
        """All checks, lower priority first."""
        return sorted(self._checks.values(), key=lambda c: c.priority)

    def get_required_checks(self) -> List[HealthCheckPlugin]:
        """Checks that gate /readyz."""
        return [c for c in self._checks.values() if c.required_for_ready]

    def clear(self) -> None:
        self._checks.clear()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def mark_initialized(self) -> None:
        self._initialized = True

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: str) -> bool:
        return name in self._checks


# ============================================================================
# GLOBAL REGISTRY & DECORATOR
# ============================================================================

_registry: Optional[HealthCheckRegistry] = None


def get_registry() -> HealthCheckRegistry:
    """Get the global health check registry."""
    global _registry
    if _registry is None:
        _registry = HealthCheckRegistry()
    return _registry


def register_check(
    category: str = None,
    priority: int = None,
    timeout_seconds: float = None,
    required_for_ready: bool = None,
):
    """
    Decorator to register a health check class with the global registry.

    Args:
        category: Override category (string or HealthCheckCategory)
        priority: Override priority (lower runs first)
        timeout_seconds: Override timeout
        required_for_ready: Override if required for /readyz
    """
    def decorator(cls: Type[HealthCheckPlugin]) -> Type[HealthCheckPlugin]:
        if category is not None:
            cls.category = HealthCheckCategory(category)

        if priority is not None:
            cls.priority = priority
        elif category is not None:
            cls.priority = cls.category.default_priority

        if timeout_seconds is not None:
            cls.timeout_seconds = timeout_seconds

        if required_for_ready is not None:
            cls.required_for_ready = required_for_ready

        get_registry().register_class(cls)
        return cls

    return decorator


__all__ = [
    "HealthCheckRegistry",
    "get_registry",
    "register_check",
]
