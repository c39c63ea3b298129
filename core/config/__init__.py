# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Configuration
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized, environment-backed configuration for the gateway.
"""

from core.config.settings import (
    ConfigurationError,
    GraphStoreConfig,
    DocumentStoreConfig,
    GatewayConfig,
    get_config,
    reset_config,
)

__all__ = [
    "ConfigurationError",
    "GraphStoreConfig",
    "DocumentStoreConfig",
    "GatewayConfig",
    "get_config",
    "reset_config",
]
