# ============================================================================
# GATEWAY SETTINGS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Cosmos DB connection settings
# PURPOSE: Environment-based configuration for graph and document stores
# CREATED: 19 OCT 2026
# ============================================================================
"""
Gateway Settings

Configuration for the two Cosmos DB paths:
- GraphStoreConfig: Gremlin API account (graph queries)
- DocumentStoreConfig: SQL API account (bootstrapped document stores)

Values are read from environment variables without validation. A missing
value surfaces as ConfigurationError the first time it is required (when a
graph connection is built or a document store is bootstrapped), not at load.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a required configuration value is missing."""


def _require(section: str, env_var: str, value: Optional[str]) -> str:
    if not value:
        raise ConfigurationError(
            f"{section} is not configured: set the {env_var} environment variable"
        )
    return value


@dataclass
class GraphStoreConfig:
    """
    Configuration for the Cosmos DB Gremlin API.

    Environment:
        COSMOS_GREMLIN_ENDPOINT: Gremlin host (e.g. myaccount.gremlin.cosmos.azure.com)
        COSMOS_GREMLIN_PRIMARY_KEY: Account primary key
        COSMOS_GREMLIN_DATABASE_NAME: Graph database name
        COSMOS_GREMLIN_CONTAINER_NAME: Graph (container) name
    """
    endpoint: Optional[str] = None
    primary_key: Optional[str] = None
    database_name: Optional[str] = None
    container_name: Optional[str] = None

    ENV_VARS = {
        "endpoint": "COSMOS_GREMLIN_ENDPOINT",
        "primary_key": "COSMOS_GREMLIN_PRIMARY_KEY",
        "database_name": "COSMOS_GREMLIN_DATABASE_NAME",
        "container_name": "COSMOS_GREMLIN_CONTAINER_NAME",
    }

    @classmethod
    def from_env(cls) -> "GraphStoreConfig":
        """Load configuration from environment variables."""
        return cls(**{
            name: os.environ.get(env_var)
            for name, env_var in cls.ENV_VARS.items()
        })

    def require(self, name: str) -> str:
        """Get a configuration value, raising ConfigurationError if missing."""
        return _require("Graph store", self.ENV_VARS[name], getattr(self, name))

    @property
    def missing(self) -> List[str]:
        """Environment variables that are not set."""
        return [
            env_var for name, env_var in self.ENV_VARS.items()
            if not getattr(self, name)
        ]


@dataclass
class DocumentStoreConfig:
    """
    Configuration for the Cosmos DB SQL API.

    Supports both key and managed identity authentication.

    Environment:
        COSMOS_DB_ACCOUNT: Account endpoint (https://myaccount.documents.azure.com:443/)
        COSMOS_DB_PRIMARY_KEY: Account primary key (not needed with managed identity)
        COSMOS_DB_DATABASE_NAME: Database shared by all bootstrapped stores
        COSMOS_DB_STORES: Comma-separated store names; each becomes a container
        USE_MANAGED_IDENTITY: Set to "true" to authenticate with managed identity
        AZURE_CLIENT_ID: Optional client ID for user-assigned managed identity
    """
    account: Optional[str] = None
    primary_key: Optional[str] = None
    database_name: Optional[str] = None
    stores: List[str] = field(default_factory=list)

    use_managed_identity: bool = False
    managed_identity_client_id: Optional[str] = None

    ENV_VARS = {
        "account": "COSMOS_DB_ACCOUNT",
        "primary_key": "COSMOS_DB_PRIMARY_KEY",
        "database_name": "COSMOS_DB_DATABASE_NAME",
    }

    @classmethod
    def from_env(cls) -> "DocumentStoreConfig":
        """Load configuration from environment variables."""
        stores = [
            name.strip()
            for name in os.environ.get("COSMOS_DB_STORES", "").split(",")
            if name.strip()
        ]
        return cls(
            account=os.environ.get("COSMOS_DB_ACCOUNT"),
            primary_key=os.environ.get("COSMOS_DB_PRIMARY_KEY"),
            database_name=os.environ.get("COSMOS_DB_DATABASE_NAME"),
            stores=stores,
            use_managed_identity=os.environ.get("USE_MANAGED_IDENTITY", "").lower() == "true",
            managed_identity_client_id=os.environ.get("AZURE_CLIENT_ID"),
        )

    def require(self, name: str) -> str:
        """Get a configuration value, raising ConfigurationError if missing."""
        return _require("Document store", self.ENV_VARS[name], getattr(self, name))

    def get_credential(self):
        """
        Get the credential for the document client.

        Returns the primary key string, or an azure-identity credential
        when USE_MANAGED_IDENTITY=true.
        """
        if not self.use_managed_identity:
            return self.require("primary_key")

        from azure.identity.aio import DefaultAzureCredential, ManagedIdentityCredential

        if self.managed_identity_client_id:
            logger.info("Using user-assigned managed identity for Cosmos DB")
            return ManagedIdentityCredential(client_id=self.managed_identity_client_id)

        logger.info("Using DefaultAzureCredential for Cosmos DB")
        return DefaultAzureCredential()

    @property
    def missing(self) -> List[str]:
        """Environment variables that are not set."""
        missing = [
            env_var for name, env_var in self.ENV_VARS.items()
            if not getattr(self, name)
            and not (name == "primary_key" and self.use_managed_identity)
        ]
        if not self.stores:
            missing.append("COSMOS_DB_STORES")
        return missing


@dataclass
class GatewayConfig:
    """Top-level configuration for the gateway service."""
    graph: GraphStoreConfig = field(default_factory=GraphStoreConfig)
    documents: DocumentStoreConfig = field(default_factory=DocumentStoreConfig)

    # App info
    service_name: str = "cosmos-gateway"
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Load configuration from environment variables."""
        return cls(
            graph=GraphStoreConfig.from_env(),
            documents=DocumentStoreConfig.from_env(),
            service_name=os.environ.get("SERVICE_NAME", "cosmos-gateway"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            json_logs=os.environ.get("LOG_FORMAT", "").lower() == "json",
        )


# Global config singleton
_config: Optional[GatewayConfig] = None


def get_config() -> GatewayConfig:
    """Get the global configuration singleton."""
    global _config
    if _config is None:
        _config = GatewayConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration (reloaded from env on next access)."""
    global _config
    _config = None


__all__ = [
    "ConfigurationError",
    "GraphStoreConfig",
    "DocumentStoreConfig",
    "GatewayConfig",
    "get_config",
    "reset_config",
]
