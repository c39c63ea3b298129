# ============================================================================
# QUERY MODELS
# ============================================================================
# EPOCH: 1 - GRAPH AND DOCUMENT GATEWAY
# STATUS: Core - Graph query request/result models
# PURPOSE: Pydantic models for graph query submission
# CREATED: 19 OCT 2026
# ============================================================================
"""
Query Models

QueryRequest carries opaque query text that is passed verbatim to the
graph driver. QueryResult tags the driver's untyped result with its shape
so callers can branch on it; the value itself is never rewritten.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ResultKind(str, Enum):
    """Shape of a driver result."""
    NULL = "null"
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"

    @classmethod
    def of(cls, value: Any) -> "ResultKind":
        """Classify a driver result."""
        if value is None:
            return cls.NULL
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, (list, tuple, set, frozenset)):
            return cls.SEQUENCE
        return cls.SCALAR


class QueryRequest(BaseModel):
    """A graph query submission."""

    query: str = Field(
        ...,
        min_length=1,
        description="Query text in the driver's language, passed through unchanged",
        examples=["g.V().count()"],
    )
    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Optional deadline for the submission. No deadline when omitted.",
    )


class QueryResult(BaseModel):
    """Driver result tagged with its shape."""

    kind: ResultKind
    value: Any = None

    @classmethod
    def from_driver(cls, value: Any) -> "QueryResult":
        kind = ResultKind.of(value)
        if isinstance(value, (set, frozenset, tuple)):
            value = list(value)
        return cls(kind=kind, value=value)


__all__ = [
    "ResultKind",
    "QueryRequest",
    "QueryResult",
]
