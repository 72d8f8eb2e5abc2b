"""Google Knowledge Graph entity search client."""

from kgraph_search.exceptions import (
    ApiError,
    ConflictingParametersError,
    InvalidParameterError,
    KGraphError,
)
from kgraph_search.tools import KnowledgeGraphClient, async_kgraph, kgraph
from kgraph_search.types import EntityRecord, KGraphResult, SearchRequest

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ConflictingParametersError",
    "EntityRecord",
    "InvalidParameterError",
    "KGraphError",
    "KGraphResult",
    "KnowledgeGraphClient",
    "SearchRequest",
    "async_kgraph",
    "kgraph",
]
