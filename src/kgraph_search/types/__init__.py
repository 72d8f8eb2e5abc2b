"""Type definitions for kgraph-search.

This module re-exports all types from submodules for convenient imports.
"""

from kgraph_search.types.entity import EntityRecord
from kgraph_search.types.search import CallParameters, KGraphResult, SearchRequest

__all__ = [
    "CallParameters",
    "EntityRecord",
    "KGraphResult",
    "SearchRequest",
]
