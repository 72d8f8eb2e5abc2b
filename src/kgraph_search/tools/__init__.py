from kgraph_search.tools.kgraph import (
    KnowledgeGraphClient,
    async_kgraph,
    build_request,
    build_request_url,
    kgraph,
    parse_entities,
)

__all__ = [
    "KnowledgeGraphClient",
    "async_kgraph",
    "build_request",
    "build_request_url",
    "kgraph",
    "parse_entities",
]
