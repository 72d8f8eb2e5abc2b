"""Integration tests against the real Knowledge Graph Search API (not mocked).

These tests make actual API calls and should only be run when:
1. GOOGLE_API_KEY is configured in .env
2. You're okay with using API quota

Run with: pytest tests/integration/test_kgraph_live.py -v -s

Skip with: pytest tests/ --ignore=tests/integration/
"""

import pytest

from kgraph_search.config import settings
from kgraph_search.exceptions import ApiError
from kgraph_search.tools.kgraph import kgraph


@pytest.mark.integration
class TestRealKnowledgeGraph:
    """Integration tests for the Knowledge Graph Search API."""

    @pytest.fixture(autouse=True)
    def require_key(self):
        if not settings.google_api_key:
            pytest.skip("Google API key not configured")

    def test_keyword_search(self):
        result = kgraph("Taylor Swift", limit=3)

        assert 0 < len(result.entities) <= 3
        assert result.entities[0].id.startswith("/")
        scores = [e.score for e in result.entities]
        assert scores == sorted(scores, reverse=True)

        print("\nKnowledge Graph results for 'Taylor Swift':")
        for entity in result.entities:
            print(f"  {entity.id} {entity.name} ({', '.join(entity.types)}) {entity.score}")

    def test_lookup_by_id(self):
        result = kgraph(ids="/m/0dl567")

        assert result.topic_ids() == ["/m/0dl567"]

    def test_unsupported_type_returns_api_error(self):
        with pytest.raises(ApiError) as exc_info:
            kgraph("Tesla", types="NotARealSchemaType")

        assert exc_info.value.status_code == 400
