"""Tests for entity and result schemas."""

import pytest
from pydantic import ValidationError

from kgraph_search.types import CallParameters, EntityRecord, KGraphResult, SearchRequest


class TestEntityRecord:
    def test_detailed_description_alias(self):
        record = EntityRecord(id="/m/065qh", detailedDescription="Long text")

        assert record.detailed_description == "Long text"
        assert record.model_dump(by_alias=True)["detailedDescription"] == "Long text"

    def test_optional_fields_default_to_none(self):
        record = EntityRecord(id="/m/065qh")

        assert record.name is None
        assert record.types == []
        assert record.description is None
        assert record.detailed_description is None
        assert record.score is None


class TestSearchRequest:
    def test_limit_bounds_enforced(self):
        with pytest.raises(ValidationError):
            SearchRequest(keyword="Myst", token="k", limit=21)

    def test_prefix_is_strict(self):
        with pytest.raises(ValidationError):
            SearchRequest(keyword="Myst", token="k", prefix="true")


class TestKGraphResult:
    @pytest.fixture
    def result(self) -> KGraphResult:
        return KGraphResult(
            call=CallParameters(keyword=["London", "Paris"], token="secret_api_key", limit=30),
            request=SearchRequest(keyword="London", token="secret_api_key", limit=20),
            request_url="https://kgsearch.googleapis.com/v1/entities:search?query=London&key=secret_api_key",
            entities=[
                EntityRecord(id="/m/04jpl", name="London", score=900.0),
                EntityRecord(id=None, name="London Bridge", score=10.0),
                EntityRecord(id="/m/0n96", name="London, Ontario", score=5.0),
            ],
        )

    def test_top(self, result: KGraphResult):
        assert result.top().name == "London"

    def test_topic_ids_skip_missing(self, result: KGraphResult):
        assert result.topic_ids() == ["/m/04jpl", "/m/0n96"]

    def test_repr_hides_key(self, result: KGraphResult):
        assert "secret_api_key" not in repr(result)

    def test_result_type_tag(self, result: KGraphResult):
        assert result.type == "kgraph"
        assert result.warnings == []

    def test_call_keeps_raw_arguments(self, result: KGraphResult):
        assert result.call.keyword == ["London", "Paris"]
        assert result.call.limit == 30
        assert result.request.limit == 20
