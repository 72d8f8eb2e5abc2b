"""Request and result schemas for a single Knowledge Graph search call."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from kgraph_search.consts import MAX_LIMIT, MIN_LIMIT
from kgraph_search.types.entity import EntityRecord


class SearchRequest(BaseModel):
    """Normalized parameters of one call.

    Built after validation, so `keyword` and `ids` are never both set and
    `limit` is already clamped.
    """

    model_config = ConfigDict(frozen=True)

    keyword: str = Field(default="", description="Free-text query")
    token: str = Field(..., repr=False, description="Google API key")
    ids: list[str] = Field(default_factory=list, description="Entity ids, e.g. '/m/065qh'")
    language: str = Field(default="", description="ISO 639 language code")
    types: list[str] = Field(default_factory=list, description="schema.org types to restrict to")
    prefix: bool = Field(default=False, strict=True, description="Allow prefix matching")
    limit: int = Field(default=10, ge=MIN_LIMIT, le=MAX_LIMIT, description="Maximum entities")


class CallParameters(BaseModel):
    """Arguments exactly as the caller passed them, before any adjustment."""

    model_config = ConfigDict(frozen=True)

    keyword: Any = ""
    token: str | None = Field(default=None, repr=False)
    ids: Any = ()
    hl: str | None = ""
    types: Any = ()
    prefix: Any = False
    limit: Any = 10
    timeout: float | None = None


class KGraphResult(BaseModel):
    """Return value of `kgraph()`.

    Entities keep the order the API returned them in (descending relevance).
    """

    type: Literal["kgraph"] = "kgraph"
    call: CallParameters
    request: SearchRequest
    request_url: str = Field(..., repr=False, description="URL that was sent, key included")
    entities: list[EntityRecord] = Field(default_factory=list)
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-fatal adjustments made to the call parameters",
    )

    def top(self) -> EntityRecord | None:
        """Most relevant entity, or None when nothing matched."""
        return self.entities[0] if self.entities else None

    def topic_ids(self) -> list[str]:
        """Entity ids in result order.

        These are the terms a trends tool expects for a topic search, which
        groups every language and spelling of the entity.
        """
        return [entity.id for entity in self.entities if entity.id]
