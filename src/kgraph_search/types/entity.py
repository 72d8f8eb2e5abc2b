"""Entity schemas for Knowledge Graph Search results."""

from pydantic import BaseModel, ConfigDict, Field


class EntityRecord(BaseModel):
    """One entity flattened out of an `itemListElement` entry."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str | None = Field(..., description="Entity id without the 'kg:' marker, e.g. '/m/0dl567'")
    name: str | None = Field(default=None, description="Entity display name")
    types: list[str] = Field(default_factory=list, description="schema.org types of the entity")
    description: str | None = Field(default=None, description="Short description")
    detailed_description: str | None = Field(
        default=None,
        alias="detailedDescription",
        description="Article body of the detailed description, if the API returned one",
    )
    score: float | None = Field(default=None, description="Relevance score assigned by the API")
