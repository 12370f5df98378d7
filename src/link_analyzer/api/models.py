"""
API request/response models.

Defines Pydantic models for the analysis endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalyzeRequest(BaseModel):
    """Body for POST /v1/analyze."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    input: str = Field(..., description="Links to analyze, one per line")
    assume_https: bool | None = Field(
        None, description="Infer https:// for scheme-less lines (config default if null)"
    )
    dedupe: bool | None = Field(
        None, description="Collapse case-insensitive duplicates (config default if null)"
    )
    save: bool = Field(True, description="Store the analysis in history")


class TopEntry(BaseModel):
    """One (key, count) pair of a distribution."""

    key: str = Field(..., description="Distribution key")
    count: int = Field(..., description="Number of rows with this key")


class TopEntriesResponse(BaseModel):
    """Response for GET /v1/history/{analysis_id}/top/{field}."""

    analysis_id: str = Field(..., description="Analysis ID")
    field: str = Field(..., description="Distribution name")
    entries: list[TopEntry] = Field(
        default_factory=list, description="Entries sorted by count, descending"
    )
