"""
Analysis record models.

A LinkAnalysis is the immutable report produced by one run of the pipeline.
Records serialize with camelCase keys so they can be stored and reloaded
without loss for exact re-display.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class AnalyzeOptions(BaseModel):
    """Options supplied by the caller for a single analysis."""

    model_config = _RECORD_CONFIG

    assume_https: bool = Field(True, description="Infer https:// for scheme-less lines")
    dedupe: bool = Field(True, description="Collapse case-insensitive duplicates")


class LinkRow(BaseModel):
    """Analysis result for one input line."""

    model_config = _RECORD_CONFIG

    id: str = Field(..., description="Opaque row identifier")
    raw: str = Field(..., description="Original line text")
    normalized: str = Field(..., description="Candidate URL after normalization")
    is_valid: bool = Field(..., description="True iff normalized parsed as a URL")
    error: str | None = Field(None, description="Parse failure reason (invalid rows)")
    protocol: str | None = Field(None, description="Scheme without trailing colon")
    hostname: str | None = Field(None, description="Host component")
    domain: str | None = Field(None, description="Hostname without leading www.")
    tld: str | None = Field(None, description="Lowercase text after the last dot")
    pathname: str | None = Field(None, description="Path component")
    query_params: int = Field(0, ge=0, description="Number of query key/value pairs")
    has_hash: bool = Field(False, description="Non-empty fragment present")
    length: int = Field(..., ge=0, description="Character length of normalized")

    @model_validator(mode="after")
    def _check_outcome(self) -> "LinkRow":
        if self.length != len(self.normalized):
            raise ValueError("length must equal the length of normalized")

        if self.is_valid:
            if self.error is not None:
                raise ValueError("valid rows cannot carry an error")
            if self.protocol is None or self.pathname is None:
                raise ValueError("valid rows require protocol and pathname")
        else:
            if not self.error:
                raise ValueError("invalid rows require a non-empty error")
            success = (
                self.protocol,
                self.hostname,
                self.domain,
                self.tld,
                self.pathname,
            )
            if any(value is not None for value in success):
                raise ValueError("invalid rows cannot carry parsed URL fields")
            if self.query_params or self.has_hash:
                raise ValueError("invalid rows cannot carry query or fragment data")
        return self


class LinkMetrics(BaseModel):
    """Summary counters over all rows of an analysis."""

    model_config = _RECORD_CONFIG

    total: int = 0
    valid: int = 0
    invalid: int = 0
    unique_domains: int = 0
    with_query: int = 0
    with_hash: int = 0
    avg_length: float = 0


class LinkDistributions(BaseModel):
    """Frequency tables keyed by protocol, lowercase domain and TLD."""

    model_config = _RECORD_CONFIG

    protocol: dict[str, int] = Field(default_factory=dict)
    domain: dict[str, int] = Field(default_factory=dict)
    tld: dict[str, int] = Field(default_factory=dict)


class LinkAnalysis(BaseModel):
    """Immutable snapshot of one analysis run."""

    model_config = _RECORD_CONFIG

    id: str = Field(..., description="Analysis identifier")
    created_at: datetime = Field(..., description="When the analysis ran")
    input: str = Field(..., description="Raw text exactly as supplied")
    items: list[LinkRow] = Field(default_factory=list)
    metrics: LinkMetrics = Field(default_factory=LinkMetrics)
    distributions: LinkDistributions = Field(default_factory=LinkDistributions)

    def to_record(self) -> dict:
        """Serialize to plain JSON-compatible data (absent fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
