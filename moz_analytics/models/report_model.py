"""Report models for the competitor analysis engine.

This module defines the AnalysisReport Pydantic model and its parts. Remote
payloads are stored as opaque values: a slot holds whatever the Moz API
returned, or ``{"error": "<message>"}`` when that single call failed.

Example:
    ```python
    from moz_analytics.models.report_model import AnalysisReport, SiteData

    report = AnalysisReport(
        primary_site="example.com",
        target_keyword="seo tools",
        locale="en-US",
        analysis_timestamp="2024-01-01T00:00:00+00:00",
        primary_site_data=SiteData(
            site_metrics={...},
            brand_authority={"brand_authority": 55},
            ranking_keywords={"error": "Moz API Error: bad (Code: 7)"},
        ),
    )
    report.to_dict()
    ```
"""

from typing import Any

from pydantic import BaseModel, Field


class SiteData(BaseModel):
    """The three remote slots gathered for one site.

    Attributes:
        site_metrics: Result of the site metrics call
        brand_authority: Result of the brand authority call
        ranking_keywords: Result of the ranking keywords call
    """

    model_config = {"extra": "forbid", "frozen": True}

    site_metrics: Any = Field(default=None, description="Site metrics result")
    brand_authority: Any = Field(default=None, description="Brand authority result")
    ranking_keywords: Any = Field(default=None, description="Ranking keywords result")


class CompetitorEntry(SiteData):
    """Site data gathered for one competitor."""

    site: str = Field(..., description="Competitor domain")


class CompetitorFailure(BaseModel):
    """A competitor whose whole batch failed."""

    model_config = {"extra": "forbid", "frozen": True}

    site: str = Field(..., description="Competitor domain")
    error: str = Field(..., description="Failure description")


class KeywordAnalysis(BaseModel):
    """The four remote slots gathered for the target keyword."""

    model_config = {"extra": "forbid", "frozen": True}

    keyword: str = Field(..., description="Target keyword")
    metrics: Any = Field(default=None, description="Keyword metrics result")
    difficulty: Any = Field(default=None, description="Keyword difficulty result")
    volume: Any = Field(default=None, description="Keyword volume result")
    search_intent: Any = Field(default=None, description="Search intent result")


class CompetitorGuidance(BaseModel):
    """Static advice returned when no competitors were supplied."""

    model_config = {"extra": "forbid", "frozen": True}

    message: str
    suggestions: list[str]
    note: str


class AnalysisReport(BaseModel):
    """Multi-site competitive report.

    Built once per analysis and never modified after it is returned.

    Attributes:
        primary_site: Domain being analyzed
        target_keyword: Keyword the sites compete for
        locale: Locale used for locale-aware calls
        analysis_timestamp: ISO 8601 time the analysis started
        primary_site_data: Remote slots for the primary site
        competitor_data: One entry per competitor, in the caller's order
        keyword_analysis: Keyword slots, only when keyword analysis was requested
        insights: Human-readable findings derived from the data
        competitor_identification_guidance: Advice, only when no competitors
            were supplied
    """

    model_config = {"extra": "forbid", "frozen": True}

    primary_site: str
    target_keyword: str
    locale: str
    analysis_timestamp: str
    primary_site_data: SiteData = Field(default_factory=SiteData)
    competitor_data: list[CompetitorEntry | CompetitorFailure] = Field(default_factory=list)
    keyword_analysis: KeywordAnalysis | None = None
    insights: list[str] = Field(default_factory=list)
    competitor_identification_guidance: CompetitorGuidance | None = None

    def to_dict(self) -> dict[str, Any]:
        """Dump the report as plain JSON-compatible data.

        Optional sections that were not produced are left out rather than
        serialized as null.
        """
        exclude = set()
        if self.keyword_analysis is None:
            exclude.add("keyword_analysis")
        if self.competitor_identification_guidance is None:
            exclude.add("competitor_identification_guidance")
        return self.model_dump(mode="json", exclude=exclude)
