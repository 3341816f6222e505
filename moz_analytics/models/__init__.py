"""Pydantic models for query parameters and analysis reports."""

from moz_analytics.models.query_models import SerpQuery, SiteQuery
from moz_analytics.models.report_model import (
    AnalysisReport,
    CompetitorEntry,
    CompetitorFailure,
    KeywordAnalysis,
    SiteData,
)

__all__ = [
    "SerpQuery",
    "SiteQuery",
    "AnalysisReport",
    "CompetitorEntry",
    "CompetitorFailure",
    "KeywordAnalysis",
    "SiteData",
]
