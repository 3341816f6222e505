"""Competitor analysis: report assembly and insight generation."""

from moz_analytics.analysis.competitor_engine import CompetitorAnalysisEngine
from moz_analytics.analysis.insights import InsightResult, generate_insights

__all__ = [
    "CompetitorAnalysisEngine",
    "InsightResult",
    "generate_insights",
]
