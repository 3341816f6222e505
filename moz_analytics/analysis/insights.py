"""Insight generation for competitor analysis reports.

This module derives short human-readable findings from an assembled
AnalysisReport. It reads only a handful of fields from the otherwise opaque
remote payloads and never raises: if a rule fails on unexpected data, the
findings produced so far are kept and one advisory line is recorded.

Example:
    ```python
    from moz_analytics.analysis.insights import generate_insights

    result = generate_insights(report)
    for line in result.all_insights():
        print(line)
    ```
"""

import logging
from typing import Any, Iterable

from pydantic import BaseModel, Field

from moz_analytics.models.report_model import AnalysisReport, CompetitorEntry

logger = logging.getLogger(__name__)

INSIGHT_FAILURE_ADVISORY = (
    "Note: Some insights could not be generated due to data analysis issues"
)

# Wrapper objects a field may be nested in, checked after the top level
_CONTAINER_KEYS = ("result", "keyword_metrics")


class InsightResult(BaseModel):
    """Findings for one report.

    Attributes:
        insights: Findings produced before any failure
        advisory: Set when a rule failed and later rules were skipped
    """

    model_config = {"extra": "forbid", "frozen": True}

    insights: list[str] = Field(default_factory=list)
    advisory: str | None = None

    @property
    def complete(self) -> bool:
        return self.advisory is None

    def all_insights(self) -> list[str]:
        """Findings followed by the advisory line, if any."""
        if self.advisory is None:
            return list(self.insights)
        return [*self.insights, self.advisory]


def brand_authority_band(value: float) -> str:
    if value >= 70:
        return "Excellent"
    if value >= 50:
        return "Good"
    if value >= 30:
        return "Fair"
    return "Needs improvement"


def difficulty_band(value: float) -> str:
    if value >= 70:
        return "Very Hard"
    if value >= 50:
        return "Hard"
    if value >= 30:
        return "Medium"
    return "Easy"


def is_error_slot(slot: Any) -> bool:
    """Whether a slot holds an inline ``{"error": ...}`` marker."""
    return isinstance(slot, dict) and "error" in slot


def read_field(slot: Any, name: str) -> Any:
    """Read one field from an opaque result slot.

    The field is looked up at the top level first, then inside the wrapper
    objects the Moz API nests results in.

    Returns:
        The field value, or None when the slot errored or lacks the field
    """
    if not isinstance(slot, dict) or is_error_slot(slot):
        return None
    if name in slot:
        return slot[name]
    for container in _CONTAINER_KEYS:
        nested = slot.get(container)
        if isinstance(nested, dict) and name in nested:
            return nested[name]
    return None


def read_ranking_keywords(slot: Any) -> list[Any] | None:
    """Extract the ranking keyword list from a slot.

    Accepts a bare list, a list under ``result``, or a ``ranking_keywords``
    field at the top level or inside a wrapper object.

    Returns:
        The list of entries, or None when the slot errored or holds no list
    """
    if isinstance(slot, list):
        return slot
    if isinstance(slot, dict) and not is_error_slot(slot) and isinstance(slot.get("result"), list):
        return slot["result"]
    keywords = read_field(slot, "ranking_keywords")
    if isinstance(keywords, list):
        return keywords
    return None


def _entry_keyword(entry: Any) -> str | None:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        keyword = entry.get("keyword")
        if isinstance(keyword, str):
            return keyword
    return None


def _entry_rank(entry: Any) -> Any:
    if isinstance(entry, dict) and entry.get("rank") is not None:
        return entry["rank"]
    return "unknown"


def _brand_authority_insight(report: AnalysisReport) -> Iterable[str]:
    value = read_field(report.primary_site_data.brand_authority, "brand_authority")
    if value is not None:
        yield f"Primary site brand authority: {value} ({brand_authority_band(value)})"


def _difficulty_insight(report: AnalysisReport) -> Iterable[str]:
    if report.keyword_analysis is None:
        return
    value = read_field(report.keyword_analysis.difficulty, "difficulty")
    if value is not None:
        yield (
            f'Target keyword "{report.target_keyword}" difficulty: '
            f"{value}% ({difficulty_band(value)})"
        )


def _volume_insight(report: AnalysisReport) -> Iterable[str]:
    if report.keyword_analysis is None:
        return
    value = read_field(report.keyword_analysis.volume, "volume")
    if value is not None:
        yield f"Target keyword monthly search volume: {value:,}"


def _competitor_comparison_insight(report: AnalysisReport) -> Iterable[str]:
    primary = read_field(report.primary_site_data.brand_authority, "brand_authority")
    if primary is None:
        return

    compared = stronger = weaker = 0
    for competitor in report.competitor_data:
        if not isinstance(competitor, CompetitorEntry):
            continue
        value = read_field(competitor.brand_authority, "brand_authority")
        if value is None:
            continue
        compared += 1
        if value > primary:
            stronger += 1
        elif value < primary:
            weaker += 1

    if compared:
        yield (
            f"Competitive landscape: {stronger} competitors have higher brand "
            f"authority, {weaker} have lower"
        )


def _ranking_keyword_insight(report: AnalysisReport) -> Iterable[str]:
    keywords = read_ranking_keywords(report.primary_site_data.ranking_keywords)
    if keywords is None:
        return

    target = report.target_keyword
    if keywords:
        yield f"Primary site ranks for {len(keywords)} keywords (showing up to 100)"

    needle = target.lower()
    for entry in keywords:
        keyword = _entry_keyword(entry)
        if keyword is not None and needle in keyword.lower():
            yield (
                f'Primary site ranks for target keyword "{target}" '
                f"at position {_entry_rank(entry)}"
            )
            return

    yield f'Primary site does not appear to rank in top 100 for target keyword "{target}"'


_RULES = (
    _brand_authority_insight,
    _difficulty_insight,
    _volume_insight,
    _competitor_comparison_insight,
    _ranking_keyword_insight,
)


def generate_insights(report: AnalysisReport) -> InsightResult:
    """Derive findings from an assembled report.

    Rules run in a fixed order; each one emits lines only when its data is
    available. The report is never modified.

    Args:
        report: Report to analyze

    Returns:
        InsightResult with the findings, plus an advisory when a rule failed
    """
    insights: list[str] = []
    try:
        for rule in _RULES:
            insights.extend(rule(report))
    except Exception as e:
        logger.warning(f"Insight generation stopped early: {e}", exc_info=True)
        return InsightResult(insights=insights, advisory=INSIGHT_FAILURE_ADVISORY)
    return InsightResult(insights=insights)
