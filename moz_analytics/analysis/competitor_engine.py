"""Competitor analysis engine.

This module implements the CompetitorAnalysisEngine that builds a
multi-site competitive report from several Moz API calls. Calls for one
site are issued concurrently; competitors are processed one at a time, in
the order given, so the report keeps that order and at most three calls are
in flight for a competitor batch.

Every remote call is guarded on its own: a failure becomes an inline
``{"error": "<message>"}`` marker in its slot and never aborts the report.

Example:
    ```python
    import asyncio

    from moz_analytics.analysis.competitor_engine import CompetitorAnalysisEngine
    from moz_analytics.client.moz_client import MozApiClient

    async def main():
        engine = CompetitorAnalysisEngine(MozApiClient("my-moz-token"))
        report = await engine.analyze(
            "example.com",
            ["competitor-a.com", "competitor-b.com"],
            "seo tools",
        )
        print(report.insights)

    asyncio.run(main())
    ```
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable

from moz_analytics.analysis.insights import generate_insights
from moz_analytics.client.moz_client import RANKING_KEYWORDS_LIMIT, MozApiClient
from moz_analytics.exceptions.analysis_error import AnalysisError
from moz_analytics.models.report_model import (
    AnalysisReport,
    CompetitorEntry,
    CompetitorFailure,
    CompetitorGuidance,
    KeywordAnalysis,
    SiteData,
)

logger = logging.getLogger(__name__)

GUIDANCE_MESSAGE = "No competitors were specified. To find potential competitors, you can:"
GUIDANCE_SUGGESTIONS = (
    "1. Look at the ranking keywords data above and see which sites rank for similar keywords",
    "2. Search for your target keyword in Google and see which sites appear in top results",
    "3. Use industry knowledge to identify known competitors",
    "4. Once you identify potential competitors, run this analysis again with competitor_sites parameter",
)
GUIDANCE_NOTE = "Moz API does not automatically identify competitors - you need to specify them manually"


def competitor_guidance() -> CompetitorGuidance:
    """Static advice attached to reports built without competitors."""
    return CompetitorGuidance(
        message=GUIDANCE_MESSAGE,
        suggestions=list(GUIDANCE_SUGGESTIONS),
        note=GUIDANCE_NOTE,
    )


async def guarded(call: Awaitable[Any], label: str = "") -> Any:
    """Await a remote call, turning any failure into an error marker.

    Args:
        call: Awaitable remote call
        label: Description used in the log line

    Returns:
        The call result, or ``{"error": "<message>"}`` if it raised
    """
    try:
        return await call
    except Exception as e:
        logger.warning(f"Call failed{f' ({label})' if label else ''}: {e}")
        return {"error": str(e)}


class CompetitorAnalysisEngine:
    """Builds competitive reports from Moz site and keyword data.

    Attributes:
        client: Moz API client used for every remote call
    """

    def __init__(self, client: MozApiClient) -> None:
        self.client = client

    async def analyze(
        self,
        primary_site: str,
        competitor_sites: list[str] | None,
        target_keyword: str,
        locale: str | None = None,
        include_keyword_analysis: bool | None = True,
    ) -> AnalysisReport:
        """Run a competitor analysis.

        Args:
            primary_site: Domain being analyzed
            competitor_sites: Competitor domains, in the order they should be
                reported. May be empty.
            target_keyword: Keyword the sites compete for
            locale: Locale for ranking keyword and keyword calls. Defaults to the
                client's default locale.
            include_keyword_analysis: Whether to fetch keyword metrics,
                difficulty, volume and search intent. Only an explicit False
                disables it.

        Returns:
            A fully assembled AnalysisReport. Individual call failures are
            recorded inline.

        Raises:
            AnalysisError: If the report itself cannot be assembled
        """
        locale = locale or self.client.default_locale
        competitor_sites = list(competitor_sites or [])
        include_keyword_analysis = include_keyword_analysis is not False

        try:
            timestamp = datetime.now(timezone.utc).isoformat()

            logger.info(f"Analyzing primary site: {primary_site}")
            primary_site_data = SiteData(**await self._fetch_site(primary_site, locale))

            competitor_data: list[CompetitorEntry | CompetitorFailure] = []
            if competitor_sites:
                logger.info(f"Analyzing {len(competitor_sites)} competitors")
                for competitor in competitor_sites:
                    competitor_data.append(await self._analyze_competitor(competitor, locale))

            keyword_analysis = None
            if include_keyword_analysis:
                logger.info(f"Analyzing target keyword: {target_keyword}")
                keyword_analysis = await self._fetch_keyword(target_keyword, locale)

            draft = AnalysisReport(
                primary_site=primary_site,
                target_keyword=target_keyword,
                locale=locale,
                analysis_timestamp=timestamp,
                primary_site_data=primary_site_data,
                competitor_data=competitor_data,
                keyword_analysis=keyword_analysis,
                competitor_identification_guidance=(
                    None if competitor_sites else competitor_guidance()
                ),
            )
            insight_result = generate_insights(draft)
            return draft.model_copy(update={"insights": insight_result.all_insights()})

        except Exception as e:
            logger.error(f"Competitor analysis failed: {e}", exc_info=True)
            raise AnalysisError(
                f"Competitor analysis failed: {e}",
                context={"primary_site": primary_site, "target_keyword": target_keyword},
            ) from e

    async def _fetch_site(self, site: str, locale: str) -> dict[str, Any]:
        """Fetch the three site slots concurrently."""
        site_metrics, brand_authority, ranking_keywords = await asyncio.gather(
            guarded(self.client.get_site_metrics(site), f"site metrics for {site}"),
            guarded(self.client.get_site_brand_authority(site), f"brand authority for {site}"),
            guarded(
                self.client.get_site_ranking_keywords(
                    site, locale=locale, limit=RANKING_KEYWORDS_LIMIT
                ),
                f"ranking keywords for {site}",
            ),
        )
        return {
            "site_metrics": site_metrics,
            "brand_authority": brand_authority,
            "ranking_keywords": ranking_keywords,
        }

    async def _analyze_competitor(
        self,
        site: str,
        locale: str,
    ) -> CompetitorEntry | CompetitorFailure:
        try:
            return CompetitorEntry(site=site, **await self._fetch_site(site, locale))
        except Exception as e:
            logger.warning(f"Failed to analyze competitor {site}: {e}")
            return CompetitorFailure(site=site, error=f"Failed to analyze: {e}")

    async def _fetch_keyword(self, keyword: str, locale: str) -> KeywordAnalysis:
        """Fetch the four keyword slots concurrently."""
        metrics, difficulty, volume, search_intent = await asyncio.gather(
            guarded(self.client.get_keyword_metrics(keyword, locale=locale), "keyword metrics"),
            guarded(self.client.get_keyword_difficulty(keyword, locale=locale), "keyword difficulty"),
            guarded(self.client.get_keyword_volume(keyword, locale=locale), "keyword volume"),
            guarded(
                self.client.get_keyword_search_intent(keyword, locale=locale),
                "search intent",
            ),
        )
        return KeywordAnalysis(
            keyword=keyword,
            metrics=metrics,
            difficulty=difficulty,
            volume=volume,
            search_intent=search_intent,
        )
