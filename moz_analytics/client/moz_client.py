"""Typed wrappers around the Moz API JSON-RPC methods.

Each wrapper maps a keyword, site or link query plus optional settings to a
fixed remote method name and parameter shape, applies the documented
defaults and returns the remote result unchanged.

Example:
    ```python
    import asyncio

    from moz_analytics.client.moz_client import MozApiClient

    async def main():
        client = MozApiClient("my-moz-token")
        volume = await client.get_keyword_volume("seo tools", locale="en-GB")
        authority = await client.get_site_brand_authority("moz.com")

    asyncio.run(main())
    ```
"""

import logging
from typing import Any

from moz_analytics.client.auth import AuthResolver
from moz_analytics.client.transport import DEFAULT_TIMEOUT, RemoteCallClient
from moz_analytics.config import DEFAULT_API_URL, Config
from moz_analytics.models.query_models import (
    DEFAULT_ENGINE,
    DEFAULT_LOCALE,
    SerpQuery,
    SiteQuery,
    SiteScope,
)

logger = logging.getLogger(__name__)

# Remote method names, reproduced verbatim for wire compatibility
QUOTA_LOOKUP = "quota.lookup"
KEYWORD_SEARCH_INTENT = "data.keyword.search.intent.fetch"
KEYWORD_SUGGESTIONS = "data.keyword.suggestions.list"
KEYWORD_DIFFICULTY = "data.keyword.metrics.difficulty.fetch"
KEYWORD_VOLUME = "data.keyword.metrics.volume.fetch"
KEYWORD_OPPORTUNITY = "data.keyword.metrics.opportunity.fetch"
KEYWORD_PRIORITY = "data.keyword.metrics.priority.fetch"
KEYWORD_METRICS = "data.keyword.metrics.fetch"
SITE_BRAND_AUTHORITY = "data.site.metrics.brand.authority.fetch"
SITE_METRICS = "data.site.metrics.fetch"
SITE_METRICS_MULTIPLE = "data.site.metrics.fetch.multiple"
SITE_RANKING_KEYWORDS = "data.site.ranking.keywords.list"
SITE_RANKING_KEYWORDS_COUNT = "site.ranking_keywords.count"
URL_METRICS = "data.url_metrics"
LINKS = "data.links"
ANCHOR_TEXT = "data.anchor_text"
TOP_PAGES = "data.top_pages"
LINKING_DOMAINS = "data.linking_domains"
GLOBAL_TOP_PAGES = "data.global.top.pages.list"
GLOBAL_TOP_DOMAINS = "data.global.top.domains.list"
USAGE_DATA = "data.usage"

KEYWORD_SUGGESTIONS_LIMIT = 1000
RANKING_KEYWORDS_LIMIT = 100
LINKS_LIMIT = 50
GLOBAL_TOP_LIMIT = 100


def _optional(**values: Any) -> dict[str, Any]:
    """Keep only the options the caller actually set."""
    return {key: value for key, value in values.items() if value}


class MozApiClient:
    """Client for the Moz API.

    The credential is resolved once, when the client is built. All calls are
    coroutines and the instance can be shared by concurrent tasks.

    Attributes:
        auth: Resolved authentication settings
        transport: Remote call client used for every request
        default_locale: Locale sent when a call does not name one
    """

    def __init__(
        self,
        api_token: str,
        endpoint: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.default_locale = default_locale
        self.auth = AuthResolver.from_credential(api_token)
        self.transport = RemoteCallClient(self.auth, endpoint=endpoint, timeout=timeout)

    @classmethod
    def from_config(cls, config: Config) -> "MozApiClient":
        """Build a client from loaded configuration."""
        return cls(
            config.moz_api_token,
            endpoint=config.moz_api_url,
            timeout=config.request_timeout,
            default_locale=config.default_locale,
        )

    async def _call(self, method: str, data: dict[str, Any]) -> Any:
        return await self.transport.send(method, {"data": data})

    async def _keyword_call(
        self,
        method: str,
        keyword: str,
        locale: str | None,
        engine: str | None,
    ) -> Any:
        serp_query = SerpQuery(
            keyword=keyword,
            locale=locale or self.default_locale,
            engine=engine or DEFAULT_ENGINE,
        )
        return await self._call(method, {"serp_query": serp_query.to_params()})

    # Account

    async def get_quota(self) -> Any:
        """Look up the remaining API quota."""
        return await self._call(QUOTA_LOOKUP, {"path": "api.limits.data.rows"})

    async def get_usage_data(
        self,
        start: str | None = None,
        end: str | None = None,
    ) -> Any:
        """Fetch API usage, optionally between two dates."""
        return await self._call(USAGE_DATA, _optional(start=start, end=end))

    # Keywords

    async def get_keyword_search_intent(
        self,
        keyword: str,
        locale: str | None = None,
        engine: str | None = None,
    ) -> Any:
        """Fetch the search intent of a keyword."""
        return await self._keyword_call(KEYWORD_SEARCH_INTENT, keyword, locale, engine)

    async def get_keyword_suggestions(
        self,
        keyword: str,
        locale: str | None = None,
        limit: int | None = None,
    ) -> Any:
        """List keywords related to a seed keyword.

        Suggestions always come from the default search engine.
        """
        serp_query = SerpQuery(keyword=keyword, locale=locale or self.default_locale)
        return await self._call(
            KEYWORD_SUGGESTIONS,
            {
                "serp_query": serp_query.to_params(),
                "limit": limit or KEYWORD_SUGGESTIONS_LIMIT,
            },
        )

    async def get_keyword_difficulty(
        self,
        keyword: str,
        locale: str | None = None,
        engine: str | None = None,
    ) -> Any:
        """Fetch the ranking difficulty (0-100) of a keyword."""
        return await self._keyword_call(KEYWORD_DIFFICULTY, keyword, locale, engine)

    async def get_keyword_volume(
        self,
        keyword: str,
        locale: str | None = None,
        engine: str | None = None,
    ) -> Any:
        """Fetch the monthly search volume of a keyword."""
        return await self._keyword_call(KEYWORD_VOLUME, keyword, locale, engine)

    async def get_keyword_opportunity(
        self,
        keyword: str,
        locale: str | None = None,
        engine: str | None = None,
    ) -> Any:
        return await self._keyword_call(KEYWORD_OPPORTUNITY, keyword, locale, engine)

    async def get_keyword_priority(
        self,
        keyword: str,
        locale: str | None = None,
        engine: str | None = None,
    ) -> Any:
        return await self._keyword_call(KEYWORD_PRIORITY, keyword, locale, engine)

    async def get_keyword_metrics(
        self,
        keyword: str,
        locale: str | None = None,
        engine: str | None = None,
    ) -> Any:
        """Fetch volume, difficulty, opportunity and priority in one call."""
        return await self._keyword_call(KEYWORD_METRICS, keyword, locale, engine)

    # Sites

    async def get_site_brand_authority(self, site: str) -> Any:
        """Fetch the Brand Authority score of a domain."""
        site_query = SiteQuery(query=site)
        return await self._call(SITE_BRAND_AUTHORITY, {"site_query": site_query.to_params()})

    async def get_site_metrics(self, site: str) -> Any:
        """Fetch Domain Authority, Page Authority, spam score and link counts."""
        site_query = SiteQuery(query=site)
        return await self._call(SITE_METRICS, {"site_query": site_query.to_params()})

    async def get_site_metrics_multiple(self, sites: list[str]) -> Any:
        """Fetch site metrics for several domains in one call."""
        site_queries = [SiteQuery(query=site).to_params() for site in sites]
        return await self._call(SITE_METRICS_MULTIPLE, {"site_queries": site_queries})

    async def get_site_ranking_keywords(
        self,
        site: str,
        engine: str | None = None,
        locale: str | None = None,
        limit: int | None = None,
    ) -> Any:
        """List the keywords a domain ranks for."""
        locale = locale or self.default_locale
        target_query = SiteQuery(query=site).to_params()
        target_query["locale"] = locale
        return await self._call(
            SITE_RANKING_KEYWORDS,
            {
                "target_query": target_query,
                "serp_query": {
                    "engine": engine or DEFAULT_ENGINE,
                    "locale": locale,
                },
                "limit": limit or RANKING_KEYWORDS_LIMIT,
            },
        )

    async def get_site_ranking_keywords_count(
        self,
        site: str,
        engine: str | None = None,
        locale: str | None = None,
    ) -> Any:
        """Count the keywords a domain ranks for."""
        return await self._call(
            SITE_RANKING_KEYWORDS_COUNT,
            {
                "site": site,
                "engine": engine or DEFAULT_ENGINE,
                "locale": locale or self.default_locale,
            },
        )

    # Links

    async def get_url_metrics(
        self,
        targets: list[str],
        metrics: list[str] | None = None,
        scope: SiteScope | None = None,
    ) -> Any:
        """Fetch link metrics for a list of URLs."""
        data: dict[str, Any] = {"targets": targets}
        data.update(_optional(scope=scope, metrics=metrics))
        return await self._call(URL_METRICS, data)

    async def get_links(
        self,
        target: str,
        scope: SiteScope | None = None,
        sort: str | None = None,
        filter_: str | None = None,
        limit: int | None = None,
        source_scope: SiteScope | None = None,
    ) -> Any:
        """List links pointing at a target."""
        data: dict[str, Any] = {
            "target": target,
            "scope": scope or "page",
            "limit": limit or LINKS_LIMIT,
        }
        data.update(_optional(sort=sort, filter=filter_, source_scope=source_scope))
        return await self._call(LINKS, data)

    async def get_anchor_text(
        self,
        target: str,
        scope: SiteScope | None = None,
        sort: str | None = None,
        limit: int | None = None,
    ) -> Any:
        """List the anchor texts of links pointing at a target."""
        data: dict[str, Any] = {
            "target": target,
            "scope": scope or "page",
            "limit": limit or LINKS_LIMIT,
        }
        data.update(_optional(sort=sort))
        return await self._call(ANCHOR_TEXT, data)

    async def get_top_pages(
        self,
        target: str,
        scope: SiteScope | None = None,
        sort: str | None = None,
        limit: int | None = None,
    ) -> Any:
        """List the most linked-to pages of a site."""
        data: dict[str, Any] = {
            "target": target,
            "scope": scope or "root_domain",
            "limit": limit or LINKS_LIMIT,
        }
        data.update(_optional(sort=sort))
        return await self._call(TOP_PAGES, data)

    async def get_linking_domains(
        self,
        target: str,
        scope: SiteScope | None = None,
        sort: str | None = None,
        filter_: str | None = None,
        limit: int | None = None,
    ) -> Any:
        """List the domains linking to a target."""
        data: dict[str, Any] = {
            "target": target,
            "scope": scope or "page",
            "limit": limit or LINKS_LIMIT,
        }
        data.update(_optional(sort=sort, filter=filter_))
        return await self._call(LINKING_DOMAINS, data)

    async def get_global_top_pages(self, limit: int | None = None) -> Any:
        return await self._call(GLOBAL_TOP_PAGES, {"limit": limit or GLOBAL_TOP_LIMIT})

    async def get_global_top_domains(self, limit: int | None = None) -> Any:
        return await self._call(GLOBAL_TOP_DOMAINS, {"limit": limit or GLOBAL_TOP_LIMIT})
