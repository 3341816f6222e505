"""Moz API tools.

Each capability of the client is exposed as a LangChain tool coroutine that
returns the remote result as indented JSON text. ``invoke_tool`` is the
single dispatch entry point: it checks required arguments before any remote
call is made, forwards optional arguments verbatim and tags failures with
the tool name.

Example:
    ```python
    import asyncio

    from moz_analytics.tools.moz_tools import invoke_tool

    text = asyncio.run(invoke_tool("moz_keyword_volume", {"keyword": "seo tools"}))
    print(text)
    ```
"""

import json
import logging
from typing import Any, Optional

from langchain_core.tools import BaseTool, tool

from moz_analytics.analysis.competitor_engine import CompetitorAnalysisEngine
from moz_analytics.client.moz_client import MozApiClient
from moz_analytics.config import get_config
from moz_analytics.exceptions.tool_error import (
    InvalidArgumentError,
    ToolExecutionError,
    UnknownToolError,
)

logger = logging.getLogger(__name__)

_client: Optional[MozApiClient] = None


def get_client() -> MozApiClient:
    """Get the shared client, building it from configuration on first use."""
    global _client
    if _client is None:
        _client = MozApiClient.from_config(get_config())
    return _client


def set_client(client: Optional[MozApiClient]) -> None:
    """Replace the shared client. Passing None rebuilds it on next use."""
    global _client
    _client = client


def _to_text(result: Any) -> str:
    return json.dumps(result, indent=2)


@tool
async def moz_quota() -> str:
    """Check your Moz API quota and usage limits."""
    return _to_text(await get_client().get_quota())


@tool
async def moz_keyword_search_intent(
    keyword: str,
    locale: Optional[str] = None,
    engine: Optional[str] = None,
) -> str:
    """Fetch search intent data for a keyword.

    Args:
        keyword: The keyword to analyze
        locale: Locale (defaults to the configured locale)
        engine: Search engine (google, bing)
    """
    return _to_text(
        await get_client().get_keyword_search_intent(keyword, locale=locale, engine=engine)
    )


@tool
async def moz_keyword_suggestions(
    keyword: str,
    locale: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """Get related keyword suggestions for a seed keyword."""
    return _to_text(
        await get_client().get_keyword_suggestions(keyword, locale=locale, limit=limit)
    )


@tool
async def moz_keyword_difficulty(
    keyword: str,
    locale: Optional[str] = None,
    engine: Optional[str] = None,
) -> str:
    """Get keyword difficulty score (0-100)."""
    return _to_text(
        await get_client().get_keyword_difficulty(keyword, locale=locale, engine=engine)
    )


@tool
async def moz_keyword_volume(
    keyword: str,
    locale: Optional[str] = None,
    engine: Optional[str] = None,
) -> str:
    """Get monthly search volume for a keyword."""
    return _to_text(
        await get_client().get_keyword_volume(keyword, locale=locale, engine=engine)
    )


@tool
async def moz_keyword_metrics(
    keyword: str,
    locale: Optional[str] = None,
    engine: Optional[str] = None,
) -> str:
    """Get all keyword metrics (volume, difficulty, opportunity, priority)."""
    return _to_text(
        await get_client().get_keyword_metrics(keyword, locale=locale, engine=engine)
    )


@tool
async def moz_keyword_opportunity(
    keyword: str,
    locale: Optional[str] = None,
    engine: Optional[str] = None,
) -> str:
    """Get keyword opportunity score (0-100)."""
    return _to_text(
        await get_client().get_keyword_opportunity(keyword, locale=locale, engine=engine)
    )


@tool
async def moz_keyword_priority(
    keyword: str,
    locale: Optional[str] = None,
    engine: Optional[str] = None,
) -> str:
    """Get keyword priority score (0-100)."""
    return _to_text(
        await get_client().get_keyword_priority(keyword, locale=locale, engine=engine)
    )


@tool
async def moz_site_brand_authority(site: str) -> str:
    """Get Brand Authority score for a domain."""
    return _to_text(await get_client().get_site_brand_authority(site))


@tool
async def moz_site_metrics(site: str) -> str:
    """Get comprehensive site metrics (DA, PA, spam score, links)."""
    return _to_text(await get_client().get_site_metrics(site))


@tool
async def moz_site_metrics_multiple(sites: list[str]) -> str:
    """Get site metrics for multiple domains at once."""
    return _to_text(await get_client().get_site_metrics_multiple(sites))


@tool
async def moz_site_ranking_keywords(
    site: str,
    engine: Optional[str] = None,
    locale: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """Get keywords a site ranks for."""
    return _to_text(
        await get_client().get_site_ranking_keywords(
            site, engine=engine, locale=locale, limit=limit
        )
    )


@tool
async def moz_site_ranking_keywords_count(
    site: str,
    engine: Optional[str] = None,
    locale: Optional[str] = None,
) -> str:
    """Count the keywords a site ranks for."""
    return _to_text(
        await get_client().get_site_ranking_keywords_count(site, engine=engine, locale=locale)
    )


@tool
async def moz_url_metrics(
    targets: list[str],
    metrics: Optional[list[str]] = None,
    scope: Optional[str] = None,
) -> str:
    """Get link metrics for a list of URLs."""
    return _to_text(
        await get_client().get_url_metrics(targets, metrics=metrics, scope=scope)
    )


@tool
async def moz_links(
    target: str,
    scope: Optional[str] = None,
    sort: Optional[str] = None,
    filter_: Optional[str] = None,
    limit: Optional[int] = None,
    source_scope: Optional[str] = None,
) -> str:
    """List links pointing at a page, subdomain or root domain."""
    return _to_text(
        await get_client().get_links(
            target,
            scope=scope,
            sort=sort,
            filter_=filter_,
            limit=limit,
            source_scope=source_scope,
        )
    )


@tool
async def moz_anchor_text(
    target: str,
    scope: Optional[str] = None,
    sort: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """List anchor texts used in links pointing at a target."""
    return _to_text(
        await get_client().get_anchor_text(target, scope=scope, sort=sort, limit=limit)
    )


@tool
async def moz_top_pages(
    target: str,
    scope: Optional[str] = None,
    sort: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """List the most linked-to pages of a site."""
    return _to_text(
        await get_client().get_top_pages(target, scope=scope, sort=sort, limit=limit)
    )


@tool
async def moz_linking_domains(
    target: str,
    scope: Optional[str] = None,
    sort: Optional[str] = None,
    filter_: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """List the domains linking to a target."""
    return _to_text(
        await get_client().get_linking_domains(
            target, scope=scope, sort=sort, filter_=filter_, limit=limit
        )
    )


@tool
async def moz_global_top_pages(limit: Optional[int] = None) -> str:
    """List the top pages on the web by linking root domains."""
    return _to_text(await get_client().get_global_top_pages(limit=limit))


@tool
async def moz_global_top_domains(limit: Optional[int] = None) -> str:
    """List the top domains on the web by linking root domains."""
    return _to_text(await get_client().get_global_top_domains(limit=limit))


@tool
async def moz_usage_data(start: Optional[str] = None, end: Optional[str] = None) -> str:
    """Get API usage data, optionally between two dates."""
    return _to_text(await get_client().get_usage_data(start=start, end=end))


@tool
async def moz_competitor_analysis(
    primary_site: str,
    target_keyword: str,
    competitor_sites: Optional[list[str]] = None,
    locale: Optional[str] = None,
    include_keyword_analysis: Optional[bool] = None,
) -> str:
    """Comprehensive competitor analysis comparing a site against competitors.

    Fetches site metrics, brand authority and ranking keywords for the primary
    site and every competitor, keyword metrics for the target keyword, and
    derives insights from the combined data.

    Args:
        primary_site: Your website domain to analyze
        target_keyword: Main keyword you want to compete for
        competitor_sites: Competitor domains to compare against
        locale: Locale for keyword analysis (defaults to the configured locale)
        include_keyword_analysis: Include detailed keyword analysis (default true)
    """
    engine = CompetitorAnalysisEngine(get_client())
    report = await engine.analyze(
        primary_site,
        competitor_sites,
        target_keyword,
        locale=locale,
        include_keyword_analysis=include_keyword_analysis,
    )
    return _to_text(report.to_dict())


TOOLS: dict[str, BaseTool] = {
    t.name: t
    for t in (
        moz_quota,
        moz_keyword_search_intent,
        moz_keyword_suggestions,
        moz_keyword_difficulty,
        moz_keyword_volume,
        moz_keyword_metrics,
        moz_keyword_opportunity,
        moz_keyword_priority,
        moz_site_brand_authority,
        moz_site_metrics,
        moz_site_metrics_multiple,
        moz_site_ranking_keywords,
        moz_site_ranking_keywords_count,
        moz_url_metrics,
        moz_links,
        moz_anchor_text,
        moz_top_pages,
        moz_linking_domains,
        moz_global_top_pages,
        moz_global_top_domains,
        moz_usage_data,
        moz_competitor_analysis,
    )
}

REQUIRED_ARGUMENTS: dict[str, tuple[str, ...]] = {
    "moz_keyword_search_intent": ("keyword",),
    "moz_keyword_suggestions": ("keyword",),
    "moz_keyword_difficulty": ("keyword",),
    "moz_keyword_volume": ("keyword",),
    "moz_keyword_metrics": ("keyword",),
    "moz_keyword_opportunity": ("keyword",),
    "moz_keyword_priority": ("keyword",),
    "moz_site_brand_authority": ("site",),
    "moz_site_metrics": ("site",),
    "moz_site_metrics_multiple": ("sites",),
    "moz_site_ranking_keywords": ("site",),
    "moz_site_ranking_keywords_count": ("site",),
    "moz_url_metrics": ("targets",),
    "moz_links": ("target",),
    "moz_anchor_text": ("target",),
    "moz_top_pages": ("target",),
    "moz_linking_domains": ("target",),
    "moz_competitor_analysis": ("primary_site", "target_keyword"),
}


def check_required_arguments(name: str, arguments: dict[str, Any]) -> None:
    """Reject a call whose required arguments are absent or empty.

    Raises:
        InvalidArgumentError: If any required argument is missing
    """
    required = REQUIRED_ARGUMENTS.get(name, ())
    if all(arguments.get(field) for field in required):
        return
    if len(required) == 1:
        message = f"Missing required parameter: {required[0]}"
    else:
        message = f"Missing required parameters: {', '.join(required)}"
    raise InvalidArgumentError(message, context={"tool": name})


async def invoke_tool(
    name: str,
    arguments: dict[str, Any] | None = None,
    client: Optional[MozApiClient] = None,
) -> str:
    """Run a tool by name.

    Args:
        name: Tool name, e.g. "moz_site_metrics"
        arguments: Tool arguments. Keys the tool does not declare are ignored.
        client: Client to use. When given it replaces the shared client;
            otherwise the shared one is used (built from configuration).

    Returns:
        The tool result as indented JSON text

    Raises:
        UnknownToolError: If no tool has that name
        InvalidArgumentError: If a required argument is missing
        ToolExecutionError: If the tool failed for any other reason
    """
    selected = TOOLS.get(name)
    if selected is None:
        raise UnknownToolError(f"Unknown tool: {name}", context={"tool": name})

    arguments = dict(arguments or {})
    check_required_arguments(name, arguments)
    if client is not None:
        set_client(client)
    accepted = {key: value for key, value in arguments.items() if key in selected.args}

    logger.info(f"Executing tool {name}")
    try:
        return await selected.ainvoke(accepted)
    except Exception as e:
        logger.error(f"Error executing {name}: {e}")
        raise ToolExecutionError(name, str(e), context={"tool": name}) from e
