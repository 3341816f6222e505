"""Tests for the Moz endpoint wrappers.

This module verifies method names, parameter shapes and defaults sent for
every wrapper, and that results and errors pass through unchanged.
"""

from unittest.mock import AsyncMock

import pytest

from moz_analytics.client.moz_client import MozApiClient
from moz_analytics.config import Config
from moz_analytics.exceptions.api_error import ApiError
from tests.fixtures.sample_data import encode_pair, rpc_body, sent_request

SERP_DEFAULTS = {"locale": "en-US", "device": "desktop", "engine": "google"}

# (wrapper name, positional args) for every wrapper
WRAPPER_CALLS = [
    ("get_quota", ()),
    ("get_usage_data", ()),
    ("get_keyword_search_intent", ("seo",)),
    ("get_keyword_suggestions", ("seo",)),
    ("get_keyword_difficulty", ("seo",)),
    ("get_keyword_volume", ("seo",)),
    ("get_keyword_opportunity", ("seo",)),
    ("get_keyword_priority", ("seo",)),
    ("get_keyword_metrics", ("seo",)),
    ("get_site_brand_authority", ("moz.com",)),
    ("get_site_metrics", ("moz.com",)),
    ("get_site_metrics_multiple", (["moz.com", "example.com"],)),
    ("get_site_ranking_keywords", ("moz.com",)),
    ("get_site_ranking_keywords_count", ("moz.com",)),
    ("get_url_metrics", (["https://moz.com/blog"],)),
    ("get_links", ("moz.com",)),
    ("get_anchor_text", ("moz.com",)),
    ("get_top_pages", ("moz.com",)),
    ("get_linking_domains", ("moz.com",)),
    ("get_global_top_pages", ()),
    ("get_global_top_domains", ()),
]


class TestClientConstruction:
    """Tests for building a client."""

    def test_raw_token_client(self) -> None:
        client = MozApiClient("test-token")
        assert client.auth.mode == "token"

    def test_pair_client(self) -> None:
        client = MozApiClient(encode_pair("id", "secret"))
        assert client.auth.mode == "signature"

    def test_from_config(self) -> None:
        config = Config(
            moz_api_token="test-token",
            moz_api_url="https://example.test/jsonrpc",
            request_timeout=5,
        )

        client = MozApiClient.from_config(config)

        assert client.transport.endpoint == "https://example.test/jsonrpc"
        assert client.transport.timeout == 5
        assert client.auth.credential == "test-token"
        assert client.default_locale == "en-US"

    @pytest.mark.asyncio
    async def test_default_locale_from_config(self) -> None:
        config = Config(_env_file=None, moz_api_token="test-token", default_locale="en-GB")
        client = MozApiClient.from_config(config)
        post = AsyncMock(return_value=(200, rpc_body(result={})))
        client.transport._post = post

        await client.get_keyword_volume("seo")
        await client.get_site_ranking_keywords("moz.com", locale="fr-FR")

        assert sent_request(post, 0).params["data"]["serp_query"]["locale"] == "en-GB"
        assert sent_request(post, 1).params["data"]["serp_query"]["locale"] == "fr-FR"


class TestPassThrough:
    """Results and errors pass through every wrapper unchanged."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,args", WRAPPER_CALLS)
    async def test_result_returned_unchanged(
        self, client: MozApiClient, mock_post: AsyncMock, name: str, args: tuple
    ) -> None:
        assert await getattr(client, name)(*args) == {"a": 1}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,args", WRAPPER_CALLS)
    async def test_api_error_raised(
        self, client: MozApiClient, mock_post: AsyncMock, name: str, args: tuple
    ) -> None:
        mock_post.return_value = (200, rpc_body(error={"code": 7, "message": "bad"}))

        with pytest.raises(ApiError) as exc_info:
            await getattr(client, name)(*args)

        assert exc_info.value.code == 7
        assert exc_info.value.api_message == "bad"


class TestKeywordWrappers:
    """Tests for keyword method names and serp_query defaults."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,method",
        [
            ("get_keyword_search_intent", "data.keyword.search.intent.fetch"),
            ("get_keyword_difficulty", "data.keyword.metrics.difficulty.fetch"),
            ("get_keyword_volume", "data.keyword.metrics.volume.fetch"),
            ("get_keyword_opportunity", "data.keyword.metrics.opportunity.fetch"),
            ("get_keyword_priority", "data.keyword.metrics.priority.fetch"),
            ("get_keyword_metrics", "data.keyword.metrics.fetch"),
        ],
    )
    async def test_defaults(
        self, client: MozApiClient, mock_post: AsyncMock, name: str, method: str
    ) -> None:
        await getattr(client, name)("seo tools")

        request = sent_request(mock_post)
        assert request.method == method
        assert request.params == {"data": {"serp_query": {"keyword": "seo tools", **SERP_DEFAULTS}}}

    @pytest.mark.asyncio
    async def test_locale_and_engine_forwarded(
        self, client: MozApiClient, mock_post: AsyncMock
    ) -> None:
        await client.get_keyword_difficulty("seo", locale="en-GB", engine="bing")

        serp_query = sent_request(mock_post).params["data"]["serp_query"]
        assert serp_query == {
            "keyword": "seo",
            "locale": "en-GB",
            "device": "desktop",
            "engine": "bing",
        }

    @pytest.mark.asyncio
    async def test_suggestions_defaults(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_keyword_suggestions("seo")

        request = sent_request(mock_post)
        assert request.method == "data.keyword.suggestions.list"
        assert request.params["data"]["serp_query"] == {"keyword": "seo", **SERP_DEFAULTS}
        assert request.params["data"]["limit"] == 1000

    @pytest.mark.asyncio
    async def test_suggestions_limit(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_keyword_suggestions("seo", locale="de-DE", limit=25)

        data = sent_request(mock_post).params["data"]
        assert data["limit"] == 25
        assert data["serp_query"]["locale"] == "de-DE"


class TestSiteWrappers:
    """Tests for site method names and site_query defaults."""

    @pytest.mark.asyncio
    async def test_brand_authority(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_site_brand_authority("moz.com")

        request = sent_request(mock_post)
        assert request.method == "data.site.metrics.brand.authority.fetch"
        assert request.params == {"data": {"site_query": {"query": "moz.com", "scope": "domain"}}}

    @pytest.mark.asyncio
    async def test_site_metrics(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_site_metrics("moz.com")

        request = sent_request(mock_post)
        assert request.method == "data.site.metrics.fetch"
        assert request.params == {"data": {"site_query": {"query": "moz.com", "scope": "domain"}}}

    @pytest.mark.asyncio
    async def test_site_metrics_multiple(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_site_metrics_multiple(["a.com", "b.com"])

        request = sent_request(mock_post)
        assert request.method == "data.site.metrics.fetch.multiple"
        assert request.params == {
            "data": {
                "site_queries": [
                    {"query": "a.com", "scope": "domain"},
                    {"query": "b.com", "scope": "domain"},
                ]
            }
        }

    @pytest.mark.asyncio
    async def test_ranking_keywords_defaults(
        self, client: MozApiClient, mock_post: AsyncMock
    ) -> None:
        await client.get_site_ranking_keywords("moz.com")

        request = sent_request(mock_post)
        assert request.method == "data.site.ranking.keywords.list"
        assert request.params == {
            "data": {
                "target_query": {"query": "moz.com", "scope": "domain", "locale": "en-US"},
                "serp_query": {"engine": "google", "locale": "en-US"},
                "limit": 100,
            }
        }

    @pytest.mark.asyncio
    async def test_ranking_keywords_options(
        self, client: MozApiClient, mock_post: AsyncMock
    ) -> None:
        await client.get_site_ranking_keywords("moz.com", engine="bing", locale="fr-FR", limit=10)

        data = sent_request(mock_post).params["data"]
        assert data["target_query"]["locale"] == "fr-FR"
        assert data["serp_query"] == {"engine": "bing", "locale": "fr-FR"}
        assert data["limit"] == 10

    @pytest.mark.asyncio
    async def test_ranking_keywords_count(
        self, client: MozApiClient, mock_post: AsyncMock
    ) -> None:
        await client.get_site_ranking_keywords_count("moz.com")

        request = sent_request(mock_post)
        assert request.method == "site.ranking_keywords.count"
        assert request.params == {
            "data": {"site": "moz.com", "engine": "google", "locale": "en-US"}
        }


class TestLinkWrappers:
    """Tests for link method names, scopes and limits."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,method,scope",
        [
            ("get_links", "data.links", "page"),
            ("get_anchor_text", "data.anchor_text", "page"),
            ("get_top_pages", "data.top_pages", "root_domain"),
            ("get_linking_domains", "data.linking_domains", "page"),
        ],
    )
    async def test_defaults(
        self, client: MozApiClient, mock_post: AsyncMock, name: str, method: str, scope: str
    ) -> None:
        await getattr(client, name)("moz.com")

        request = sent_request(mock_post)
        assert request.method == method
        assert request.params == {"data": {"target": "moz.com", "scope": scope, "limit": 50}}

    @pytest.mark.asyncio
    async def test_links_optional_keys(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_links(
            "moz.com",
            scope="root_domain",
            sort="source_domain_authority",
            filter_="external",
            limit=10,
            source_scope="root_domain",
        )

        assert sent_request(mock_post).params["data"] == {
            "target": "moz.com",
            "scope": "root_domain",
            "limit": 10,
            "sort": "source_domain_authority",
            "filter": "external",
            "source_scope": "root_domain",
        }

    @pytest.mark.asyncio
    async def test_url_metrics(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_url_metrics(["https://moz.com"])
        assert sent_request(mock_post).params == {"data": {"targets": ["https://moz.com"]}}

        await client.get_url_metrics(
            ["https://moz.com"], metrics=["domain_authority"], scope="page"
        )
        request = sent_request(mock_post)
        assert request.method == "data.url_metrics"
        assert request.params["data"] == {
            "targets": ["https://moz.com"],
            "scope": "page",
            "metrics": ["domain_authority"],
        }

    @pytest.mark.asyncio
    async def test_global_lists(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_global_top_pages()
        assert sent_request(mock_post).method == "data.global.top.pages.list"
        assert sent_request(mock_post).params == {"data": {"limit": 100}}

        await client.get_global_top_domains(limit=5)
        assert sent_request(mock_post).method == "data.global.top.domains.list"
        assert sent_request(mock_post).params == {"data": {"limit": 5}}


class TestAccountWrappers:
    """Tests for quota and usage calls."""

    @pytest.mark.asyncio
    async def test_quota(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_quota()

        request = sent_request(mock_post)
        assert request.method == "quota.lookup"
        assert request.params == {"data": {"path": "api.limits.data.rows"}}

    @pytest.mark.asyncio
    async def test_usage_data(self, client: MozApiClient, mock_post: AsyncMock) -> None:
        await client.get_usage_data()
        assert sent_request(mock_post).params == {"data": {}}

        await client.get_usage_data(start="2024-01-01", end="2024-01-31")
        request = sent_request(mock_post)
        assert request.method == "data.usage"
        assert request.params == {"data": {"start": "2024-01-01", "end": "2024-01-31"}}
