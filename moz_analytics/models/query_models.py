"""Query models shared by the Moz endpoint wrappers.

This module defines the SiteQuery and SerpQuery Pydantic models that carry
the nested query objects the Moz API expects, along with their defaults.

Example:
    ```python
    from moz_analytics.models.query_models import SerpQuery, SiteQuery

    SerpQuery(keyword="seo tools").to_params()
    # {"keyword": "seo tools", "locale": "en-US", "device": "desktop", "engine": "google"}

    SiteQuery(query="moz.com").to_params()
    # {"query": "moz.com", "scope": "domain"}
    ```
"""

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_LOCALE = "en-US"
DEFAULT_DEVICE = "desktop"
DEFAULT_ENGINE = "google"

SiteScope = Literal["domain", "page", "subdomain", "root_domain"]


class SiteQuery(BaseModel):
    """A site the Moz API should describe.

    Attributes:
        query: Domain, subdomain or URL to query
        scope: How much of the site the query covers
    """

    model_config = {"extra": "forbid", "frozen": True}

    query: str = Field(..., description="Domain or URL to query")
    scope: SiteScope = Field(default="domain", description="Query scope")

    def to_params(self) -> dict[str, str]:
        return {"query": self.query, "scope": self.scope}


class SerpQuery(BaseModel):
    """A keyword on a given search engine results page.

    Attributes:
        keyword: Keyword to look up
        locale: Market locale, e.g. "en-US"
        device: Device the SERP is rendered for
        engine: Search engine name
    """

    model_config = {"extra": "forbid", "frozen": True}

    keyword: str = Field(..., description="Keyword to look up")
    locale: str = Field(default=DEFAULT_LOCALE, description="Market locale")
    device: str = Field(default=DEFAULT_DEVICE, description="SERP device")
    engine: str = Field(default=DEFAULT_ENGINE, description="Search engine")

    def to_params(self) -> dict[str, str]:
        return {
            "keyword": self.keyword,
            "locale": self.locale,
            "device": self.device,
            "engine": self.engine,
        }
