"""Console Schemas: response and request models for the search console endpoints.

Invariants:
    - Field names serialize as camelCase (displayName, lastCrawlTime, ...)
    - Analytics rows are passed through as opaque dicts
    - UrlInspectionRequest ignores unknown body fields
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from seo_console.core.domain_types import SiteType


class CamelModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


class SiteSchema(CamelModel):
    id: str
    display_name: str
    type: SiteType


class SiteListResponse(CamelModel):
    sites: list[SiteSchema]


class SearchAnalyticsResponse(BaseModel):
    """Rows keep the export's own key names, hence no camel aliasing."""
    search_console_rows: list[dict[str, Any]]


class UrlInspectionRequest(CamelModel):
    """Body of urlInspection:index. Everything is optional."""
    model_config = ConfigDict(extra="ignore")

    inspection_url: str | None = None


class UrlInspectionResultSchema(CamelModel):
    url: str
    index_status: str
    last_crawl_time: str
    robots_state: str
    canonical_url: str
    mobile_friendly: bool
    mobile_issues: list[str] = []
    rich_result_types: list[str] = []


class UrlInspectionResponse(CamelModel):
    result: UrlInspectionResultSchema


class SitemapSchema(CamelModel):
    path: str
    type: str
    last_submitted: str
    last_processed: str
    discovered_urls: int
    indexed_urls: int


class SitemapListResponse(CamelModel):
    sitemaps: list[SitemapSchema]
