"""Site Catalog: the read-only data every handler answers from.

Invariants:
    - Built once per application; never written to at request time
    - Collections are tuples, frozensets and read-only mappings
    - The analytics fixture owns exactly one site id, and the URL inspection
      template points into that same site

Design Decisions:
    - One frozen context object injected into routes (FastAPI Depends) instead
      of module-level mutable globals
    - Static site/alias/sitemap tables live here as constants; only the
      analytics rows come from disk (see infrastructure/fixture_store.py)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from seo_console.core.domain_types import SiteId, SiteMatchMode, SiteType


@dataclass(frozen=True)
class Site:
    id: SiteId
    display_name: str
    type: SiteType


@dataclass(frozen=True)
class SitemapEntry:
    path: str
    type: str
    last_submitted: str
    last_processed: str
    discovered_urls: int
    indexed_urls: int


@dataclass(frozen=True)
class UrlInspectionResult:
    """Inspection verdict for one URL. The template is specialized per request."""
    url: str
    index_status: str
    last_crawl_time: str
    robots_state: str
    canonical_url: str
    mobile_friendly: bool
    mobile_issues: tuple[str, ...] = ()
    rich_result_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalyticsFixture:
    """Pre-recorded search analytics rows for a single site."""
    site: SiteId
    rows: tuple[Mapping[str, Any], ...]


@dataclass(frozen=True)
class SiteCatalog:
    sites: tuple[Site, ...]
    aliases: Mapping[SiteId, frozenset[str]]
    sitemaps: Mapping[SiteId, tuple[SitemapEntry, ...]]
    inspection_template: UrlInspectionResult
    analytics: AnalyticsFixture
    mode: SiteMatchMode = SiteMatchMode.REWRITE


# ─── Static tables ───────────────────────────────────────────────

ACCU_SITE = SiteId("https://accu.co.uk/")

DEFAULT_SITES: tuple[Site, ...] = (
    Site(ACCU_SITE, "Accu", SiteType.URL_PREFIX),
    Site(SiteId("sc-domain:example.com"), "Example", SiteType.DOMAIN),
)

DEFAULT_SITE_ALIASES: Mapping[SiteId, frozenset[str]] = MappingProxyType({
    ACCU_SITE: frozenset({"https://accu.co.uk/", "accu.co.uk", "accu"}),
})

DEFAULT_SITEMAPS: Mapping[SiteId, tuple[SitemapEntry, ...]] = MappingProxyType({
    ACCU_SITE: (
        SitemapEntry(
            path="/sitemap.xml",
            type="SITEMAP",
            last_submitted="2025-01-01T00:00:00Z",
            last_processed="2025-01-01T01:00:00Z",
            discovered_urls=1200,
            indexed_urls=1100,
        ),
    ),
})

DEFAULT_URL_INSPECTION = UrlInspectionResult(
    url="https://accu.co.uk/blue-shoes",
    index_status="INDEXED",
    last_crawl_time="2025-01-27T10:23:15Z",
    robots_state="ALLOWED",
    canonical_url="https://accu.co.uk/blue-shoes",
    mobile_friendly=True,
    mobile_issues=(),
    rich_result_types=("PRODUCT",),
)


def freeze_rows(rows) -> tuple[Mapping[str, Any], ...]:
    """Wrap fixture rows in read-only mappings."""
    return tuple(MappingProxyType(dict(row)) for row in rows)


def build_site_catalog(
    analytics: AnalyticsFixture,
    mode: SiteMatchMode = SiteMatchMode.REWRITE,
) -> SiteCatalog:
    """Assemble the catalog from the loaded fixture and the static tables."""
    return SiteCatalog(
        sites=DEFAULT_SITES,
        aliases=DEFAULT_SITE_ALIASES,
        sitemaps=DEFAULT_SITEMAPS,
        inspection_template=DEFAULT_URL_INSPECTION,
        analytics=analytics,
        mode=mode,
    )
