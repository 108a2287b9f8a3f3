"""Sitemap Listing: looks up the static sitemap table."""

from seo_console.core.domain_types import SiteId
from seo_console.core.errors import NotFoundError
from seo_console.core.site_catalog import SiteCatalog, SitemapEntry


def list_sitemaps(catalog: SiteCatalog, site_id: SiteId) -> tuple[SitemapEntry, ...]:
    """Return the sitemaps registered for site_id, or raise 404 when none are."""
    entries = catalog.sitemaps.get(site_id)
    if not entries:
        raise NotFoundError("Sitemaps not found", f"{site_id} has no data")
    return entries
