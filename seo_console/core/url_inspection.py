"""URL Inspection: specializes the inspection template for one request.

Invariants:
    - A non-empty inspection_url always wins: it becomes both url and
      canonical_url, whatever the mode
    - REWRITE mode moves the template's default URLs onto the requested site;
      STRICT mode leaves them pointing at the fixture's site
    - The site id is never checked for existence here
"""

from dataclasses import replace

from seo_console.core.domain_types import SiteId, SiteMatchMode
from seo_console.core.fixture_rewriter import rewrite_site_prefix
from seo_console.core.site_catalog import SiteCatalog, UrlInspectionResult


def inspect_url(
    catalog: SiteCatalog,
    site_id: SiteId,
    inspection_url: str | None = None,
) -> UrlInspectionResult:
    """Build the inspection result for site_id, optionally for a given URL."""
    result = catalog.inspection_template
    if catalog.mode is SiteMatchMode.REWRITE:
        source = catalog.analytics.site
        result = replace(
            result,
            url=rewrite_site_prefix(result.url, source, site_id),
            canonical_url=rewrite_site_prefix(
                result.canonical_url, source, site_id,
            ),
        )
    if inspection_url:
        result = replace(
            result, url=inspection_url, canonical_url=inspection_url,
        )
    return result
