"""Search Analytics Query: serves fixture rows for a resolved site.

Invariants:
    - STRICT mode: only the fixture's exact site id has rows; others are 404
    - REWRITE mode: every site gets the rows, page URLs re-prefixed to it
    - Returned rows are always fresh copies of the fixture
"""

import copy

from seo_console.core.domain_types import SiteId, SiteMatchMode
from seo_console.core.errors import NotFoundError
from seo_console.core.fixture_rewriter import rewrite_rows
from seo_console.core.site_catalog import SiteCatalog


def query_search_analytics(catalog: SiteCatalog, site_id: SiteId) -> list[dict]:
    fixture = catalog.analytics
    if catalog.mode is SiteMatchMode.REWRITE:
        return rewrite_rows(fixture.rows, fixture.site, site_id)
    if site_id != fixture.site:
        raise NotFoundError("Site not found", f"{site_id} has no fixture")
    return [copy.deepcopy(dict(row)) for row in fixture.rows]
