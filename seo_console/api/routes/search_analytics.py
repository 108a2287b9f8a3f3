"""Search Analytics Route: POST searchAnalytics:query.

Invariants:
    - Request body is accepted but ignored (no filtering, no pagination)
    - Site id matched across "/" so decoded URL-prefix ids route here

Design Decisions:
    - Mismatch handling (404 vs rewrite) decided by the catalog's mode in
      core/search_analytics.py, not here
"""

import logging

from fastapi import APIRouter, Depends

from seo_console.api.dependencies import get_catalog, site_segment
from seo_console.core.search_analytics import query_search_analytics
from seo_console.core.site_catalog import SiteCatalog
from seo_console.core.site_resolver import require_site_id
from seo_console.schemas.console import SearchAnalyticsResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v1/sites", tags=["search-analytics"])


@router.post(
    "/{site_id:path}/searchAnalytics:query",
    response_model=SearchAnalyticsResponse,
)
async def search_analytics_query(
    site_token: str = Depends(site_segment("searchAnalytics:query")),
    catalog: SiteCatalog = Depends(get_catalog),
):
    resolved = require_site_id(site_token, catalog.aliases)
    rows = query_search_analytics(catalog, resolved)
    logger.debug(
        f"Serving {len(rows)} analytics rows", extra={"site_id": resolved},
    )
    return SearchAnalyticsResponse(search_console_rows=rows)
