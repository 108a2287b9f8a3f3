"""Sitemaps Route: GET sitemaps for a site."""

from fastapi import APIRouter, Depends

from seo_console.api.dependencies import get_catalog, site_segment
from seo_console.core.site_catalog import SiteCatalog
from seo_console.core.site_resolver import require_site_id
from seo_console.core.sitemaps import list_sitemaps
from seo_console.schemas.console import SitemapListResponse, SitemapSchema

router = APIRouter(prefix="/v1/sites", tags=["sitemaps"])


@router.get("/{site_id:path}/sitemaps", response_model=SitemapListResponse)
async def get_sitemaps(
    site_token: str = Depends(site_segment("sitemaps")),
    catalog: SiteCatalog = Depends(get_catalog),
):
    resolved = require_site_id(site_token, catalog.aliases)
    return SitemapListResponse(sitemaps=[
        SitemapSchema(
            path=entry.path,
            type=entry.type,
            last_submitted=entry.last_submitted,
            last_processed=entry.last_processed,
            discovered_urls=entry.discovered_urls,
            indexed_urls=entry.indexed_urls,
        )
        for entry in list_sitemaps(catalog, resolved)
    ])
