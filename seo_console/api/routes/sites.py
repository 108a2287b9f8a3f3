"""Sites Route: static site listing.

Invariants:
    - GET /v1/sites never fails and never depends on the request
"""

from fastapi import APIRouter, Depends

from seo_console.api.dependencies import get_catalog
from seo_console.core.site_catalog import SiteCatalog
from seo_console.schemas.console import SiteListResponse, SiteSchema

router = APIRouter(prefix="/v1/sites", tags=["sites"])


@router.get("", response_model=SiteListResponse)
async def list_sites(catalog: SiteCatalog = Depends(get_catalog)):
    return SiteListResponse(sites=[
        SiteSchema(id=site.id, display_name=site.display_name, type=site.type)
        for site in catalog.sites
    ])
