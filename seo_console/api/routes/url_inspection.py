"""URL Inspection Route: POST urlInspection:index.

Invariants:
    - Body is optional; a non-empty inspectionUrl overrides url and canonicalUrl
    - A JSON array body carries no inspectionUrl and gets the default result
    - Object bodies are validated; a non-string inspectionUrl is a 400
    - Unknown sites are not rejected here
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from seo_console.api.dependencies import get_catalog, site_segment
from seo_console.core.site_catalog import SiteCatalog
from seo_console.core.site_resolver import require_site_id
from seo_console.core.url_inspection import inspect_url
from seo_console.schemas.console import (
    UrlInspectionRequest, UrlInspectionResponse, UrlInspectionResultSchema,
)

router = APIRouter(prefix="/v1/sites", tags=["url-inspection"])


def inspection_url_from_body(body: dict[str, Any] | list[Any] | None) -> str | None:
    if not isinstance(body, dict):
        return None
    try:
        request = UrlInspectionRequest.model_validate(body)
    except ValidationError as exc:
        raise RequestValidationError([
            {**error, "loc": ("body", *error["loc"])}
            for error in exc.errors(include_url=False)
        ])
    return request.inspection_url


@router.post(
    "/{site_id:path}/urlInspection:index",
    response_model=UrlInspectionResponse,
)
async def url_inspection_index(
    site_token: str = Depends(site_segment("urlInspection:index")),
    body: dict[str, Any] | list[Any] | None = Body(None),
    catalog: SiteCatalog = Depends(get_catalog),
):
    resolved = require_site_id(site_token, catalog.aliases)
    result = inspect_url(catalog, resolved, inspection_url_from_body(body))
    return UrlInspectionResponse(result=UrlInspectionResultSchema(
        url=result.url,
        index_status=result.index_status,
        last_crawl_time=result.last_crawl_time,
        robots_state=result.robots_state,
        canonical_url=result.canonical_url,
        mobile_friendly=result.mobile_friendly,
        mobile_issues=list(result.mobile_issues),
        rich_result_types=list(result.rich_result_types),
    ))
