"""Route Dependencies: the read-only site catalog and the raw siteId segment.

Invariants:
    - The catalog is attached to app.state by create_app before serving
    - Handlers never import the catalog module-level; tests swap it per app
    - A siteId is exactly one raw path segment: "/" must arrive as %2F.
      /v1/sites/a/b/sitemaps is an unmatched route, not site "a/b"
    - An empty segment (/v1/sites//sitemaps) still reaches the handler,
      which reports the missing parameter

Design Decisions:
    - Routes use Starlette's greedy path convertor because the ASGI server
      decodes %2F before routing; the raw_path check restores one-segment
      matching on top of it
"""

from urllib.parse import unquote

from fastapi import Request

from seo_console.core.errors import NotFoundError
from seo_console.core.site_catalog import SiteCatalog

SITES_PREFIX = "/v1/sites/"


def get_catalog(request: Request) -> SiteCatalog:
    return request.app.state.catalog


def original_url(request: Request) -> str:
    """Path as the client sent it (still percent-encoded), plus query string."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


def site_segment(action: str):
    """Dependency factory: the siteId path param, checked to be one raw segment.

    action is the route tail after the site segment, e.g. "sitemaps".
    """

    def dependency(request: Request, site_id: str) -> str:
        raw_path = request.scope.get("raw_path")
        if raw_path:
            path = raw_path.decode("latin-1")
            if path.startswith(SITES_PREFIX):
                _, _, tail = path[len(SITES_PREFIX):].partition("/")
                if unquote(tail) != action:
                    raise NotFoundError(
                        "Not found", f"{request.method} {original_url(request)}",
                    )
        request.state.site_token = site_id
        return site_id

    return dependency
