"""Site Identifier Resolution: maps caller-supplied tokens to canonical site ids.

Invariants:
    - Empty or absent input resolves to None (never to an empty SiteId)
    - Alias matching is exact and case-sensitive, performed after one
      percent-decoding pass
    - Unknown identifiers pass through decoded but otherwise unchanged;
      existence checks belong to the handlers that read data

Design Decisions:
    - Alias table injected as a mapping instead of read from a global, so the
      same function serves the app catalog and tests
"""

from collections.abc import Mapping, Set
from urllib.parse import unquote

from seo_console.core.domain_types import SiteId
from seo_console.core.errors import MissingParameterError


def resolve_site_id(
    raw: str | None, aliases: Mapping[SiteId, Set[str]],
) -> SiteId | None:
    """Resolve a raw path token to its canonical site id, or None if empty."""
    if not raw:
        return None
    decoded = unquote(raw)
    for canonical, accepted in aliases.items():
        if decoded in accepted:
            return canonical
    return SiteId(decoded)


def require_site_id(
    raw: str | None, aliases: Mapping[SiteId, Set[str]],
) -> SiteId:
    """Like resolve_site_id, but a missing token is a 400 for the caller."""
    site_id = resolve_site_id(raw, aliases)
    if site_id is None:
        raise MissingParameterError("siteId")
    return site_id
