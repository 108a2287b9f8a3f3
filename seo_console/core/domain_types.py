"""Domain Types: rich types that replace bare strings across the codebase.

Invariants:
    - SiteId is always the canonical form (URL-prefix or sc-domain:)
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


SiteId = NewType("SiteId", str)


class SiteType(str, Enum):
    """Property types exposed by the site listing."""
    URL_PREFIX = "URL_PREFIX"
    DOMAIN = "DOMAIN"


class SiteMatchMode(str, Enum):
    """How analytics requests for sites other than the fixture's are served.

    STRICT: only the fixture's own site has data, anything else is 404.
    REWRITE: every site gets the fixture rows with their URLs re-prefixed.
    """
    STRICT = "strict"
    REWRITE = "rewrite"
