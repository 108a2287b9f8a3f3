"""Fixture Rewriting: re-prefixes fixture URLs onto the requested site.

Invariants:
    - Only a prefix at the very start of the value is replaced
    - Both identifiers are compared and spliced in trailing-slash form
    - Input rows are never mutated; rewritten rows are new dicts
    - Rewriting onto the fixture's own site is the identity
"""

import copy
from collections.abc import Iterable, Mapping
from typing import Any


def with_trailing_slash(site_id: str) -> str:
    return site_id if site_id.endswith("/") else site_id + "/"


def rewrite_site_prefix(value: str, source_site: str, target_site: str) -> str:
    """Swap a leading source_site prefix for target_site. No-op when absent."""
    source = with_trailing_slash(source_site)
    if not value.startswith(source):
        return value
    return with_trailing_slash(target_site) + value[len(source):]


def rewrite_rows(
    rows: Iterable[Mapping[str, Any]],
    source_site: str,
    target_site: str,
    field: str = "page",
) -> list[dict[str, Any]]:
    """Copy each row, rewriting its URL field. Rows without a str field are copied as-is."""
    rewritten = []
    for row in rows:
        out = copy.deepcopy(dict(row))
        value = out.get(field)
        if isinstance(value, str):
            out[field] = rewrite_site_prefix(value, source_site, target_site)
        rewritten.append(out)
    return rewritten
