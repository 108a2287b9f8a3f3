"""Fixture Store: loads the analytics fixture JSON once at startup.

Invariants:
    - The file is read exactly once per catalog build
    - A missing or malformed fixture raises; it is a startup failure, not a
      runtime error the API reports
    - Rows are frozen before they reach the catalog

Design Decisions:
    - Pydantic validates the file shape at the boundary; rows themselves stay
      opaque dicts because their metric fields vary between exports
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from seo_console.core.domain_types import SiteId, SiteMatchMode
from seo_console.core.site_catalog import (
    AnalyticsFixture, SiteCatalog, build_site_catalog, freeze_rows,
)

logger = logging.getLogger(__name__)

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"
DEFAULT_FIXTURE_PATH = FIXTURES_DIR / "accu_co_uk_search_console.json"


class AnalyticsFixtureFile(BaseModel):
    """On-disk shape of a search console export."""
    site: str
    search_console_rows: list[dict[str, Any]]


def load_analytics_fixture(path: Path = DEFAULT_FIXTURE_PATH) -> AnalyticsFixture:
    """Read and validate the fixture file at path."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    parsed = AnalyticsFixtureFile.model_validate(raw)
    logger.info(
        f"Loaded {len(parsed.search_console_rows)} analytics rows from {path}",
        extra={"site_id": parsed.site},
    )
    return AnalyticsFixture(
        site=SiteId(parsed.site),
        rows=freeze_rows(parsed.search_console_rows),
    )


def load_site_catalog(
    path: Path = DEFAULT_FIXTURE_PATH,
    mode: SiteMatchMode = SiteMatchMode.REWRITE,
) -> SiteCatalog:
    return build_site_catalog(load_analytics_fixture(path), mode)
