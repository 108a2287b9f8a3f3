"""Root conftest: shared test configuration and catalog fixtures."""

import os

import pytest

from seo_console.core.domain_types import SiteMatchMode
from seo_console.core.site_catalog import (
    AnalyticsFixture, build_site_catalog, freeze_rows,
)
from tests.sample_data import FIXTURE_ROWS, FIXTURE_SITE

# Module-level app in seo_console.main reads these on import
os.environ.setdefault("SITE_MATCH_MODE", "rewrite")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def analytics() -> AnalyticsFixture:
    return AnalyticsFixture(site=FIXTURE_SITE, rows=freeze_rows(FIXTURE_ROWS))


@pytest.fixture
def rewrite_catalog(analytics):
    return build_site_catalog(analytics, SiteMatchMode.REWRITE)


@pytest.fixture
def strict_catalog(analytics):
    return build_site_catalog(analytics, SiteMatchMode.STRICT)
