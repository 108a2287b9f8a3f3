"""Site Catalog: verifies the static tables and their immutability.

Tests cover:
    - Built-in sites, types and aliases
    - Catalog and its tables reject mutation
    - build_site_catalog wires the fixture and mode through
"""

import dataclasses

import pytest

from seo_console.core.domain_types import SiteMatchMode, SiteType
from seo_console.core.site_catalog import (
    DEFAULT_SITE_ALIASES, DEFAULT_SITEMAPS, DEFAULT_SITES, build_site_catalog,
)


def test_default_sites():
    assert [(s.id, s.display_name, s.type) for s in DEFAULT_SITES] == [
        ("https://accu.co.uk/", "Accu", SiteType.URL_PREFIX),
        ("sc-domain:example.com", "Example", SiteType.DOMAIN),
    ]


def test_accu_aliases():
    assert DEFAULT_SITE_ALIASES["https://accu.co.uk/"] == {
        "https://accu.co.uk/", "accu.co.uk", "accu",
    }


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_SITE_ALIASES["sc-domain:example.com"] = frozenset({"example"})


def test_sitemap_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_SITEMAPS["sc-domain:example.com"] = ()


def test_fixture_rows_are_read_only(analytics):
    with pytest.raises(TypeError):
        analytics.rows[0]["page"] = "https://shop.test/"


def test_catalog_is_frozen(rewrite_catalog):
    with pytest.raises(dataclasses.FrozenInstanceError):
        rewrite_catalog.mode = SiteMatchMode.STRICT


def test_build_site_catalog_defaults_to_rewrite(analytics):
    catalog = build_site_catalog(analytics)
    assert catalog.mode is SiteMatchMode.REWRITE
    assert catalog.analytics is analytics
    assert catalog.sites == DEFAULT_SITES
