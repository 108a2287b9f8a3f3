"""Sample data shared by core and API tests."""

from seo_console.core.domain_types import SiteId

FIXTURE_SITE = SiteId("https://accu.co.uk/")

# Percent-encoded form a client puts in the path for the accu site
ACCU_ENCODED = "https%3A%2F%2Faccu.co.uk%2F"

FIXTURE_ROWS = [
    {"page": "https://accu.co.uk/blue-shoes", "query": "blue shoes", "clicks": 10},
    {"page": "https://accu.co.uk/", "query": "accu", "clicks": 50},
    {"page": "https://elsewhere.test/accu", "query": "accu elsewhere", "clicks": 1},
    {"query": "no page field", "clicks": 0},
]
