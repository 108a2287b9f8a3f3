"""Unmatched Routes: any unknown method/path combination is a 404 envelope.

Tests cover:
    - Unknown path names the method and original path
    - Query string preserved in details
    - Known path with the wrong method is 404, not 405
    - Trailing-slash variants are 404 with no redirect
    - A literal "/" inside the site segment is 404; encoded "%2F" still routes
"""

import pytest


async def test_unknown_path_is_404(client):
    res = await client.get("/v1/nope")
    assert res.status_code == 404
    assert res.json() == {
        "error": {"code": 404, "message": "Not found", "details": "GET /v1/nope"},
    }


async def test_query_string_kept_in_details(client):
    res = await client.get("/v2/sites?verbose=1")
    assert res.status_code == 404
    assert res.json()["error"]["details"] == "GET /v2/sites?verbose=1"


@pytest.mark.parametrize("method, path", [
    ("DELETE", "/v1/sites"),
    ("POST", "/v1/sites"),
    ("GET", "/v1/sites/accu/searchAnalytics:query"),
    ("PUT", "/v1/sites/accu/urlInspection:index"),
    ("POST", "/v1/sites/accu/sitemaps"),
])
async def test_wrong_method_is_404(strict_client, method, path):
    res = await strict_client.request(method, path)
    assert res.status_code == 404
    assert res.json()["error"]["details"] == f"{method} {path}"


async def test_unknown_site_subresource_is_404(client):
    res = await client.get("/v1/sites/accu/crawlErrors")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Not found"


@pytest.mark.parametrize("method, path", [
    ("GET", "/v1/sites/"),
    ("POST", "/v1/sites/accu/sitemaps/"),
    ("GET", "/v1/sites/accu/sitemaps/"),
    ("POST", "/v1/sites/accu/searchAnalytics:query/"),
    ("GET", "/health/"),
])
async def test_trailing_slash_is_404_not_redirect(client, method, path):
    res = await client.request(method, path, follow_redirects=False)
    assert res.status_code == 404
    assert "location" not in res.headers
    assert res.json() == {
        "error": {"code": 404, "message": "Not found", "details": f"{method} {path}"},
    }


@pytest.mark.parametrize("method, path", [
    ("POST", "/v1/sites/a/b/searchAnalytics:query"),
    ("POST", "/v1/sites/https://accu.co.uk//urlInspection:index"),
    ("GET", "/v1/sites/accu/extra/sitemaps"),
])
async def test_literal_slash_in_site_segment_is_404(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 404
    assert res.json()["error"] == {
        "code": 404, "message": "Not found", "details": f"{method} {path}",
    }


async def test_encoded_slashes_still_route(client):
    res = await client.post("/v1/sites/a%2Fb/searchAnalytics:query")
    assert res.status_code == 200
    assert res.json()["search_console_rows"][0]["page"] == "a/b/blue-shoes"
