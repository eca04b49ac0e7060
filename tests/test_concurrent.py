"""Tests that the server handles many simultaneous requests correctly.

Uniqueness comes from the store's index alone, so concurrent shorten
requests must neither duplicate rows nor hand out the same code twice.
"""

import asyncio

import pytest


class TestConcurrentConnections:
    """Many simultaneous requests against one app."""

    async def test_concurrent_shorten_distinct_urls(self, client, store):
        """Concurrent POST /api with different URLs; all succeed with unique codes."""
        urls = [f"https://example.com/page_{i}" for i in range(30)]

        responses = await asyncio.gather(
            *[client.post("/api", json={"longUrl": url}) for url in urls],
            return_exceptions=True,
        )

        codes = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code} body={r.text}"
            assert r.json()["longUrl"] == urls[i]
            codes.append(r.json()["hash"])

        assert len(set(codes)) == len(urls), "All codes must be unique under concurrency"
        assert len(store.all_mappings()) == len(urls)

    async def test_concurrent_shorten_same_url(self, client, store):
        """Concurrent POST /api with one URL converge on a single mapping."""
        responses = await asyncio.gather(
            *[client.post("/api", json={"longUrl": "https://example.com/same"}) for _ in range(20)]
        )

        assert {r.status_code for r in responses} == {200}
        assert len({r.json()["shortUrl"] for r in responses}) == 1
        assert len(store.all_mappings()) == 1

    async def test_concurrent_redirect_requests(self, client):
        """Create one short URL, then many concurrent redirects all succeed."""
        create_resp = await client.post("/api", json={"longUrl": "https://example.com/redirect-target"})
        assert create_resp.status_code == 200
        code = create_resp.json()["hash"]

        responses = await asyncio.gather(
            *[client.get(f"/{code}", follow_redirects=False) for _ in range(20)]
        )

        for i, r in enumerate(responses):
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"
            assert r.headers["location"] == "https://example.com/redirect-target"
