"""Tests for the HTML pages and short link redirects."""

from httpx import ASGITransport, AsyncClient

from conftest import UnavailableStore, build_app
from hashlink.hasher import hash_url
from hashlink.service import URLShortenerService


class TestWebRoutes:
    """Test web interface."""

    async def test_homepage(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert "URL Shortener" in response.text
        assert 'action="create"' in response.text

    async def test_create_redirects_to_result(self, client, sample_urls):
        response = await client.post("/create", data={"url": sample_urls[0]}, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == f"result/{hash_url(sample_urls[0])}"

    async def test_result_page_shows_short_url(self, client, sample_urls):
        await client.post("/create", data={"url": sample_urls[0]}, follow_redirects=False)
        code = hash_url(sample_urls[0])

        response = await client.get(f"/result/{code}")

        assert response.status_code == 200
        assert f"http://testserver/{code}" in response.text
        assert sample_urls[0] in response.text

    async def test_result_page_not_found(self, client):
        response = await client.get("/result/deadbeef")

        assert response.status_code == 404
        assert "not found" in response.text

    async def test_malformed_code_not_looked_up(self, logger, config):
        service = URLShortenerService(store=UnavailableStore(logger=logger), logger=logger)

        async with AsyncClient(transport=ASGITransport(app=build_app(service, config)), base_url="http://testserver") as client:
            redirect = await client.get("/favicon.ico", follow_redirects=False)
            result = await client.get("/result/not-a-hash")

        assert redirect.status_code == 404
        assert result.status_code == 404

    async def test_create_invalid_url(self, client, store):
        response = await client.post("/create", data={"url": "not a url"}, follow_redirects=False)

        assert response.status_code == 400
        assert "Please enter a valid URL." in response.text
        assert store.insert_calls == []

    async def test_redirect(self, client, sample_urls):
        await client.post("/create", data={"url": sample_urls[1]}, follow_redirects=False)

        response = await client.get(f"/{hash_url(sample_urls[1])}", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == sample_urls[1]

    async def test_redirect_not_found(self, client):
        response = await client.get("/deadbeef", follow_redirects=False)

        assert response.status_code == 404
        assert "not found" in response.text

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    async def test_stylesheet_served(self, client):
        response = await client.get("/css/style.css")

        assert response.status_code == 200
