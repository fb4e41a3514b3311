import json
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from butterfly_client import Client

FIXTURES_DIR = Path(__file__).parent / "fixtures"
DOMAIN = "https://local.test"


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def _route(request: httpx.Request) -> httpx.Response:
    """Serve fixture bodies the way the API would for the paths under test."""
    path = request.url.path.rstrip("/") or "/"
    page_number = request.url.params.get("page[number]")

    if path == "/v1":
        return httpx.Response(200, json=load_fixture("property.json"))

    if path == "/v1/posts" and page_number in (None, "1"):
        return httpx.Response(200, json=load_fixture("posts_page1.json"))

    if path == "/v1/posts":
        next_link = httpx.URL(load_fixture("posts_page1.json")["links"]["next"])
        if request.url.raw_path == next_link.raw_path:
            return httpx.Response(200, json=load_fixture("posts_page2.json"))
        return httpx.Response(404, json=load_fixture("path_404.json"))

    if path == "/v1/posts/1337":
        return httpx.Response(404, json=load_fixture("post_404.json"))

    if path == "/v1/posts/42-old":
        # Redirect entry wrapped in a 200 response
        return httpx.Response(200, json=load_fixture("post_moved.json"))

    return httpx.Response(404, json=load_fixture("path_404.json"))


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def fixture_transport(requests_seen) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return _route(request)

    return httpx.MockTransport(handler)


@pytest_asyncio.fixture
async def http_client(fixture_transport):
    async with httpx.AsyncClient(transport=fixture_transport) as client:
        yield client


@pytest_asyncio.fixture
async def client(http_client):
    return Client(DOMAIN, http_client=http_client)
