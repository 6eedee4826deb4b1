"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from config import Config
from url_shortener import URLShortener

SHORT_ID = "http://goo.gl/XYZ"


async def insert_url(request: web.Request) -> web.Response:
    body = await request.json()
    request.app["requests"].append({
        "body": body,
        "query": dict(request.query),
        "headers": dict(request.headers),
    })
    return web.json_response({
        "kind": "urlshortener#url",
        "id": SHORT_ID,
        "longUrl": body["longUrl"],
    })


async def server_error(request: web.Request) -> web.Response:
    return web.json_response({"error": "backend"}, status=500)


async def not_json(request: web.Request) -> web.Response:
    return web.Response(text="<html>oops</html>", content_type="text/html")


async def null_body(request: web.Request) -> web.Response:
    return web.json_response(None)


async def empty_body(request: web.Request) -> web.Response:
    return web.Response(status=200)


async def missing_id(request: web.Request) -> web.Response:
    return web.json_response({"kind": "urlshortener#url"})


async def redirect(request: web.Request) -> web.Response:
    raise web.HTTPFound("http://example.com/target")


async def redirect_chain(request: web.Request) -> web.Response:
    raise web.HTTPMovedPermanently("/r/redirect")


async def plain_page(request: web.Request) -> web.Response:
    return web.Response(text="already long")


async def missing_page(request: web.Request) -> web.Response:
    return web.Response(status=404, text="not found")


def build_app() -> web.Application:
    app = web.Application()
    app["requests"] = []
    app.router.add_post("/urlshortener/v1/url", insert_url)
    app.router.add_post("/broken/status", server_error)
    app.router.add_post("/broken/html", not_json)
    app.router.add_post("/broken/null", null_body)
    app.router.add_post("/broken/empty", empty_body)
    app.router.add_post("/broken/noid", missing_id)
    app.router.add_get("/r/redirect", redirect)
    app.router.add_get("/r/chain", redirect_chain)
    app.router.add_get("/r/plain", plain_page)
    app.router.add_get("/r/missing", missing_page)
    return app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of Config."""
    for name in ("SHORTENER_API_URL", "SHORTENER_API_KEY", "APPLICATION_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest_asyncio.fixture
async def server():
    """Local stand-in for both the shortening API and the short-link host."""
    test_server = TestServer(build_app())
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest_asyncio.fixture
async def dead_url():
    """URL of a server that has already shut down."""
    test_server = TestServer(web.Application())
    await test_server.start_server()
    url = str(test_server.make_url("/gone"))
    await test_server.close()
    return url


@pytest.fixture
def config(server):
    """Config pointing at the local shortening API."""
    cfg = Config()
    cfg.SHORTENER_API_URL = str(server.make_url("/urlshortener/v1/url"))
    return cfg


@pytest_asyncio.fixture
async def shortener(config):
    """URL shortener wired to the local server."""
    service = URLShortener(config)
    yield service
    await service.close()
