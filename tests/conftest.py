import json
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

# Served bodies by file name; names not listed get a generated body.
BODIES = {
    "a.jar": b"X",
    "big.jar": bytes(range(256)) * 2048,
}

UNREACHABLE_URL = "http://127.0.0.1:1/nothing-listens-here.jar"


class AssetServer:
    """A local HTTP server serving fake mod files, recording every request."""

    def __init__(self, server: TestServer, requests: list[str]):
        self.server = server
        self.requests = requests

    def url(self, path: str) -> str:
        return str(self.server.make_url(path))

    def file_url(self, name: str) -> str:
        return self.url(f"/files/{name}")


def body_for(name: str) -> bytes:
    return BODIES.get(name, f"content of {name}".encode())


@pytest_asyncio.fixture
async def asset_server():
    requests: list[str] = []

    async def serve_file(request: web.Request) -> web.Response:
        requests.append(request.path)
        return web.Response(body=body_for(request.match_info["name"]))

    async def not_found(request: web.Request) -> web.Response:
        requests.append(request.path)
        return web.Response(status=404, text="not found")

    async def server_error(request: web.Request) -> web.Response:
        requests.append(request.path)
        return web.Response(status=500, text="boom")

    async def redirect(request: web.Request) -> web.Response:
        requests.append(request.path)
        raise web.HTTPFound(f"/files/{request.match_info['name']}")

    app = web.Application()
    app.router.add_get("/files/{name}", serve_file)
    app.router.add_get("/missing/{name}", not_found)
    app.router.add_get("/error/{name}", server_error)
    app.router.add_get("/redirect/{name}", redirect)

    server = TestServer(app)
    await server.start_server()
    try:
        yield AssetServer(server, requests)
    finally:
        await server.close()


def write_profiles(path: Path, profiles: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"profiles": profiles}), encoding="utf-8")
    return path


@pytest.fixture
def minecraft_dir(tmp_path: Path) -> Path:
    """A fake game directory holding an empty profile registry."""
    directory = tmp_path / ".minecraft"
    write_profiles(directory / "launcher_profiles.json", {})
    return directory
