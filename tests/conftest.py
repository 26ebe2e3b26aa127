import asyncio

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


class TemplateSite:
    """Serves .mdc files from memory and records every requested filename."""

    def __init__(self):
        self.responses: dict[str, list[tuple[int, bytes]]] = {}
        self.requests: list[str] = []
        self.delay = 0.0
        self.base_url = ""

    def add(self, name: str, body: bytes | str, status: int = 200) -> None:
        """Queues a response; the last queued response for a name is repeated."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.responses.setdefault(name, []).append((status, body))

    async def handle(self, request: web.Request) -> web.Response:
        filename = request.match_info["filename"]
        self.requests.append(filename)
        if self.delay:
            await asyncio.sleep(self.delay)
        queue = self.responses.get(filename.removesuffix(".mdc"))
        if not filename.endswith(".mdc") or not queue:
            return web.Response(status=404, text="404: Not Found")
        status, body = queue.pop(0) if len(queue) > 1 else queue[0]
        return web.Response(status=status, body=body)


@pytest.fixture
async def template_site():
    site = TemplateSite()
    app = web.Application()
    app.router.add_get("/rules/{filename}", site.handle)
    server = TestServer(app)
    await server.start_server()
    site.base_url = str(server.make_url("/rules"))
    yield site
    await server.close()


@pytest.fixture
async def session():
    async with aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(total=5)
    ) as client_session:
        yield client_session
