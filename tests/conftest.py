import ssl

import pytest
import trustme
from aiohttp import web


@pytest.fixture
def make_header_server(aiohttp_server):
    """Start a local server whose ``/`` answers with the given response headers."""
    async def factory(headers, ssl_context=None):
        seen = []

        async def handler(request):
            seen.append(dict(request.headers))
            return web.Response(text="ok", headers=headers)

        app = web.Application()
        app.router.add_get("/", handler)
        if ssl_context is None:
            server = await aiohttp_server(app)
        else:
            server = await aiohttp_server(app, ssl=ssl_context)
        server.requests = seen
        return server
    return factory


@pytest.fixture
def self_signed_context():
    # certificate issued by a throwaway CA that the client does not trust
    ca = trustme.CA()
    ctx = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
    ca.issue_cert("127.0.0.1", "localhost").configure_cert(ctx)
    return ctx


@pytest.fixture
def url_file(tmp_path):
    def write(text):
        path = tmp_path / "urls.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write
