import gzip

import httpx
import pytest


SAMPLE_HASH = "dd8255ecdc7ca55fb0bbf81323d87062db1f6d1c"

SAMPLE_DUMP = (
    f"{SAMPLE_HASH}|Big Buck Bunny 1080p|Movies|https://www.ettv.tv/torrent/1/big-buck-bunny\n"
    "08ada5a7a6183aae1e09d831df6748d566095a10|Sintel 2010 720p|Movies|https://www.ettv.tv/torrent/2/sintel\n"
    "\n"
    "c9e15763f722f23e98a29decdfae341b98d53056|Cosmos Laundromat S01E01|TV|https://www.ettv.tv/torrent/3/cosmos\n"
)


def gzip_text(text: str) -> bytes:
    return gzip.compress(text.encode("utf-8"))


class ChunkedStream(httpx.AsyncByteStream):
    """Response body delivered in small chunks, like a real socket."""

    def __init__(self, body: bytes, chunk_size: int = 64):
        self._body = body
        self._chunk_size = chunk_size

    async def __aiter__(self):
        for start in range(0, len(self._body), self._chunk_size):
            yield self._body[start:start + self._chunk_size]


def dump_transport(routes, requests=None):
    """
    MockTransport serving gzip bodies by URL path.

    routes maps a path to bytes (served with status 200), to a
    (status, bytes) tuple, or to an exception instance to raise.
    """
    def handler(request):
        if requests is not None:
            requests.append(request)
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, stream=ChunkedStream(b"<html>Not Found</html>"))
        if isinstance(route, Exception):
            raise route
        if isinstance(route, tuple):
            status, body = route
            return httpx.Response(status, stream=ChunkedStream(body))
        return httpx.Response(200, stream=ChunkedStream(route))

    return httpx.MockTransport(handler)


@pytest.fixture
def sample_dump():
    return SAMPLE_DUMP


@pytest.fixture
def sample_gzip():
    return gzip_text(SAMPLE_DUMP)
