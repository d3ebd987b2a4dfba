"""
Tests for dump download and gzip decoding.

The network is replaced with httpx.MockTransport; bodies are built with the
gzip module.
"""

import gzip

import httpx
import pytest

from ettv_dump.errors import DecompressionError, EttvError, NetworkError
from ettv_dump.fetcher import GzipTextDecoder, fetch_dump

from conftest import dump_transport, gzip_text


URL = "https://www.ettv.tv/dumps/ettv_daily.txt.gz"


def decode(*chunks):
    decoder = GzipTextDecoder()
    for chunk in chunks:
        decoder.feed(chunk)
    return decoder.close()


class TestGzipTextDecoder:
    def test_single_chunk(self, sample_dump, sample_gzip):
        assert decode(sample_gzip) == sample_dump

    def test_byte_by_byte(self, sample_dump, sample_gzip):
        chunks = [sample_gzip[i:i + 1] for i in range(len(sample_gzip))]

        assert decode(*chunks) == sample_dump

    def test_multibyte_character_split_across_chunks(self):
        text = "h|Amélie ★|Movies|l\n" * 50
        data = gzip_text(text)
        middle = len(data) // 2

        assert decode(data[:middle], data[middle:]) == text

    def test_concatenated_members(self):
        data = gzip_text("a|b|c|d\n") + gzip_text("e|f|g|h\n")

        assert decode(data) == "a|b|c|d\ne|f|g|h\n"

    def test_trailing_padding_is_ignored(self):
        assert decode(gzip_text("a|b|c|d\n") + b"\x00" * 16) == "a|b|c|d\n"

    def test_invalid_utf8_is_replaced(self):
        assert decode(gzip.compress(b"h|caf\xe9|c|l\n")) == "h|caf�|c|l\n"

    def test_not_gzip(self):
        decoder = GzipTextDecoder()

        with pytest.raises(DecompressionError):
            decoder.feed(b"this is plain text, not gzip")

    def test_truncated_stream(self, sample_gzip):
        decoder = GzipTextDecoder()
        decoder.feed(sample_gzip[:len(sample_gzip) // 2])

        with pytest.raises(DecompressionError):
            decoder.close()

    def test_empty_body(self):
        with pytest.raises(DecompressionError):
            decode(b"")


@pytest.mark.asyncio
async def test_fetch_dump_returns_text(sample_dump, sample_gzip):
    requests = []
    transport = dump_transport({"/dumps/ettv_daily.txt.gz": sample_gzip}, requests)

    async with httpx.AsyncClient(transport=transport) as client:
        text = await fetch_dump(URL, client)

    assert text == sample_dump
    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert requests[0].headers["accept-encoding"] == "identity"


@pytest.mark.asyncio
async def test_fetch_dump_ignores_status_code():
    transport = dump_transport({"/dumps/ettv_daily.txt.gz": (503, gzip_text("h|t|c|l\n"))})

    async with httpx.AsyncClient(transport=transport) as client:
        assert await fetch_dump(URL, client) == "h|t|c|l\n"


@pytest.mark.asyncio
async def test_error_page_is_a_decompression_error():
    transport = dump_transport({})

    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(DecompressionError):
            await fetch_dump(URL, client)


@pytest.mark.asyncio
async def test_connection_refused_is_a_network_error():
    transport = dump_transport({"/dumps/ettv_daily.txt.gz": httpx.ConnectError("Connection refused")})

    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(NetworkError) as excinfo:
            await fetch_dump(URL, client)

    assert isinstance(excinfo.value, EttvError)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_connection_reset_is_a_network_error():
    transport = dump_transport({"/dumps/ettv_daily.txt.gz": httpx.ReadError("Connection reset by peer")})

    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(NetworkError):
            await fetch_dump(URL, client)


class BrokenStream(httpx.AsyncByteStream):
    """Yields the first part of a body, then drops the connection."""

    def __init__(self, body: bytes):
        self._body = body

    async def __aiter__(self):
        yield self._body[:len(self._body) // 2]
        raise httpx.ReadError("Connection reset by peer")


@pytest.mark.asyncio
async def test_connection_dropped_mid_body_is_a_network_error(sample_gzip):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, stream=BrokenStream(sample_gzip)))

    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(NetworkError):
            await fetch_dump(URL, client)


@pytest.mark.asyncio
async def test_already_consumed_body_is_a_network_error(sample_gzip):
    # httpx reads a content= body ahead of time, so the raw stream is gone
    transport = httpx.MockTransport(lambda request: httpx.Response(200, content=sample_gzip))

    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(NetworkError) as excinfo:
            await fetch_dump(URL, client)

    assert isinstance(excinfo.value.__cause__, httpx.StreamError)
