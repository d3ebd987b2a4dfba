"""
Download and gunzip a dump over HTTP.

The response body is decompressed as it streams in and the caller receives
the whole text at once. The status code is not checked: whatever the host
sends is fed to the decompressor, so an error page surfaces as a
DecompressionError.
"""

import codecs
import zlib

import httpx

from .errors import DecompressionError, NetworkError
from .logger import logger


# zlib window bits accepting a gzip header and trailer
GZIP_WBITS = 16 + zlib.MAX_WBITS
GZIP_MAGIC = b"\x1f\x8b"


class GzipTextDecoder:
    """
    Incremental gzip to UTF-8 decoder.

    Concatenated gzip members are decoded one after another, as gunzip does.
    Invalid UTF-8 is replaced rather than rejected.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._inflater = zlib.decompressobj(GZIP_WBITS)
        self._text = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._parts = []
        self._trailing = False
        self.compressed_bytes = 0

    def feed(self, chunk: bytes):
        self.compressed_bytes += len(chunk)
        try:
            while chunk and not self._trailing:
                if self._inflater.eof:
                    if not chunk.startswith(GZIP_MAGIC[:len(chunk)]):
                        # Padding after the last member is ignored
                        self._trailing = True
                        break
                    self._inflater = zlib.decompressobj(GZIP_WBITS)
                self._parts.append(self._text.decode(self._inflater.decompress(chunk)))
                chunk = self._inflater.unused_data if self._inflater.eof else b""
        except zlib.error as e:
            raise DecompressionError(f"Invalid gzip data: {e}") from e

    def close(self) -> str:
        if not self._inflater.eof:
            raise DecompressionError(
                f"Unexpected end of gzip stream after {self.compressed_bytes} bytes"
            )
        self._parts.append(self._text.decode(b"", final=True))
        return "".join(self._parts)


async def fetch_dump(url: str, client: httpx.AsyncClient) -> str:
    """
    GET a gzip-compressed dump and return its decompressed text.

    Raises:
        NetworkError: The host could not be reached or the transfer broke off
        DecompressionError: The body was not a complete gzip stream
    """
    logger.info(f"Making GET request to: '{url}'")
    decoder = GzipTextDecoder()

    try:
        # identity keeps the transport from layering its own content coding
        async with client.stream("GET", url, headers={"Accept-Encoding": "identity"}) as response:
            logger.debug(f"Response {response.status_code} from {url}")
            async for chunk in response.aiter_raw():
                decoder.feed(chunk)
        text = decoder.close()
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.error(f"Failed to fetch {url}: {e}")
        raise NetworkError(f"Failed to fetch {url}: {e}") from e
    except DecompressionError as e:
        logger.error(f"Failed to decompress {url}: {e}")
        raise

    logger.info(f"Decompressed {decoder.compressed_bytes} bytes into {len(text)} characters")
    return text
