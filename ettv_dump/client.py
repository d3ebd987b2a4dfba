"""
Async client for the ETTV database dumps.

Fetches the daily or full dump, gunzips it and returns the lines as Torrent
records with magnet links attached.

Usage:
    import asyncio
    from ettv_dump.client import EttvClient

    client = EttvClient()
    torrents = asyncio.run(client.get_daily())
    for torrent in torrents:
        print(torrent.title, torrent.magnet)
"""

from typing import Iterable, List, Optional, Tuple
from urllib.parse import urljoin

import httpx

from .config import Config
from .fetcher import fetch_dump
from .logger import logger
from .models import Torrent
from .parser import parse_dump
from .trackers import DEFAULT_TRACKERS


DAILY = "daily"
FULL = "full"


class EttvClient:
    def __init__(
        self,
        base_url: str = Config.BASE_URL,
        trackers: Iterable[str] = DEFAULT_TRACKERS,
        strict: bool = Config.STRICT,
        legacy_magnet_prefix: bool = Config.LEGACY_MAGNET,
        timeout: Optional[float] = Config.TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the dump host (default: https://www.ettv.tv/)
            trackers: Pre-escaped tracker URLs added to every magnet link
            strict: Raise ParseError on dump lines with fewer than four fields
            legacy_magnet_prefix: Emit legacy "$magnet:?" links
            timeout: Request timeout in seconds (default: no timeout)
            transport: Optional httpx transport, mainly for tests
        """
        self._base_url = base_url
        self._trackers = tuple(trackers)
        self._strict = strict
        self._legacy_magnet_prefix = legacy_magnet_prefix
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def trackers(self) -> Tuple[str, ...]:
        return self._trackers

    @property
    def strict(self) -> bool:
        return self._strict

    def dump_url(self, name: str) -> str:
        """Resolve the URL of a dump file, e.g. 'daily' or 'full'."""
        return urljoin(self._base_url, Config.DUMP_PATH_TEMPLATE.format(name=name))

    def parse(self, text: str) -> List[Torrent]:
        """Parse already decompressed dump text with this client's settings."""
        return parse_dump(
            text,
            self._trackers,
            strict=self._strict,
            legacy_prefix=self._legacy_magnet_prefix,
        )

    async def get_file(self, name: str) -> List[Torrent]:
        """
        Get a dump file and convert it to a list of Torrent records.

        Raises:
            NetworkError: The dump could not be downloaded
            DecompressionError: The dump was not valid gzip
            ParseError: A line was short and strict parsing is enabled
        """
        url = self.dump_url(name)
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        ) as client:
            text = await fetch_dump(url, client)

        torrents = self.parse(text)
        logger.info(f"Parsed {len(torrents)} torrents from the {name} dump")
        return torrents

    async def get_daily(self) -> List[Torrent]:
        """Get the daily database dump."""
        return await self.get_file(DAILY)

    async def get_full(self) -> List[Torrent]:
        """Get the full database dump."""
        return await self.get_file(FULL)
