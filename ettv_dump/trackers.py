"""
Tracker lists used when building magnet links.

DEFAULT_TRACKERS holds the announce URLs ETTV publishes alongside its dumps,
already escaped for use as `tr` values. A fresh public list can be fetched
with fetch_trackers(); its entries are escaped the same way so both kinds
can be handed to EttvClient unchanged.
"""

from typing import Iterable, List, Tuple

import httpx

from .logger import logger


DEFAULT_TRACKERS: Tuple[str, ...] = (
    "udp%3A%2F%2Ftracker.coppersurfer.tk:6969/announce",
    "udp%3A%2F%2F9.rarbg.to:2710/announce",
    "udp%3A%2F%2F9.rarbg.me:2710/announce",
    "udp%3A%2F%2FIPv6.open-internet.nl:6969/announce",
    "udp%3A%2F%2Ftracker.internetwarriors.net:1337/announce",
    "udp%3A%2F%2Ftracker.opentrackr.org:1337/announce",
    "udp%3A%2F%2Fp4p.arenabg.com:1337/announce",
    "udp%3A%2F%2Feddie4.nl:6969/announce",
    "udp%3A%2F%2Fshadowshq.yi.org:6969/announce",
    "udp%3A%2F%2Ftracker.leechers-paradise.org:6969/announce",
    "udp%3A%2F%2Fexplodie.org:6969/announce",
    "udp%3A%2F%2Ftracker.tiny-vps.com:6969/announce",
    "udp%3A%2F%2Finferno.demonoid.pw:3391/announce",
    "udp%3A%2F%2Fipv4.tracker.harry.lu:80/announce",
    "udp%3A%2F%2Fpeerfect.org:6969/announce",
    "udp%3A%2F%2Ftracker.pirateparty.gr:6969/announce",
    "udp%3A%2F%2Ftracker.vanitycore.co:6969/announce",
    "udp%3A%2F%2Fopen.stealth.si:80/announce",
    "udp%3A%2F%2Ftracker.torrent.eu.org:451",
    "udp%3A%2F%2Ftracker.zer0day.to:1337/announce",
    "udp%3A%2F%2Ftracker.open-internet.nl:6969/announce",
)


def quote_tracker(url: str) -> str:
    """
    Escape an announce URL the way the default list is escaped.

    Only the scheme separator is encoded ("udp://" -> "udp%3A%2F%2F"); the
    host, port and path are left readable. Already escaped input is returned
    as is.
    """
    url = url.strip()
    scheme, sep, rest = url.partition("://")
    if not sep:
        return url
    return f"{scheme}%3A%2F%2F{rest}"


def quote_trackers(urls: Iterable[str]) -> List[str]:
    return [quote_tracker(url) for url in urls if url.strip()]


async def fetch_trackers(url: str, transport=None) -> List[str]:
    """
    Fetch a public tracker list from a URL.

    Returns the announce URLs, escaped for use in magnet links, filtering out
    empty lines. An unreachable list is not fatal: a warning is logged and an
    empty list returned, so callers can fall back to DEFAULT_TRACKERS.
    """
    logger.info(f"Fetching public tracker list from {url}")

    try:
        async with httpx.AsyncClient(timeout=30.0, transport=transport) as client:
            response = await client.get(url)
            response.raise_for_status()

            trackers = quote_trackers(response.text.strip().split('\n'))
            logger.info(f"Fetched {len(trackers)} public trackers")
            return trackers

    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch tracker list: {e}")
        return []
