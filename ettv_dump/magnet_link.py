"""
Magnet link construction and parsing.

build_magnet() turns a dump record's info hash and title into a magnet URI.
The xt parameter keeps 'urn:btih:' unencoded, which most torrent clients
require. Tracker values are taken as already escaped and appended verbatim.
"""

import re
from typing import Iterable, Optional
from urllib.parse import parse_qs, quote


MAGNET_PREFIX = "magnet:?"
# Legacy prefix, kept for byte-compatible output
LEGACY_MAGNET_PREFIX = "$magnet:?"


def build_magnet(
    info_hash: Optional[str],
    title: Optional[str],
    trackers: Iterable[str] = (),
    legacy_prefix: bool = False,
) -> str:
    """
    Build a magnet URI from an info hash, display name and tracker list.

    Args:
        info_hash: The torrent's info hash, placed in xt as urn:btih:<hash>
        title: Display name, percent-encoded into dn
        trackers: Pre-escaped announce URLs, one tr parameter each, in order
        legacy_prefix: Emit "$magnet:?" instead of "magnet:?"

    Returns:
        str: The magnet URI
    """
    # Build xt parameter manually - colons in urn:btih: must NOT be encoded
    parts = [f"xt=urn:btih:{quote(info_hash or '', safe='')}"]
    parts.append(f"dn={quote(title or '', safe='')}")

    for tracker in trackers:
        parts.append(f"tr={tracker}")

    prefix = LEGACY_MAGNET_PREFIX if legacy_prefix else MAGNET_PREFIX
    return f"{prefix}{'&'.join(parts)}"


def parse_magnet(magnet_uri: str) -> dict:
    """Split a magnet URI into info_hash, name and trackers."""
    if '?' not in magnet_uri:
        raise ValueError(f"Not a magnet URI: {magnet_uri!r}")

    params = parse_qs(magnet_uri.split('?', 1)[1], keep_blank_values=True)

    info_hash = params.get('xt', [None])[0]
    if info_hash:
        info_hash = info_hash.split(':')[-1]

    return {
        'info_hash': info_hash,
        'name': params.get('dn', [None])[0],
        'trackers': params.get('tr', []),
    }


def is_valid_magnet(magnet_uri: str) -> bool:
    # Basic validation of a magnet URI
    pattern = r'^\$?magnet:\?xt=urn:btih:[^&]+'
    return re.match(pattern, magnet_uri) is not None
