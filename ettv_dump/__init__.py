"""
ETTV dump client - torrent metadata from ETTV's gzip database dumps.

Downloads the daily or full dump, parses each hash|title|category|link line
into a Torrent record and attaches a magnet link built from a tracker list.
"""

from .client import EttvClient
from .config import Config
from .errors import DecompressionError, EttvError, NetworkError, ParseError
from .magnet_link import build_magnet
from .models import Torrent
from .parser import parse_dump
from .trackers import DEFAULT_TRACKERS

__version__ = "0.1.0"
__all__ = [
    "EttvClient",
    "Config",
    "Torrent",
    "DEFAULT_TRACKERS",
    "build_magnet",
    "parse_dump",
    "EttvError",
    "NetworkError",
    "DecompressionError",
    "ParseError",
]
