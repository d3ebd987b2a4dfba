"""
Record types produced from ETTV dumps.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


FIELDS = ("hash", "title", "category", "link")


@dataclass(frozen=True)
class Torrent:
    """
    One line of a dump: hash|title|category|link, plus a generated magnet.

    Fields missing from a short line are None.
    """
    hash: Optional[str]
    title: Optional[str]
    category: Optional[str]
    link: Optional[str]
    magnet: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
