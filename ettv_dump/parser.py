"""
Parser for ETTV dump text.

A dump is one torrent per line, fields separated by '|' in the order
hash|title|category|link. Blank lines are skipped. Lines with fewer than
four fields yield records with the missing fields set to None, unless
strict parsing is requested, in which case ParseError is raised.
"""

from typing import Iterable, Iterator, List, Optional

from .errors import ParseError
from .logger import logger
from .magnet_link import build_magnet
from .models import FIELDS, Torrent


DELIMITER = "|"


def parse_line(
    line: str,
    trackers: Iterable[str] = (),
    strict: bool = False,
    legacy_prefix: bool = False,
    line_number: Optional[int] = None,
) -> Torrent:
    """
    Convert a single dump line into a Torrent.

    Fields past the fourth are ignored. The magnet link is built from the
    hash and title with the given trackers.
    """
    values = line.split(DELIMITER)

    if len(values) < len(FIELDS):
        if strict:
            raise ParseError(
                f"Expected {len(FIELDS)} fields, got {len(values)}"
                + (f" on line {line_number}" if line_number else ""),
                line_number=line_number,
                line=line,
            )
        logger.debug(f"Short dump line {line_number}: {len(values)} fields")
        values = values + [None] * (len(FIELDS) - len(values))

    record = dict(zip(FIELDS, values))
    record["magnet"] = build_magnet(
        record["hash"], record["title"], trackers, legacy_prefix=legacy_prefix
    )
    return Torrent(**record)


def iter_torrents(
    text: str,
    trackers: Iterable[str] = (),
    strict: bool = False,
    legacy_prefix: bool = False,
) -> Iterator[Torrent]:
    trackers = tuple(trackers)
    for number, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        yield parse_line(
            line,
            trackers,
            strict=strict,
            legacy_prefix=legacy_prefix,
            line_number=number,
        )


def parse_dump(
    text: str,
    trackers: Iterable[str] = (),
    strict: bool = False,
    legacy_prefix: bool = False,
) -> List[Torrent]:
    """
    Parse a decompressed dump into a list of Torrent records.

    Lines holding only whitespace count as blank and are skipped, as are
    empty lines. ETTV's own dump reader only dropped empty lines and turned a
    whitespace-only line into a record with a whitespace hash; that record is
    no longer produced. A trailing '\\r' is removed from every line.

    Args:
        text: The decompressed dump
        trackers: Pre-escaped tracker URLs added to every magnet link
        strict: Raise ParseError on lines with fewer than four fields
        legacy_prefix: Prefix magnet links with "$magnet:?"

    Returns:
        List[Torrent]: One record per non-blank line, in input order
    """
    return list(iter_torrents(text, trackers, strict=strict, legacy_prefix=legacy_prefix))
