"""
Command-line interface for the ETTV dump client.

Usage:
    ettv-dump daily
    ettv-dump full --format magnet --limit 10
    ettv-dump daily --trackers-url https://example.com/trackers.txt
"""

import argparse
import asyncio
import json
import sys

from .client import DAILY, FULL, EttvClient
from .config import Config
from .errors import EttvError
from .logger import logger
from .trackers import DEFAULT_TRACKERS, fetch_trackers


def format_torrent(torrent, output_format):
    if output_format == "magnet":
        return torrent.magnet
    return json.dumps(torrent.to_dict(), ensure_ascii=False)


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {value}")
    return number


async def run(args):
    trackers = DEFAULT_TRACKERS
    if args.trackers_url:
        trackers = await fetch_trackers(args.trackers_url) or DEFAULT_TRACKERS

    client = EttvClient(
        base_url=args.base_url,
        trackers=trackers,
        strict=args.strict,
        legacy_magnet_prefix=args.legacy_magnet,
        timeout=args.timeout,
    )
    if args.dump == DAILY:
        return await client.get_daily()
    return await client.get_full()


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Fetch ETTV database dumps as torrent records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s daily
  %(prog)s full --format magnet --limit 10
  %(prog)s daily --strict --format json > daily.json
  %(prog)s daily --trackers-url
"""
    )
    parser.add_argument("dump", choices=[DAILY, FULL], help="Dump to fetch")
    parser.add_argument("--base-url", default=Config.BASE_URL, help="Base URL of the dump host")
    parser.add_argument("--strict", action="store_true", default=Config.STRICT,
                        help="Fail on lines with fewer than four fields")
    parser.add_argument("--legacy-magnet", action="store_true", default=Config.LEGACY_MAGNET,
                        help="Prefix magnet links with '$magnet:?'")
    parser.add_argument("--timeout", type=float, default=Config.TIMEOUT,
                        help="Request timeout in seconds")
    parser.add_argument("--trackers-url", nargs="?", const=Config.TRACKERS_LIST_URL,
                        help="Fetch the tracker list from this URL (default: TRACKERS_LIST_URL)")
    parser.add_argument("--format", dest="output_format", default="jsonl",
                        choices=["json", "jsonl", "magnet"], help="Output format")
    parser.add_argument("--limit", type=non_negative_int, help="Print at most this many records")

    args = parser.parse_args(argv)

    try:
        torrents = asyncio.run(run(args))
    except EttvError as e:
        logger.error(f"Could not load the {args.dump} dump: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.limit is not None:
        torrents = torrents[:args.limit]

    if args.output_format == "json":
        print(json.dumps([t.to_dict() for t in torrents], ensure_ascii=False, indent=2))
    else:
        for torrent in torrents:
            print(format_torrent(torrent, args.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
