"""
cli.py — Command Line Interface
=================================
    imt-hasher hash <url> --destination PATH [--throttle MS]

Fetches a file, compresses it to an IMT hash, converts the hash to a
hexadecimal string and saves it to the destination path.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from imt_hasher.config import settings
from imt_hasher.services.converter import HashConverter
from imt_hasher.services.digest_sink import SinkError
from imt_hasher.services.fetcher import FetchError

logger = logging.getLogger("imt_hasher.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imt-hasher",
        description="Fetch remote files and store their IMT digest.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    hash_parser = subparsers.add_parser(
        "hash",
        help=(
            "Fetch a <url> file, compress it as a hash, convert it to a "
            "hexadecimal string and save it to <destination>."
        ),
    )
    hash_parser.add_argument("url", help="URL of the file to hash")
    hash_parser.add_argument(
        "--destination", required=True, help="Destination path"
    )
    hash_parser.add_argument(
        "--throttle",
        type=int,
        default=settings.DEFAULT_THROTTLE_MS or None,
        help="Delay in milliseconds applied to the fetch",
    )
    return parser


async def _run_hash(url: str, destination: str, throttle: Optional[int]) -> int:
    converter = HashConverter()
    try:
        result = await converter.convert(url, destination, throttle=throttle)
    except (FetchError, SinkError) as e:
        logger.error("%s", e)
        return 1

    print(f"Hexadecimal value: {result.digest}")
    print(f"hexadecimal saved in: {result.destination}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.throttle is not None and args.throttle < 0:
        parser.error("--throttle must be non-negative")

    return asyncio.run(_run_hash(args.url, args.destination, args.throttle))


if __name__ == "__main__":
    sys.exit(main())
