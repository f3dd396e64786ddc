#!/usr/bin/env python3
"""
Look up track artwork and build notification deep links.

USAGE:
    python3 lookup.py [-c CONFIG] artwork DEEZER_TRACK_URL
    python3 lookup.py [-c CONFIG] deeplink track MB_ID
    python3 lookup.py [-c CONFIG] deeplink queue

SYNOPSIS:
    Resolves the cover artwork for a Deezer track link, or prints the deep
    link a recognition notification would open.
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from recognizer.artwork import ArtworkFetcher
from recognizer.config import RecognizerConfig, load_config
from recognizer.deeplink import NotificationServiceRouter
from recognizer.exceptions import ConfigError
from recognizer.models import TrackEntity, TrackLinks, TrackMetadata

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level based on config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)
    logger.setLevel(level)


def lookup_artwork(config: RecognizerConfig, deezer_url: str) -> int:
    """Print the artwork URL for a Deezer track link. Returns the exit code."""
    track = TrackEntity(
        mb_id=deezer_url,
        title="",
        artist="",
        metadata=TrackMetadata(last_recognition_date=datetime.now()),
        links=TrackLinks(deezer=deezer_url),
    )
    with ArtworkFetcher(config.artwork) as fetcher:
        result = fetcher.lookup(track)

    if result.url:
        print(result.url)
        return 0

    reason = result.reason.value if result.reason else "unknown"
    logger.warning(f"No artwork available for {deezer_url} ({reason})")
    return 1


def build_deep_link(config: RecognizerConfig, destination: str, mb_id: Optional[str]) -> int:
    """Print the deep link URI for a destination. Returns the exit code."""
    router = NotificationServiceRouter(
        scheme=config.deep_links.scheme, target=config.deep_links.target
    )
    if destination == "track":
        if not mb_id:
            logger.error("A track id is required for track deep links")
            return 2
        intent = router.get_deep_link_intent_to_track(mb_id)
    else:
        intent = router.get_deep_link_intent_to_recognition_queue()
    print(intent.uri)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="lookup.py",
        description="Resolve track artwork and build notification deep links.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to the YAML configuration file (defaults apply when omitted).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    artwork_parser = subparsers.add_parser("artwork", help="Resolve cover artwork.")
    artwork_parser.add_argument("url", help="Deezer track link, e.g. https://www.deezer.com/track/3135556")

    deeplink_parser = subparsers.add_parser("deeplink", help="Build a deep link URI.")
    deeplink_parser.add_argument("destination", choices=["track", "queue"])
    deeplink_parser.add_argument("mb_id", nargs="?", default=None, help="Track id for track deep links.")

    args = parser.parse_args(argv)

    if args.config:
        try:
            config = load_config(args.config)
            logger.info(f"Loaded configuration version {config.version}")
        except ConfigError as e:
            logger.error(f"Configuration error: {e}")
            sys.exit(2)
    else:
        config = RecognizerConfig()

    setup_logging(config.log_level)

    if args.command == "artwork":
        sys.exit(lookup_artwork(config, args.url))
    sys.exit(build_deep_link(config, args.destination, args.mb_id))


if __name__ == "__main__":
    main()
