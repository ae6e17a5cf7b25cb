"""Command-line interface for wiki-rss."""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from datetime import date
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from wiki_rss.clients import WikipediaClient
from wiki_rss.config import FeedConfig
from wiki_rss.errors import (
    ArticleUnavailableError,
    InternalError,
    InvalidRequestError,
    WikiRssError,
)
from wiki_rss.service import FeedService

DEFAULT_ORIGIN = "http://localhost:8787"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2
EXIT_UNAVAILABLE = 3


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> FeedConfig:
    """Build the feed config from the environment and command-line overrides."""
    return FeedConfig.from_env(
        anchor_date=args.anchor_date,
        max_feed_items=args.max_items,
        article_salt=args.salt,
        max_workers=getattr(args, "workers", None),
        skip_unavailable=getattr(args, "skip_unavailable", False) or None,
    )


def execute(config: FeedConfig, command: Callable[[FeedService], str]) -> str:
    """Run ``command`` with a live Wikipedia client.

    Raises:
        WikiRssError: Domain errors pass through; anything unexpected is
            raised as InternalError with a one-line description
    """
    try:
        with WikipediaClient(config.client) as client:
            return command(FeedService(config, client))
    except WikiRssError:
        raise
    except Exception as e:
        logging.getLogger(__name__).debug("Unexpected failure", exc_info=True)
        raise InternalError(f"Internal error: {type(e).__name__}: {e}") from e


def run_command(args: argparse.Namespace, command: Callable[[FeedService], str]) -> int:
    """Run ``command`` against a FeedService and map errors to exit codes.

    Args:
        args: Parsed command-line arguments
        command: Callable producing the text to write on success

    Returns:
        Exit code (0 success, 2 invalid input, 3 article unavailable, 1 other)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = build_config(args)
    except PydanticValidationError as e:
        logger.error(f"Invalid configuration: {e.errors()[0]['msg']}")
        return EXIT_INVALID

    try:
        output = execute(config, command)
    except InvalidRequestError as e:
        logger.error(e.message)
        return EXIT_INVALID
    except ArticleUnavailableError as e:
        logger.error(f"Article unavailable for {e.date}: {e.message}")
        return EXIT_UNAVAILABLE
    except WikiRssError as e:
        logger.error(e.message)
        return EXIT_FAILURE

    output_path: Path | None = getattr(args, "output", None)
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output, encoding="utf-8")
        logger.info(f"Wrote {output_path}")
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")

    return EXIT_OK


def feed(args: argparse.Namespace) -> int:
    """Execute the feed command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    return run_command(
        args,
        lambda service: service.build_feed(
            args.cadence, origin=args.origin, today=args.today
        ),
    )


def article(args: argparse.Namespace) -> int:
    """Execute the article command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    return run_command(
        args,
        lambda service: service.inspect_article(args.date).model_dump_json(indent=2),
    )


def schedule(args: argparse.Namespace) -> int:
    """Execute the schedule command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    def list_dates(service: FeedService) -> str:
        dates = service.publish_dates(args.cadence, today=args.today)
        return json.dumps([d.isoformat() for d in dates], indent=2)

    return run_command(args, list_dates)


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--anchor-date",
        type=str,
        default=None,
        help="Anchor date cadences count from (default: $ANCHOR_DATE or 2026-01-01)",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=None,
        help="Maximum feed items (default: $MAX_FEED_ITEMS or 20)",
    )
    parser.add_argument(
        "--salt",
        type=str,
        default=None,
        help="Article salt (default: $ARTICLE_SALT or wiki-rss)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="wiki-rss",
        description="Serve deterministic Wikipedia article feeds",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    feed_parser = subparsers.add_parser(
        "feed",
        help="Render the RSS feed for a cadence",
        description="Resolve the recent publish dates of a cadence and render them as an RSS 2.0 document.",
    )
    feed_parser.add_argument(
        "--cadence",
        type=int,
        required=True,
        help="Days between articles (1-7)",
    )
    feed_parser.add_argument(
        "--origin",
        type=str,
        default=DEFAULT_ORIGIN,
        help=f"Origin used for the channel link (default: {DEFAULT_ORIGIN})",
    )
    feed_parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Treat this UTC date as today (ISO format: YYYY-MM-DD)",
    )
    feed_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the feed to this file instead of stdout",
    )
    feed_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used to resolve dates (default: 1)",
    )
    feed_parser.add_argument(
        "--skip-unavailable",
        action="store_true",
        help="Omit dates with no resolvable article instead of failing",
    )
    _add_config_arguments(feed_parser)
    feed_parser.set_defaults(func=feed)

    article_parser = subparsers.add_parser(
        "article",
        help="Show the article for a single date",
        description="Resolve the article for one UTC date and print it as JSON.",
    )
    article_parser.add_argument(
        "--date",
        type=str,
        required=True,
        help="Date to resolve (ISO format: YYYY-MM-DD)",
    )
    _add_config_arguments(article_parser)
    article_parser.set_defaults(func=article)

    schedule_parser = subparsers.add_parser(
        "schedule",
        help="List the publish dates of a cadence",
        description="List the recent publish dates of a cadence without looking up any articles.",
    )
    schedule_parser.add_argument(
        "--cadence",
        type=int,
        required=True,
        help="Days between articles (1-7)",
    )
    schedule_parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Treat this UTC date as today (ISO format: YYYY-MM-DD)",
    )
    _add_config_arguments(schedule_parser)
    schedule_parser.set_defaults(func=schedule)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
