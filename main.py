#  reelscroll main CLI: interactive search screen or one-shot result table
import sys

from loguru import logger

from reelscroll.modules.cli import parse_args
from reelscroll.modules.config import ConfigError, load_settings
from reelscroll.modules.logger import configure_logging
from reelscroll.modules.search import (
    SearchError,
    format_results_text,
    search_movies_sync,
    to_movie_summaries,
)


def run_query(settings, api_key, query, page):
    """Print one page of results; returns the process exit code."""
    try:
        response = search_movies_sync(
            api_key,
            query,
            page,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )
    except SearchError as e:
        logger.warning("One-shot search failed ({}): {}", e.kind, e)
        print(f"Error fetching search results: {e}", file=sys.stderr)
        return 1

    items = to_movie_summaries(response.movie_list)
    print(format_results_text(items, response.total_results, page))
    return 0


def main(argv=None):
    args = parse_args(argv)
    one_shot = args.query is not None and not args.tui

    # provisional sinks until the settings file has been read
    configure_logging(args.log_file, "DEBUG" if args.verbose else "INFO", console=args.verbose and one_shot)

    try:
        settings = load_settings(
            config_path=args.config,
            overrides={
                "api_key": args.api_key,
                "base_url": args.base_url,
                "timeout": args.timeout,
                "log_file": args.log_file,
                "log_level": "DEBUG" if args.verbose else None,
            },
        )
        api_key = settings.require_api_key()
    except ConfigError as e:
        print(f"[!] {e}", file=sys.stderr)
        sys.exit(2)

    configure_logging(settings.log_file, settings.log_level, console=args.verbose and one_shot)

    if one_shot:
        sys.exit(run_query(settings, api_key, args.query, args.page))

    from reelscroll.tui import ReelscrollApp

    logger.info("Starting search screen against {}", settings.base_url)
    ReelscrollApp(settings).run()


if __name__ == "__main__":
    main()
