# CLI argument parsing for reelscroll

import argparse


def build_parser():
    p = argparse.ArgumentParser(
        description="Search OMDb for movies and scroll through the results."
    )
    p.add_argument(
        "--api-key", "-k",
        dest="api_key",
        help="OMDb API key (overrides OMDB_API_KEY and the settings file)",
    )
    p.add_argument(
        "--config", "-c",
        dest="config",
        default=None,
        help="Path to settings.yml (default: ~/.config/reelscroll/settings.yml)",
    )
    p.add_argument(
        "--base-url",
        dest="base_url",
        help="OMDb endpoint root",
    )
    p.add_argument(
        "--timeout",
        dest="timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds",
    )
    p.add_argument(
        "--log-file", "-l",
        dest="log_file",
        help="Path to save a complete log of output",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log at DEBUG level (and to stderr in one-shot mode)",
    )
    # One-shot mode
    p.add_argument(
        "--query", "-q",
        dest="query",
        help="Print one page of results for this query and exit",
    )
    p.add_argument(
        "--page", "-p",
        dest="page",
        type=int,
        default=1,
        help="Page number for --query (default 1)",
    )
    p.add_argument(
        "--tui", "-t",
        action="store_true",
        help="Launch the interactive search screen even when --query is given",
    )
    return p


def parse_args(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    if args.page < 1:
        p.error("--page must be 1 or greater")
    if args.query is not None and not args.query.strip():
        p.error("--query must not be blank")
    return args
