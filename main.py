"""CLI entry point for the advocate directory search."""

import argparse
import json
import logging
import sys

from src.core.config import Settings
from src.core.dataset import load_advocates
from src.core.formatting import describe_range, format_phone_number
from src.core.schemas import Advocate, ExperienceLevel, SearchRequest
from src.search.description import describe_search
from src.search.engine import evaluate

logger = logging.getLogger(__name__)


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def _add_search_args(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    def help_text(text: str) -> str:
        return argparse.SUPPRESS if suppress else text

    parser.add_argument("--term", default="", help=help_text("Free-text search term"))
    parser.add_argument("--city", default="", help=help_text("Filter by city (substring)"))
    parser.add_argument("--degree", default="", help=help_text("Filter by degree (substring)"))
    parser.add_argument(
        "--specialty",
        action="append",
        default=[],
        dest="specialties",
        help=help_text("Required specialty; repeat to require several"),
    )
    parser.add_argument(
        "--level",
        default="",
        type=str.lower,
        choices=[level.value for level in ExperienceLevel if level.value],
        help=help_text("Experience level bucket"),
    )
    parser.add_argument("--page", type=int, default=1, help=help_text("Page number (default: 1)"))
    parser.add_argument("--limit", type=int, default=None, help=help_text("Page size"))
    parser.add_argument(
        "--json",
        action="store_true",
        help=help_text("Print the API response body as JSON"),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Advocate directory search - serve the search API or run a search",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- search subcommand (default) ---
    search_parser = subparsers.add_parser("search", help="Run a single search")
    _add_common_args(search_parser)
    _add_search_args(search_parser)

    # --- serve subcommand ---
    serve_parser = subparsers.add_parser("serve", help="Serve the search API over HTTP")
    _add_common_args(serve_parser)
    serve_parser.add_argument("--host", help="Bind address (default: from settings)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: from settings)")

    # --- top-level flags for search when no subcommand given ---
    parser.add_argument("--config", default="config/settings.yaml", help=argparse.SUPPRESS)
    parser.add_argument("--verbose", "-v", action="store_true", help=argparse.SUPPRESS)
    _add_search_args(parser, suppress=True)

    args = parser.parse_args(argv)

    if args.command is None:
        args.command = "search"

    return args


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _format_row(advocate: Advocate) -> str:
    phone = format_phone_number(advocate.phone_number) or "Invalid phone number"
    return " | ".join([
        f"{advocate.first_name} {advocate.last_name}",
        advocate.city,
        advocate.degree,
        f"{advocate.years_of_experience} years",
        ", ".join(advocate.specialties),
        phone,
    ])


def cmd_search(args: argparse.Namespace, settings: Settings) -> None:
    """Handle search subcommand."""
    advocates = load_advocates(settings.data.path)
    fields = {
        "searchTerm": args.term,
        "city": args.city,
        "degree": args.degree,
        "specialties": args.specialties,
        "experienceLevel": args.level,
        "page": args.page,
        "limit": args.limit,
    }
    search = SearchRequest.model_validate(fields, context=settings.validation_context())
    result = evaluate(advocates, search)

    if args.json:
        print(json.dumps(result.to_response(), indent=2))
        return

    print(describe_search(search))
    if search.search_term:
        print(f"Searching for: {search.search_term}")
    if not result.data:
        print("No advocates found")
    for advocate in result.data:
        print(f"  {_format_row(advocate)}")
    print(describe_range(result.pagination))


def cmd_serve(args: argparse.Namespace, settings: Settings) -> None:
    """Handle serve subcommand."""
    import uvicorn

    from src.api.app import create_app

    advocates = load_advocates(settings.data.path)
    app = create_app(advocates, settings)
    host = args.host or settings.server.host
    port = args.port or settings.server.port
    logger.info("Serving %d advocates on http://%s:%d", len(advocates), host, port)
    uvicorn.run(app, host=host, port=port)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = Settings.from_yaml(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "serve":
            cmd_serve(args, settings)
        else:
            cmd_search(args, settings)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
