"""US Stock Screener - Main Entry Point with CLI Commands.

Supports:
- categories: List the available screening categories
- fetch: Run one category fetch without the UI
- app: Launch the Streamlit page
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from loguru import logger

from ai_screener.config.categories import CATEGORY_DEFINITIONS, Category
from ai_screener.config.settings import load_settings
from ai_screener.core.completion import GeminiCompletionClient
from ai_screener.core.exceptions import FetchError
from ai_screener.core.fetcher import StockFetcher
from ai_screener.core.log_setup import configure_logging

APP_SCRIPT = Path(__file__).parent / "app" / "main.py"


def cmd_categories(args: argparse.Namespace) -> None:
    """List the screening categories and their titles."""
    for category, definition in CATEGORY_DEFINITIONS.items():
        logger.info(f"  • {category.value}: {definition.title}")


def cmd_fetch(args: argparse.Namespace) -> None:
    """Fetch one category from Gemini and print the result."""
    settings = load_settings()
    category = Category(args.category)
    logger.info(f"=== Fetching {CATEGORY_DEFINITIONS[category].title} ===")

    client = GeminiCompletionClient(settings.api_key, model=args.model or settings.model)
    fetcher = StockFetcher(client, language=settings.analysis_language)

    try:
        stocks = asyncio.run(fetcher.fetch(category))
    except FetchError as e:
        logger.error(f"Fetch failed: {e} (cause: {e.__cause__})")
        sys.exit(1)

    if args.json:
        payload = [stock.model_dump(by_alias=True) for stock in stocks]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for stock in stocks:
        logger.info(
            f"{stock.ticker:<6} {stock.company_name} | "
            f"{stock.key_metric_label}: {stock.key_metric_value}"
        )
        logger.info(f"       {stock.analysis}")


def cmd_app(args: argparse.Namespace) -> None:
    """Launch the Streamlit page."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(APP_SCRIPT)]
    sys.exit(stcli.main())


def main(argv: list[str] | None = None) -> None:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="US Stock Screener - AI curated stock lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # Categories command
    parser_categories = subparsers.add_parser("categories", help="List screening categories")
    parser_categories.set_defaults(func=cmd_categories)

    # Fetch command
    parser_fetch = subparsers.add_parser("fetch", help="Fetch one category without the UI")
    parser_fetch.add_argument(
        "category",
        choices=[c.value for c in Category],
        help="Category to fetch",
    )
    parser_fetch.add_argument("--model", help="Override the Gemini model")
    parser_fetch.add_argument(
        "--json", action="store_true", help="Print the records as JSON instead of logging them"
    )
    parser_fetch.set_defaults(func=cmd_fetch)

    # App command
    parser_app = subparsers.add_parser("app", help="Launch the Streamlit page")
    parser_app.set_defaults(func=cmd_app)

    # Parse arguments and execute
    args = parser.parse_args(argv)
    configure_logging(load_settings().log_level)
    args.func(args)


if __name__ == "__main__":
    main()
