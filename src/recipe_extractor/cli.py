#!/usr/bin/env python3
"""
Command-line interface for recipe-extractor.
Extracts a recipe from a URL (or a saved copy of its page) and prints it as JSON.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import RecipeExtractorError
from .extractor import extract
from .fetcher import RecipeParser
from .models import RecipeDraft


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    logging.getLogger().setLevel(log_level)

    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


async def load_draft(args: argparse.Namespace) -> RecipeDraft:
    """Extract from the saved page if one was given, otherwise fetch the URL."""
    if args.html_file:
        html = Path(args.html_file).read_text(encoding="utf-8")
        logging.info(f"Read {len(html)} characters from {args.html_file}")
        return extract(html, args.url)

    async with RecipeParser() as parser:
        return await parser.parse_url(args.url)


async def main_async(args: argparse.Namespace) -> int:
    """Asynchronous main function to handle recipe extraction."""
    try:
        draft = await load_draft(args)
    except RecipeExtractorError as e:
        logging.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error reading input file: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = draft.model_dump_json(indent=2)
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        logging.info(f"Recipe saved to: {args.output}")
    else:
        print(output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    parser = argparse.ArgumentParser(
        description="Extract a structured recipe from a recipe web page"
    )

    parser.add_argument(
        "url",
        help="URL of the recipe page"
    )

    parser.add_argument(
        "--html-file",
        help="Saved copy of the page to read instead of fetching the URL"
    )

    parser.add_argument(
        "--output", "-o",
        help="File to write the recipe JSON to (default: stdout)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging with detailed information"
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    return asyncio.run(main_async(args))


if __name__ == "__main__":
    sys.exit(main())
