#!/usr/bin/env python3
"""
MTG Card Lookup CLI
Looks up Magic: The Gathering cards by exact name and prints a summary of each match.
"""

import argparse
import sys
from typing import List, Optional

from .config import DEFAULT_CARD_NAMES
from .orchestrator import CardLookupService
from .presenter import CardPresenter, make_console
from .tools.cards_api import CardsAPI

console = make_console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MTG Card Lookup - exact-name search against magicthegathering.io",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Look up the default example cards
  %(prog)s "Black Lotus"            # Single lookup
  %(prog)s Opt "Lightning Bolt"     # Several lookups, run in order
        """
    )

    parser.add_argument(
        "names",
        nargs="*",
        help=f"Card names to look up (default: {', '.join(DEFAULT_CARD_NAMES)})"
    )

    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: MTG_API_BASE_URL or https://api.magicthegathering.io)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also print how long each lookup took"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="MTG Card Lookup 1.0"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)
    names = args.names or list(DEFAULT_CARD_NAMES)

    cards_api = CardsAPI(base_url=args.base_url)
    service = CardLookupService(cards_api=cards_api, presenter=CardPresenter(console, verbose=args.verbose))
    try:
        service.run(names)
    except KeyboardInterrupt:
        console.print("\nInterrupted")
        sys.exit(130)
    finally:
        cards_api.close()


if __name__ == "__main__":
    main()
