"""
Generate a deck from the local card catalog.

    python -m inkforge.jobs.generate_deck --inks amber steel
    python -m inkforge.jobs.generate_deck --random-inks --seed 7 --format list
"""

import argparse
import logging
import random
from pathlib import Path

from inkforge.config import settings
from inkforge.models.deck import DeckGenerationRequest
from inkforge.models.ink import Ink, parse_ink_pair
from inkforge.services.card_database import load_card_database
from inkforge.services.deck_formatter import export_deck_list, format_generated_deck
from inkforge.services.deck_generator import generate_deck

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a two-ink deck")
    ink_group = parser.add_mutually_exclusive_group(required=True)
    ink_group.add_argument(
        "--inks",
        nargs=2,
        metavar="INK",
        help=f"Two inks ({', '.join(ink.value.lower() for ink in Ink)})",
    )
    ink_group.add_argument(
        "--random-inks",
        action="store_true",
        help="Pick a random ink pair",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help=f"Catalog JSON file (default: {settings.catalog_path})",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=settings.default_retries,
        help=f"Regeneration rounds allowed (default: {settings.default_retries})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible deck",
    )
    parser.add_argument(
        "--legal-only",
        action="store_true",
        help=f"Only use cards legal in the '{settings.legality_format}' format",
    )
    parser.add_argument(
        "--format",
        choices=["markdown", "list"],
        default="markdown",
        help="Output format (default: markdown)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Returns:
        0 for a complete deck, 1 for a short or empty one
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rng = random.Random(args.seed)
    try:
        if args.random_inks:
            inks = frozenset(rng.choice(Ink.pairs()))
        else:
            inks = parse_ink_pair(args.inks)
        request = DeckGenerationRequest(inks=inks, retries=args.retries)
    except ValueError as e:
        parser.error(str(e))

    catalog = load_card_database(
        args.catalog,
        legality_format=settings.legality_format if args.legal_only else None,
    )
    deck = generate_deck(request, catalog, rng=rng)

    if args.format == "list":
        print(export_deck_list(deck))
    else:
        print(format_generated_deck(deck))

    if not deck.is_complete:
        logger.warning("Deck is incomplete: %d cards", deck.total_cards)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
