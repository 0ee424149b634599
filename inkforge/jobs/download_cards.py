"""
Download the Lorcast card catalog.

Run this job before generating decks:

    python -m inkforge.jobs.download_cards
    python -m inkforge.jobs.download_cards --output /tmp/cards.json
"""

import argparse
import asyncio
import logging
from collections import Counter
from pathlib import Path

from inkforge.config import settings
from inkforge.models.ink import Ink
from inkforge.services.card_database import (
    CatalogDownloadError,
    default_catalog_path,
    download_card_database,
    load_card_database,
)

logger = logging.getLogger(__name__)


def summarize_catalog(path: Path) -> tuple[int, dict[Ink, int]]:
    """
    Load a freshly written catalog.

    Returns:
        Total card count and cards per ink (dual-ink cards count under each ink)
    """
    catalog = load_card_database(path)
    per_ink: Counter[Ink] = Counter(ink for card in catalog for ink in card.inks)
    return len(catalog), {ink: per_ink[ink] for ink in Ink}


async def run_download(output_path: Path | None = None, base_url: str | None = None) -> Path:
    """
    Download the catalog and check that it loads.

    Raises:
        CatalogDownloadError: If the Lorcast API cannot be reached
    """
    target = output_path or default_catalog_path()
    logger.info("Downloading Lorcast card catalog to %s...", target)

    try:
        path = await download_card_database(output_path=target, base_url=base_url)
    except CatalogDownloadError as e:
        logger.error("Failed to download card catalog: %s", e)
        raise

    total, counts = summarize_catalog(path)
    logger.info(
        "Catalog ready: %d cards (%s)",
        total,
        ", ".join(f"{ink.value} {count}" for ink, count in counts.items()),
    )
    return path


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns 0 on success, 1 if the download failed."""
    parser = argparse.ArgumentParser(description="Download the Lorcast card catalog")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=f"Where to write the catalog (default: {settings.catalog_path})",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help=f"Lorcast API root (default: {settings.lorcast_api_url})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(run_download(args.output, args.api_url))
    except CatalogDownloadError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
