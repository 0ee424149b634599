"""
Card database service.

Downloads the Lorcast card catalog and loads it into Card records with their
requirement sets derived.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from inkforge.config import settings
from inkforge.models.card import Card
from inkforge.parsers.lorcast import CardParseError, parse_card
from inkforge.services.requirements import derive_requirements

logger = logging.getLogger(__name__)

# The search endpoint pages by query; every card costs between 0 and 10
CARD_COSTS = range(0, 11)


class CatalogDownloadError(Exception):
    """Raised when the catalog cannot be fetched."""


def default_catalog_path() -> Path:
    return Path(settings.catalog_path)


async def download_card_database(
    output_path: Path | None = None,
    base_url: str | None = None,
) -> Path:
    """
    Download the full Lorcast catalog, one cost bucket at a time.

    Args:
        output_path: Where to save the file. Defaults to settings.catalog_path
        base_url: API root. Defaults to settings.lorcast_api_url

    Returns:
        Path to the written JSON list of card records

    Raises:
        CatalogDownloadError: If any request fails
    """
    if output_path is None:
        output_path = default_catalog_path()
    if base_url is None:
        base_url = settings.lorcast_api_url

    output_path.parent.mkdir(parents=True, exist_ok=True)

    records: list[dict[str, Any]] = []
    try:
        async with httpx.AsyncClient(
            timeout=30.0,
            headers={"User-Agent": f"{settings.app_name}/1.0"},
        ) as client:
            for cost in CARD_COSTS:
                response = await client.get(
                    f"{base_url}/cards/search", params={"q": f"cost:{cost}"}
                )
                response.raise_for_status()
                results = response.json().get("results", [])
                logger.debug("Fetched %d cards of cost %d", len(results), cost)
                records.extend(results)
    except httpx.HTTPStatusError as e:
        raise CatalogDownloadError(
            f"Failed to download catalog: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise CatalogDownloadError(f"Failed to download catalog: {e}") from e

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(records, f)

    return output_path


def read_card_records(path: Path) -> list[dict[str, Any]]:
    """
    Read raw card records from a catalog file.

    Accepts either a JSON list or a search response object with `results`.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid catalog JSON
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Card catalog not found at {path}. "
            "Run `python -m inkforge.jobs.download_cards` first."
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Card catalog at {path} is corrupted: {e}") from e

    if isinstance(data, dict):
        data = data.get("results")
    if not isinstance(data, list):
        raise ValueError(f"Card catalog at {path} is corrupted: expected a list of cards")

    return data


def build_catalog(
    records: list[dict[str, Any]],
    legality_format: str | None = None,
) -> list[Card]:
    """
    Parse records into Cards and derive their requirement sets.

    Unparseable records are skipped. When the same id appears twice the
    first record wins.

    Args:
        records: Raw Lorcast card objects
        legality_format: If given, drop cards not legal in this format
    """
    cards: dict[str, Card] = {}
    for record in records:
        try:
            card = parse_card(record)
        except CardParseError as e:
            logger.warning("Skipping card record: %s", e)
            continue
        cards.setdefault(card.id, card)

    catalog = list(cards.values())
    if legality_format:
        catalog = [card for card in catalog if card.is_legal_in(legality_format)]

    return derive_requirements(catalog)


def load_card_database(
    path: Path | None = None,
    legality_format: str | None = None,
) -> list[Card]:
    """
    Load the catalog from disk.

    Args:
        path: Catalog JSON file. Defaults to settings.catalog_path
        legality_format: If given, keep only cards legal in this format

    Returns:
        Cards in file order, with requirement sets derived

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        ValueError: If the catalog file is corrupted
    """
    if path is None:
        path = default_catalog_path()

    catalog = build_catalog(read_card_records(path), legality_format)
    logger.info("Loaded %d cards from %s", len(catalog), path)
    return catalog
