"""
Deck generation service.

Builds a 60-card, two-ink deck from the catalog by weighted random picks,
then repairs it by removing cards whose requirements the deck does not meet.

Each run moves through these states:
1. Fill: sample and append until the deck holds DECK_SIZE cards
2. Repair: remove every copy of each card with unmet requirements, repeated
   until a full pass removes nothing
3. Evaluate: a full deck is a success; a short deck is refilled from the
   surviving cards (with the inks actually left in it) until the retry
   budget runs out

The retry budget is the only thing bounding the fill/repair cycle.
"""

import logging
from collections.abc import Iterable

from inkforge.config import DECK_SIZE
from inkforge.models.card import Card
from inkforge.models.deck import (
    DeckGenerationRequest,
    DeckProfile,
    GeneratedDeck,
    GenerationOutcome,
)
from inkforge.models.ink import Ink
from inkforge.models.weights import DEFAULT_WEIGHT_CONFIG, WeightConfig
from inkforge.services.requirements import unmet_requirements
from inkforge.services.sampler import RandomSource, pick_weighted, weigh_candidates

logger = logging.getLogger(__name__)


def cards_of_inks(catalog: Iterable[Card], inks: Iterable[Ink]) -> list[Card]:
    """Cards whose every ink is among `inks`, in catalog order."""
    allowed = set(inks)
    return [card for card in catalog if allowed.issuperset(card.inks)]


def fill_deck(
    deck: list[Card],
    pool: list[Card],
    rng: RandomSource | None = None,
    config: WeightConfig = DEFAULT_WEIGHT_CONFIG,
) -> int:
    """
    Append weighted picks from `pool` until the deck is full.

    Stops early if no candidate is pickable (every card capped or weighing 0).

    Returns:
        Number of cards added
    """
    added = 0
    while len(deck) < DECK_SIZE:
        weighted = weigh_candidates(pool, DeckProfile.from_cards(deck), config)
        if not weighted:
            logger.warning(
                "No pickable cards left with %d/%d cards in deck", len(deck), DECK_SIZE
            )
            break
        deck.append(pick_weighted(weighted, rng))
        added += 1
    return added


def repair_deck(deck: list[Card]) -> list[Card]:
    """
    Remove cards whose requirements the deck does not meet, in place.

    Removing one card can break another card's requirement, so passes repeat
    until one removes nothing.

    Returns:
        One entry per printing removed, in removal order
    """
    removed: list[Card] = []
    while True:
        removed_this_pass = False
        for card in DeckProfile.from_cards(deck).cards:
            unmet = unmet_requirements(card, deck)
            if not unmet:
                continue
            logger.debug("Removing %s: unmet %s", card.title, ", ".join(unmet))
            deck[:] = [entry for entry in deck if entry.id != card.id]
            removed.append(card)
            removed_this_pass = True
        if not removed_this_pass:
            return removed


def generate_deck(
    request: DeckGenerationRequest,
    catalog: list[Card],
    rng: RandomSource | None = None,
    config: WeightConfig = DEFAULT_WEIGHT_CONFIG,
) -> GeneratedDeck:
    """
    Generate a deck for the requested inks.

    Args:
        request: Inks, optional seed deck and retry budget
        catalog: Every available card, with derived requirements
        rng: Random source; pass a seeded `random.Random` for reproducible decks
        config: Weight magnitudes

    Returns:
        GeneratedDeck. Short decks are returned as-is with outcome EXHAUSTED;
        an ink selection with no catalog cards yields an empty EMPTY_POOL deck.
    """
    warnings: list[str] = []
    deck = list(request.seed_deck)
    active_inks = set(request.inks)

    pool = cards_of_inks(catalog, active_inks)
    if not pool:
        ink_names = ", ".join(sorted(ink.value for ink in active_inks))
        logger.warning("No catalog cards match inks %s", ink_names)
        warnings.append(f"No cards available for inks {ink_names}")
        return GeneratedDeck(
            cards=[],
            inks=request.inks,
            outcome=GenerationOutcome.EMPTY_POOL,
            warnings=warnings,
        )

    retries_used = 0
    rounds = 0
    while True:
        rounds += 1
        logger.info(
            "Generation round %d: inks=%s, seed=%d cards, retries left=%d",
            rounds,
            "/".join(sorted(ink.value for ink in active_inks)),
            len(deck),
            request.retries - retries_used,
        )

        fill_deck(deck, pool, rng, config)
        removed = repair_deck(deck)
        if removed:
            logger.info(
                "Repair removed %d printings, %d cards remain", len(removed), len(deck)
            )

        if len(deck) == DECK_SIZE:
            return GeneratedDeck(
                cards=deck,
                inks=request.inks,
                outcome=GenerationOutcome.SUCCESS,
                retries_used=retries_used,
                rounds=rounds,
                warnings=warnings,
            )

        if retries_used >= request.retries:
            break

        retries_used += 1
        # Regenerate with the requested inks that survived repair
        surviving = {ink for card in deck for ink in card.inks}
        active_inks = (surviving & request.inks) or set(request.inks)
        pool = cards_of_inks(catalog, active_inks)
        if not pool:
            warnings.append("No cards available for the inks left in the deck")
            break

    logger.warning(
        "Retries exhausted after %d rounds with %d/%d cards", rounds, len(deck), DECK_SIZE
    )
    warnings.append(f"Could only build {len(deck)} of {DECK_SIZE} cards")
    return GeneratedDeck(
        cards=deck,
        inks=request.inks,
        outcome=GenerationOutcome.EXHAUSTED,
        retries_used=retries_used,
        rounds=rounds,
        warnings=warnings,
    )
