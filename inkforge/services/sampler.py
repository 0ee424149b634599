"""
Weighted card sampler.

Picks one card from a candidate pool with probability proportional to its
weight against the current deck.
"""

import random
from collections.abc import Iterable, Sequence
from typing import Protocol

from inkforge.config import MAX_COPIES
from inkforge.models.card import Card
from inkforge.models.deck import DeckProfile, as_profile
from inkforge.models.weights import DEFAULT_WEIGHT_CONFIG, WeightConfig
from inkforge.services.weight_calculator import calculate_weight


class RandomSource(Protocol):
    """Anything exposing `random()` in [0, 1); `random.Random` qualifies."""

    def random(self) -> float: ...


class EmptyCandidatePoolError(AssertionError):
    """
    Raised when the sampler is asked to pick from nothing.

    The caller must check that at least one candidate is pickable before
    sampling; reaching this is a programming error, not a runtime outcome.
    """


# Process-wide source used when the caller does not supply one
_default_source = random.Random()


def weigh_candidates(
    candidates: Iterable[Card],
    deck: Iterable[Card] | DeckProfile,
    config: WeightConfig = DEFAULT_WEIGHT_CONFIG,
) -> list[tuple[Card, float]]:
    """
    Weigh every pickable candidate.

    Candidates at the copy cap or with a weight of 0 or less are dropped.

    Returns:
        (card, weight) pairs in candidate order
    """
    profile = as_profile(deck)
    weighted: list[tuple[Card, float]] = []
    for card in candidates:
        if profile.count(card.id) >= MAX_COPIES:
            continue
        weight = calculate_weight(card, profile, config)
        if weight > 0:
            weighted.append((card, weight))
    return weighted


def pick_weighted(
    weighted: Sequence[tuple[Card, float]],
    rng: RandomSource | None = None,
) -> Card:
    """
    Cumulative-weight selection over (card, weight) pairs.

    The draw is uniform over [0, total); the first card whose running sum
    reaches the draw is picked.

    Raises:
        EmptyCandidatePoolError: If there is nothing to pick from
    """
    total = sum(weight for _, weight in weighted)
    if not weighted or total <= 0:
        raise EmptyCandidatePoolError("Cannot sample from an empty candidate pool")

    source = rng if rng is not None else _default_source
    draw = source.random() * total

    cumulative = 0.0
    for card, weight in weighted:
        cumulative += weight
        if cumulative >= draw:
            return card

    # Float rounding can leave the sum a hair under the draw
    return weighted[-1][0]


def pick_card(
    candidates: Iterable[Card],
    deck: Iterable[Card] | DeckProfile,
    rng: RandomSource | None = None,
    config: WeightConfig = DEFAULT_WEIGHT_CONFIG,
) -> Card:
    """
    Pick one candidate for the deck, proportional to weight.

    Raises:
        EmptyCandidatePoolError: If no candidate is pickable
    """
    return pick_weighted(weigh_candidates(candidates, deck, config), rng)
