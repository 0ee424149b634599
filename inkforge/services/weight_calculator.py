"""
Card weight calculation.

Scores how desirable a candidate card is for a partial deck. The weight is a
product of factors (cost curve, card quality, synergy with what is already in
the deck, copy count) plus an additive bonus for "gain N lore" effects.

INVARIANT: Weights are never negative. A weight of 0 means the card cannot
be picked this round; a card already at the copy cap always weighs 0.
"""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from inkforge.config import MAX_COPIES
from inkforge.models.card import CHARACTER_TYPE, SONG_TYPE, Card
from inkforge.models.deck import DeckProfile, as_profile
from inkforge.models.weights import DEFAULT_WEIGHT_CONFIG, WeightConfig
from inkforge.services.requirements import (
    deck_meets_requirements,
    meets_shift_requirement,
    satisfied_dimensions,
)

DRAW_PATTERN = re.compile(r"draws? (a|an|x|\d+) cards?")
LORE_GAIN_PATTERN = re.compile(r"gain (\d+) lore")


@dataclass(frozen=True)
class WeightBreakdown:
    """
    Every factor that went into one card's weight.

    `factors` are multiplied together in insertion order; `bonus` is added
    afterwards. Used for diagnostic display next to a generated deck.
    """

    card_id: str
    factors: dict[str, float] = field(default_factory=dict)
    bonus: float = 0.0

    @property
    def product(self) -> float:
        return math.prod(self.factors.values())

    @property
    def total(self) -> float:
        return max(self.product + self.bonus, 0.0)


# =============================================================================
# FACTORS
# =============================================================================


def _base_factors(card: Card, config: WeightConfig) -> dict[str, float]:
    """Deck-independent desirability of the card itself."""
    factors: dict[str, float] = {}

    # Cheap cards are better
    headroom = max(config.cost_ceiling - card.cost, 0.0)
    factors["cost"] = max(headroom**config.cost_exponent, config.min_base_weight)

    if card.inkwell:
        factors["inkwell"] = config.inkwell_multiplier

    if card.lore > 0:
        factors["lore"] = config.lore_base**card.lore

    factors["ability"] = config.ability_multiplier if card.text else config.no_ability_multiplier

    for type_name in sorted(card.types):
        multiplier = config.type_multipliers.get(type_name)
        if multiplier is not None:
            factors[f"type:{type_name}"] = multiplier

    return factors


def _quota_factors(card: Card, profile: DeckProfile, config: WeightConfig) -> dict[str, float]:
    """
    Boost secondary types while the deck is under their soft ceiling.

    The boost grows with the number of other deck cards that list the type
    as a requirement, so picks go to types the deck actually needs.
    """
    factors: dict[str, float] = {}
    for type_name, ceiling in config.type_quotas.items():
        if not card.has_type(type_name):
            continue

        in_deck = sum(
            profile.count(other.id) for other in profile.cards if other.has_type(type_name)
        )
        if in_deck >= ceiling:
            continue

        demand = sum(
            profile.count(other.id)
            for other in profile.others(card)
            if type_name in other.required_types
        )
        if demand:
            factors[f"quota:{type_name}"] = config.quota_growth**demand
    return factors


def _shift_factors(card: Card, profile: DeckProfile, config: WeightConfig) -> dict[str, float]:
    factors: dict[str, float] = {}

    # Cheaper same-name printings are the foundation a shift card lands on
    if card.has_type(CHARACTER_TYPE):
        names = set(card.name_parts)
        for shifter in profile.others(card):
            if (
                shifter.can_shift
                and card.cost < shifter.cost
                and not names.isdisjoint(shifter.name_parts)
            ):
                factors["shift_anchor"] = config.shift_anchor_boost
                break

    if card.can_shift and meets_shift_requirement(card, profile):
        factors["shift_ready"] = config.shift_ready_boost

    return factors


def _song_factors(card: Card, profile: DeckProfile, config: WeightConfig) -> dict[str, float]:
    if not card.has_type(SONG_TYPE):
        return {}

    thresholds = {other.effective_sing_cost for other in profile.others(card) if other.is_singer}
    if not thresholds:
        return {}

    songs = [other for other in profile.cards if other.has_type(SONG_TYPE)]
    uncovered = sum(1 for threshold in thresholds if not any(s.cost <= threshold for s in songs))

    if card.cost in thresholds:
        return {"song_match": config.song_match_boost * config.song_shortfall_growth**uncovered}

    # Still singable if a cheaper singer replaces the current one
    if any(card.cost < threshold for threshold in thresholds):
        return {"song_under_threshold": config.song_under_threshold_boost}

    return {}


def _phrase_factors(card: Card, config: WeightConfig) -> dict[str, float]:
    text = card.sanitized_text
    if not text:
        return {}

    factors: dict[str, float] = {}

    draw = DRAW_PATTERN.search(text)
    if draw:
        amount = int(draw.group(1)) if draw.group(1).isdigit() else 1
        factors["draw"] = 1.0 + config.draw_bonus_per_card * amount

    for phrase, multiplier in config.phrase_multipliers.items():
        if phrase in text:
            factors[f"phrase:{phrase}"] = multiplier

    return factors


def _lore_gain_bonus(card: Card, config: WeightConfig) -> float:
    match = LORE_GAIN_PATTERN.search(card.sanitized_text)
    return int(match.group(1)) * config.lore_gain_bonus if match else 0.0


# =============================================================================
# PUBLIC API
# =============================================================================


def weight_breakdown(
    card: Card,
    deck: Iterable[Card] | DeckProfile,
    config: WeightConfig = DEFAULT_WEIGHT_CONFIG,
) -> WeightBreakdown:
    """
    Compute a card's weight against a partial deck, factor by factor.

    Args:
        card: Candidate card
        deck: Current partial deck (or a profile of it)
        config: Weight magnitudes

    Returns:
        WeightBreakdown whose `total` is the card's weight
    """
    profile = as_profile(deck)
    copies = profile.count(card.id)

    if copies >= MAX_COPIES:
        return WeightBreakdown(card_id=card.id, factors={"copy_cap": 0.0})

    factors = _base_factors(card, config)
    factors.update(_quota_factors(card, profile, config))

    for dimension in satisfied_dimensions(card, profile):
        factors[f"synergy:{dimension}"] = config.synergy_boosts.get(dimension, 1.0)

    if profile.size >= config.late_deck_threshold and not deck_meets_requirements(card, profile):
        factors["late_deck"] = config.late_deck_suppression

    factors.update(_shift_factors(card, profile, config))
    factors.update(_song_factors(card, profile, config))

    # Strictly decreasing in copies: (K - N) ** e for N in 0..3
    factors["repeat"] = max(config.repeat_base - copies, 0.0) ** config.repeat_exponent

    factors.update(_phrase_factors(card, config))

    return WeightBreakdown(
        card_id=card.id,
        factors=factors,
        bonus=_lore_gain_bonus(card, config),
    )


def calculate_weight(
    card: Card,
    deck: Iterable[Card] | DeckProfile,
    config: WeightConfig = DEFAULT_WEIGHT_CONFIG,
) -> float:
    """Weight of a candidate card for a partial deck. Never negative."""
    return weight_breakdown(card, deck, config).total
