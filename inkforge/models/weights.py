"""
Tunable constants for the card weight function.

Every multiplier the weight function applies lives here so a caller (or a
test) can swap one rule's magnitude without touching the scoring code:

    strict = replace(DEFAULT_WEIGHT_CONFIG, late_deck_suppression=0.0)
"""

from dataclasses import dataclass, field

from inkforge.config import LATE_DECK_THRESHOLD


def _default_type_multipliers() -> dict[str, float]:
    return {
        "Character": 0.7,
        "Action": 0.2,
        "Item": 0.05,
        "Location": 0.05,
    }


def _default_type_quotas() -> dict[str, int]:
    # Soft ceilings per secondary type
    return {
        "Song": 8,
        "Item": 4,
        "Location": 6,
        "Action": 12,
    }


def _default_synergy_boosts() -> dict[str, float]:
    return {
        "keywords": 4.41,
        "classifications": 4.41,
        "types": 4.41,
        "card_names": 4.41,
    }


def _default_phrase_multipliers() -> dict[str, float]:
    # Checked against sanitized text; "draw" is handled separately
    return {
        "banish": 1.3,
        "banish all": 20.0,
        "return": 1.1,
        "into your inkwell": 1.2,
    }


@dataclass(frozen=True)
class WeightConfig:
    """
    Magnitudes used by `inkforge.services.weight_calculator`.

    Attributes:
        cost_ceiling: Base weight is (cost_ceiling - cost) ** cost_exponent
        cost_exponent: Steepness of the cheap-card preference
        min_base_weight: Floor for the cost curve
        inkwell_multiplier: Applied to inkable cards
        lore_base: Base weight is multiplied by lore_base ** lore
        ability_multiplier: Applied when the card has ability text
        no_ability_multiplier: Applied when it has none
        type_multipliers: Per-type factor, one applied for each type the card holds
        type_quotas: Soft ceiling per secondary type
        quota_growth: Base of the quota boost, raised to the number of other
            deck cards requiring that type
        synergy_boosts: Per requirement dimension, applied when satisfied
        late_deck_threshold: Deck size at which unmet requirements are suppressed
        late_deck_suppression: Factor for unmet cards in a late deck
        shift_anchor_boost: For a cheaper same-name printing of a shift card in the deck
        shift_ready_boost: For a shift card whose shift requirement is met
        song_match_boost: For a song costing exactly a singer's threshold
        song_shortfall_growth: Raised to the number of singer thresholds no song covers yet
        song_under_threshold_boost: For a song cheaper than some singer's threshold
        repeat_base: Repeat factor is (repeat_base - copies) ** repeat_exponent
        repeat_exponent: Steepness of the repeat suppression
        draw_bonus_per_card: Draw effects multiply by 1 + bonus * cards drawn
        phrase_multipliers: Text fragment -> multiplier
        lore_gain_bonus: Added per point of "gain N lore"
    """

    cost_ceiling: float = 10.0
    cost_exponent: float = 2.0
    min_base_weight: float = 1.0
    inkwell_multiplier: float = 1.2
    lore_base: float = 2.0
    ability_multiplier: float = 1.5
    no_ability_multiplier: float = 0.5
    type_multipliers: dict[str, float] = field(default_factory=_default_type_multipliers)

    type_quotas: dict[str, int] = field(default_factory=_default_type_quotas)
    quota_growth: float = 2.1

    synergy_boosts: dict[str, float] = field(default_factory=_default_synergy_boosts)

    late_deck_threshold: int = LATE_DECK_THRESHOLD
    late_deck_suppression: float = 0.000001

    shift_anchor_boost: float = 100.0
    shift_ready_boost: float = 1000.0

    song_match_boost: float = 10.0
    song_shortfall_growth: float = 2.1
    song_under_threshold_boost: float = 1.2

    repeat_base: float = 10.0
    repeat_exponent: float = 2.0

    draw_bonus_per_card: float = 0.4
    phrase_multipliers: dict[str, float] = field(default_factory=_default_phrase_multipliers)
    lore_gain_bonus: float = 5.0


DEFAULT_WEIGHT_CONFIG = WeightConfig()
