"""
Card requirements.

Derives, once per catalog load, which keywords, classifications, types and
card names each card's ability text depends on, and checks whether a deck
supports a card.

A card's requirements are met by a deck when every non-empty dimension is
satisfied by some *other* printing in the deck:

- keywords / types: every required tag appears on another card
- classifications / card names: any required tag appears on another card
- shift: another printing sharing a name costs strictly less (or the
  universal shift enabler is present)
- sing: a song costing no more than the singer's threshold is present
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from inkforge.models.card import (
    CHARACTER_TYPE,
    ITEM_TYPE,
    SONG_TYPE,
    UNIVERSAL_SHIFT_ID,
    Card,
)
from inkforge.models.deck import DeckProfile, as_profile

# "gains Evasive", "gain Challenger +2": granting a keyword is not depending on it
GRANT_PATTERN = re.compile(r"gains? \w+(\s\+\d+)?")

ITEM_REFERENCE_PATTERN = re.compile(r"(?:chosen item of yours|your items?|reveal an item)")

REQUIREMENT_DIMENSIONS = ("keywords", "classifications", "types", "card_names")


@dataclass(frozen=True)
class CatalogVocabulary:
    """Every tag and name that appears anywhere in a catalog."""

    keywords: frozenset[str]
    classifications: frozenset[str]
    types: frozenset[str]
    card_names: frozenset[str]

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "CatalogVocabulary":
        cards = list(cards)
        return cls(
            keywords=frozenset(k for card in cards for k in card.keywords),
            classifications=frozenset(c for card in cards for c in card.classifications),
            types=frozenset(t for card in cards for t in card.types),
            card_names=frozenset(card.name for card in cards),
        )


class _Matchers:
    """Compiled patterns for one vocabulary, reused across every card."""

    def __init__(self, vocabulary: CatalogVocabulary) -> None:
        self.keywords = [
            (keyword, re.compile(rf"\b{re.escape(keyword.lower())}\b"))
            for keyword in sorted(vocabulary.keywords)
        ]
        self.classifications = [
            (
                classification,
                re.compile(rf"\b{re.escape(classification.lower())}(?:e?s)?\b"),
                f"challenges a {classification.lower()}",
            )
            for classification in sorted(vocabulary.classifications)
        ]
        self.types = [
            (type_name, re.compile(rf"\b{re.escape(type_name.lower())}s?\b"))
            for type_name in sorted(vocabulary.types)
            if type_name != CHARACTER_TYPE
        ]
        self.card_names = [
            (name, re.compile(rf"(?<=\s){re.escape(name.lower())}(?!\w)"))
            for name in sorted(vocabulary.card_names)
        ]


def _derive_for_card(card: Card, matchers: _Matchers) -> Card:
    text = card.sanitized_text
    if not text:
        return card.with_requirements(frozenset(), frozenset(), frozenset(), frozenset())

    keyword_text = GRANT_PATTERN.sub("", text)
    keywords = {kw for kw, pattern in matchers.keywords if pattern.search(keyword_text)}

    classifications = {
        classification
        for classification, pattern, challenge_phrase in matchers.classifications
        if pattern.search(text.replace(challenge_phrase, ""))
    }

    types: set[str] = set()
    for type_name, pattern in matchers.types:
        if type_name == ITEM_TYPE:
            if ITEM_REFERENCE_PATTERN.search(text):
                types.add(type_name)
        elif pattern.search(text):
            types.add(type_name)

    own_names = {card.name, *card.name_parts}
    card_names = {
        name
        for name, pattern in matchers.card_names
        if name not in own_names and pattern.search(text)
    }
    if card.can_shift:
        card_names.update(card.name_parts)

    return card.with_requirements(
        frozenset(keywords),
        frozenset(classifications),
        frozenset(types),
        frozenset(card_names),
    )


def derive_requirements(
    cards: list[Card],
    vocabulary: CatalogVocabulary | None = None,
) -> list[Card]:
    """
    Populate every card's required-sets from its sanitized ability text.

    Args:
        cards: The full catalog
        vocabulary: Tags and names to look for; defaults to the catalog's own

    Returns:
        New Card objects, in the same order, carrying their required-sets
    """
    if vocabulary is None:
        vocabulary = CatalogVocabulary.from_cards(cards)
    matchers = _Matchers(vocabulary)
    return [_derive_for_card(card, matchers) for card in cards]


# =============================================================================
# REQUIREMENT CHECKS
# =============================================================================


def meets_required_keywords(card: Card, deck: Iterable[Card] | DeckProfile) -> bool:
    if not card.required_keywords:
        return True
    present = {kw for other in as_profile(deck).others(card) for kw in other.keywords}
    return card.required_keywords <= present


def meets_required_classifications(card: Card, deck: Iterable[Card] | DeckProfile) -> bool:
    if not card.required_classifications:
        return True
    return any(
        other.classifications & card.required_classifications
        for other in as_profile(deck).others(card)
    )


def meets_required_types(card: Card, deck: Iterable[Card] | DeckProfile) -> bool:
    if not card.required_types:
        return True
    present = {t for other in as_profile(deck).others(card) for t in other.types}
    return card.required_types <= present


def meets_required_card_names(card: Card, deck: Iterable[Card] | DeckProfile) -> bool:
    if not card.required_card_names:
        return True
    return any(
        other.name in card.required_card_names
        or not card.required_card_names.isdisjoint(other.name_parts)
        for other in as_profile(deck).others(card)
    )


def meets_shift_requirement(card: Card, deck: Iterable[Card] | DeckProfile) -> bool:
    """A shift card needs a cheaper printing sharing one of its names."""
    if not card.can_shift:
        return True
    names = set(card.name_parts)
    for other in as_profile(deck).others(card):
        if other.id == UNIVERSAL_SHIFT_ID:
            return True
        if other.cost < card.cost and not names.isdisjoint(other.name_parts):
            return True
    return False


def meets_sing_requirement(card: Card, deck: Iterable[Card] | DeckProfile) -> bool:
    """A singer needs a song it is able to sing."""
    if not card.is_singer:
        return True
    threshold = card.effective_sing_cost
    return any(
        other.has_type(SONG_TYPE) and other.cost <= threshold
        for other in as_profile(deck).others(card)
    )


_CHECKS = (
    ("keywords", meets_required_keywords),
    ("classifications", meets_required_classifications),
    ("types", meets_required_types),
    ("card_names", meets_required_card_names),
    ("shift", meets_shift_requirement),
    ("sing", meets_sing_requirement),
)


def unmet_requirements(card: Card, deck: Iterable[Card] | DeckProfile) -> list[str]:
    """Names of the requirement checks the deck fails for this card."""
    profile = as_profile(deck)
    return [name for name, check in _CHECKS if not check(card, profile)]


def deck_meets_requirements(card: Card, deck: Iterable[Card] | DeckProfile) -> bool:
    """True if the deck supports every requirement the card declares."""
    profile = as_profile(deck)
    return all(check(card, profile) for _, check in _CHECKS)


def satisfied_dimensions(card: Card, deck: Iterable[Card] | DeckProfile) -> list[str]:
    """
    Requirement dimensions the card declares and the deck already satisfies.

    Only non-empty required-sets are considered, so a card with no
    requirements returns an empty list.
    """
    profile = as_profile(deck)
    required = {
        "keywords": card.required_keywords,
        "classifications": card.required_classifications,
        "types": card.required_types,
        "card_names": card.required_card_names,
    }
    return [
        name
        for name, check in _CHECKS[:4]
        if required[name] and check(card, profile)
    ]
