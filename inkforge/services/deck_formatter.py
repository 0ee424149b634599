"""
Generated deck formatting.

Sorting and text rendering only; nothing here changes deck contents.
"""

from collections import Counter

from inkforge.models.card import ACTION_TYPE, CHARACTER_TYPE, ITEM_TYPE, LOCATION_TYPE, Card
from inkforge.models.deck import GeneratedDeck
from inkforge.models.ink import Ink

TYPE_ORDER = (CHARACTER_TYPE, ACTION_TYPE, ITEM_TYPE, LOCATION_TYPE)

# Costs at or above this share the last curve bucket
CURVE_CAP = 7


def _primary_type_rank(card: Card) -> int:
    for rank, type_name in enumerate(TYPE_ORDER):
        if card.has_type(type_name):
            return rank
    return len(TYPE_ORDER)


def sort_deck(cards: list[Card], ink_order: list[Ink] | None = None) -> list[Card]:
    """
    Sort for display: ink, then type (Character, Action, Item, Location),
    then cost, then name.
    """
    if ink_order is None:
        ink_order = list(Ink)

    def ink_rank(card: Card) -> int:
        return ink_order.index(card.ink) if card.ink in ink_order else len(ink_order)

    return sorted(
        cards,
        key=lambda card: (ink_rank(card), _primary_type_rank(card), card.cost, card.title),
    )


def cost_curve(cards: list[Card]) -> dict[int, int]:
    """Cards per cost bucket (CURVE_CAP means that cost or more)."""
    curve = dict.fromkeys(range(CURVE_CAP + 1), 0)
    for card in cards:
        curve[min(card.cost, CURVE_CAP)] += 1
    return curve


def type_counts(cards: list[Card]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for card in cards:
        counts.update(card.types)
    return dict(counts)


def _grouped(cards: list[Card]) -> list[tuple[Card, int]]:
    """(card, copies) pairs in display order."""
    copies = Counter(card.id for card in cards)
    seen: set[str] = set()
    grouped: list[tuple[Card, int]] = []
    for card in sort_deck(cards):
        if card.id in seen:
            continue
        seen.add(card.id)
        grouped.append((card, copies[card.id]))
    return grouped


def format_generated_deck(deck: GeneratedDeck) -> str:
    """Format a generated deck for display."""
    inks = " / ".join(ink.value for ink in Ink if ink in deck.inks)
    lines = [f"# {inks} Deck\n"]

    if deck.warnings:
        lines.append("**Warnings:**")
        for warning in deck.warnings:
            lines.append(f"- {warning}")
        lines.append("")

    lines.append(f"**Outcome:** {deck.outcome.value}")
    lines.append(f"**Total Cards:** {deck.total_cards}")
    lines.append(f"**Rounds:** {deck.rounds} ({deck.retries_used} retries)")

    curve_items = [(cost, count) for cost, count in cost_curve(deck.cards).items() if count > 0]
    if curve_items:
        curve_str = " | ".join(
            f"{cost}{'+' if cost == CURVE_CAP else ''}:{count}" for cost, count in curve_items
        )
        lines.append(f"**Cost Curve:** {curve_str}")

    types = type_counts(deck.cards)
    if types:
        type_str = " | ".join(f"{name}:{count}" for name, count in sorted(types.items()))
        lines.append(f"**Types:** {type_str}")
    lines.append("")

    current_ink: Ink | None = None
    for card, qty in _grouped(deck.cards):
        if card.ink != current_ink:
            if current_ink is not None:
                lines.append("")
            lines.append(f"## {card.ink.value}")
            current_ink = card.ink
        lines.append(f"- {qty}x {card.title} ({card.cost})")

    return "\n".join(lines)


def export_deck_list(deck: GeneratedDeck) -> str:
    """Export as "<qty> <title>" lines, the usual deck list import format."""
    return "\n".join(f"{qty} {card.title}" for card, qty in _grouped(deck.cards))
