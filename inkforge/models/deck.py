from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from inkforge.config import DECK_SIZE, DEFAULT_RETRIES, MAX_COPIES
from inkforge.models.card import Card
from inkforge.models.ink import Ink, InvalidInkSelectionError, parse_ink_pair


class GenerationOutcome(str, Enum):
    """Terminal state of one deck generation run."""

    SUCCESS = "success"
    EXHAUSTED = "exhausted"
    EMPTY_POOL = "empty_pool"


@dataclass(frozen=True)
class DeckProfile:
    """
    Read-only summary of a partial deck.

    Requirement checks only care which distinct printings are present, so the
    profile keeps one entry per card id plus the copy counts. Build one per
    pick and share it across every candidate's weight evaluation.
    """

    size: int
    copies: dict[str, int]
    cards: tuple[Card, ...]

    @classmethod
    def from_cards(cls, deck: Iterable[Card]) -> "DeckProfile":
        deck = list(deck)
        distinct: dict[str, Card] = {}
        for card in deck:
            distinct.setdefault(card.id, card)
        return cls(
            size=len(deck),
            copies=dict(Counter(card.id for card in deck)),
            cards=tuple(distinct.values()),
        )

    def count(self, card_id: str) -> int:
        """Copies of a printing in the deck."""
        return self.copies.get(card_id, 0)

    def others(self, card: Card) -> Iterator[Card]:
        """Distinct printings in the deck other than `card` itself."""
        return (other for other in self.cards if other.id != card.id)


def as_profile(deck: "Iterable[Card] | DeckProfile") -> DeckProfile:
    return deck if isinstance(deck, DeckProfile) else DeckProfile.from_cards(deck)


@dataclass
class DeckGenerationRequest:
    """Parameters for deck generation."""

    inks: frozenset[Ink]
    seed_deck: list[Card] = field(default_factory=list)
    retries: int = DEFAULT_RETRIES

    def __post_init__(self) -> None:
        self.inks = parse_ink_pair(self.inks)
        if self.retries < 0:
            raise ValueError(f"retries must be non-negative, got {self.retries}")
        if len(self.seed_deck) > DECK_SIZE:
            raise ValueError(
                f"Seed deck has {len(self.seed_deck)} cards, more than the {DECK_SIZE} allowed"
            )

        off_ink = [card.title for card in self.seed_deck if not self.inks.issuperset(card.inks)]
        if off_ink:
            raise InvalidInkSelectionError(
                f"Seed deck has cards outside the requested inks: {', '.join(off_ink)}"
            )

        over_cap = sorted(
            card_id
            for card_id, copies in Counter(card.id for card in self.seed_deck).items()
            if copies > MAX_COPIES
        )
        if over_cap:
            raise ValueError(
                f"Seed deck has more than {MAX_COPIES} copies of: {', '.join(over_cap)}"
            )


@dataclass
class GeneratedDeck:
    """A deck produced by the generator, complete or not."""

    cards: list[Card]
    inks: frozenset[Ink]
    outcome: GenerationOutcome
    retries_used: int = 0
    rounds: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def total_cards(self) -> int:
        return len(self.cards)

    @property
    def is_complete(self) -> bool:
        """True if the deck reached full size."""
        return self.outcome is GenerationOutcome.SUCCESS and len(self.cards) == DECK_SIZE

    def count(self, card_id: str) -> int:
        return sum(1 for card in self.cards if card.id == card_id)

    def quantities(self) -> dict[str, int]:
        """Copies per card id, in first-seen order."""
        return dict(Counter(card.id for card in self.cards))

    def inks_present(self) -> set[Ink]:
        return {ink for card in self.cards for ink in card.inks}
