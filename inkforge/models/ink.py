from collections.abc import Iterable
from enum import Enum
from itertools import combinations


class InvalidInkSelectionError(ValueError):
    """Raised when an ink selection is not a pair of distinct, known inks."""


class Ink(str, Enum):
    """The six ink colors. A deck is built from exactly two."""

    AMBER = "Amber"
    AMETHYST = "Amethyst"
    EMERALD = "Emerald"
    RUBY = "Ruby"
    SAPPHIRE = "Sapphire"
    STEEL = "Steel"

    @classmethod
    def parse(cls, value: "str | Ink") -> "Ink":
        """
        Resolve an ink from its name, case-insensitively.

        Raises:
            InvalidInkSelectionError: If the name is not one of the six inks
        """
        if isinstance(value, Ink):
            return value

        for ink in cls:
            if ink.value.lower() == value.strip().lower():
                return ink

        raise InvalidInkSelectionError(
            f"Unknown ink '{value}'. Must be one of: {', '.join(i.value for i in cls)}"
        )

    @classmethod
    def pairs(cls) -> list[tuple["Ink", "Ink"]]:
        """All fifteen two-ink combinations, in declaration order."""
        return list(combinations(cls, 2))


def parse_ink_pair(values: "Iterable[str | Ink]") -> frozenset[Ink]:
    """
    Validate a requested ink selection.

    Args:
        values: Ink names or Ink members

    Returns:
        Frozen set of exactly two inks

    Raises:
        InvalidInkSelectionError: If the selection is not two distinct known inks
    """
    inks = frozenset(Ink.parse(v) for v in values)
    if len(inks) != 2:
        raise InvalidInkSelectionError(
            f"A deck is built from exactly two distinct inks, got {len(inks)}"
        )
    return inks
