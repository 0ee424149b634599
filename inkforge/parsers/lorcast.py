"""
Lorcast card record parser.

Turns the JSON objects returned by the Lorcast search API into `Card`
records, normalizing ability text for phrase matching.

API: https://lorcast.com/docs/api
"""

import re
from typing import Any, TypedDict

from inkforge.models.card import Card
from inkforge.models.ink import Ink, InvalidInkSelectionError

SINGER_PATTERN = re.compile(r"Singer (\d+)")
_SYMBOL_PATTERN = re.compile(r"{[^}]+}")
_REMINDER_PATTERN = re.compile(r"\([^)]*\)")
_WHITESPACE_PATTERN = re.compile(r"\s+")


class CardParseError(ValueError):
    """Raised when a catalog record cannot be turned into a Card."""


class LorcastCard(TypedDict, total=False):
    """The subset of a Lorcast card object we read."""

    id: str
    name: str
    version: str | None
    cost: int
    ink: str | None
    inks: list[str] | None
    inkwell: bool
    lore: int | None
    type: list[str]
    keywords: list[str]
    classifications: list[str] | None
    text: str | None
    legalities: dict[str, str]


def sanitize_text(text: str, keywords: frozenset[str] | set[str]) -> str:
    """
    Normalize ability text for phrase matching.

    Lines that open with one of the card's own keywords are keyword reminder
    lines ("Shift 5 (You may pay...)") and are dropped, as is any remaining
    parenthesised reminder text. The result is lower-cased with whitespace
    collapsed.
    """
    if not text:
        return ""

    kept: list[str] = []
    for line in text.split("\n"):
        words = line.split()
        if words and words[0].rstrip(":") in keywords:
            continue
        kept.append(line)

    sanitized = _REMINDER_PATTERN.sub("", " ".join(kept))
    sanitized = sanitized.replace("(", "").replace(")", "")
    return _WHITESPACE_PATTERN.sub(" ", sanitized).strip().lower()


def parse_sing_cost(text: str, keywords: frozenset[str]) -> int | None:
    """Value printed after "Singer", or None for non-singers."""
    if "Singer" not in keywords:
        return None
    match = SINGER_PATTERN.search(text or "")
    return int(match.group(1)) if match else None


def _int_field(raw: dict[str, Any], key: str) -> int:
    value = raw.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise CardParseError(f"Card {raw.get('id')!r} has non-numeric {key}: {value!r}")
    return int(value)


def parse_card(raw: LorcastCard | dict[str, Any]) -> Card:
    """
    Build a Card from one Lorcast record.

    Required-sets are left empty; they depend on the whole catalog and are
    derived by the catalog loader.

    Raises:
        CardParseError: If id or name is missing, a numeric field is not a
            number, or the ink is unknown
    """
    card_id = raw.get("id")
    name = raw.get("name")
    if not card_id or not name:
        raise CardParseError(f"Card record is missing id or name: {raw!r:.120}")

    ink_names = raw.get("inks") or [raw.get("ink")]
    try:
        inks = tuple(Ink.parse(ink) for ink in ink_names if ink)
    except InvalidInkSelectionError as e:
        raise CardParseError(f"Card {card_id!r}: {e}") from e
    if not inks:
        raise CardParseError(f"Card {card_id!r} has no ink")

    # Ability symbols such as {E} and {I} are matched lower-case
    text = _SYMBOL_PATTERN.sub(lambda m: m.group(0).lower(), raw.get("text") or "")
    keywords = frozenset(raw.get("keywords") or [])

    return Card(
        id=card_id,
        name=name,
        version=raw.get("version") or None,
        cost=_int_field(raw, "cost"),
        ink=inks[0],
        inks=inks,
        inkwell=bool(raw.get("inkwell", False)),
        lore=_int_field(raw, "lore"),
        types=frozenset(raw.get("type") or []),
        keywords=keywords,
        classifications=frozenset(raw.get("classifications") or []),
        text=text,
        sanitized_text=sanitize_text(text, keywords),
        sing_cost=parse_sing_cost(text, keywords),
        legalities=tuple(sorted((raw.get("legalities") or {}).items())),
    )
