from typing import Any

import pytest

from inkforge.models import Card, Ink
from tests.factories import make_card


@pytest.fixture
def plain_catalog() -> list[Card]:
    """Ten Amber and ten Steel cards with no requirements."""
    amber = [make_card(f"amber_{i}", cost=1 + i % 5, ink=Ink.AMBER) for i in range(10)]
    steel = [make_card(f"steel_{i}", cost=1 + i % 5, ink=Ink.STEEL) for i in range(10)]
    return amber + steel


@pytest.fixture
def lorcast_records() -> list[dict[str, Any]]:
    """Raw Lorcast card objects covering shift, singer, song and item cards."""
    return [
        {
            "id": "crd_elsa_1",
            "name": "Elsa",
            "version": "Snow Queen",
            "cost": 4,
            "ink": "Amethyst",
            "inkwell": True,
            "lore": 2,
            "type": ["Character"],
            "keywords": [],
            "classifications": ["Storyborn", "Hero", "Queen", "Sorcerer"],
            "text": "FREEZE {E} — Exert chosen opposing character.",
            "legalities": {"core": "legal"},
        },
        {
            "id": "crd_elsa_2",
            "name": "Elsa",
            "version": "Spirit of Winter",
            "cost": 8,
            "ink": "Amethyst",
            "inkwell": False,
            "lore": 3,
            "type": ["Character"],
            "keywords": ["Shift"],
            "classifications": ["Floodborn", "Hero", "Queen", "Sorcerer"],
            "text": (
                "Shift 6 (You may pay 6 {I} to play this on top of one of your "
                "characters named Elsa.)\nDEEP FREEZE When you play this character, "
                "exert up to 2 chosen characters."
            ),
            "legalities": {"core": "legal"},
        },
        {
            "id": "crd_ariel",
            "name": "Ariel",
            "version": "Spectacular Singer",
            "cost": 3,
            "ink": "Amber",
            "inkwell": True,
            "lore": 2,
            "type": ["Character"],
            "keywords": ["Singer"],
            "classifications": ["Storyborn", "Hero", "Princess"],
            "text": (
                "Singer 5 (This character counts as cost 5 to sing songs.)\n"
                "MUSICAL DEBUT When you play this character, look at the top 4 cards "
                "of your deck. You may reveal a song card and put it into your hand."
            ),
            "legalities": {"core": "legal"},
        },
        {
            "id": "crd_friends",
            "name": "Friends on the Other Side",
            "cost": 3,
            "ink": "Amethyst",
            "inkwell": True,
            "type": ["Action", "Song"],
            "keywords": [],
            "classifications": None,
            "text": (
                "(A character with cost 3 or more can {E} to sing this song for free.)\n"
                "Draw 2 cards."
            ),
            "legalities": {"core": "legal"},
        },
        {
            "id": "crd_lantern",
            "name": "Lantern",
            "cost": 2,
            "ink": "Amber",
            "inkwell": True,
            "type": ["Item"],
            "keywords": [],
            "text": "BIRTHDAY LIGHTS {E} — You pay 1 {I} less for the next character you play.",
            "legalities": {"core": "not_legal"},
        },
    ]
