"""Tests for requirement derivation and requirement checks."""

from inkforge.models.card import UNIVERSAL_SHIFT_ID
from inkforge.services.requirements import (
    CatalogVocabulary,
    deck_meets_requirements,
    derive_requirements,
    meets_required_card_names,
    meets_required_classifications,
    meets_required_keywords,
    meets_required_types,
    meets_shift_requirement,
    meets_sing_requirement,
    satisfied_dimensions,
    unmet_requirements,
)
from tests.factories import make_card


def _derived(card, *others):
    """Derive requirements for `card` against a catalog of itself plus `others`."""
    return derive_requirements([card, *others])[0]


class TestCatalogVocabulary:
    def test_collects_every_tag(self) -> None:
        vocabulary = CatalogVocabulary.from_cards(
            [
                make_card("a", name="Elsa", keywords=["Shift"], classifications=["Queen"]),
                make_card("b", name="Lantern", types=["Item"]),
            ]
        )

        assert vocabulary.keywords == frozenset({"Shift"})
        assert vocabulary.classifications == frozenset({"Queen"})
        assert vocabulary.types == frozenset({"Character", "Item"})
        assert vocabulary.card_names == frozenset({"Elsa", "Lantern"})


class TestDeriveRequirements:
    def test_keyword_mentioned_in_text(self) -> None:
        card = make_card("a", text="Your characters with Evasive get +1 lore.")
        derived = _derived(card, make_card("b", keywords=["Evasive"]))
        assert derived.required_keywords == frozenset({"Evasive"})

    def test_granted_keyword_is_not_required(self) -> None:
        card = make_card("a", text="Chosen character gains Evasive this turn.")
        derived = _derived(card, make_card("b", keywords=["Evasive"]))
        assert derived.required_keywords == frozenset()

    def test_granted_keyword_with_value_is_not_required(self) -> None:
        card = make_card("a", text="Chosen character gains Challenger +2 this turn.")
        derived = _derived(card, make_card("b", keywords=["Challenger"]))
        assert derived.required_keywords == frozenset()

    def test_classification_plural_forms(self) -> None:
        card = make_card("a", text="Your Princesses get +1 lore.")
        derived = _derived(card, make_card("b", classifications=["Princess"]))
        assert derived.required_classifications == frozenset({"Princess"})

    def test_challenge_phrase_is_not_a_classification_requirement(self) -> None:
        card = make_card("a", text="Whenever this character challenges a Hero, draw a card.")
        derived = _derived(card, make_card("b", classifications=["Hero"]))
        assert derived.required_classifications == frozenset()

    def test_character_type_is_never_required(self) -> None:
        card = make_card("a", text="Your other characters get +1 strength.")
        derived = _derived(card)
        assert derived.required_types == frozenset()

    def test_song_type_required(self) -> None:
        card = make_card("a", text="You may reveal a song card and put it into your hand.")
        derived = _derived(card, make_card("b", types=["Action", "Song"]))
        assert derived.required_types == frozenset({"Song"})

    def test_item_type_needs_a_reference_to_your_items(self) -> None:
        lantern = make_card("b", types=["Item"])

        banisher = _derived(make_card("a", text="Banish chosen item."), lantern)
        assert banisher.required_types == frozenset()

        supporter = _derived(make_card("c", text="Your items cost 1 less."), lantern)
        assert supporter.required_types == frozenset({"Item"})

    def test_card_name_mentioned(self) -> None:
        card = make_card("a", name="Anna", text="If you have a character named Elsa, draw a card.")
        derived = _derived(card, make_card("b", name="Elsa"))
        assert derived.required_card_names == frozenset({"Elsa"})

    def test_own_name_is_excluded(self) -> None:
        card = make_card("a", name="Elsa", text="Your other characters named Elsa get +1 lore.")
        derived = _derived(card, make_card("b", name="Elsa"))
        assert derived.required_card_names == frozenset()

    def test_shift_card_requires_its_name_parts(self) -> None:
        card = make_card(
            "a",
            name="Flotsam & Jetsam",
            cost=5,
            keywords=["Shift"],
            text="When you play this character, draw a card.",
        )
        derived = _derived(card)
        assert derived.required_card_names == frozenset({"Flotsam", "Jetsam"})

    def test_empty_text_has_no_requirements(self) -> None:
        card = make_card("a", required_keywords=["Stale"])
        derived = _derived(card, make_card("b", keywords=["Ward"]))
        assert derived.required_keywords == frozenset()
        assert derived.required_classifications == frozenset()
        assert derived.required_types == frozenset()
        assert derived.required_card_names == frozenset()

    def test_order_is_preserved(self) -> None:
        cards = [make_card(f"c{i}") for i in range(5)]
        assert [card.id for card in derive_requirements(cards)] == [f"c{i}" for i in range(5)]

    def test_explicit_vocabulary(self) -> None:
        card = make_card("a", text="Your characters with Ward get +1 lore.")
        vocabulary = CatalogVocabulary(
            keywords=frozenset({"Ward"}),
            classifications=frozenset(),
            types=frozenset(),
            card_names=frozenset(),
        )
        derived = derive_requirements([card], vocabulary)[0]
        assert derived.required_keywords == frozenset({"Ward"})


class TestRequirementChecks:
    def test_keywords_need_every_tag(self) -> None:
        card = make_card("a", required_keywords=["Ward", "Evasive"])
        ward = make_card("b", keywords=["Ward"])
        evasive = make_card("c", keywords=["Evasive"])

        assert not meets_required_keywords(card, [ward])
        assert meets_required_keywords(card, [ward, evasive])

    def test_keywords_on_the_card_itself_do_not_count(self) -> None:
        card = make_card("a", keywords=["Ward"], required_keywords=["Ward"])
        assert not meets_required_keywords(card, [card, card])

    def test_classifications_need_any_tag(self) -> None:
        card = make_card("a", required_classifications=["Hero", "Villain"])
        assert meets_required_classifications(card, [make_card("b", classifications=["Villain"])])
        assert not meets_required_classifications(card, [make_card("c")])

    def test_types_need_every_tag(self) -> None:
        card = make_card("a", required_types=["Song", "Item"])
        song = make_card("b", types=["Action", "Song"])
        item = make_card("c", types=["Item"])

        assert not meets_required_types(card, [song])
        assert meets_required_types(card, [song, item])

    def test_card_names_need_any_name(self) -> None:
        card = make_card("a", name="Anna", required_card_names=["Elsa", "Olaf"])
        assert meets_required_card_names(card, [make_card("b", name="Olaf")])
        assert not meets_required_card_names(card, [make_card("c", name="Kristoff")])

    def test_card_names_match_name_parts(self) -> None:
        card = make_card("a", name="Ursula", required_card_names=["Flotsam"])
        assert meets_required_card_names(card, [make_card("b", name="Flotsam & Jetsam")])

    def test_shift_needs_cheaper_same_name(self) -> None:
        shifter = make_card("a", name="Elsa", cost=6, keywords=["Shift"])
        cheaper = make_card("b", name="Elsa", cost=4)
        pricier = make_card("c", name="Elsa", cost=7)
        other = make_card("d", name="Anna", cost=2)

        assert meets_shift_requirement(shifter, [cheaper])
        assert not meets_shift_requirement(shifter, [pricier, other])
        assert not meets_shift_requirement(shifter, [])

    def test_shift_onto_dual_name(self) -> None:
        shifter = make_card("a", name="Flotsam & Jetsam", cost=6, keywords=["Shift"])
        assert meets_shift_requirement(shifter, [make_card("b", name="Jetsam", cost=3)])

    def test_universal_shift_enabler(self) -> None:
        shifter = make_card("a", name="Elsa", cost=2, keywords=["Shift"])
        goo = make_card(UNIVERSAL_SHIFT_ID, name="Morph", cost=2)
        assert meets_shift_requirement(shifter, [goo])

    def test_non_shift_card_always_meets_shift(self) -> None:
        assert meets_shift_requirement(make_card("a"), [])

    def test_singer_needs_affordable_song(self) -> None:
        singer = make_card("a", cost=3, keywords=["Singer"], sing_cost=5)
        cheap_song = make_card("b", cost=5, types=["Action", "Song"])
        big_song = make_card("c", cost=7, types=["Action", "Song"])

        assert meets_sing_requirement(singer, [cheap_song])
        assert not meets_sing_requirement(singer, [big_song])

    def test_singer_uses_cost_without_printed_value(self) -> None:
        singer = make_card("a", cost=3, keywords=["Singer"])
        song = make_card("b", cost=4, types=["Action", "Song"])
        assert not meets_sing_requirement(singer, [song])


class TestDeckMeetsRequirements:
    def test_card_without_requirements_is_always_supported(self) -> None:
        card = make_card("a")
        assert deck_meets_requirements(card, [])
        assert unmet_requirements(card, []) == []

    def test_unmet_requirements_lists_failing_checks(self) -> None:
        card = make_card(
            "a",
            keywords=["Singer"],
            required_keywords=["Ward"],
            required_types=["Item"],
        )
        deck = [make_card("b", keywords=["Ward"])]

        assert unmet_requirements(card, deck) == ["types", "sing"]
        assert not deck_meets_requirements(card, deck)

    def test_satisfied_dimensions_only_counts_declared_ones(self) -> None:
        card = make_card("a", required_keywords=["Ward"], required_classifications=["Hero"])
        deck = [make_card("b", keywords=["Ward"])]

        assert satisfied_dimensions(card, deck) == ["keywords"]
        assert satisfied_dimensions(make_card("c"), deck) == []
