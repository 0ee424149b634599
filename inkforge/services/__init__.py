"""
InkForge services.

Catalog loading, card weighting and deck generation.
"""

from inkforge.services.card_database import (
    CatalogDownloadError,
    build_catalog,
    download_card_database,
    load_card_database,
)
from inkforge.services.deck_formatter import (
    export_deck_list,
    format_generated_deck,
    sort_deck,
)
from inkforge.services.deck_generator import (
    cards_of_inks,
    fill_deck,
    generate_deck,
    repair_deck,
)
from inkforge.services.requirements import (
    CatalogVocabulary,
    deck_meets_requirements,
    derive_requirements,
    unmet_requirements,
)
from inkforge.services.sampler import (
    EmptyCandidatePoolError,
    pick_card,
    pick_weighted,
    weigh_candidates,
)
from inkforge.services.weight_calculator import (
    WeightBreakdown,
    calculate_weight,
    weight_breakdown,
)

__all__ = [
    # Catalog
    "CatalogDownloadError",
    "build_catalog",
    "download_card_database",
    "load_card_database",
    # Requirements
    "CatalogVocabulary",
    "deck_meets_requirements",
    "derive_requirements",
    "unmet_requirements",
    # Weighting and sampling
    "WeightBreakdown",
    "calculate_weight",
    "weight_breakdown",
    "EmptyCandidatePoolError",
    "pick_card",
    "pick_weighted",
    "weigh_candidates",
    # Generation
    "cards_of_inks",
    "fill_deck",
    "generate_deck",
    "repair_deck",
    # Output
    "export_deck_list",
    "format_generated_deck",
    "sort_deck",
]
