from inkforge.models.card import (
    ACTION_TYPE,
    CHARACTER_TYPE,
    ITEM_TYPE,
    LOCATION_TYPE,
    SHIFT_KEYWORD,
    SINGER_KEYWORD,
    SONG_TYPE,
    UNIVERSAL_SHIFT_ID,
    Card,
)
from inkforge.models.deck import (
    DeckGenerationRequest,
    DeckProfile,
    GeneratedDeck,
    GenerationOutcome,
)
from inkforge.models.ink import Ink, InvalidInkSelectionError, parse_ink_pair
from inkforge.models.weights import DEFAULT_WEIGHT_CONFIG, WeightConfig

__all__ = [
    "ACTION_TYPE",
    "CHARACTER_TYPE",
    "Card",
    "DEFAULT_WEIGHT_CONFIG",
    "DeckGenerationRequest",
    "DeckProfile",
    "GeneratedDeck",
    "GenerationOutcome",
    "ITEM_TYPE",
    "Ink",
    "InvalidInkSelectionError",
    "LOCATION_TYPE",
    "SHIFT_KEYWORD",
    "SINGER_KEYWORD",
    "SONG_TYPE",
    "UNIVERSAL_SHIFT_ID",
    "WeightConfig",
    "parse_ink_pair",
]
