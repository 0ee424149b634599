from dataclasses import dataclass, field, replace

from inkforge.models.ink import Ink

CHARACTER_TYPE = "Character"
ACTION_TYPE = "Action"
SONG_TYPE = "Song"
ITEM_TYPE = "Item"
LOCATION_TYPE = "Location"

SHIFT_KEYWORD = "Shift"
SINGER_KEYWORD = "Singer"

# Separator used by dual-identity names ("Flotsam & Jetsam")
NAME_SEPARATOR = "&"

# Morph - Space Goo may be shifted onto by any shift character
UNIVERSAL_SHIFT_ID = "crd_be70d689335140bdadcde5f5356e169d"


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single printing from the catalog.

    Printings of the same character share a `name` but have distinct ids.
    The `required_*` sets are derived once per catalog load (see
    `inkforge.services.requirements.derive_requirements`) and are empty
    until then.

    Attributes:
        id: Stable catalog id, unique per printing
        name: Base character/card name shared across printings
        version: Subtitle of this printing, if any
        cost: Ink cost to play
        ink: Primary ink color
        inks: Every ink of the printing (dual-ink cards carry two)
        inkwell: Whether the card can be put into the inkwell
        lore: Lore gained when questing
        types: Category tags (Character, Action, Song, Item, Location)
        keywords: Ability keywords (Shift, Singer, Ward, ...)
        classifications: Thematic tags (Storyborn, Hero, Princess, ...)
        text: Raw ability text
        sanitized_text: Normalized ability text used for phrase matching
        sing_cost: Cost this card counts as when singing songs
    """

    id: str
    name: str
    cost: int
    ink: Ink
    version: str | None = None
    inks: tuple[Ink, ...] = ()
    inkwell: bool = False
    lore: int = 0
    types: frozenset[str] = frozenset()
    keywords: frozenset[str] = frozenset()
    classifications: frozenset[str] = frozenset()
    text: str = ""
    sanitized_text: str = ""
    sing_cost: int | None = None
    legalities: tuple[tuple[str, str], ...] = ()
    required_keywords: frozenset[str] = field(default_factory=frozenset)
    required_classifications: frozenset[str] = field(default_factory=frozenset)
    required_types: frozenset[str] = field(default_factory=frozenset)
    required_card_names: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.inks:
            object.__setattr__(self, "inks", (self.ink,))

    @property
    def title(self) -> str:
        """Display title including the printing's subtitle."""
        return f"{self.name} - {self.version}" if self.version else self.name

    @property
    def name_parts(self) -> tuple[str, ...]:
        """Each identity a dual-named card counts as."""
        return tuple(part.strip() for part in self.name.split(NAME_SEPARATOR) if part.strip())

    @property
    def can_shift(self) -> bool:
        return SHIFT_KEYWORD in self.keywords

    @property
    def is_singer(self) -> bool:
        return SINGER_KEYWORD in self.keywords

    @property
    def effective_sing_cost(self) -> int:
        """Sing threshold; falls back to cost when no Singer value was printed."""
        return self.sing_cost if self.sing_cost is not None else self.cost

    def has_type(self, type_name: str) -> bool:
        return type_name in self.types

    def is_legal_in(self, format_name: str) -> bool:
        """True unless the printing's legality data marks it not legal in the format."""
        if not self.legalities:
            return True
        return dict(self.legalities).get(format_name) == "legal"

    def with_requirements(
        self,
        keywords: frozenset[str],
        classifications: frozenset[str],
        types: frozenset[str],
        card_names: frozenset[str],
    ) -> "Card":
        """Return a copy carrying the derived requirement sets."""
        return replace(
            self,
            required_keywords=keywords,
            required_classifications=classifications,
            required_types=types,
            required_card_names=card_names,
        )
