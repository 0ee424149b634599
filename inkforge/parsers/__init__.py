from inkforge.parsers.lorcast import (
    CardParseError,
    LorcastCard,
    parse_card,
    parse_sing_cost,
    sanitize_text,
)

__all__ = [
    "CardParseError",
    "LorcastCard",
    "parse_card",
    "parse_sing_cost",
    "sanitize_text",
]
