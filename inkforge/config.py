from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="INKFORGE_")

    app_name: str = "InkForge"
    debug: bool = False

    catalog_path: str = "data/cards.json"

    lorcast_api_url: str = "https://api.lorcast.com/v0"

    # Format key looked up in each card's `legalities` map when filtering
    legality_format: str = "core"

    default_retries: int = 10

    log_level: str = "INFO"


settings = Settings()


# =============================================================================
# DECK CONSTRUCTION LIMITS
# =============================================================================

# A finished deck holds exactly this many cards
DECK_SIZE = 60

# Copies of one printing (card id) allowed in a deck
MAX_COPIES = 4

# Regeneration rounds allowed after the first fill
DEFAULT_RETRIES = 10

# Deck size past which cards with unmet requirements are suppressed
LATE_DECK_THRESHOLD = 45
