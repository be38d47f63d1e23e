from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from runedeck.models.legality import DEFAULT_DECK_SIZE, DeckFormatRules


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "runedeck"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Directory holding Data Dragon set bundles (set1-en_us.json, ...)
    card_data_dir: Path = Path(__file__).parent.parent / "data"

    # Standard rotation, e.g. STANDARD_SETS='["05","06"]'
    # Empty by default: no deck is standard until a rotation is configured
    standard_sets: list[str] = []
    standard_regions: list[str] = []

    deck_size: int = DEFAULT_DECK_SIZE

    def format_rules(self) -> DeckFormatRules:
        """Legality rules for the configured rotation."""
        return DeckFormatRules.from_lists(
            sets=self.standard_sets,
            regions=self.standard_regions,
            deck_size=self.deck_size,
        )


settings = Settings()
