from runedeck.services.card_index import (
    CardIndex,
    CardInfo,
    get_card_index,
    load_card_index,
    load_set_bundle,
)
from runedeck.services.deck_display import (
    DeckLine,
    DeckView,
    InvalidDeckCodeError,
    describe_code,
    render_deck,
)

__all__ = [
    "CardIndex",
    "CardInfo",
    "DeckLine",
    "DeckView",
    "InvalidDeckCodeError",
    "describe_code",
    "get_card_index",
    "load_card_index",
    "load_set_bundle",
    "render_deck",
]
