from runedeck.models.card_code import CardCode, InvalidCardCodeError, is_well_formed
from runedeck.models.deck import CardCodeQuantity, CardGroup, Deck
from runedeck.models.legality import (
    DeckFormatRules,
    deck_regions,
    is_eternal,
    is_singleton,
    is_standard,
)
from runedeck.models.region import CardRegion
from runedeck.models.set import CardSet
from runedeck.models.version import (
    DeckCodeFormat,
    DeckCodeVersion,
    card_min_version,
    min_version_for,
)

__all__ = [
    "CardCode",
    "CardCodeQuantity",
    "CardGroup",
    "CardRegion",
    "CardSet",
    "Deck",
    "DeckCodeFormat",
    "DeckCodeVersion",
    "DeckFormatRules",
    "InvalidCardCodeError",
    "card_min_version",
    "deck_regions",
    "is_eternal",
    "is_singleton",
    "is_standard",
    "is_well_formed",
    "min_version_for",
]
