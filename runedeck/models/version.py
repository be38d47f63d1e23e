"""
Deck code format and version tags.

The first byte of every deck code packs two numbers:

    high nibble: DeckCodeFormat  (byte layout of the rest of the code)
    low nibble:  DeckCodeVersion (oldest game client able to read it)

The version only grows when new factions are released: each region
has a minimum version, and a deck needs the highest minimum among
its cards. Every known set is readable from V1.
"""

from collections.abc import Iterable
from enum import IntEnum

from runedeck.models.card_code import CardCode
from runedeck.models.region import CardRegion
from runedeck.models.set import CardSet


class DeckCodeFormat(IntEnum):
    """Byte layout of a deck code. Only F1 is defined so far."""

    F1 = 1


class DeckCodeVersion(IntEnum):
    """Minimum content revision needed to read a deck code."""

    V1 = 1  # Closed alpha: original set
    V2 = 2  # Launch: Bilgewater, then Targon
    V3 = 3  # Empires of the Ascended: Shurima
    V4 = 4  # Beyond the Bandlewood: Bandle City
    V5 = 5  # Worldwalker: Runeterra


REGION_MIN_VERSIONS: dict[CardRegion, DeckCodeVersion] = {
    CardRegion.DEMACIA: DeckCodeVersion.V1,
    CardRegion.FRELJORD: DeckCodeVersion.V1,
    CardRegion.IONIA: DeckCodeVersion.V1,
    CardRegion.NOXUS: DeckCodeVersion.V1,
    CardRegion.PILTOVER_ZAUN: DeckCodeVersion.V1,
    CardRegion.SHADOW_ISLES: DeckCodeVersion.V1,
    CardRegion.BILGEWATER: DeckCodeVersion.V2,
    CardRegion.TARGON: DeckCodeVersion.V2,
    CardRegion.SHURIMA: DeckCodeVersion.V3,
    CardRegion.BANDLE_CITY: DeckCodeVersion.V4,
    CardRegion.RUNETERRA: DeckCodeVersion.V5,
}

SET_MIN_VERSIONS: dict[CardSet, DeckCodeVersion] = {
    CardSet.FOUNDATIONS: DeckCodeVersion.V1,
    CardSet.RISING_TIDES: DeckCodeVersion.V1,
    CardSet.CALL_OF_THE_MOUNTAIN: DeckCodeVersion.V1,
    CardSet.EMPIRES_OF_THE_ASCENDED: DeckCodeVersion.V1,
    CardSet.BEYOND_THE_BANDLEWOOD: DeckCodeVersion.V1,
    CardSet.WORLDWALKER: DeckCodeVersion.V1,
}


def region_min_version(region: CardRegion) -> DeckCodeVersion | None:
    """Minimum version for a region, or None if it cannot be encoded."""
    return REGION_MIN_VERSIONS.get(region)


def set_min_version(card_set: CardSet) -> DeckCodeVersion | None:
    """Minimum version for a set, or None if it cannot be encoded."""
    return SET_MIN_VERSIONS.get(card_set)


def card_min_version(code: CardCode) -> DeckCodeVersion | None:
    """
    Minimum version able to represent a card.

    This is the higher of its set's and its region's minimums,
    or None if either of them has no known minimum.
    """
    by_set = set_min_version(CardSet.from_code(code.set))
    by_region = region_min_version(CardRegion.from_code(code.region))
    if by_set is None or by_region is None:
        return None
    return max(by_set, by_region)


def min_version_for(codes: Iterable[CardCode]) -> DeckCodeVersion | None:
    """
    Minimum version able to represent every given card.

    Returns V1 for no cards at all, and None as soon as a single
    card cannot be represented.
    """
    required = DeckCodeVersion.V1
    for code in codes:
        version = card_min_version(code)
        if version is None:
            return None
        required = max(required, version)
    return required
