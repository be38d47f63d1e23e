"""
Card regions and their deck code representations.

Regions appear in three shapes:
- the "nameRef" used by set bundle JSON files (e.g., "ShadowIsles")
- the two-letter short code inside card codes (e.g., "SI")
- the numeric id written into deck codes (e.g., 5)

New regions are released over time, so unrecognized names deserialize
to CardRegion.UNSUPPORTED instead of failing.
"""

from enum import Enum


class CardRegion(str, Enum):
    """A region a card can belong to."""

    NOXUS = "Noxus"
    DEMACIA = "Demacia"
    FRELJORD = "Freljord"
    SHADOW_ISLES = "ShadowIsles"
    TARGON = "Targon"
    IONIA = "Ionia"
    BILGEWATER = "Bilgewater"
    SHURIMA = "Shurima"
    PILTOVER_ZAUN = "PiltoverZaun"
    BANDLE_CITY = "BandleCity"
    RUNETERRA = "Runeterra"

    # Origin regions: never written into card codes
    JHIN = "Jhin"
    EVELYNN = "Evelynn"
    BARD = "Bard"

    UNSUPPORTED = "Unsupported"

    @classmethod
    def _missing_(cls, value: object) -> "CardRegion":
        return cls.UNSUPPORTED

    @classmethod
    def from_code(cls, code: str) -> "CardRegion":
        """Get the region with the given short code, or UNSUPPORTED."""
        return _BY_CODE.get(code, cls.UNSUPPORTED)

    @classmethod
    def from_id(cls, region_id: int) -> "CardRegion":
        """Get the region with the given deck code id, or UNSUPPORTED."""
        return _BY_ID.get(region_id, cls.UNSUPPORTED)

    @property
    def code(self) -> str | None:
        """The two-letter short code, if the region has one."""
        return _CODES.get(self)

    @property
    def id(self) -> int | None:
        """The numeric id used in deck codes, if the region has one."""
        return _IDS.get(self)


_CODES: dict[CardRegion, str] = {
    CardRegion.DEMACIA: "DE",
    CardRegion.FRELJORD: "FR",
    CardRegion.IONIA: "IO",
    CardRegion.NOXUS: "NX",
    CardRegion.PILTOVER_ZAUN: "PZ",
    CardRegion.SHADOW_ISLES: "SI",
    CardRegion.BILGEWATER: "BW",
    CardRegion.SHURIMA: "SH",
    CardRegion.TARGON: "MT",
    CardRegion.BANDLE_CITY: "BC",
    CardRegion.RUNETERRA: "RU",
}

# Ids 8 and 11 are unassigned
_IDS: dict[CardRegion, int] = {
    CardRegion.DEMACIA: 0,
    CardRegion.FRELJORD: 1,
    CardRegion.IONIA: 2,
    CardRegion.NOXUS: 3,
    CardRegion.PILTOVER_ZAUN: 4,
    CardRegion.SHADOW_ISLES: 5,
    CardRegion.BILGEWATER: 6,
    CardRegion.SHURIMA: 7,
    CardRegion.TARGON: 9,
    CardRegion.BANDLE_CITY: 10,
    CardRegion.RUNETERRA: 12,
}

_BY_CODE = {code: region for region, code in _CODES.items()}
_BY_ID = {region_id: region for region, region_id in _IDS.items()}


# Display names for regions, used when no localized names are available
REGION_NAMES: dict[CardRegion, str] = {
    CardRegion.NOXUS: "Noxus",
    CardRegion.DEMACIA: "Demacia",
    CardRegion.FRELJORD: "Freljord",
    CardRegion.SHADOW_ISLES: "Shadow Isles",
    CardRegion.TARGON: "Targon",
    CardRegion.IONIA: "Ionia",
    CardRegion.BILGEWATER: "Bilgewater",
    CardRegion.SHURIMA: "Shurima",
    CardRegion.PILTOVER_ZAUN: "Piltover & Zaun",
    CardRegion.BANDLE_CITY: "Bandle City",
    CardRegion.RUNETERRA: "Runeterra",
    CardRegion.JHIN: "The Virtuoso",
    CardRegion.EVELYNN: "Agony's Embrace",
    CardRegion.BARD: "The Wandering Caretaker",
    CardRegion.UNSUPPORTED: "Unknown",
}
