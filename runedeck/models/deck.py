"""
Deck — An Unshuffled Multiset of Cards.

A Deck maps each CardCode to the number of copies it contains.
It has no identity beyond its contents: two decks holding the same
cards in the same quantities are equal.

Canonical ordering (used by the encoder and by display):

    1. Cards with exactly 3, then 2, then 1 copies. Inside each of these
       buckets, cards are grouped by (set, region); groups are sorted by
       set then region, cards inside a group by card number.
    2. Cards with any other count, sorted by their full code.

Deck codes are only reproducible because this order is fixed.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from itertools import groupby

from runedeck.models.card_code import CardCode
from runedeck.models.version import DeckCodeVersion, min_version_for

# Copy counts that get their own bucket, in the order they are written
GROUPED_COUNTS = (3, 2, 1)


@dataclass(frozen=True, slots=True, order=True)
class CardCodeQuantity:
    """
    A card inserted in a deck, possibly more than once.

    Attributes:
        count: Number of copies (at least 1)
        code: The card inserted
    """

    count: int
    code: CardCode


@dataclass(frozen=True, slots=True)
class CardGroup:
    """
    Cards of one (set, region) pair sharing the same copy count.

    Attributes:
        set_code: Two-digit set code shared by the cards
        region_code: Two-letter region code shared by the cards
        codes: The cards, sorted by card number
    """

    set_code: str
    region_code: str
    codes: tuple[CardCode, ...]


def _group_key(code: CardCode) -> tuple[str, str]:
    return (code.set, code.region)


def _card_sort_key(code: CardCode) -> tuple[str, str, int, str]:
    number = code.card_number
    return (code.set, code.region, -1 if number is None else number, code.full)


@dataclass
class Deck:
    """
    The contents of a deck.

    Attributes:
        contents: Mapping of card code to number of copies
    """

    contents: dict[CardCode, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for code, count in self.contents.items():
            if count < 1:
                raise ValueError(f"Deck cannot hold {count} copies of {code}")

    @classmethod
    def from_mapping(cls, cards: Mapping[CardCode, int]) -> "Deck":
        """Build a deck from a {code: count} mapping."""
        deck = cls()
        for code, count in cards.items():
            deck.insert(code, count)
        return deck

    def insert(self, code: CardCode, count: int = 1) -> None:
        """
        Add copies of a card, merging with copies already in the deck.

        Raises:
            ValueError: If count is less than 1
        """
        if count < 1:
            raise ValueError(f"Cannot insert {count} copies of {code}")
        self.contents[code] = self.contents.get(code, 0) + count

    def __contains__(self, code: CardCode) -> bool:
        return code in self.contents

    def __len__(self) -> int:
        """Number of distinct cards in the deck."""
        return len(self.contents)

    def get_count(self, code: CardCode) -> int:
        """Copies of a card in the deck, or 0."""
        return self.contents.get(code, 0)

    def total_cards(self) -> int:
        """Total number of cards, counting copies."""
        return sum(self.contents.values())

    def as_mapping(self) -> dict[CardCode, int]:
        """Copy of the deck contents as a plain dict."""
        return dict(self.contents)

    def min_version(self) -> DeckCodeVersion | None:
        """Minimum deck code version able to represent this deck."""
        return min_version_for(self.contents)

    def groups(self, count: int) -> list[CardGroup]:
        """
        The (set, region) groups of cards having exactly `count` copies.

        Groups and the cards inside them are in canonical order.
        """
        codes = sorted(
            (code for code, qty in self.contents.items() if qty == count),
            key=_card_sort_key,
        )
        return [
            CardGroup(set_code=set_code, region_code=region_code, codes=tuple(members))
            for (set_code, region_code), members in groupby(codes, key=_group_key)
        ]

    def extra_entries(self) -> list[CardCodeQuantity]:
        """Cards whose count has no bucket of its own, sorted by code."""
        return [
            CardCodeQuantity(count=qty, code=code)
            for code, qty in sorted(self.contents.items())
            if qty not in GROUPED_COUNTS
        ]

    def entries(self) -> Iterator[CardCodeQuantity]:
        """Iterate over every card of the deck in canonical order."""
        for count in GROUPED_COUNTS:
            for group in self.groups(count):
                for code in group.codes:
                    yield CardCodeQuantity(count=count, code=code)
        yield from self.extra_entries()
