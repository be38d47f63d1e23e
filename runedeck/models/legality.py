"""
Deck Legality — Format Checks Over Decoded Decks.

INVARIANT: The standard rotation is never hard-coded here.
Which sets and regions are "currently standard" changes with every
release, so every check receives it through DeckFormatRules.

Deck-building rules shared by the constructed formats:
- exactly `deck_size` cards (40)
- at most `max_copies` copies of a card (3)
- at most `max_regions` regions (2)
"""

from dataclasses import dataclass, field

from runedeck.models.deck import Deck
from runedeck.models.region import CardRegion

DEFAULT_DECK_SIZE = 40
DEFAULT_MAX_COPIES = 3
DEFAULT_MAX_REGIONS = 2


@dataclass(frozen=True, slots=True)
class DeckFormatRules:
    """
    Injected configuration for legality checks.

    Attributes:
        sets: Set codes in the standard rotation (e.g., {"05", "06"})
        regions: Region codes in the standard rotation (e.g., {"DE", "BC"})
        deck_size: Exact number of cards a legal deck holds
        max_copies: Most copies of a single card allowed in Standard and Eternal
        max_regions: Most distinct regions allowed in Standard and Eternal
    """

    sets: frozenset[str] = field(default_factory=frozenset)
    regions: frozenset[str] = field(default_factory=frozenset)
    deck_size: int = DEFAULT_DECK_SIZE
    max_copies: int = DEFAULT_MAX_COPIES
    max_regions: int = DEFAULT_MAX_REGIONS

    @classmethod
    def from_lists(
        cls,
        sets: list[str] | None = None,
        regions: list[str] | None = None,
        deck_size: int = DEFAULT_DECK_SIZE,
    ) -> "DeckFormatRules":
        """Build rules from plain lists, upper-casing region codes."""
        return cls(
            sets=frozenset(s.strip() for s in sets or []),
            regions=frozenset(r.strip().upper() for r in regions or []),
            deck_size=deck_size,
        )

    def allows(self, set_code: str, region_code: str) -> bool:
        """Check if a (set, region) pair is in the standard rotation."""
        return set_code in self.sets and region_code in self.regions


def deck_regions(deck: Deck) -> list[CardRegion]:
    """Distinct regions of a deck's cards, in order of first appearance."""
    regions: list[CardRegion] = []
    for entry in deck.entries():
        region = CardRegion.from_code(entry.code.region)
        if region not in regions:
            regions.append(region)
    return regions


def is_singleton(deck: Deck, rules: DeckFormatRules | None = None) -> bool:
    """
    Check if a deck is legal in Singleton.

    A singleton deck holds exactly `deck_size` cards, one copy of each.
    """
    rules = rules or DeckFormatRules()
    if deck.total_cards() != rules.deck_size:
        return False
    return all(count == 1 for count in deck.contents.values())


def is_eternal(deck: Deck, rules: DeckFormatRules | None = None) -> bool:
    """
    Check if a deck is legal in Eternal.

    Eternal uses the constructed deck-building limits with every set
    and region allowed.
    """
    rules = rules or DeckFormatRules()
    if deck.total_cards() != rules.deck_size:
        return False

    if any(count > rules.max_copies for count in deck.contents.values()):
        return False

    return len(deck_regions(deck)) <= rules.max_regions


def is_standard(deck: Deck, rules: DeckFormatRules) -> bool:
    """
    Check if a deck is legal in Standard.

    Args:
        deck: Decoded deck to check
        rules: Rotation and deck-building limits to check against

    Returns:
        True if the deck is legal in Eternal and every card's set
        and region is in rotation
    """
    if not is_eternal(deck, rules):
        return False

    return all(rules.allows(code.set, code.region) for code in deck.contents)
