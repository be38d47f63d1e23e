"""
Deck display service.

Turns deck codes into something a chat reply or an API response can show:
the canonical code, one line per card, the format it is legal in and the
regions it uses.

User-facing failures are always the generic InvalidDeckCodeError; the
specific codec error is only logged.
"""

import logging
from dataclasses import dataclass

from runedeck.deckcode import DeckCodeError, decode, encode
from runedeck.models.deck import Deck
from runedeck.models.legality import (
    DeckFormatRules,
    deck_regions,
    is_eternal,
    is_singleton,
    is_standard,
)
from runedeck.models.region import REGION_NAMES
from runedeck.services.card_index import CardIndex, CardInfo

logger = logging.getLogger(__name__)

INVALID_DECK_CODE_MESSAGE = "Invalid deck code."
UNKNOWN_CARD_NAME = "Unknown card"

FORMAT_STANDARD = "Standard"
FORMAT_ETERNAL = "Eternal"
FORMAT_SINGLETON = "Singleton"
FORMAT_UNKNOWN = "Unknown"


class InvalidDeckCodeError(Exception):
    """
    Raised when a user-supplied deck code cannot be shown.

    The message never includes parser details; the original error is
    kept as __cause__ for diagnostics.
    """

    def __init__(self) -> None:
        super().__init__(INVALID_DECK_CODE_MESSAGE)


@dataclass(frozen=True, slots=True)
class DeckLine:
    """One card of a displayed deck."""

    count: int
    code: str
    name: str


@dataclass(frozen=True, slots=True)
class DeckView:
    """
    A deck ready for display.

    Attributes:
        code: Canonical deck code, or None if the deck cannot be re-encoded
        name: Optional deck name given by the user
        lines: Cards sorted by cost then name, unknown cards last
        total_cards: Number of cards counting copies
        format: Name of the format the deck is legal in
        regions: Display names of the regions the deck uses
    """

    code: str | None
    name: str | None
    lines: tuple[DeckLine, ...]
    total_cards: int
    format: str
    regions: tuple[str, ...]

    def to_text(self) -> str:
        """Plain-text rendering, one card per line."""
        header = [f"__**{self.name}**__"] if self.name else []
        if self.code:
            header.append(self.code)
        body = [f"**{line.count}×** {line.name}" for line in self.lines]
        footer = [f"Format: {self.format}"]
        if self.regions:
            footer.append("Regions: " + ", ".join(self.regions))
        return "\n".join(header + body + footer)


def deck_format_name(deck: Deck, rules: DeckFormatRules) -> str:
    """
    Name of the first format the deck is legal in.

    Formats are tried from the most to the least restrictive:
    Standard, Eternal, then Singleton.
    """
    if is_standard(deck, rules):
        return FORMAT_STANDARD
    if is_eternal(deck, rules):
        return FORMAT_ETERNAL
    if is_singleton(deck, rules):
        return FORMAT_SINGLETON
    return FORMAT_UNKNOWN


def render_deck(
    deck: Deck,
    index: CardIndex,
    rules: DeckFormatRules,
    name: str | None = None,
) -> DeckView:
    """
    Build the display form of a deck.

    Args:
        deck: Deck to display
        index: Card index used to resolve names
        rules: Legality rules used to pick the format
        name: Optional deck name

    Returns:
        DeckView with cards sorted by cost then name. Cards missing
        from the index come last, in canonical order, as "Unknown card"
    """
    try:
        code: str | None = encode(deck)
    except DeckCodeError as e:
        logger.info("Deck cannot be re-encoded: %s", e)
        code = None

    known: list[tuple[CardInfo, DeckLine]] = []
    unknown: list[DeckLine] = []
    for entry in deck.entries():
        card = index.get(entry.code)
        if card is None:
            unknown.append(DeckLine(entry.count, entry.code.full, UNKNOWN_CARD_NAME))
        else:
            known.append((card, DeckLine(entry.count, entry.code.full, card.name)))

    known.sort(key=lambda pair: (pair[0].cost, pair[0].name))
    lines = [line for _, line in known] + unknown

    return DeckView(
        code=code,
        name=name,
        lines=tuple(lines),
        total_cards=deck.total_cards(),
        format=deck_format_name(deck, rules),
        regions=tuple(REGION_NAMES[region] for region in deck_regions(deck)),
    )


def describe_code(
    code: str,
    index: CardIndex,
    rules: DeckFormatRules,
    name: str | None = None,
) -> DeckView:
    """
    Decode a user-supplied deck code and build its display form.

    Raises:
        InvalidDeckCodeError: If the code cannot be decoded
    """
    try:
        deck = decode(code)
    except DeckCodeError as e:
        logger.warning("Rejected deck code %r: %s: %s", code, type(e).__name__, e)
        raise InvalidDeckCodeError() from e

    return render_deck(deck, index, rules, name=name)
