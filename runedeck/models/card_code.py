"""
Card Code — The Compact Identifier of a Card.

Every Legends of Runeterra card has an ASCII code made of fixed-width segments:

    0..2  set      (e.g., "01")
    2..4  region   (e.g., "DE")
    4..7  card     (e.g., "012")
    7..9  token    (only on non-collectible variants, e.g., "T1")

Example: Evelynn is "06RU025".

INVARIANTS:
- A CardCode is always ASCII and 7 or 9 characters long
- Segment values are NOT checked against known sets or regions
- All models are frozen (immutable after construction)
"""

from dataclasses import dataclass

VALID_CODE_LENGTHS = frozenset({7, 9})


class InvalidCardCodeError(ValueError):
    """Raised when a raw string cannot be a card code."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid card code {raw!r}: {reason}")


def is_well_formed(raw: str) -> bool:
    """Check that a string is ASCII and has the length of a card code."""
    return raw.isascii() and len(raw) in VALID_CODE_LENGTHS


@dataclass(frozen=True, slots=True, order=True)
class CardCode:
    """
    A validated card code.

    Construct through CardCode.parse (untrusted input) or
    CardCode.from_parts (trusted, e.g. decoded deck bytes).
    Once built, every segment accessor is total.

    Attributes:
        full: The complete code string
    """

    full: str

    def __post_init__(self) -> None:
        if not is_well_formed(self.full):
            raise InvalidCardCodeError(self.full, "expected 7 or 9 ASCII characters")

    @classmethod
    def parse(cls, raw: str) -> "CardCode":
        """
        Parse an untrusted string into a CardCode.

        Surrounding whitespace is ignored and letters are upper-cased,
        so "01de012 " parses the same as "01DE012".

        Raises:
            InvalidCardCodeError: If the string is not ASCII or has the wrong length
        """
        return cls(raw.strip().upper())

    @classmethod
    def from_parts(cls, set_code: str, region_code: str, number: int) -> "CardCode":
        """
        Build a 7-character code from its set, region and card number.

        The number is zero-padded to three digits. Whether a card with
        the resulting code actually exists is not checked.
        """
        return cls(f"{set_code}{region_code}{number:03d}")

    @property
    def set(self) -> str:
        """The two-character set segment."""
        return self.full[0:2]

    @property
    def region(self) -> str:
        """The two-character region segment."""
        return self.full[2:4]

    @property
    def card(self) -> str:
        """The three-character card number segment."""
        return self.full[4:7]

    @property
    def token(self) -> str | None:
        """The two-character token segment, or None for collectible cards."""
        if len(self.full) == 9:
            return self.full[7:9]
        return None

    @property
    def card_number(self) -> int | None:
        """The card segment as an integer, or None if it is not decimal."""
        if not self.card.isdigit():
            return None
        return int(self.card)

    def __str__(self) -> str:
        return self.full
