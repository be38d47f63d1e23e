"""
Deck code errors.

Every failure of the codec is one of the exceptions below. Callers that
only need to know whether a code is usable can catch DeckDecodingError
or DeckEncodingError; the subclasses carry the details for logging.
Codec operations are pure, so none of these is ever worth retrying.
"""


class DeckCodeError(Exception):
    """Base class for all deck code failures."""


class DeckDecodingError(DeckCodeError):
    """A deck code could not be turned into a deck."""


class DeckEncodingError(DeckCodeError):
    """A deck could not be turned into a deck code."""


class InvalidEncodingError(DeckDecodingError):
    """The text is not valid unpadded base-32."""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Deck code {code!r} is not valid base-32: {reason}")


class UnsupportedFormatVersionError(DeckDecodingError):
    """The header announces a byte layout this decoder does not know."""

    def __init__(self, format_id: int):
        self.format_id = format_id
        super().__init__(f"Unsupported deck code format: {format_id}")


class TruncatedBufferError(DeckDecodingError):
    """A field runs past the end of the decoded bytes."""

    def __init__(self, offset: int, field: str):
        self.offset = offset
        self.field = field
        super().__init__(f"Deck code ended at byte {offset} while reading {field}")


class DuplicateCardError(DeckDecodingError):
    """The same card appears more than once in a deck code."""

    def __init__(self, card_code: str):
        self.card_code = card_code
        super().__init__(f"Card {card_code} appears more than once in the deck code")


class UnknownRegionError(DeckDecodingError):
    """A region id has no known short code."""

    def __init__(self, region_id: int):
        self.region_id = region_id
        super().__init__(f"Unknown region id in deck code: {region_id}")


class UnsupportedContentError(DeckEncodingError):
    """A card has a set, region or token that deck codes cannot represent."""

    def __init__(self, card_code: str):
        self.card_code = card_code
        super().__init__(f"Card {card_code} cannot be represented in a deck code")


class CardNumberOverflowError(DeckEncodingError):
    """A card number is not a decimal number in the encodable range."""

    def __init__(self, card_code: str, limit: int):
        self.card_code = card_code
        self.limit = limit
        super().__init__(f"Card number of {card_code} must be a decimal number from 0 to {limit}")


class InvalidCardError(DeckDecodingError):
    """Decoded set or card numbers do not fit in a card code."""

    def __init__(self, set_id: int, card_number: int):
        self.set_id = set_id
        self.card_number = card_number
        super().__init__(f"Set {set_id} and card number {card_number} do not form a card code")
