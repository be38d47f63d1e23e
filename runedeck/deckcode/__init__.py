from runedeck.deckcode.codec import (
    MAX_CARD_NUMBER,
    DeckCodeHeader,
    decode,
    encode,
    read_header,
)
from runedeck.deckcode.errors import (
    CardNumberOverflowError,
    DeckCodeError,
    DeckDecodingError,
    DeckEncodingError,
    DuplicateCardError,
    InvalidCardError,
    InvalidEncodingError,
    TruncatedBufferError,
    UnknownRegionError,
    UnsupportedContentError,
    UnsupportedFormatVersionError,
)

__all__ = [
    "CardNumberOverflowError",
    "DeckCodeError",
    "DeckCodeHeader",
    "DeckDecodingError",
    "DeckEncodingError",
    "DuplicateCardError",
    "InvalidCardError",
    "InvalidEncodingError",
    "MAX_CARD_NUMBER",
    "TruncatedBufferError",
    "UnknownRegionError",
    "UnsupportedContentError",
    "UnsupportedFormatVersionError",
    "decode",
    "encode",
    "read_header",
]
