"""
Deck code encoder and decoder.

A deck code is an unpadded base-32 (RFC 4648) string wrapping these bytes:

    header        1 byte: format << 4 | version
    3x section    [group count] { [cards] [set] [region] {card number}* }*
    2x section    same layout
    1x section    same layout
    extra         { [count] [set] [region] [card number] }* until the end

Every bracketed field is a varint. Sets are written as their number,
regions as their deck code id (see CardRegion.id).

Encoding follows the canonical order of Deck, so the same deck always
produces the same code.
"""

import base64
import binascii
from dataclasses import dataclass

from runedeck.deckcode.errors import (
    CardNumberOverflowError,
    DuplicateCardError,
    InvalidCardError,
    InvalidEncodingError,
    UnknownRegionError,
    UnsupportedContentError,
    UnsupportedFormatVersionError,
)
from runedeck.deckcode.varint import ByteReader, encode_varint
from runedeck.models.card_code import CardCode
from runedeck.models.deck import GROUPED_COUNTS, Deck
from runedeck.models.region import CardRegion
from runedeck.models.set import CardSet
from runedeck.models.version import DeckCodeFormat, DeckCodeVersion, card_min_version

# Largest card number the encoder accepts
MAX_CARD_NUMBER = 255

# Largest values that still fit the fixed-width card code segments
MAX_SET_ID = 99
MAX_CARD_SEGMENT = 999


@dataclass(frozen=True, slots=True)
class DeckCodeHeader:
    """
    The first byte of a deck code.

    Attributes:
        format: Byte layout of the rest of the code
        version: Raw version nibble; not checked against DeckCodeVersion
    """

    format: DeckCodeFormat
    version: int

    @property
    def known_version(self) -> DeckCodeVersion | None:
        """The version nibble as a DeckCodeVersion, if it is a known one."""
        try:
            return DeckCodeVersion(self.version)
        except ValueError:
            return None

    def to_byte(self) -> int:
        return (int(self.format) << 4) | self.version


# =============================================================================
# TEXT LAYER
# =============================================================================


def _text_to_bytes(code: str) -> bytes:
    """Decode unpadded base-32 text, tolerating case and surrounding blanks."""
    text = code.strip().upper().rstrip("=")
    padded = text + "=" * (-len(text) % 8)
    try:
        return base64.b32decode(padded)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(code, str(e)) from e


def _bytes_to_text(data: bytes) -> str:
    return base64.b32encode(data).decode("ascii").rstrip("=")


# =============================================================================
# DECODING
# =============================================================================


def _read_header(reader: ByteReader) -> DeckCodeHeader:
    byte = reader.read_byte("header")
    format_id = byte >> 4
    try:
        deck_format = DeckCodeFormat(format_id)
    except ValueError:
        raise UnsupportedFormatVersionError(format_id) from None
    return DeckCodeHeader(format=deck_format, version=byte & 0x0F)


def _read_card_code(reader: ByteReader, set_id: int, region_id: int) -> CardCode:
    number = reader.read_varint("card number")
    if set_id > MAX_SET_ID or number > MAX_CARD_SEGMENT:
        raise InvalidCardError(set_id, number)

    region_code = CardRegion.from_id(region_id).code
    if region_code is None:
        raise UnknownRegionError(region_id)

    return CardCode.from_parts(f"{set_id:02d}", region_code, number)


def _insert_once(deck: Deck, code: CardCode, count: int) -> None:
    if code in deck:
        raise DuplicateCardError(code.full)
    deck.insert(code, count)


def _read_f1_body(reader: ByteReader) -> Deck:
    deck = Deck()

    for count in GROUPED_COUNTS:
        group_count = reader.read_varint(f"{count}x group count")
        for _ in range(group_count):
            card_count = reader.read_varint("group size")
            set_id = reader.read_varint("group set")
            region_id = reader.read_varint("group region")
            for _ in range(card_count):
                _insert_once(deck, _read_card_code(reader, set_id, region_id), count)

    while not reader.exhausted():
        count = reader.read_varint("card count")
        set_id = reader.read_varint("card set")
        region_id = reader.read_varint("card region")
        code = _read_card_code(reader, set_id, region_id)
        # A zero count carries no cards
        if count:
            _insert_once(deck, code, count)

    return deck


def read_header(code: str) -> DeckCodeHeader:
    """
    Read only the header of a deck code.

    Raises:
        InvalidEncodingError: If the text is not base-32
        TruncatedBufferError: If the code holds no bytes at all
        UnsupportedFormatVersionError: If the format nibble is unknown
    """
    return _read_header(ByteReader(_text_to_bytes(code)))


def decode(code: str) -> Deck:
    """
    Decode a deck code into a Deck.

    The version nibble is not enforced: codes announcing a version this
    module does not know are still read with the layout of their format.

    Args:
        code: Deck code as typed or pasted by a user

    Returns:
        Deck with every card of the code

    Raises:
        InvalidEncodingError: If the text is not base-32
        UnsupportedFormatVersionError: If the format nibble is unknown
        TruncatedBufferError: If a field runs past the end of the code
        DuplicateCardError: If a card is listed more than once
        UnknownRegionError: If a region id has no short code
        InvalidCardError: If set or card numbers overflow the card code
    """
    reader = ByteReader(_text_to_bytes(code))
    header = _read_header(reader)

    if header.format is DeckCodeFormat.F1:
        return _read_f1_body(reader)
    raise UnsupportedFormatVersionError(int(header.format))


# =============================================================================
# ENCODING
# =============================================================================


def _required_version(deck: Deck) -> DeckCodeVersion:
    required = DeckCodeVersion.V1
    for code in deck.contents:
        version = card_min_version(code)
        if version is None or code.token is not None:
            raise UnsupportedContentError(code.full)
        required = max(required, version)
    return required


def _card_number(code: CardCode) -> int:
    number = code.card_number
    if number is None or number > MAX_CARD_NUMBER:
        raise CardNumberOverflowError(code.full, MAX_CARD_NUMBER)
    return number


def _set_region_ids(code: CardCode) -> bytes:
    set_id = CardSet.from_code(code.set).id
    region_id = CardRegion.from_code(code.region).id
    if set_id is None or region_id is None:
        raise UnsupportedContentError(code.full)
    return encode_varint(set_id) + encode_varint(region_id)


def _write_f1_body(deck: Deck) -> bytes:
    out = bytearray()

    for count in GROUPED_COUNTS:
        groups = deck.groups(count)
        out += encode_varint(len(groups))
        for group in groups:
            out += encode_varint(len(group.codes))
            out += _set_region_ids(group.codes[0])
            for code in group.codes:
                out += encode_varint(_card_number(code))

    for entry in deck.extra_entries():
        out += encode_varint(entry.count)
        out += _set_region_ids(entry.code)
        out += encode_varint(_card_number(entry.code))

    return bytes(out)


def encode(deck: Deck, deck_format: DeckCodeFormat = DeckCodeFormat.F1) -> str:
    """
    Encode a Deck into its canonical deck code.

    The version nibble is the lowest version able to represent
    every card of the deck.

    Args:
        deck: Deck to encode
        deck_format: Byte layout to use

    Returns:
        Unpadded base-32 deck code

    Raises:
        UnsupportedContentError: If a card's set or region has no
            known version, or the card is a token
        CardNumberOverflowError: If a card number is not decimal or
            exceeds MAX_CARD_NUMBER
    """
    header = DeckCodeHeader(format=deck_format, version=_required_version(deck))

    if deck_format is not DeckCodeFormat.F1:
        raise ValueError(f"Cannot encode deck codes in format {deck_format}")
    body = _write_f1_body(deck)

    return _bytes_to_text(bytes([header.to_byte()]) + body)
