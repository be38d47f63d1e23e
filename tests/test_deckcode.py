"""Tests for the deck code encoder and decoder."""

import pytest

from runedeck.deckcode import (
    CardNumberOverflowError,
    DeckDecodingError,
    DeckEncodingError,
    DuplicateCardError,
    InvalidEncodingError,
    TruncatedBufferError,
    UnknownRegionError,
    UnsupportedContentError,
    UnsupportedFormatVersionError,
    decode,
    encode,
    read_header,
)
from runedeck.models.card_code import CardCode
from runedeck.models.deck import Deck
from runedeck.models.version import DeckCodeFormat, DeckCodeVersion

LONELY_PORO = "CEAAAAIBAEAQQ"
TWISTED_SHRIMP = "CICACBAFAEBAGBQICABQCBJLF4YQOAQGAQEQYEQUDITAAAIBAMCQO"
PALTRI = (
    "CQAAADABAICACAIFBLAACAIFAEHQCBQBEQBAGBADAQBAIAIKBUBAKBAWDUBQIBACA4GAMAIBAMCAYHJB"
    "GADAMBAOCQKRMKBLA4AQIAQ3D4QSIKZYBACAODJ3JRIW3AABQIAYUAI"
)

# The same deck, with groups ordered by size (as Riot's encoder does)
# and by set and region (as ours does)
SHRIMP_BY_SIZE = "CICACAYGBAAQIBIBAMAQKKZPGEDQEBQEBEGBEFA2EYAQCAYGCABACAIFGUAQGBIH"
SHRIMP_CANONICAL = "CICAGAIFFMXTCBYCAYCASDASCQNCMAIDAYEACBAFAEAQCAYGCABACAIFGUAQGBIH"


def deck_of(**cards: int) -> Deck:
    """Build a deck from keyword arguments, e.g. deck_of(_01DE012=3)."""
    return Deck.from_mapping({CardCode(code.lstrip("_")): n for code, n in cards.items()})


class TestDecode:
    """Tests for decoding known deck codes."""

    def test_lonely_poro(self) -> None:
        """A single Poro, one copy."""
        assert decode(LONELY_PORO) == deck_of(_01FR008=1)

    def test_twisted_shrimp(self) -> None:
        deck = decode(TWISTED_SHRIMP)

        assert deck.total_cards() == 40
        assert deck.get_count(CardCode("04SI001")) == 3
        assert deck.get_count(CardCode("02BW038")) == 3
        assert deck.get_count(CardCode("03SI007")) == 1

    def test_paltri_two_byte_card_numbers(self) -> None:
        """Card numbers of 128 and above are read as two-byte varints."""
        deck = decode(PALTRI)

        assert deck.total_cards() == 40
        assert len(deck) == 40
        assert CardCode("05BC192") in deck
        assert CardCode("04SH128") in deck
        assert CardCode("04SH138") in deck

    def test_group_order_does_not_matter(self) -> None:
        """Codes listing groups in a different order decode to the same deck."""
        assert decode(SHRIMP_BY_SIZE) == decode(SHRIMP_CANONICAL)

    def test_extra_section(self) -> None:
        """Cards with more than three copies are read from the trailing section."""
        assert decode("CEAAAAAEAEAAKBQBAAVA") == deck_of(_01DE005=4, _01DE042=6)

    def test_empty_deck(self) -> None:
        assert decode("CEAAAAA") == Deck()

    def test_case_and_whitespace_tolerated(self) -> None:
        assert decode(f"  {LONELY_PORO.lower()}\n") == decode(LONELY_PORO)

    def test_version_nibble_not_enforced(self) -> None:
        """A code announcing a newer version than its cards need still decodes."""
        assert decode("CUAAAAIBAEAQQ") == deck_of(_01FR008=1)
        assert decode("D4AAAAIBAEAQQ") == deck_of(_01FR008=1)


class TestDecodeErrors:
    """Tests for malformed deck codes."""

    @pytest.mark.parametrize("code", ["CEAAAAIBAEAQ1", "CEAAAAIBAEAQQ!", "C", "CEAAAAIBAÉ"])
    def test_invalid_base32(self, code: str) -> None:
        with pytest.raises(InvalidEncodingError):
            decode(code)

    def test_unknown_format(self) -> None:
        """Header 0x21 announces format 2, which does not exist."""
        with pytest.raises(UnsupportedFormatVersionError) as exc_info:
            decode("EEAAAAA")

        assert exc_info.value.format_id == 2

    @pytest.mark.parametrize(
        "code",
        [
            "",  # no header
            "CE",  # header only
            "CEAQ",  # one 3x group announced, none present
            "CEAAAAICAEAAK",  # group of two cards holding one
            "CEAAAAAEAE",  # partial trailing record
        ],
    )
    def test_truncated(self, code: str) -> None:
        with pytest.raises(TruncatedBufferError):
            decode(code)

    def test_duplicate_card(self) -> None:
        """The same card listed in two groups."""
        with pytest.raises(DuplicateCardError) as exc_info:
            decode("CEAAAAQBAEAAKAIBAACQ")

        assert exc_info.value.card_code == "01DE005"

    def test_unknown_region(self) -> None:
        """Region id 8 is unassigned."""
        with pytest.raises(UnknownRegionError) as exc_info:
            decode("CEAAAAIBAEEAK")

        assert exc_info.value.region_id == 8

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(DeckDecodingError):
            decode("not a deck code")


class TestReadHeader:
    """Tests for read_header."""

    def test_header_of_known_codes(self) -> None:
        assert read_header(LONELY_PORO).version == 1
        assert read_header(TWISTED_SHRIMP).version == 2
        assert read_header(PALTRI).version == 4
        assert read_header(PALTRI).format is DeckCodeFormat.F1

    def test_unknown_version_kept_raw(self) -> None:
        header = read_header("D4AAAAIBAEAQQ")

        assert header.version == 15
        assert header.known_version is None

    @pytest.mark.parametrize("code", [LONELY_PORO, TWISTED_SHRIMP, PALTRI])
    def test_header_matches_required_version(self, code: str) -> None:
        """The version nibble equals the highest version the cards need."""
        assert read_header(code).known_version is decode(code).min_version()


class TestEncode:
    """Tests for encoding decks."""

    def test_lonely_poro(self) -> None:
        assert encode(deck_of(_01FR008=1)) == LONELY_PORO

    def test_canonical_group_order(self) -> None:
        """Groups are written by set then region, whatever order they came in."""
        assert encode(decode(SHRIMP_BY_SIZE)) == SHRIMP_CANONICAL

    def test_extra_section(self) -> None:
        assert encode(deck_of(_01DE042=6, _01DE005=4)) == "CEAAAAAEAEAAKBQBAAVA"

    def test_two_byte_card_number(self) -> None:
        assert encode(deck_of(_01DE200=1)) == "CEAAAAIBAEAMQAI"
        assert decode("CEAAAAIBAEAMQAI") == deck_of(_01DE200=1)

    def test_empty_deck(self) -> None:
        assert encode(Deck()) == "CEAAAAA"

    def test_no_padding(self) -> None:
        assert "=" not in encode(decode(PALTRI))

    def test_header_uses_lowest_version(self) -> None:
        """A stale version nibble is replaced by the one the cards need."""
        assert encode(decode("CUAAAAIBAEAQQ")) == LONELY_PORO

    @pytest.mark.parametrize(
        ("cards", "version"),
        [
            ({"01DE012": 3}, DeckCodeVersion.V1),
            ({"01DE012": 3, "02BW010": 2}, DeckCodeVersion.V2),
            ({"04SH020": 1}, DeckCodeVersion.V3),
            ({"05BC192": 1, "01DE012": 1}, DeckCodeVersion.V4),
            ({"06RU025": 1}, DeckCodeVersion.V5),
        ],
    )
    def test_version_nibble(self, cards: dict[str, int], version: DeckCodeVersion) -> None:
        deck = Deck.from_mapping({CardCode(c): n for c, n in cards.items()})

        assert read_header(encode(deck)).known_version is version


class TestEncodeErrors:
    """Tests for decks that cannot be encoded."""

    @pytest.mark.parametrize("code", ["01XX001", "07DE001", "01NX020T3"])
    def test_unsupported_content(self, code: str) -> None:
        """Unknown regions, unknown sets and tokens cannot be encoded."""
        with pytest.raises(UnsupportedContentError) as exc_info:
            encode(Deck.from_mapping({CardCode(code): 1}))

        assert exc_info.value.card_code == code

    @pytest.mark.parametrize("code", ["01DE256", "01DE999", "01DEabc"])
    def test_card_number_overflow(self, code: str) -> None:
        with pytest.raises(CardNumberOverflowError):
            encode(Deck.from_mapping({CardCode(code): 2}))

    def test_overflow_in_extra_section(self) -> None:
        with pytest.raises(CardNumberOverflowError):
            encode(Deck.from_mapping({CardCode("01DE300"): 7}))

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(DeckEncodingError):
            encode(Deck.from_mapping({CardCode("01XX001"): 1}))


class TestRoundTrip:
    """Encoding and decoding are inverse operations."""

    @pytest.mark.parametrize("code", [LONELY_PORO, TWISTED_SHRIMP, PALTRI, SHRIMP_BY_SIZE])
    def test_deck_survives_round_trip(self, code: str) -> None:
        deck = decode(code)

        assert decode(encode(deck)) == deck

    @pytest.mark.parametrize("code", [LONELY_PORO, TWISTED_SHRIMP, PALTRI])
    def test_encoder_output_is_stable(self, code: str) -> None:
        """Re-encoding an encoder-produced code gives the same string."""
        canonical = encode(decode(code))

        assert encode(decode(canonical)) == canonical

    def test_mixed_counts(self) -> None:
        deck = deck_of(
            _01DE012=3,
            _01DE031=3,
            _02BW010=2,
            _05BC192=1,
            _06RU025=1,
            _01FR008=4,
            _03MT002=255,
        )

        assert decode(encode(deck)) == deck
