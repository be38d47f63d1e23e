"""Tests for card codes."""

import pytest

from runedeck.models.card_code import CardCode, InvalidCardCodeError, is_well_formed


class TestIsWellFormed:
    """Tests for the ASCII and length check."""

    @pytest.mark.parametrize("raw", ["01DE012", "06RU025", "01NX020T3"])
    def test_accepts_card_codes(self, raw: str) -> None:
        """Seven and nine character ASCII strings are well formed."""
        assert is_well_formed(raw)

    @pytest.mark.parametrize("raw", ["", "01DE01", "01DE0123", "01DE012T34", "01DÉ012"])
    def test_rejects_other_strings(self, raw: str) -> None:
        """Wrong lengths and non-ASCII strings are not well formed."""
        assert not is_well_formed(raw)

    def test_does_not_check_segments(self) -> None:
        """Unknown sets and regions still pass the shape check."""
        assert is_well_formed("99ZZabc")


class TestCardCodeParse:
    """Tests for CardCode.parse."""

    def test_parse_normalizes_input(self) -> None:
        """Whitespace is stripped and letters upper-cased."""
        assert CardCode.parse(" 01de012\n") == CardCode("01DE012")

    def test_parse_rejects_wrong_length(self) -> None:
        """Malformed codes raise InvalidCardCodeError."""
        with pytest.raises(InvalidCardCodeError) as exc_info:
            CardCode.parse("01DE12")

        assert exc_info.value.raw == "01DE12"

    def test_invalid_card_code_is_value_error(self) -> None:
        """Callers can catch the error as a ValueError."""
        with pytest.raises(ValueError):
            CardCode("nope")


class TestCardCodeSegments:
    """Tests for segment accessors."""

    def test_collectible_card_segments(self) -> None:
        """A 7-character code has set, region and card but no token."""
        code = CardCode("06RU025")

        assert code.set == "06"
        assert code.region == "RU"
        assert code.card == "025"
        assert code.token is None
        assert code.card_number == 25

    def test_token_segment(self) -> None:
        """A 9-character code exposes its token."""
        code = CardCode("01NX020T3")

        assert code.card == "020"
        assert code.token == "T3"

    def test_non_decimal_card_number(self) -> None:
        """card_number is None when the card segment is not a number."""
        assert CardCode("01DEabc").card_number is None

    def test_str_is_full_code(self) -> None:
        """str() returns the full code."""
        assert str(CardCode("01DE012")) == "01DE012"


class TestCardCodeFromParts:
    """Tests for CardCode.from_parts."""

    def test_zero_pads_card_number(self) -> None:
        """The card number is padded to three digits."""
        assert CardCode.from_parts("01", "FR", 8) == CardCode("01FR008")

    def test_three_digit_number(self) -> None:
        """Three-digit numbers are kept as they are."""
        assert CardCode.from_parts("05", "BC", 192).full == "05BC192"

    def test_oversized_number_fails_shape_check(self) -> None:
        """Numbers above 999 cannot form a card code."""
        with pytest.raises(InvalidCardCodeError):
            CardCode.from_parts("01", "DE", 1000)


class TestCardCodeOrdering:
    """Card codes sort by their full string."""

    def test_sorting(self) -> None:
        codes = [CardCode("02BW010"), CardCode("01DE012"), CardCode("01DE002")]

        assert [c.full for c in sorted(codes)] == ["01DE002", "01DE012", "02BW010"]

    def test_hashable(self) -> None:
        assert len({CardCode("01DE012"), CardCode.parse("01de012")}) == 1
