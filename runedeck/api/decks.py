"""
Deck API endpoints.

Provides decoding of deck codes for display and encoding of card lists
into canonical deck codes.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from runedeck.config import settings
from runedeck.deckcode import DeckEncodingError, encode
from runedeck.models.card_code import CardCode, InvalidCardCodeError
from runedeck.models.deck import Deck
from runedeck.models.legality import DeckFormatRules
from runedeck.services.card_index import CardIndex, get_card_index
from runedeck.services.deck_display import InvalidDeckCodeError, describe_code

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])


def get_format_rules() -> DeckFormatRules:
    """Legality rules for the configured rotation."""
    return settings.format_rules()


class DecodeRequest(BaseModel):
    """Request model for decoding a deck code."""

    code: str = Field(
        ...,
        min_length=1,
        description="Deck code to decode",
        examples=["CEAAAAIBAEAQQ"],
    )
    name: str | None = Field(default=None, description="Optional deck name")


class DeckLineResponse(BaseModel):
    """A card of a decoded deck."""

    count: int
    code: str
    name: str


class DeckResponse(BaseModel):
    """Response model for a decoded deck."""

    code: str | None
    name: str | None = None
    cards: list[DeckLineResponse] = Field(default_factory=list)
    total_cards: int = 0
    format: str
    regions: list[str] = Field(default_factory=list)
    text: str


class EncodeRequest(BaseModel):
    """Request model for encoding a card list."""

    cards: dict[str, int] = Field(
        ...,
        description="Map of card codes to copy counts",
        examples=[{"01DE012": 3, "01DE031": 2}],
    )


class EncodeResponse(BaseModel):
    """Response model for an encoded deck."""

    code: str
    total_cards: int


@router.post("/decode", response_model=DeckResponse)
async def decode_deck(
    request: DecodeRequest,
    index: Annotated[CardIndex, Depends(get_card_index)],
    rules: Annotated[DeckFormatRules, Depends(get_format_rules)],
) -> DeckResponse:
    """
    Decode a deck code and describe its cards.

    Returns 400 with a generic message if the code is invalid.
    """
    try:
        view = describe_code(request.code, index, rules, name=request.name)
    except InvalidDeckCodeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return DeckResponse(
        code=view.code,
        name=view.name,
        cards=[
            DeckLineResponse(count=line.count, code=line.code, name=line.name)
            for line in view.lines
        ],
        total_cards=view.total_cards,
        format=view.format,
        regions=list(view.regions),
        text=view.to_text(),
    )


@router.post("/encode", response_model=EncodeResponse)
async def encode_deck(request: EncodeRequest) -> EncodeResponse:
    """
    Encode a card list into its canonical deck code.

    Returns 400 for malformed card codes or counts,
    422 if the deck cannot be represented as a deck code.
    """
    deck = Deck()
    for raw_code, count in request.cards.items():
        try:
            deck.insert(CardCode.parse(raw_code), count)
        except (InvalidCardCodeError, ValueError) as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    try:
        code = encode(deck)
    except DeckEncodingError as e:
        logger.warning("Cannot encode deck: %s", e)
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e

    return EncodeResponse(code=code, total_cards=deck.total_cards())
