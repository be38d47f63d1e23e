"""
Card index service.

Loads Data Dragon set bundle files (set1-en_us.json, set2-en_us.json, ...)
and indexes their cards by CardCode. The codec never reads this index;
it is only used to put names on decoded cards.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from runedeck.config import settings
from runedeck.models.card_code import CardCode, InvalidCardCodeError

logger = logging.getLogger(__name__)

SET_BUNDLE_PATTERN = "set*.json"


class CardInfo(BaseModel):
    """
    The part of a set bundle card needed for display.

    Other set bundle fields are ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(..., alias="cardCode")
    name: str
    cost: int = 0


CardIndex = dict[CardCode, CardInfo]


def load_set_bundle(path: Path) -> list[CardInfo]:
    """
    Load the cards of a single set bundle file.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not a JSON list of cards
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"Set bundle {path} is not a list of cards")

    try:
        return [CardInfo.model_validate(card) for card in raw]
    except ValidationError as e:
        raise ValueError(f"Set bundle {path} has malformed cards: {e}") from e


def load_card_index(data_dir: Path | None = None) -> CardIndex:
    """
    Load every set bundle under a directory into a CardIndex.

    Unreadable bundles and cards with malformed codes are logged and
    skipped, so one broken file does not take the whole index down.

    Args:
        data_dir: Directory searched recursively. Defaults to settings.card_data_dir

    Returns:
        Dict mapping card codes to card info. Empty if nothing was found.
    """
    if data_dir is None:
        data_dir = settings.card_data_dir

    index: CardIndex = {}

    for path in sorted(data_dir.rglob(SET_BUNDLE_PATTERN)):
        try:
            cards = load_set_bundle(path)
        except (OSError, ValueError) as e:
            logger.warning("Skipping set bundle %s: %s", path, e)
            continue

        for card in cards:
            try:
                index[CardCode.parse(card.code)] = card
            except InvalidCardCodeError as e:
                logger.warning("Skipping card in %s: %s", path.name, e)

        logger.info("Loaded %d cards from %s", len(cards), path.name)

    return index


@lru_cache(maxsize=1)
def get_card_index() -> CardIndex:
    """
    Get cached card index for the configured data directory.

    Returns:
        Dict mapping card codes to card info.
        Cached after first load.
    """
    return load_card_index()
