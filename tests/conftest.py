import pytest

from runedeck.models.card_code import CardCode
from runedeck.models.legality import DeckFormatRules
from runedeck.services.card_index import CardIndex, CardInfo


@pytest.fixture
def all_sets_rules() -> DeckFormatRules:
    """Rules with every released set and region in rotation."""
    return DeckFormatRules.from_lists(
        sets=["01", "02", "03", "04", "05", "06"],
        regions=["DE", "FR", "IO", "NX", "PZ", "SI", "BW", "SH", "MT", "BC", "RU"],
    )


@pytest.fixture
def card_index() -> CardIndex:
    """A tiny card index."""
    cards = [
        CardInfo(code="01FR008", name="Poro", cost=1),
        CardInfo(code="01DE012", name="Vanguard Lookout", cost=2),
        CardInfo(code="01DE031", name="Silverwing Diver", cost=2),
    ]
    return {CardCode(card.code): card for card in cards}
