from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import CardDecodeError


class Card(BaseModel):
    """Represents a Magic: The Gathering card from the magicthegathering.io API"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    mana_cost: str = Field(alias="manaCost")
    type: str
    rarity: str
    set_name: str = Field(alias="setName")
    flavor: Optional[str] = None
    text: str
    artist: str
    number: str
    id: str

    def __hash__(self) -> int:
        """Make Card hashable using its unique id"""
        return hash(self.id)

    def __eq__(self, other) -> bool:
        """Override equality to use id for comparison"""
        if not isinstance(other, Card):
            return False
        return self.id == other.id


class CardsList(BaseModel):
    """Top level payload of the /cards endpoint"""
    cards: List[Card]


def decode_cards(data: bytes) -> List[Card]:
    """
    Decode a raw /cards response body into cards, keeping API order.

    Args:
        data: Response body bytes

    Returns:
        List of decoded cards, possibly empty

    Raises:
        CardDecodeError: If the body is not JSON or any card misses a required field
    """
    try:
        return CardsList.model_validate_json(data).cards
    except ValidationError as e:
        raise CardDecodeError(str(e)) from e
