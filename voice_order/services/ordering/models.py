"""Order models."""
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict


class TokenCategory(str, Enum):
    """Category assigned to a token by the classifier."""

    NUMBER = "Number"
    NOUN = "Noun"

    def __str__(self) -> str:
        """Return the string value of the category."""
        return self.value


class ClassifiedToken(BaseModel):
    """Token text resolved to a number or a noun."""

    model_config = ConfigDict(frozen=True)

    text: str
    category: TokenCategory

    @property
    def is_number(self) -> bool:
        return self.category == TokenCategory.NUMBER


class OrderLine(BaseModel):
    """Signed quantity change for one product. Negative means removal."""

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int


class OrderResult(BaseModel):
    """Outcome of processing one utterance."""

    delta: List[OrderLine] = []
    messages: List[str]
    view_menu: bool = False
    view_cart: bool = False

    def as_pair(self) -> Tuple[List[Tuple[str, int]], List[str]]:
        """Return the delta as (name, quantity) tuples together with the messages."""
        return [(line.name, line.quantity) for line in self.delta], list(self.messages)
