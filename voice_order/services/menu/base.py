"""Menu provider interface."""
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel


class MenuItem(BaseModel):
    """Product that can be ordered by voice."""

    name: str
    description: Optional[str] = None
    price: Optional[int] = None  # Won
    category: Optional[str] = None
    aliases: List[str] = []  # Other spoken names for the product

    def matches(self, spoken_name: str) -> bool:
        """Check whether a spoken product name refers to this item."""
        spoken_name = spoken_name.strip().lower()
        return any(name.lower() == spoken_name for name in [self.name, *self.aliases])


class Menu(BaseModel):
    """Products grouped by category."""

    items: List[MenuItem]
    categories: List[str] = []


class MenuProvider(ABC):
    """Source of the product menu."""

    @abstractmethod
    async def get_menu(self) -> Menu:
        """Get the full menu."""
        pass

    @abstractmethod
    async def validate_item(self, item_name: str) -> bool:
        """Check if a spoken product name is on the menu."""
        pass
