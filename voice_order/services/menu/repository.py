"""Menu repository."""
from typing import Iterable, List
from voice_order.services.menu.base import Menu, MenuProvider


class MenuRepository:
    """Repository for menu operations."""

    def __init__(self, provider: MenuProvider):
        self.provider = provider

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self.provider.get_menu()

    async def validate_item(self, item_name: str) -> bool:
        """Check if a product is on the menu."""
        return await self.provider.validate_item(item_name)

    async def find_unknown_items(self, item_names: Iterable[str]) -> List[str]:
        """Return the names that are not on the menu, once each, in order."""
        unknown = []
        for name in dict.fromkeys(item_names):
            if not await self.validate_item(name):
                unknown.append(name)
        return unknown

    async def get_menu_text(self) -> str:
        """Get the menu as a sentence suitable for reading aloud."""
        menu = await self.get_menu()
        if not menu.items:
            return "등록된 메뉴가 없습니다"
        parts = []
        for category in menu.categories:
            names = [item.name for item in menu.items if item.category == category]
            if names:
                parts.append(f"{category}: {', '.join(names)}")
        uncategorized = [item.name for item in menu.items if item.category not in menu.categories]
        if uncategorized:
            parts.append(", ".join(uncategorized))
        return ". ".join(parts)
