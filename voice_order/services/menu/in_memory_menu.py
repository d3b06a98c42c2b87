"""In-memory menu provider."""
import yaml
from pathlib import Path
from typing import Optional
from voice_order.services.menu.base import Menu, MenuItem, MenuProvider


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)
        self._menu: Optional[Menu] = None

    async def _load_menu(self) -> Menu:
        """Load menu from YAML file."""
        if self._menu is None:
            if not self.menu_file.exists():
                # Default menu if file doesn't exist
                self._menu = Menu(
                    items=[
                        MenuItem(name="우유", description="흰 우유 1L", price=2800, category="유제품"),
                        MenuItem(name="식빵", description="우유 식빵", price=3500, category="베이커리", aliases=["빵"]),
                        MenuItem(name="콜라", description="캔 콜라 355ml", price=1500, category="음료"),
                    ],
                    categories=["유제품", "베이커리", "음료"],
                )
            else:
                with open(self.menu_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                    items = [
                        MenuItem(**item) for item in data.get("items", [])
                    ]
                    categories = data.get("categories") or list(
                        dict.fromkeys(item.category for item in items if item.category)
                    )
                    self._menu = Menu(items=items, categories=categories)
        return self._menu

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self._load_menu()

    async def validate_item(self, item_name: str) -> bool:
        """Check if a spoken product name is on the menu, by name or alias."""
        menu = await self._load_menu()
        return any(item.matches(item_name) for item in menu.items)
