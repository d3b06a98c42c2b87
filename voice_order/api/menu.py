"""Menu API endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict

from voice_order.core.dependencies import get_menu_repository
from voice_order.services.menu.repository import MenuRepository

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuItemResponse(BaseModel):
    """Menu item response model."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    description: Optional[str] = None
    price: Optional[int] = None
    category: Optional[str] = None
    aliases: List[str] = []


class MenuResponse(BaseModel):
    """Menu response model."""

    items: List[MenuItemResponse]
    categories: List[str] = []
    text: str = ""


async def build_menu_response(menu_repository: MenuRepository) -> MenuResponse:
    """Build the menu response, including the text to read aloud."""
    menu = await menu_repository.get_menu()
    return MenuResponse(
        items=[MenuItemResponse.model_validate(item, from_attributes=True) for item in menu.items],
        categories=menu.categories,
        text=await menu_repository.get_menu_text(),
    )


@router.get("/api/menu", response_model=MenuResponse)
async def get_menu(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get the full menu."""
    logger.info(
        f"[MENU] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        response = await build_menu_response(menu_repository)
        logger.info(f"[MENU] Menu loaded - {len(response.items)} items, {len(response.categories)} categories")
        return response

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching menu: {str(e)}")
