"""Cart API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict

from voice_order.core.dependencies import get_cart_manager
from voice_order.services.cart.manager import CartSessionManager
from voice_order.services.cart.models import Cart

router = APIRouter()
logger = logging.getLogger(__name__)


class CartLineResponse(BaseModel):
    """Cart line response model."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    quantity: int


class CartResponse(BaseModel):
    """Cart response model."""

    session_id: str
    lines: List[CartLineResponse] = []
    total_items: int = 0
    summary: str = ""


def build_cart_response(cart: Cart) -> CartResponse:
    """Build a cart response from a cart."""
    return CartResponse(
        session_id=cart.session_id,
        lines=[CartLineResponse(name=line.name, quantity=line.quantity) for line in cart.lines],
        total_items=cart.total_items(),
        summary=cart.get_summary(),
    )


@router.get("/api/carts/{session_id}", response_model=CartResponse)
async def get_cart(
    session_id: str,
    cart_manager: CartSessionManager = Depends(get_cart_manager),
):
    """Get a session's cart. Unknown sessions have an empty cart."""
    logger.info(f"[CART] Get cart - Session: {session_id}")
    cart = await cart_manager.get_cart(session_id)
    if cart is None:
        cart = Cart(session_id=session_id)
    return build_cart_response(cart)


@router.delete("/api/carts/{session_id}")
async def delete_cart(
    session_id: str,
    cart_manager: CartSessionManager = Depends(get_cart_manager),
):
    """Clear a session's cart."""
    logger.info(f"[CART] Delete cart - Session: {session_id}")
    if not await cart_manager.clear_cart(session_id):
        raise HTTPException(status_code=404, detail=f"Cart for session '{session_id}' not found")
    return {"message": f"Cart for session '{session_id}' cleared"}
