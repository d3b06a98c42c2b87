"""Voice order endpoint."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from voice_order.api.carts import CartResponse, build_cart_response
from voice_order.api.menu import MenuResponse, build_menu_response
from voice_order.core.dependencies import get_cart_manager, get_menu_repository, get_order_engine
from voice_order.services.cart.manager import CartSessionManager
from voice_order.services.menu.repository import MenuRepository
from voice_order.services.ordering.engine import OrderEngine
from voice_order.services.ordering.models import OrderLine

router = APIRouter()
logger = logging.getLogger(__name__)


class VoiceOrderRequest(BaseModel):
    """Voice order request model."""

    utterance: str
    session_id: Optional[str] = None


class VoiceOrderResponse(BaseModel):
    """Voice order response model."""

    delta: List[OrderLine] = []
    messages: List[str]
    view_menu: bool = False
    view_cart: bool = False
    unknown_items: List[str] = []  # Ordered names that are not on the menu
    cart: Optional[CartResponse] = None
    menu: Optional[MenuResponse] = None


@router.post("/api/voice-order", response_model=VoiceOrderResponse)
async def process_voice_order(
    request: Request,
    body: VoiceOrderRequest,
    engine: OrderEngine = Depends(get_order_engine),
    cart_manager: CartSessionManager = Depends(get_cart_manager),
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """
    Process a transcribed utterance.

    With a session id the delta is applied to that session's cart and the
    updated cart is returned. Names in the delta that are not on the menu
    are listed in unknown_items; the delta itself is applied unchanged.
    """
    logger.info(
        f"[VOICE ORDER] Request received - Session: {body.session_id}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        # The tokenizer may block (Okt runs on the JVM)
        result = await run_in_threadpool(engine.process_order, body.utterance)

        response = VoiceOrderResponse(
            delta=result.delta,
            messages=result.messages,
            view_menu=result.view_menu,
            view_cart=result.view_cart,
        )
        if body.session_id:
            cart = await cart_manager.apply_delta(body.session_id, result.delta)
            response.cart = build_cart_response(cart)
        if result.delta:
            response.unknown_items = await menu_repository.find_unknown_items(
                line.name for line in result.delta
            )
            if response.unknown_items:
                logger.info(f"[VOICE ORDER] Names not on the menu: {response.unknown_items}")
        if result.view_menu:
            response.menu = await build_menu_response(menu_repository)

        logger.info(f"[VOICE ORDER] Responding - Session: {body.session_id}, message: '{result.messages[0]}'")
        return response

    except Exception as e:
        logger.error(
            f"[VOICE ORDER] Error processing utterance - Session: {body.session_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error processing voice order: {str(e)}")
