"""Cart session manager."""
import logging
from typing import Dict, Iterable, Optional

from voice_order.services.cart.models import Cart
from voice_order.services.ordering.models import OrderLine

logger = logging.getLogger(__name__)

# Module-level cart storage (persists across requests)
# In production, use Redis or similar
_sessions: Dict[str, Cart] = {}


class CartSessionManager:
    """Keeps one cart per session and folds order deltas into it."""

    async def get_cart(self, session_id: str) -> Optional[Cart]:
        """Get an existing cart."""
        return _sessions.get(session_id)

    async def get_or_create_cart(self, session_id: str) -> Cart:
        """Get a cart, creating an empty one if needed."""
        cart = _sessions.get(session_id)
        if cart is None:
            cart = Cart(session_id=session_id)
            _sessions[session_id] = cart
            logger.info(f"[CART] Created cart - Session: {session_id}")
        return cart

    async def apply_delta(self, session_id: str, delta: Iterable[OrderLine]) -> Cart:
        """Apply an order delta to a session's cart."""
        delta = list(delta)
        cart = await self.get_or_create_cart(session_id)
        cart.apply(delta)
        logger.info(
            f"[CART] Applied {len(delta)} delta lines - Session: {session_id}, "
            f"items now: {cart.total_items()}"
        )
        return cart

    async def clear_cart(self, session_id: str) -> bool:
        """Delete a session's cart. Returns False if there was none."""
        cart = _sessions.pop(session_id, None)
        if cart is None:
            return False
        logger.info(f"[CART] Cleared cart - Session: {session_id}")
        return True
