"""Cart models."""
from typing import Iterable, List, Optional

from pydantic import BaseModel

from voice_order.services.ordering.models import OrderLine


class CartLine(BaseModel):
    """Product in the cart."""

    name: str
    quantity: int


class Cart(BaseModel):
    """Shopping cart owned by one session."""

    session_id: str
    lines: List[CartLine] = []

    def get_line(self, name: str) -> Optional[CartLine]:
        """Get the cart line for a product."""
        for line in self.lines:
            if line.name == name:
                return line
        return None

    def apply(self, delta: Iterable[OrderLine]) -> None:
        """Apply delta lines in order.

        Quantities are summed per product and a product whose quantity
        drops to zero or below leaves the cart.
        """
        for change in delta:
            line = self.get_line(change.name)
            current = line.quantity if line else 0
            quantity = current + change.quantity
            if quantity <= 0:
                if line:
                    self.lines.remove(line)
            elif line:
                line.quantity = quantity
            else:
                self.lines.append(CartLine(name=change.name, quantity=quantity))

    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def get_summary(self) -> str:
        """Get a spoken summary of the cart."""
        if not self.lines:
            return "장바구니가 비어 있습니다"
        return ", ".join(f"{line.name} {line.quantity}개" for line in self.lines)
