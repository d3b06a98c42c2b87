"""Confirmation message composition."""
from typing import Iterable, List

from voice_order.services.lexicon.vocabulary import Messages
from voice_order.services.ordering.models import OrderLine


class MessageComposer:
    """Builds the spoken confirmation for an order delta."""

    def __init__(self, messages: Messages):
        self.messages = messages

    @staticmethod
    def _summary(lines: Iterable[OrderLine]) -> str:
        return " ".join(f"{line.name} {abs(line.quantity)}개" for line in lines)

    def compose(
        self, delta: List[OrderLine], view_menu: bool = False, view_cart: bool = False
    ) -> List[str]:
        """
        Compose one or two messages for a delta.

        Returns:
            Add confirmation and/or remove confirmation (add first); otherwise
            a view message; otherwise the fallback asking the user to repeat.
        """
        added = self._summary(line for line in delta if line.quantity >= 1)
        removed = self._summary(line for line in delta if line.quantity <= -1)

        result = []
        if added:
            result.append(added + self.messages.add_suffix)
        if removed:
            result.append(removed + self.messages.remove_suffix)

        if not result:
            if view_menu:
                result.append(self.messages.view_menu)
            elif view_cart:
                result.append(self.messages.view_cart)

        if not result:
            result.append(self.messages.fallback)
        return result
