"""View intent detection."""
import re
from enum import Enum
from typing import FrozenSet

from voice_order.services.lexicon.vocabulary import ViewPatterns


class ViewIntent(str, Enum):
    """Requests to hear a listing rather than change the cart."""

    MENU = "view_menu"
    CART = "view_cart"

    def __str__(self) -> str:
        """Return the string value of the intent."""
        return self.value


class ViewIntentClassifier:
    """Detects view intents by full-matching token text against patterns."""

    def __init__(self, patterns: ViewPatterns):
        self._patterns = (
            (ViewIntent.MENU, re.compile(patterns.menu)),
            (ViewIntent.CART, re.compile(patterns.cart)),
        )

    def classify(self, text: str) -> FrozenSet[ViewIntent]:
        """Return every view intent whose pattern fully matches ``text``."""
        return frozenset(
            intent for intent, pattern in self._patterns if pattern.fullmatch(text)
        )
