"""FastAPI dependencies."""
from functools import lru_cache

from voice_order.core.config import settings
from voice_order.services.cart.manager import CartSessionManager
from voice_order.services.lexicon.vocabulary import Vocabulary, load_vocabulary
from voice_order.services.menu.in_memory_menu import InMemoryMenuProvider
from voice_order.services.menu.repository import MenuRepository
from voice_order.services.nlp.okt import OktTokenizer
from voice_order.services.nlp.tokenizer import Tokenizer, WhitespaceTokenizer
from voice_order.services.ordering.engine import OrderEngine


@lru_cache
def get_vocabulary() -> Vocabulary:
    """Get the shared vocabulary."""
    return load_vocabulary(settings.vocabulary_file)


def build_tokenizer(backend: str, vocabulary: Vocabulary) -> Tokenizer:
    """Build the tokenizer for a configured backend."""
    if backend == "okt":
        return OktTokenizer()
    if backend == "whitespace":
        return WhitespaceTokenizer(number_words=vocabulary.number_lexicon().words())
    raise ValueError(f"Unknown tokenizer backend: {backend}")


@lru_cache
def get_order_engine() -> OrderEngine:
    """Get the shared order engine."""
    vocabulary = get_vocabulary()
    return OrderEngine(
        tokenizer=build_tokenizer(settings.tokenizer_backend, vocabulary),
        vocabulary=vocabulary,
    )


def get_menu_repository() -> MenuRepository:
    """Get menu repository instance."""
    return MenuRepository(provider=InMemoryMenuProvider(settings.menu_file))


def get_cart_manager() -> CartSessionManager:
    """Get cart session manager instance."""
    return CartSessionManager()
