"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path
from typing import Dict, List
from fastapi.testclient import TestClient

from voice_order.main import app
from voice_order.core.dependencies import (
    build_tokenizer,
    get_menu_repository,
    get_order_engine,
)
from voice_order.core.exceptions import TokenizationError
from voice_order.services.lexicon.vocabulary import Vocabulary, load_vocabulary
from voice_order.services.menu.in_memory_menu import InMemoryMenuProvider
from voice_order.services.menu.repository import MenuRepository
from voice_order.services.nlp.tokenizer import RawToken, Tokenizer
from voice_order.services.ordering.engine import OrderEngine


class StubTokenizer(Tokenizer):
    """Tokenizer that returns preset tokens for known utterances."""

    def __init__(self, outputs: Dict[str, List[RawToken]]):
        self.outputs = outputs

    def tokenize(self, text: str) -> List[RawToken]:
        return list(self.outputs.get(text, []))


class FailingTokenizer(Tokenizer):
    """Tokenizer that always fails."""

    def tokenize(self, text: str) -> List[RawToken]:
        raise TokenizationError("malformed input")


@pytest.fixture(scope="session")
def vocabulary() -> Vocabulary:
    """Bundled vocabulary."""
    return load_vocabulary()


@pytest.fixture
def lexicon(vocabulary):
    """Number lexicon from the bundled vocabulary."""
    return vocabulary.number_lexicon()


@pytest.fixture
def engine(vocabulary) -> OrderEngine:
    """Order engine with the whitespace tokenizer."""
    return OrderEngine(build_tokenizer("whitespace", vocabulary), vocabulary)


@pytest.fixture
def digit_vocabulary(vocabulary) -> Vocabulary:
    """Vocabulary that also accepts Arabic numerals."""
    numbers = vocabulary.numbers.model_copy(update={"allow_arabic_numerals": True})
    return vocabulary.model_copy(update={"numbers": numbers})


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_menu_repository(test_menu_path):
    """Create menu repository with test data."""
    provider = InMemoryMenuProvider(menu_file=str(test_menu_path))
    return MenuRepository(provider)


@pytest.fixture
def clean_cart_sessions():
    """Clean up cart sessions before and after tests."""
    from voice_order.services.cart import manager
    manager._sessions.clear()
    yield
    manager._sessions.clear()


@pytest.fixture
def test_client(engine, test_menu_repository, clean_cart_sessions):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_order_engine] = lambda: engine
    app.dependency_overrides[get_menu_repository] = lambda: test_menu_repository

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
def make_engine(vocabulary):
    """Factory for engines over a custom tokenizer or preset tokens."""
    def _make_engine(tokenizer=None, outputs=None, vocab=None):
        if tokenizer is None:
            tokenizer = StubTokenizer(outputs or {})
        return OrderEngine(tokenizer, vocab or vocabulary)
    return _make_engine


@pytest.fixture
def failing_tokenizer():
    """Tokenizer that raises TokenizationError."""
    return FailingTokenizer()
