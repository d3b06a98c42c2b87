"""Morphological tokenizer interface."""
import logging
import re
from abc import ABC, abstractmethod
from typing import Iterable, List

from pydantic import BaseModel, ConfigDict

from voice_order.core.exceptions import TokenizationError

logger = logging.getLogger(__name__)


class RawToken(BaseModel):
    """A token as produced by a morphological tokenizer."""

    model_config = ConfigDict(frozen=True)

    text: str
    stem: str = ""  # Dictionary form for verbs/adjectives, empty otherwise
    pos: str = "Noun"


class Tokenizer(ABC):
    """Abstract base class for tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> List[RawToken]:
        """
        Split text into ordered tokens.

        Raises:
            TokenizationError: If the text cannot be tokenized
        """
        pass


_PUNCTUATION = re.compile(r"[.,!?~]+")


class WhitespaceTokenizer(Tokenizer):
    """Tokenizer that splits on whitespace.

    Counter suffixes are split off words whose remainder is a number
    ("두개" -> "두", "개"). No stemming is performed.
    """

    def __init__(self, counters: Iterable[str] = ("개", "잔"), number_words: Iterable[str] = ()):
        self.counters = tuple(sorted(counters, key=len, reverse=True))
        self.number_words = frozenset(number_words)

    def _is_number(self, word: str) -> bool:
        return word in self.number_words or (word.isascii() and word.isdigit())

    def _split_counter(self, word: str) -> List[str]:
        for counter in self.counters:
            if word.endswith(counter) and len(word) > len(counter):
                head = word[: -len(counter)]
                if self._is_number(head):
                    return [head, counter]
        return [word]

    def tokenize(self, text: str) -> List[RawToken]:
        if not isinstance(text, str):
            raise TokenizationError(f"Expected text, got {type(text).__name__}")

        tokens = []
        for word in _PUNCTUATION.sub(" ", text).split():
            for part in self._split_counter(word):
                pos = "Number" if self._is_number(part) else "Noun"
                tokens.append(RawToken(text=part, pos=pos))
        logger.debug(f"[TOKENIZER] {len(tokens)} tokens from '{text}'")
        return tokens
