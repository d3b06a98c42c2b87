"""Vocabulary loading for the voice order engine."""
import logging
import re
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from voice_order.core.exceptions import VocabularyError
from voice_order.services.lexicon.numbers import NumberLexicon

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_FILE = Path(__file__).parent / "data" / "vocabulary.yaml"


class NumberTiers(BaseModel):
    """Number words grouped by tier."""

    model_config = ConfigDict(frozen=True)

    digits: Dict[str, int]
    magnitudes: Dict[str, int] = {}
    allow_arabic_numerals: bool = False

    @field_validator("digits", "magnitudes")
    @classmethod
    def _positive_values(cls, value: Dict[str, int]) -> Dict[str, int]:
        bad = [word for word, number in value.items() if number <= 0]
        if bad:
            raise ValueError(f"number words must map to positive values: {bad}")
        return value


class Keywords(BaseModel):
    """Commit keywords."""

    model_config = ConfigDict(frozen=True)

    add: FrozenSet[str]
    remove: FrozenSet[str]


class ViewPatterns(BaseModel):
    """Regular expressions that must fully match a token to raise a view intent."""

    model_config = ConfigDict(frozen=True)

    menu: str
    cart: str

    @field_validator("menu", "cart")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid pattern {value!r}: {e}") from e
        return value


class Messages(BaseModel):
    """Fixed response texts."""

    model_config = ConfigDict(frozen=True)

    add_suffix: str
    remove_suffix: str
    view_menu: str
    view_cart: str
    fallback: str


class Vocabulary(BaseModel):
    """Immutable vocabulary shared by every engine call."""

    model_config = ConfigDict(frozen=True)

    numbers: NumberTiers
    keywords: Keywords
    stop_words: FrozenSet[str] = frozenset()
    view_patterns: ViewPatterns
    messages: Messages

    def number_lexicon(self) -> NumberLexicon:
        """Build the number lexicon described by this vocabulary."""
        return NumberLexicon(
            digits=self.numbers.digits,
            magnitudes=self.numbers.magnitudes,
            allow_arabic_numerals=self.numbers.allow_arabic_numerals,
        )

    def is_add_keyword(self, word: str) -> bool:
        return word in self.keywords.add

    def is_remove_keyword(self, word: str) -> bool:
        return word in self.keywords.remove

    def is_commit_keyword(self, word: str) -> bool:
        return self.is_add_keyword(word) or self.is_remove_keyword(word)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words


def load_vocabulary(vocabulary_file: Optional[Union[str, Path]] = None) -> Vocabulary:
    """
    Load a vocabulary from a YAML file.

    Args:
        vocabulary_file: Path to the YAML file, or None for the bundled one

    Returns:
        Parsed Vocabulary

    Raises:
        VocabularyError: If the file is missing, unreadable or incomplete
    """
    path = Path(vocabulary_file) if vocabulary_file else DEFAULT_VOCABULARY_FILE
    if not path.exists():
        raise VocabularyError(f"Vocabulary file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise VocabularyError(f"Could not parse vocabulary file {path}: {e}") from e

    if not isinstance(data, dict):
        raise VocabularyError(f"Vocabulary file {path} must contain a mapping")

    try:
        vocabulary = Vocabulary(**data)
    except ValidationError as e:
        raise VocabularyError(f"Invalid vocabulary in {path}: {e}") from e

    logger.info(
        f"[VOCABULARY] Loaded {path.name} - "
        f"{len(vocabulary.numbers.digits) + len(vocabulary.numbers.magnitudes)} number words, "
        f"{len(vocabulary.keywords.add)} add / {len(vocabulary.keywords.remove)} remove keywords, "
        f"{len(vocabulary.stop_words)} stop words"
    )
    return vocabulary
