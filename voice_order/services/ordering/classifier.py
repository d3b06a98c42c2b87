"""Token classification."""
from typing import Iterable, List

from voice_order.services.lexicon.numbers import NumberLexicon
from voice_order.services.nlp.tokenizer import RawToken
from voice_order.services.ordering.models import ClassifiedToken, TokenCategory


class TokenClassifier:
    """Marks raw tokens as numbers or nouns using the number lexicon."""

    def __init__(self, lexicon: NumberLexicon):
        self.lexicon = lexicon

    def classify_token(self, token: RawToken) -> ClassifiedToken:
        """
        Classify a single token.

        Number words become a Number token carrying the decimal value. Anything
        else becomes a Noun carrying the stem, or the surface text when the
        tokenizer gave no stem.
        """
        value = self.lexicon.value_of(token.text)
        if value != 0:
            return ClassifiedToken(text=str(value), category=TokenCategory.NUMBER)
        return ClassifiedToken(text=token.stem or token.text, category=TokenCategory.NOUN)

    def classify(self, tokens: Iterable[RawToken]) -> List[ClassifiedToken]:
        """Classify tokens in order. No token is dropped."""
        return [self.classify_token(token) for token in tokens]
