"""Number word lexicon."""
from types import MappingProxyType
from typing import Dict, Mapping, Optional


class NumberLexicon:
    """Read-only mapping from Korean number words to integer values.

    Words live in two tiers: native single digits (한, 둘, 다섯 ...) and
    tens or larger magnitudes (열, 스물, 이십, 백 ...). The lexicon never
    composes words across tiers; "이십 오" stays two separate lookups.
    """

    def __init__(
        self,
        digits: Mapping[str, int],
        magnitudes: Mapping[str, int],
        allow_arabic_numerals: bool = False,
    ):
        self.digits: Mapping[str, int] = MappingProxyType(dict(digits))
        self.magnitudes: Mapping[str, int] = MappingProxyType(dict(magnitudes))
        self.allow_arabic_numerals = allow_arabic_numerals

    def value_of(self, word: str) -> int:
        """Sum the values of every entry in both tiers whose key equals ``word``.

        Returns 0 when nothing matches.
        """
        total = 0
        for tier in (self.digits, self.magnitudes):
            for key, value in tier.items():
                if key == word:
                    total += value
        if total == 0 and self.allow_arabic_numerals and word.isascii() and word.isdigit():
            total = int(word)
        return total

    def resolve(self, word: str) -> Optional[int]:
        """Return the integer value of ``word``, or None if it is not a number word."""
        value = self.value_of(word)
        return value if value else None

    def words(self) -> Dict[str, int]:
        """Return every known number word with its value."""
        return {**self.digits, **self.magnitudes}

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.resolve(word) is not None
