"""Unit tests for tokenizer adapters."""
import pytest

from voice_order.core.exceptions import TokenizationError
from voice_order.services.nlp.okt import OktTokenizer
from voice_order.services.nlp.tokenizer import RawToken, WhitespaceTokenizer


class FakeOkt:
    """Stands in for konlpy's Okt with canned analyses."""

    def __init__(self, surfaces, stemmed):
        self.surfaces = surfaces
        self.stemmed = stemmed

    def normalize(self, text):
        return text.strip()

    def pos(self, phrase, norm=False, stem=False):
        return self.stemmed if stem else self.surfaces


class BrokenOkt:
    def normalize(self, text):
        raise RuntimeError("JVM exploded")


class TestWhitespaceTokenizer:
    """Test the whitespace tokenizer."""

    @pytest.fixture
    def tokenizer(self, lexicon):
        return WhitespaceTokenizer(number_words=lexicon.words())

    def test_splits_words(self, tokenizer):
        tokens = tokenizer.tokenize("우유 두 개 주세요")
        assert [t.text for t in tokens] == ["우유", "두", "개", "주세요"]
        assert all(t.stem == "" for t in tokens)

    def test_splits_counter_after_number(self, tokenizer):
        tokens = tokenizer.tokenize("콜라 세잔 우유 두개")
        assert [t.text for t in tokens] == ["콜라", "세", "잔", "우유", "두", "개"]
        assert tokens[1].pos == "Number"

    def test_splits_counter_after_digits(self, tokenizer):
        tokens = tokenizer.tokenize("우유 2개")
        assert [t.text for t in tokens] == ["우유", "2", "개"]

    def test_keeps_words_ending_like_counters(self, tokenizer):
        """Test a counter suffix is kept when the remainder is not a number."""
        tokens = tokenizer.tokenize("사과 베개")
        assert [t.text for t in tokens] == ["사과", "베개"]

    def test_strips_punctuation(self, tokenizer):
        tokens = tokenizer.tokenize("우유 주세요.")
        assert [t.text for t in tokens] == ["우유", "주세요"]

    def test_empty_text(self, tokenizer):
        assert tokenizer.tokenize("") == []
        assert tokenizer.tokenize("   ") == []

    def test_non_text_raises(self, tokenizer):
        with pytest.raises(TokenizationError):
            tokenizer.tokenize(None)


class TestOktTokenizer:
    """Test the Open Korean Text adapter."""

    def test_pairs_surfaces_with_stems(self):
        okt = FakeOkt(
            surfaces=[("우유", "Noun"), ("두", "Noun"), ("개", "Noun"), ("빼", "Verb"), ("주세요", "Verb")],
            stemmed=[("우유", "Noun"), ("두", "Noun"), ("개", "Noun"), ("빼다", "Verb"), ("주다", "Verb")],
        )
        tokens = OktTokenizer(okt=okt).tokenize("우유 두 개 빼주세요")

        assert tokens[0] == RawToken(text="우유", stem="", pos="Noun")
        assert tokens[3] == RawToken(text="빼", stem="빼다", pos="Verb")
        assert tokens[4] == RawToken(text="주세요", stem="주다", pos="Verb")

    def test_length_mismatch_drops_stems(self):
        okt = FakeOkt(
            surfaces=[("우유", "Noun"), ("넣어", "Verb")],
            stemmed=[("우유", "Noun"), ("넣다", "Verb"), ("요", "Eomi")],
        )
        tokens = OktTokenizer(okt=okt).tokenize("우유 넣어")
        assert [t.stem for t in tokens] == ["", ""]

    def test_failure_raises_tokenization_error(self):
        with pytest.raises(TokenizationError, match="JVM exploded"):
            OktTokenizer(okt=BrokenOkt()).tokenize("우유")
