"""Open Korean Text tokenizer adapter."""
import logging
import threading
from typing import List, Optional

from voice_order.core.exceptions import TokenizationError
from voice_order.services.nlp.tokenizer import RawToken, Tokenizer

logger = logging.getLogger(__name__)

# Parts of speech that Open Korean Text stems to a dictionary form
STEMMED_POS = ("Verb", "Adjective")


class OktTokenizer(Tokenizer):
    """Tokenizer backed by konlpy's Okt (Open Korean Text).

    Requires the ``korean`` extra and a Java runtime. The JVM is started on
    first use, not at construction, and only once per tokenizer even when
    the first calls arrive from several threads.
    """

    def __init__(self, okt=None):
        self._okt = okt
        self._okt_lock = threading.Lock()

    def _get_okt(self):
        if self._okt is None:
            with self._okt_lock:
                if self._okt is None:
                    try:
                        from konlpy.tag import Okt

                        self._okt = Okt()
                    except Exception as e:
                        raise TokenizationError(f"Could not start Open Korean Text: {e}") from e
        return self._okt

    def tokenize(self, text: str) -> List[RawToken]:
        okt = self._get_okt()
        try:
            normalized = okt.normalize(text)
            surfaces = okt.pos(normalized, norm=False, stem=False)
            stemmed = okt.pos(normalized, norm=False, stem=True)
        except Exception as e:
            raise TokenizationError(f"Tokenization failed: {e}") from e

        stems: List[Optional[str]]
        if len(stemmed) == len(surfaces):
            stems = [form for form, _ in stemmed]
        else:
            logger.debug(
                f"[TOKENIZER] Stem/surface length mismatch ({len(stemmed)} vs {len(surfaces)}), "
                f"dropping stems for '{normalized}'"
            )
            stems = [None] * len(surfaces)

        tokens = []
        for (form, pos), stem in zip(surfaces, stems):
            tokens.append(
                RawToken(
                    text=form,
                    stem=stem if stem and pos in STEMMED_POS else "",
                    pos=pos,
                )
            )
        logger.debug(f"[TOKENIZER] {len(tokens)} tokens from '{text}'")
        return tokens
