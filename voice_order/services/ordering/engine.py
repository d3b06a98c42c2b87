"""Voice order engine."""
import logging
from typing import List

from voice_order.core.exceptions import TokenizationError
from voice_order.services.lexicon.vocabulary import Vocabulary
from voice_order.services.nlp.tokenizer import RawToken, Tokenizer
from voice_order.services.ordering.accumulator import DeltaAccumulator
from voice_order.services.ordering.classifier import TokenClassifier
from voice_order.services.ordering.composer import MessageComposer
from voice_order.services.ordering.intents import ViewIntentClassifier
from voice_order.services.ordering.models import OrderResult

logger = logging.getLogger(__name__)


class OrderEngine:
    """Turns a transcribed utterance into a cart delta and a confirmation.

    The engine holds no per-call state, so one instance may serve
    concurrent callers.
    """

    def __init__(self, tokenizer: Tokenizer, vocabulary: Vocabulary):
        self.tokenizer = tokenizer
        self.vocabulary = vocabulary
        self.classifier = TokenClassifier(vocabulary.number_lexicon())
        self.accumulator = DeltaAccumulator(
            vocabulary, ViewIntentClassifier(vocabulary.view_patterns)
        )
        self.composer = MessageComposer(vocabulary.messages)

    def _tokenize(self, utterance: str) -> List[RawToken]:
        if not utterance or not utterance.strip():
            return []
        try:
            return self.tokenizer.tokenize(utterance)
        except TokenizationError as e:
            logger.warning(f"[VOICE ORDER] Tokenization failed for '{utterance}': {e}")
            return []

    def process_order(self, utterance: str) -> OrderResult:
        """
        Process one utterance.

        Args:
            utterance: Transcribed speech

        Returns:
            OrderResult with the signed delta and 1-2 messages
        """
        raw_tokens = self._tokenize(utterance)
        tokens = self.classifier.classify(raw_tokens)
        logger.debug(f"[VOICE ORDER] Classified tokens: {[(t.text, str(t.category)) for t in tokens]}")

        state = self.accumulator.run(tokens)
        delta = list(state.delta)
        messages = self.composer.compose(delta, state.view_menu, state.view_cart)

        logger.info(
            f"[VOICE ORDER] Processed utterance - {len(tokens)} tokens, {len(delta)} delta lines, "
            f"view_menu={state.view_menu}, view_cart={state.view_cart}"
        )
        return OrderResult(
            delta=delta,
            messages=messages,
            view_menu=state.view_menu,
            view_cart=state.view_cart,
        )
