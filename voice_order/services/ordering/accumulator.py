"""Intent and delta accumulation over classified tokens."""
import logging
from functools import reduce
from typing import Iterable, Tuple

from pydantic import BaseModel, ConfigDict

from voice_order.services.lexicon.vocabulary import Vocabulary
from voice_order.services.ordering.intents import ViewIntent, ViewIntentClassifier
from voice_order.services.ordering.models import ClassifiedToken, OrderLine

logger = logging.getLogger(__name__)


class AccumulatorState(BaseModel):
    """Running state of one scan over an utterance."""

    model_config = ConfigDict(frozen=True)

    pending_names: Tuple[str, ...] = ()  # Nouns seen since the last commit
    staged_products: Tuple[OrderLine, ...] = ()  # Current batch, one entry per name
    delta: Tuple[OrderLine, ...] = ()  # Committed lines
    view_menu: bool = False
    view_cart: bool = False

    def staged_names(self) -> Tuple[str, ...]:
        return tuple(line.name for line in self.staged_products)


class DeltaAccumulator:
    """Single forward pass that turns classified tokens into signed order lines.

    Nouns collect as pending names, a number stages every pending name with
    that quantity, and an add/remove keyword commits the staged batch (or,
    when nothing was staged, the pending names with a quantity of one).
    """

    def __init__(self, vocabulary: Vocabulary, view_intents: ViewIntentClassifier):
        self.vocabulary = vocabulary
        self.view_intents = view_intents

    def step(self, state: AccumulatorState, token: ClassifiedToken) -> AccumulatorState:
        """Apply one token to the state and return the new state."""
        intents = self.view_intents.classify(token.text)
        if intents:
            state = state.model_copy(
                update={
                    "view_menu": state.view_menu or ViewIntent.MENU in intents,
                    "view_cart": state.view_cart or ViewIntent.CART in intents,
                }
            )

        if self.vocabulary.is_stop_word(token.text):
            return state

        is_add = self.vocabulary.is_add_keyword(token.text)
        is_commit = self.vocabulary.is_commit_keyword(token.text)
        sign = 1 if is_add else -1

        if is_commit and state.staged_products:
            committed = tuple(
                OrderLine(name=line.name, quantity=line.quantity * sign)
                for line in state.staged_products
            )
            logger.debug(f"[ACCUMULATOR] '{token.text}' committed staged batch: {committed}")
            return state.model_copy(
                update={
                    "delta": state.delta + committed,
                    "staged_products": (),
                    "pending_names": (),
                }
            )

        if is_commit and state.pending_names:
            committed = tuple(
                OrderLine(name=name, quantity=sign) for name in state.pending_names
            )
            logger.debug(f"[ACCUMULATOR] '{token.text}' committed pending names: {committed}")
            return state.model_copy(
                update={"delta": state.delta + committed, "pending_names": ()}
            )

        if token.is_number:
            quantity = int(token.text)
            staged = list(state.staged_products)
            staged_names = set(state.staged_names())
            for name in state.pending_names:
                if name not in staged_names:
                    staged.append(OrderLine(name=name, quantity=quantity))
                    staged_names.add(name)
            # Pending names stay until the next commit
            return state.model_copy(update={"staged_products": tuple(staged)})

        return state.model_copy(update={"pending_names": state.pending_names + (token.text,)})

    def run(self, tokens: Iterable[ClassifiedToken]) -> AccumulatorState:
        """Fold every token into a fresh state. Uncommitted items are left in the result."""
        final = reduce(self.step, tokens, AccumulatorState())
        if final.pending_names or final.staged_products:
            logger.debug(
                f"[ACCUMULATOR] Discarding uncommitted items - pending: {final.pending_names}, "
                f"staged: {final.staged_products}"
            )
        return final
