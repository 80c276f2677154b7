"""Coordinates count -> match -> value for one category.
Binds the weights once so the hot path is a single call per document."""

import logging
from typing import Callable, Mapping, Optional, Sequence

from .errors import InvalidInputError
from .frequency import get_frequencies, word_count
from .lexicon_model import match_category
from .model import Encoding, calc_lex

logger = logging.getLogger(__name__)

Scorer = Callable[..., float]

def make_scorer(category_weights: Mapping[str, float], intercept: float = 0.0,
                precision: Optional[int] = None) -> Scorer:
    if not isinstance(category_weights, Mapping):
        raise InvalidInputError("make_scorer needs a mapping of token -> weight")
    weights = dict(category_weights)
    logger.debug("scorer bound to %d weighted tokens", len(weights))

    def scorer(tokens: Sequence[str], intercept_override: Optional[float] = None,
               precision_override: Optional[int] = None) -> float:
        freqs = get_frequencies(tokens)
        matches = match_category(freqs, weights)
        return calc_lex(
            matches,
            intercept if intercept_override is None else intercept_override,
            word_count(freqs),
            Encoding.FREQUENCY,
            precision if precision_override is None else precision_override,
        )

    return scorer
