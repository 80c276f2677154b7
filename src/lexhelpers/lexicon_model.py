import logging
from numbers import Real
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Union

from .config import SETTINGS
from .errors import InvalidInputError
from .frequency import get_frequencies, word_count
from .model import Encoding, TokenValue, calc_lex, check_word_count, parse_encoding
from .policy import Thresholds, resolve_thresholds

logger = logging.getLogger(__name__)

class MatchRecord(NamedTuple):
    token: str
    frequency: int
    weight: float

MatchSet = List[MatchRecord]

def _require_mapping(obj, name: str):
    if obj is None or not isinstance(obj, Mapping):
        raise InvalidInputError(f"{name} must be a mapping, got {type(obj).__name__}")

def match_category(frequencies: Mapping[str, int], weights: Mapping[str, float],
                   thresholds: Thresholds = Thresholds()) -> MatchSet:
    """Records for tokens present in both mappings whose weight passes `thresholds`."""
    _require_mapping(weights, "category weights")
    # walk the smaller side
    if len(weights) <= len(frequencies):
        pairs = ((tok, w) for tok, w in weights.items() if tok in frequencies)
    else:
        pairs = ((tok, weights[tok]) for tok in frequencies if tok in weights)
    out: MatchSet = []
    for tok, w in pairs:
        if isinstance(w, bool) or not isinstance(w, Real):
            raise InvalidInputError(f"weight for {tok!r} must be a number, got {w!r}")
        if thresholds.allows(w):
            out.append(MatchRecord(tok, frequencies[tok], w))
    return out

def get_matches(frequencies: Mapping[str, int], lexicon: Mapping[str, Mapping[str, float]],
                min: Optional[float] = None, max: Optional[float] = None) -> Dict[str, MatchSet]:
    """
    {category: [MatchRecord, ...]} for every category of `lexicon`.
    Categories without hits map to []. Bounds are exclusive.
    """
    _require_mapping(frequencies, "frequencies")
    _require_mapping(lexicon, "lexicon")
    thresholds = resolve_thresholds(min, max)
    return {cat: match_category(frequencies, weights, thresholds) for cat, weights in lexicon.items()}

def get_weighted_relative_frequencies(weights: Mapping[str, float],
                                      frequencies: Mapping[str, int]) -> Iterator[TokenValue]:
    """(freq / wc) * weight per lexicon token in the document, to 15 significant digits."""
    _require_mapping(weights, "weights")
    _require_mapping(frequencies, "frequencies")
    wc = word_count(frequencies)
    for tok, w in weights.items():
        if tok in frequencies:
            yield TokenValue(tok, float(f"{(frequencies[tok] / wc) * w:.15g}"))


class Lexicon:
    """A set of weighted categories plus one intercept per category."""

    def __init__(self, categories: Mapping[str, Mapping[str, float]],
                 intercepts: Optional[Mapping[str, float]] = None):
        _require_mapping(categories, "lexicon")
        for cat, weights in categories.items():
            _require_mapping(weights, f"category {cat!r}")
        if intercepts is not None:
            _require_mapping(intercepts, "intercepts")
        self.categories = categories
        self.intercepts: Dict[str, float] = dict(intercepts or {})

    def match(self, frequencies: Mapping[str, int], min: Optional[float] = None,
              max: Optional[float] = None) -> Dict[str, MatchSet]:
        return get_matches(frequencies, self.categories, min, max)

    def summarize(self, matches: Mapping[str, MatchSet], wc: float,
                  encoding: Union[str, Encoding] = Encoding.FREQUENCY,
                  precision: Optional[int] = None, workers: Optional[int] = None) -> Dict[str, float]:
        """
        One lexical value per category. With `workers` the categories are
        scored on a thread pool; the first failure aborts the whole batch.
        """
        _require_mapping(matches, "matches")
        enc = parse_encoding(encoding)
        check_word_count(enc, wc)
        workers = SETTINGS.workers if workers is None else workers

        def _one(cat):
            return cat, calc_lex(matches[cat], self.intercepts.get(cat, 0.0), wc, enc, precision)

        cats = list(matches.keys())
        if workers and workers > 1 and len(cats) > 1:
            logger.debug("scoring %d categories on %d workers", len(cats), workers)
            with ThreadPoolExecutor(max_workers=workers) as pool:
                return dict(pool.map(_one, cats))
        return dict(_one(c) for c in cats)


def score_lexicon(tokens: Sequence[str], lexicon: Mapping[str, Mapping[str, float]],
                  intercepts: Optional[Mapping[str, float]] = None,
                  encoding: Union[str, Encoding] = Encoding.FREQUENCY,
                  min: Optional[float] = None, max: Optional[float] = None,
                  precision: Optional[int] = None, workers: Optional[int] = None) -> Dict[str, float]:
    """Tokens in, {category: lexical value} out."""
    lex = Lexicon(lexicon, intercepts)
    freqs = get_frequencies(tokens)
    return lex.summarize(lex.match(freqs, min, max), word_count(freqs), encoding, precision, workers)
