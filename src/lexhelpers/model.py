"""
Lexical value aggregation.

WHAT:
  - turns a category's match records into one number using an encoding:
      raw        sum(weight) + intercept
      frequency  sum((freq / wc) * weight) + intercept
      percent    sum(freq / wc)            (fraction of wc, no intercept)
  - decimal rounding helpers that strip IEEE-754 summation drift
    (5.199999999999999 -> 5.2).

WHY:
  - the encodings share one per-token term (`term`) so the match report and
    the value always agree.
"""
import logging, math
from decimal import Context, Decimal, ROUND_HALF_DOWN, ROUND_HALF_UP
from enum import Enum
from numbers import Real
from typing import Iterable, Mapping, NamedTuple, Optional, Union

from .config import SETTINGS, clamp_precision
from .errors import InvalidEncodingError, InvalidInputError, MissingWordCountError

logger = logging.getLogger(__name__)

_CTX = Context(prec=100)

class Encoding(str, Enum):
    RAW = "raw"
    FREQUENCY = "frequency"
    PERCENT = "percent"

_ALIASES = {"freq": Encoding.FREQUENCY, "cent": Encoding.PERCENT}

class TokenValue(NamedTuple):
    token: str
    value: float

def parse_encoding(encoding: Union[str, Encoding]) -> Encoding:
    if isinstance(encoding, Encoding):
        return encoding
    if not isinstance(encoding, str):
        raise InvalidEncodingError(f"unknown encoding: {encoding!r}")
    key = encoding.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Encoding(key)
    except ValueError:
        raise InvalidEncodingError(f"unknown encoding: {encoding!r}") from None

def _number(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    return float(value)

def check_word_count(encoding: Encoding, word_count: Optional[float]) -> float:
    """Frequency and percent divide by wc, so it has to be positive there."""
    if word_count is None:
        wc = 0.0
    else:
        wc = _number(word_count, "word_count")
    if wc < 0:
        raise MissingWordCountError(f"word count cannot be negative (got {word_count!r})")
    if encoding is not Encoding.RAW and not wc > 0:
        raise MissingWordCountError(f"{encoding.value} encoding needs a positive word count (got {word_count!r})")
    return wc

def round_to(value: float, places: int) -> float:
    """Round halves toward +inf on the shortest decimal repr of `value`."""
    if math.isnan(value) or math.isinf(value):
        return value
    d = Decimal(repr(float(value)))
    ctx = _CTX if d.adjusted() + places + 2 <= _CTX.prec else Context(prec=d.adjusted() + places + 2)
    rounding = ROUND_HALF_UP if d >= 0 else ROUND_HALF_DOWN
    return float(d.quantize(Decimal(1).scaleb(-places), rounding=rounding, context=ctx))

def correct_float(value: float, places: Optional[int] = None) -> float:
    places = SETTINGS.float_places if places is None else clamp_precision(places)
    return round_to(_number(value, "value"), places)

def _values(values: Iterable) -> list:
    if values is None or isinstance(values, (str, bytes)):
        raise InvalidInputError("sum_values needs an iterable of numbers")
    out = []
    for v in values:
        if isinstance(v, TokenValue):
            v = v.value
        out.append(_number(v, "value"))
    return out

def sum_values(values: Iterable, places: Optional[int] = None) -> float:
    """Sum plain numbers or TokenValues and correct the total."""
    return correct_float(math.fsum(_values(values)), places)

def get_lexicon_value(values: Iterable, intercept: float = 0.0, places: Optional[int] = None) -> float:
    total = math.fsum(_values(values)) + _number(intercept or 0, "intercept")
    return correct_float(total, places)

def term(encoding: Encoding, frequency: float, weight: float, word_count: float) -> float:
    if encoding is Encoding.FREQUENCY:
        return (frequency / word_count) * weight
    if encoding is Encoding.PERCENT:
        return frequency / word_count
    return weight

def iter_records(matches):
    """Yield (token, frequency, weight) triples from a MatchSet."""
    if matches is None or isinstance(matches, (str, bytes)):
        raise InvalidInputError("matches must be a sequence of (token, frequency, weight) records")
    if isinstance(matches, Mapping):
        matches = matches.values()
    try:
        items = list(matches)
    except TypeError:
        raise InvalidInputError(f"matches is not iterable: {type(matches).__name__}") from None
    for rec in items:
        try:
            token, freq, weight = rec
        except (TypeError, ValueError):
            raise InvalidInputError(f"malformed match record: {rec!r}") from None
        yield token, _number(freq, "frequency"), _number(weight, "weight")

def calc_lex(matches, intercept: float = 0.0, word_count: Optional[float] = None,
             encoding: Union[str, Encoding] = Encoding.FREQUENCY,
             precision: Optional[int] = None) -> float:
    """
    Lexical value of one category's matches, rounded to `precision` decimal
    places (default 9; >20 clamps to 14, <0 clamps to 0).
    """
    enc = parse_encoding(encoding)
    wc = check_word_count(enc, word_count)
    icpt = 0.0 if intercept is None else _number(intercept, "intercept")
    places = clamp_precision(precision)

    lex = math.fsum(term(enc, f, w, wc) for _, f, w in iter_records(matches))
    if enc is not Encoding.PERCENT:
        lex += icpt
    return round_to(lex, places)
