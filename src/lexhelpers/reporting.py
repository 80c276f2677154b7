"""
Match report: sorted per-token rows plus corpus coverage numbers.

Each row's contribution is the same per-token term calc_lex sums, so the
rows of a report add up (before rounding) to the category's value minus
its intercept.
"""
import math
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Union

from .config import SETTINGS, clamp_precision
from .errors import InvalidEncodingError
from .model import Encoding, check_word_count, iter_records, parse_encoding, round_to, term

class ReportRecord(NamedTuple):
    token: str
    frequency: int
    weight: float
    contribution: float

@dataclass
class MatchSummary:
    total_matches: int
    total_unique_matches: int
    total_tokens: float
    percent_matches: float

@dataclass
class MatchReport:
    records: List[ReportRecord] = field(default_factory=list)
    summary: Optional[MatchSummary] = None

# sort key -> ReportRecord field
SORT_KEYS = {"frequency": 1, "freq": 1, "weight": 2, "lex": 3}

def sort_matches(records: Iterable[ReportRecord], by: Optional[str] = None) -> List[ReportRecord]:
    """Ascending, stable sort on frequency, weight or lex (contribution)."""
    by = by or SETTINGS.sort_by
    if by not in SORT_KEYS:
        raise InvalidEncodingError(f"unknown sort key: {by!r}")
    idx = SORT_KEYS[by]
    return sorted(records, key=lambda r: r[idx])

def prepare_matches(matches, encoding: Union[str, Encoding], word_count: Optional[float],
                    sort_by: Optional[str] = None, precision: Optional[int] = None) -> MatchReport:
    enc = parse_encoding(encoding)
    wc = check_word_count(enc, word_count)
    places = clamp_precision(precision)

    rows: List[ReportRecord] = []
    total = 0
    for token, freq, weight in iter_records(matches):
        contribution = term(enc, freq, weight, wc)
        freq = int(freq) if float(freq).is_integer() else freq
        rows.append(ReportRecord(token, freq, round_to(weight, places), round_to(contribution, places)))
        total += freq

    percent = round_to(total / wc * 100, SETTINGS.percent_places) if wc else math.nan
    summary = MatchSummary(
        total_matches=total,
        total_unique_matches=len(rows),
        total_tokens=word_count if word_count is not None else 0,
        percent_matches=percent,
    )
    return MatchReport(records=sort_matches(rows, sort_by), summary=summary)
