"""Lexicon-based lexical value helpers (open-vocabulary text scoring)."""

from .errors import LexError, InvalidInputError, MissingWordCountError, InvalidEncodingError
from .config import SETTINGS, Settings, clamp_precision
from .frequency import get_frequencies, indexes_of, word_count
from .policy import Thresholds, resolve_thresholds
from .model import (Encoding, TokenValue, calc_lex, correct_float, get_lexicon_value,
                    parse_encoding, sum_values)
from .lexicon_model import (Lexicon, MatchRecord, get_matches, get_weighted_relative_frequencies,
                            match_category, score_lexicon)
from .reporting import MatchReport, MatchSummary, ReportRecord, prepare_matches, sort_matches
from .inference import make_scorer
from .normalize import join_tokens
from .utils import report_to_csv

__version__ = "0.1.0"
