"""
Display helpers for token rows.

WHAT:
  - join each row of tokens into one string, collapse whitespace, drop the
    space a plain join leaves before closing punctuation.

WHY:
  - report output only; scoring never looks at joined text.
"""

import re
from typing import List, Sequence

from .errors import InvalidInputError

WS_RE = re.compile(r"\s+")
PUNCT_RE = re.compile(r"\s+([.,;:!?%)\]}])")
OPEN_RE = re.compile(r"([(\[{])\s+")

def join_row(tokens: Sequence[str]) -> str:
    t = " ".join(str(x) for x in tokens)
    t = WS_RE.sub(" ", t).strip()
    t = PUNCT_RE.sub(r"\1", t)
    t = OPEN_RE.sub(r"\1", t)
    return t

def join_tokens(rows: Sequence[Sequence[str]]) -> List[str]:
    if rows is None or isinstance(rows, (str, bytes)):
        raise InvalidInputError("join_tokens needs a sequence of token rows")
    return [join_row(r) for r in rows]
