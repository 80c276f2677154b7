from collections import Counter
from typing import Dict, List, Sequence

from .errors import InvalidInputError

def get_frequencies(tokens: Sequence[str]) -> Dict[str, int]:
    """Count every distinct token in one pass. Empty input -> {}."""
    if tokens is None or isinstance(tokens, (str, bytes)):
        raise InvalidInputError("get_frequencies needs a sequence of tokens")
    return dict(Counter(tokens))

def word_count(frequencies: Dict[str, int]) -> int:
    return sum(frequencies.values())

def indexes_of(tokens: Sequence[str], token: str) -> List[int]:
    """Positions of every occurrence of `token` in `tokens`, ascending."""
    if tokens is None or token is None or token == "":
        raise InvalidInputError("indexes_of needs input!")
    token = str(token)
    return [i for i, t in enumerate(tokens) if t == token]
