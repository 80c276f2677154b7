"""Weight threshold filter applied while matching.

Both bounds are exclusive: a weight equal to `min` or `max` never matches.
"""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional

from .errors import InvalidInputError

@dataclass(frozen=True)
class Thresholds:
    min: float = -math.inf
    max: float = math.inf

    def allows(self, weight: float) -> bool:
        return self.min < weight < self.max

def _bound(value, default: float, name: str) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} threshold must be a number, got {value!r}")
    return float(value)

def resolve_thresholds(min: Optional[float] = None, max: Optional[float] = None) -> Thresholds:
    return Thresholds(_bound(min, -math.inf, "min"), _bound(max, math.inf, "max"))
