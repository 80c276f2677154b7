from dataclasses import dataclass
import logging, os
from dotenv import load_dotenv
from .errors import InvalidInputError
load_dotenv()

logger = logging.getLogger(__name__)

@dataclass
class Settings:
    precision: int
    max_precision: int
    clamped_precision: int
    float_places: int
    percent_places: int
    sort_by: str
    workers: int | None

def _to_int(x, default=None):
    try: return int(x) if x else default
    except ValueError: return default

SETTINGS = Settings(
    precision=_to_int(os.getenv("LEX_PRECISION"), 9),
    max_precision=_to_int(os.getenv("LEX_MAX_PRECISION"), 20),
    clamped_precision=_to_int(os.getenv("LEX_CLAMPED_PRECISION"), 14),
    float_places=_to_int(os.getenv("LEX_FLOAT_PLACES"), 10),
    percent_places=_to_int(os.getenv("LEX_PERCENT_PLACES"), 2),
    sort_by=os.getenv("LEX_SORT_BY", "lex"),
    workers=_to_int(os.getenv("LEX_WORKERS")),
)

def clamp_precision(places: int | None = None, settings: Settings = SETTINGS) -> int:
    """
    Resolve a decimal-place count.

    None -> settings.precision. Above settings.max_precision the value is
    pulled down to settings.clamped_precision (deep float decimals only
    reproduce representation noise); negatives become 0. Clamping is policy,
    never an error.
    """
    if places is None:
        return settings.precision
    if isinstance(places, bool) or not isinstance(places, int):
        raise InvalidInputError(f"precision must be an int, got {type(places).__name__}")
    if places > settings.max_precision:
        logger.debug("precision %d clamped to %d", places, settings.clamped_precision)
        return settings.clamped_precision
    if places < 0:
        logger.debug("precision %d clamped to 0", places)
        return 0
    return places
