"""Error taxonomy raised by the scoring helpers.

Everything derives from LexError (a ValueError) so callers can catch the
whole family at once. Out-of-range precision is NOT an error; it is
clamped, see config.clamp_precision.
"""


class LexError(ValueError):
    pass


class InvalidInputError(LexError, TypeError):
    """A required argument is missing or is not the expected shape."""


class MissingWordCountError(LexError):
    """frequency / percent encoding requested without a positive word count."""


class InvalidEncodingError(LexError):
    """Unrecognised encoding (or sort key)."""
