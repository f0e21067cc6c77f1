"""Field predicates for resource submissions.

Every check returns a boolean and never raises; a failed rule is an
ordinary outcome, not an error.
"""

import math
from datetime import date

DEFAULT_MAX_TEXT_LENGTH = 100
MIN_PUBLICATION_YEAR = 1500


def is_valid_text(value: str, max_length: int = DEFAULT_MAX_TEXT_LENGTH) -> bool:
    """True iff the text is non-blank once trimmed and at most ``max_length`` long."""
    return len(value) <= max_length and bool(value.strip())


def is_valid_year(
    year: int,
    min_year: int = MIN_PUBLICATION_YEAR,
    current_year: int | None = None,
) -> bool:
    """True iff ``min_year <= year <= current_year``.

    The upper bound is today's calendar year, read on every call unless
    ``current_year`` is given.
    """
    if current_year is None:
        current_year = date.today().year
    return min_year <= year <= current_year


def is_in_range(value: float, minimum: float, maximum: float) -> bool:
    """Inclusive range check."""
    return minimum <= value <= maximum


def is_numeric(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
