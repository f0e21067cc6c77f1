"""Coercion of raw form values into typed fields.

Form values arrive as strings (or numbers from programmatic callers).
Missing or unparseable numbers become 0 instead of raising, mirroring a
plain numeric cast on the submitted value.
"""

import math
import re
from dataclasses import dataclass

from app.resources.models import RawSubmission

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class SubmittedFields:
    """Typed view of a RawSubmission; every field has a zero default."""

    title: str = ""
    author: str = ""
    year: int = 0
    size: float = 0.0
    pages: int = 0


def coerce_submission(raw: RawSubmission) -> SubmittedFields:
    return SubmittedFields(
        title=to_text(raw.get("title")),
        author=to_text(raw.get("author")),
        year=to_int(raw.get("year")),
        size=to_float(raw.get("size")),
        pages=to_int(raw.get("pages")),
    )


def to_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def to_float(value: object) -> float:
    """Parse the leading numeric part of ``value``; 0.0 when there is none."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match is None:
            return 0.0
        number = float(match.group())
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_int(value: object) -> int:
    """Integer cast that truncates toward zero: ``"2.7"`` -> 2, ``"abc"`` -> 0."""
    if isinstance(value, int):
        return int(value)
    return math.trunc(to_float(value))
