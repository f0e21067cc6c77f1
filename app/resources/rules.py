from dataclasses import dataclass

from app.config.settings import Settings
from app.resources.validator import DEFAULT_MAX_TEXT_LENGTH, MIN_PUBLICATION_YEAR


@dataclass(frozen=True)
class RecordRules:
    """Bounds applied when building records.

    ``min_pages`` of None accepts any numeric page count, including zero
    and negatives. Setting it tightens the print rule.
    """

    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    min_year: int = MIN_PUBLICATION_YEAR
    min_size_mb: float = 1.0
    max_size_mb: float = 100.0
    min_pages: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordRules":
        return cls(
            max_text_length=settings.text_max_length,
            min_year=settings.min_publication_year,
            min_size_mb=settings.digital_min_size_mb,
            max_size_mb=settings.digital_max_size_mb,
            min_pages=settings.physical_min_pages,
        )
