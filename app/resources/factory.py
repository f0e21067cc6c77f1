from app.resources.models import (
    DigitalDetails,
    ItemDetails,
    ItemKind,
    MetadataRecord,
    PhysicalDetails,
    RawSubmission,
)
from app.resources.rules import RecordRules
from app.resources.submission import SubmittedFields, coerce_submission
from app.resources.validator import is_in_range, is_numeric, is_valid_text, is_valid_year


class RecordFactory:
    """Builds metadata records from raw submissions for either item kind."""

    def __init__(self, rules: RecordRules | None = None) -> None:
        self._rules = rules or RecordRules()

    def create(self, kind: ItemKind, raw: RawSubmission) -> MetadataRecord | None:
        """Return a record, or None when ``kind`` is unknown or any rule fails."""
        parsed = ItemKind.parse(kind)
        if parsed is None:
            return None
        kind = parsed
        fields = coerce_submission(raw)
        if self._violations(kind, fields):
            return None
        return MetadataRecord(
            kind=kind,
            title=fields.title,
            author=fields.author,
            year=fields.year,
            details=self._details(kind, fields),
        )

    def violations(self, kind: ItemKind, raw: RawSubmission) -> list[str]:
        """Names of the fields that fail their rules, in form order."""
        parsed = ItemKind.parse(kind)
        if parsed is None:
            return ["itemType"]
        return self._violations(parsed, coerce_submission(raw))

    def _violations(self, kind: ItemKind, fields: SubmittedFields) -> list[str]:
        rules = self._rules
        failed: list[str] = []
        if not is_valid_text(fields.title, rules.max_text_length):
            failed.append("title")
        if not is_valid_text(fields.author, rules.max_text_length):
            failed.append("author")
        if not is_valid_year(fields.year, rules.min_year):
            failed.append("year")
        if kind is ItemKind.DIGITAL:
            if not is_in_range(fields.size, rules.min_size_mb, rules.max_size_mb):
                failed.append("size")
        elif not self._pages_ok(fields.pages):
            failed.append("pages")
        return failed

    def _pages_ok(self, pages: int) -> bool:
        if not is_numeric(pages):
            return False
        return self._rules.min_pages is None or pages >= self._rules.min_pages

    @staticmethod
    def _details(kind: ItemKind, fields: SubmittedFields) -> ItemDetails:
        if kind is ItemKind.DIGITAL:
            return DigitalDetails(file_size_mb=fields.size)
        return PhysicalDetails(page_count=fields.pages)


_default_factory = RecordFactory()


def create_record(kind: ItemKind, raw: RawSubmission) -> MetadataRecord | None:
    """Build a record with the default rules."""
    return _default_factory.create(kind, raw)
