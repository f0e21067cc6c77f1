from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

RawSubmission = Mapping[str, object]


class ItemKind(StrEnum):
    """Discriminator for the two resource variants, valued as the form sends it."""

    DIGITAL = "digital"
    PHYSICAL = "physical"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "ItemKind | None":
        """Map a raw form value to a kind; unknown values yield None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_LABELS = {
    ItemKind.DIGITAL: "Digital Resource",
    ItemKind.PHYSICAL: "Print Resource",
}


@dataclass(frozen=True)
class DigitalDetails:
    """Digital-only payload."""

    file_size_mb: float


@dataclass(frozen=True)
class PhysicalDetails:
    """Print-only payload."""

    page_count: int


ItemDetails = DigitalDetails | PhysicalDetails


@dataclass(frozen=True)
class MetadataRecord:
    """A validated description of one registered resource."""

    kind: ItemKind
    title: str
    author: str
    year: int
    details: ItemDetails

    def __post_init__(self) -> None:
        expected = DigitalDetails if self.kind is ItemKind.DIGITAL else PhysicalDetails
        if not isinstance(self.details, expected):
            raise ValueError(
                f"{self.kind.value} record requires {expected.__name__}, "
                f"got {type(self.details).__name__}"
            )

    def as_string(self) -> str:
        """Render the display line: label | title | author | year | size or pages."""
        return " | ".join(
            [
                self.kind.label,
                self.title,
                self.author,
                str(self.year),
                _format_details(self.details),
            ]
        )


def _format_details(details: ItemDetails) -> str:
    if isinstance(details, DigitalDetails):
        return f"{_format_number(details.file_size_mb)}MB"
    return f"{details.page_count} pages"


def _format_number(value: float) -> str:
    # Whole numbers print without a fractional part: 2.0 -> "2".
    if value.is_integer():
        return str(int(value))
    return repr(value)
