# catalog_reconcile/core/domain/record.py

"""Catalog record domain model"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Column names used in catalog exports, mapped to Record attributes
COLUMN_FIELDS: dict[str, str] = {
    "material type": "material_type",
    "mono or serial": "mono_or_serial",
    "date1": "date1",
    "date2": "date2",
    "form": "form",
    "tind": "tind",
    "oclc": "oclc",
    "isbn": "isbn",
    "issn": "issn",
    "title": "title",
    "subtitle": "subtitle",
    "author": "author",
    "publisher": "publisher",
    "year": "year",
    "pagination": "pagination",
}

# Descriptive fields used as match evidence (identifiers are what we reconcile)
DESIGNATED_FIELDS: tuple[str, ...] = (
    "material_type",
    "mono_or_serial",
    "date1",
    "date2",
    "form",
    "isbn",
    "issn",
    "publisher",
    "year",
)

IDENTIFIER_FIELDS: tuple[str, ...] = ("tind", "oclc")

# Order of the text columns in reconciled output
OUTPUT_FIELDS: tuple[str, ...] = (
    "material_type",
    "mono_or_serial",
    "date1",
    "date2",
    "form",
    "tind",
    "oclc",
    "isbn",
    "issn",
    "title",
    "subtitle",
    "author",
    "publisher",
    "year",
    "pagination",
)

OUTPUT_HEADER: tuple[str, ...] = (
    "material type",
    "mono or serial",
    "date1",
    "date2",
    "form",
    "tind",
    "OCLC",
    "ISBN",
    "ISSN",
    "title",
    "subtitle",
    "author",
    "publisher",
    "year",
    "pagination",
    "matched count",
)


class Record(BaseModel):
    """A bibliographic record from either catalog export

    Records are immutable. Merging and match-count annotation build new
    records with ``model_copy``, so one candidate matched by several targets
    is never modified in place.
    """

    model_config = ConfigDict(frozen=True)

    material_type: str = ""
    mono_or_serial: str = ""
    date1: str = ""
    date2: str = ""
    form: str = ""
    tind: str = Field(default="", description="TIND system identifier")
    oclc: str = Field(default="", description="OCLC number")
    isbn: str = ""
    issn: str = ""
    title: str = ""
    subtitle: str = ""
    author: str = ""
    publisher: str = ""
    year: str = ""
    pagination: str = ""
    matched_count: int = Field(default=0, ge=0, description="Matches found for the target")

    @property
    def is_matched(self) -> bool:
        """Whether this output row came from a successful match"""
        return self.matched_count > 0

    def with_matched_count(self, count: int) -> "Record":
        """Return a copy annotated with the given match count"""
        return self.model_copy(update={"matched_count": count})

    def to_row(self) -> list[str | int]:
        """Output row: text fields in header order, then the match count"""
        row: list[str | int] = [getattr(self, name) for name in OUTPUT_FIELDS]
        row.append(self.matched_count)
        return row
