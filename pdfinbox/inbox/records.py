"""Domain records for discovered PDF files."""

from __future__ import annotations

from dataclasses import dataclass, field

PDF_SUFFIX = ".pdf"
INVALID_NAME_LABEL = "Invalid file name"


@dataclass(frozen=True)
class FileRecord:
    """One PDF found by a directory scan.

    Only ``file_name`` takes part in equality: two scans that find the same
    name in different directories produce indistinguishable records.
    """

    file_name: str
    size: int | None = field(default=None, compare=False)
    modified_ns: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.file_name:
            raise ValueError("file_name must not be empty")
        if not self.file_name.endswith(PDF_SUFFIX):
            raise ValueError(f"not a pdf file name: {self.file_name!r}")

    @property
    def label(self) -> str:
        """Display text, falling back to a placeholder for undecodable names."""
        try:
            self.file_name.encode("utf-8")
        except UnicodeEncodeError:
            return INVALID_NAME_LABEL
        return self.file_name


def is_pdf_name(name: str) -> bool:
    """Case-sensitive literal ``.pdf`` suffix check used by directory scans."""
    return name.endswith(PDF_SUFFIX)


def filter_records(records: list[FileRecord], query: str) -> list[FileRecord]:
    """Keep records whose name contains ``query``, ignoring case."""
    needle = query.strip().casefold()
    if not needle:
        return list(records)
    return [record for record in records if needle in record.label.casefold()]


__all__ = ["FileRecord", "INVALID_NAME_LABEL", "PDF_SUFFIX", "filter_records", "is_pdf_name"]
