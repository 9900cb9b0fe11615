"""Drive document types, file extensions and their MIME types."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

MIME_TYPE_DRIVE_FOLDER = "application/vnd.google-apps.folder"
MIME_TYPE_DRIVE_DOCUMENT = "application/vnd.google-apps.document"
MIME_TYPE_DRIVE_SHORTCUT = "application/vnd.google-apps.shortcut"
MIME_TYPE_DRIVE_SPREADSHEET = "application/vnd.google-apps.spreadsheet"
MIME_TYPE_DRIVE_PRESENTATION = "application/vnd.google-apps.presentation"


class FileExtension(Enum):
    """A file extension known to the import and export commands."""

    DOC = "doc"
    DOCX = "docx"
    ODT = "odt"
    JPG = "jpg"
    JPEG = "jpeg"
    GIF = "gif"
    PNG = "png"
    RTF = "rtf"
    PDF = "pdf"
    HTML = "html"
    XLS = "xls"
    XLSX = "xlsx"
    CSV = "csv"
    TSV = "tsv"
    ODS = "ods"
    PPT = "ppt"
    PPTX = "pptx"
    ODP = "odp"
    EPUB = "epub"
    TXT = "txt"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_path(cls, path) -> FileExtension | None:
        """Return the extension of ``path``, or None if it is unknown."""
        suffix = Path(path).suffix
        if not suffix:
            return None
        try:
            return cls(suffix[1:])
        except ValueError:
            return None

    def export_mime(self) -> str:
        """Return the MIME type used when exporting to this extension."""
        return _EXPORT_MIME[self]


_EXPORT_MIME = {
    FileExtension.DOC: "application/msword",
    FileExtension.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    FileExtension.ODT: "application/vnd.oasis.opendocument.text",
    FileExtension.JPG: "image/jpeg",
    FileExtension.JPEG: "image/jpeg",
    FileExtension.GIF: "image/gif",
    FileExtension.PNG: "image/png",
    FileExtension.RTF: "application/rtf",
    FileExtension.PDF: "application/pdf",
    FileExtension.HTML: "text/html",
    FileExtension.XLS: "application/vnd.ms-excel",
    FileExtension.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    FileExtension.CSV: "text/csv",
    FileExtension.TSV: "text/tab-separated-values",
    FileExtension.ODS: "application/vnd.oasis.opendocument.spreadsheet",
    FileExtension.PPT: "application/vnd.ms-powerpoint",
    FileExtension.PPTX: "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    FileExtension.ODP: "application/vnd.oasis.opendocument.presentation",
    FileExtension.EPUB: "application/epub+zip",
    FileExtension.TXT: "text/plain",
}


class DocType(Enum):
    """A native Drive document type."""

    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_file_path(cls, path) -> DocType | None:
        """Return the document type a local file is imported as, if any."""
        extension = FileExtension.from_path(path)
        if extension is None:
            return None
        return next(
            (doc_type for ext, doc_type in _IMPORT_EXTENSION_MAP if ext is extension),
            None,
        )

    @classmethod
    def from_mime_type(cls, mime: str) -> DocType | None:
        return _DRIVE_MIME_TO_DOC_TYPE.get(mime)

    @classmethod
    def supported_import_types(cls) -> list[str]:
        return [str(ext) for ext, _ in _IMPORT_EXTENSION_MAP]

    def default_export_type(self) -> FileExtension:
        if self is DocType.SPREADSHEET:
            return FileExtension.CSV
        return FileExtension.PDF

    def can_export_to(self, extension: FileExtension) -> bool:
        return extension in self.supported_export_types()

    def supported_export_types(self) -> list[FileExtension]:
        return list(_EXPORT_TYPES[self])

    def mime(self) -> str:
        """Return the Drive MIME type of this document type."""
        return _DOC_TYPE_TO_DRIVE_MIME[self]


_IMPORT_EXTENSION_MAP: tuple[tuple[FileExtension, DocType], ...] = (
    (FileExtension.DOC, DocType.DOCUMENT),
    (FileExtension.DOCX, DocType.DOCUMENT),
    (FileExtension.ODT, DocType.DOCUMENT),
    (FileExtension.JPG, DocType.DOCUMENT),
    (FileExtension.JPEG, DocType.DOCUMENT),
    (FileExtension.GIF, DocType.DOCUMENT),
    (FileExtension.PNG, DocType.DOCUMENT),
    (FileExtension.RTF, DocType.DOCUMENT),
    (FileExtension.PDF, DocType.DOCUMENT),
    (FileExtension.HTML, DocType.DOCUMENT),
    (FileExtension.XLS, DocType.SPREADSHEET),
    (FileExtension.XLSX, DocType.SPREADSHEET),
    (FileExtension.CSV, DocType.SPREADSHEET),
    (FileExtension.TSV, DocType.SPREADSHEET),
    (FileExtension.ODS, DocType.SPREADSHEET),
    (FileExtension.PPT, DocType.PRESENTATION),
    (FileExtension.PPTX, DocType.PRESENTATION),
    (FileExtension.ODP, DocType.PRESENTATION),
)

_EXPORT_TYPES = {
    DocType.DOCUMENT: (
        FileExtension.PDF,
        FileExtension.ODT,
        FileExtension.DOCX,
        FileExtension.EPUB,
        FileExtension.RTF,
        FileExtension.TXT,
        FileExtension.HTML,
    ),
    DocType.SPREADSHEET: (
        FileExtension.CSV,
        FileExtension.TSV,
        FileExtension.ODS,
        FileExtension.XLSX,
        FileExtension.PDF,
    ),
    DocType.PRESENTATION: (
        FileExtension.PDF,
        FileExtension.PPTX,
        FileExtension.ODP,
        FileExtension.TXT,
    ),
}

_DOC_TYPE_TO_DRIVE_MIME = {
    DocType.DOCUMENT: MIME_TYPE_DRIVE_DOCUMENT,
    DocType.SPREADSHEET: MIME_TYPE_DRIVE_SPREADSHEET,
    DocType.PRESENTATION: MIME_TYPE_DRIVE_PRESENTATION,
}

_DRIVE_MIME_TO_DOC_TYPE = {mime: doc_type for doc_type, mime in _DOC_TYPE_TO_DRIVE_MIME.items()}


def is_directory(file: Mapping[str, Any]) -> bool:
    """Whether a Drive file resource is a folder."""
    return file.get("mimeType") == MIME_TYPE_DRIVE_FOLDER


def is_binary(file: Mapping[str, Any]) -> bool:
    """Whether a Drive file resource holds binary content (it has a checksum)."""
    return file.get("md5Checksum") is not None


def is_shortcut(file: Mapping[str, Any]) -> bool:
    """Whether a Drive file resource is a shortcut."""
    return file.get("mimeType") == MIME_TYPE_DRIVE_SHORTCUT