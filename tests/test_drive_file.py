import pytest

from drivecli.drive_file import (
    MIME_TYPE_DRIVE_DOCUMENT,
    MIME_TYPE_DRIVE_FOLDER,
    MIME_TYPE_DRIVE_PRESENTATION,
    MIME_TYPE_DRIVE_SHORTCUT,
    MIME_TYPE_DRIVE_SPREADSHEET,
    DocType,
    FileExtension,
    is_binary,
    is_directory,
    is_shortcut,
)


@pytest.mark.parametrize("extension", list(FileExtension))
def test_extension_from_path_round_trip(extension):
    assert FileExtension.from_path(f"dir/file.{extension}") is extension


def test_extension_from_path_unknown_or_missing():
    assert FileExtension.from_path("README") is None
    assert FileExtension.from_path("archive.tar.zzz") is None
    assert FileExtension.from_path("report.DOCX") is None


def test_extension_str_and_mime():
    assert str(FileExtension.DOCX) == "docx"
    assert FileExtension.PDF.export_mime() == "application/pdf"
    assert FileExtension.JPG.export_mime() == FileExtension.JPEG.export_mime()


def test_doc_type_from_file_path():
    assert DocType.from_file_path("sheet.csv") is DocType.SPREADSHEET
    assert DocType.from_file_path("slides.pptx") is DocType.PRESENTATION
    assert DocType.from_file_path("letter.odt") is DocType.DOCUMENT
    assert DocType.from_file_path("book.epub") is None
    assert DocType.from_file_path("plain") is None


def test_doc_type_mime_round_trip():
    for doc_type in DocType:
        assert DocType.from_mime_type(doc_type.mime()) is doc_type
    assert DocType.DOCUMENT.mime() == MIME_TYPE_DRIVE_DOCUMENT
    assert DocType.from_mime_type(MIME_TYPE_DRIVE_FOLDER) is None


def test_supported_import_types():
    imports = DocType.supported_import_types()
    expected = {str(e) for e in FileExtension} - {"epub", "txt"}
    assert set(imports) == expected
    assert len(imports) == len(expected)
    assert imports[0] == "doc"


def test_default_export_type_is_supported():
    for doc_type in DocType:
        assert doc_type.can_export_to(doc_type.default_export_type())
    assert DocType.SPREADSHEET.default_export_type() is FileExtension.CSV
    assert DocType.DOCUMENT.default_export_type() is FileExtension.PDF


def test_can_export_to():
    assert DocType.DOCUMENT.can_export_to(FileExtension.EPUB)
    assert not DocType.SPREADSHEET.can_export_to(FileExtension.DOCX)
    assert not DocType.PRESENTATION.can_export_to(FileExtension.CSV)


def test_doc_type_str():
    assert str(DocType.from_file_path("slides.ppt")) == "presentation"
    assert str(DocType.from_mime_type(MIME_TYPE_DRIVE_PRESENTATION)) == "presentation"
    assert str(DocType.from_file_path("sheet.xlsx")) == "spreadsheet"


def test_file_kind_predicates():
    folder = {"mimeType": MIME_TYPE_DRIVE_FOLDER}
    shortcut = {"mimeType": MIME_TYPE_DRIVE_SHORTCUT}
    binary = {"mimeType": "image/png", "md5Checksum": "abc"}
    sheet = {"mimeType": MIME_TYPE_DRIVE_SPREADSHEET}
    assert is_directory(folder) and not is_directory(binary)
    assert is_shortcut(shortcut) and not is_shortcut(folder)
    assert is_binary(binary) and not is_binary(sheet)