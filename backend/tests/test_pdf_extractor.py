"""
Tests for the PDF text extractor and its load-once library gate.
"""

from unittest.mock import patch

import pytest

from backend.app.exceptions import PdfExtractionError, PdfLibraryNotReady
from backend.app.pdf_extractor import (
    LIBRARY_LOAD_FAILED_MESSAGE,
    LIBRARY_NOT_READY_MESSAGE,
    LibraryState,
    PdfLibrary,
    extract_text,
)


class TestPdfLibrary:
    def test_starts_uninitialized_and_refuses_work(self, make_pdf):
        library = PdfLibrary()

        assert library.state is LibraryState.UNINITIALIZED
        with pytest.raises(PdfLibraryNotReady, match=LIBRARY_NOT_READY_MESSAGE):
            extract_text(library, make_pdf([["Hello"]]))

    def test_initialize_reaches_ready(self):
        library = PdfLibrary()

        assert library.initialize() is LibraryState.READY
        assert library.is_ready
        assert library.error is None

    def test_initialize_loads_module_once(self):
        library = PdfLibrary()
        with patch("backend.app.pdf_extractor.importlib.import_module") as import_module:
            library.initialize()
            library.initialize()
            library.initialize()

        import_module.assert_called_once_with("fitz")
        assert library.is_ready

    def test_failed_load_is_sticky(self, make_pdf):
        library = PdfLibrary(module_name="definitely_not_a_pdf_library")

        assert library.initialize() is LibraryState.FAILED
        assert library.error == LIBRARY_LOAD_FAILED_MESSAGE
        # A second attempt does not retry the import
        assert library.initialize() is LibraryState.FAILED
        with pytest.raises(PdfLibraryNotReady):
            extract_text(library, make_pdf([["Hello"]]))


class TestExtractText:
    def test_items_joined_by_space_pages_by_newline(self, ready_library, make_pdf):
        data = make_pdf([["Jane Doe", "Senior Python Engineer"], ["Experience", "Acme Corp"]])

        text = extract_text(ready_library, data)

        assert text == "Jane Doe Senior Python Engineer\nExperience Acme Corp"

    def test_page_without_text_is_empty(self, ready_library, make_pdf):
        data = make_pdf([["First"], [], ["Third"]])

        assert extract_text(ready_library, data) == "First\n\nThird"

    def test_single_page(self, ready_library, make_pdf):
        assert extract_text(ready_library, make_pdf([["Only line"]])) == "Only line"

    def test_not_a_pdf(self, ready_library):
        with pytest.raises(PdfExtractionError):
            extract_text(ready_library, b"this is plain text, not a pdf")
