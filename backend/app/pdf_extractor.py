# backend/app/pdf_extractor.py
import enum
import importlib
import logging
import threading
from typing import List, Optional

from .exceptions import PdfExtractionError, PdfLibraryNotReady

logger = logging.getLogger(__name__)

PDF_LIBRARY_MODULE = "fitz"  # PyMuPDF
LIBRARY_NOT_READY_MESSAGE = "PDF library is not ready."
LIBRARY_LOAD_FAILED_MESSAGE = "Failed to load the PDF processing library. Please refresh the page."

# PyMuPDF block type for text blocks (1 is image)
_TEXT_BLOCK = 0


class LibraryState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class PdfLibrary:
    """Load-once gate around the PDF parsing module.

    States move UNINITIALIZED -> LOADING -> READY or FAILED and never go back.
    Every extraction checks the state first and fails fast outside READY.
    """

    def __init__(self, module_name: str = PDF_LIBRARY_MODULE):
        self.module_name = module_name
        self.state = LibraryState.UNINITIALIZED
        self.error: Optional[str] = None
        self._module = None
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        return self.state is LibraryState.READY

    def initialize(self) -> LibraryState:
        with self._lock:
            if self.state is not LibraryState.UNINITIALIZED:
                return self.state
            self.state = LibraryState.LOADING
            try:
                self._module = importlib.import_module(self.module_name)
            except ImportError as e:
                logger.error("Could not load PDF library '%s': %s", self.module_name, e)
                self.error = LIBRARY_LOAD_FAILED_MESSAGE
                self.state = LibraryState.FAILED
            else:
                logger.info("PDF library '%s' loaded.", self.module_name)
                self.state = LibraryState.READY
            return self.state

    def require_ready(self):
        """Return the loaded module, or raise PdfLibraryNotReady."""
        if self.state is not LibraryState.READY:
            raise PdfLibraryNotReady(LIBRARY_NOT_READY_MESSAGE)
        return self._module


# Process-wide instance, initialized by the application lifespan hook.
pdf_library = PdfLibrary()


def _page_text_items(page) -> List[str]:
    items = []
    for block in page.get_text("dict").get("blocks", []):
        if block.get("type") != _TEXT_BLOCK:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                items.append(span.get("text", ""))
    return items


def extract_text(library: PdfLibrary, data: bytes) -> str:
    """Extracts all text items from a PDF, one line of output per page.

    Items on a page are joined by a single space and pages by a newline, in
    page order. Image-only pages yield an empty line; there is no OCR.
    """
    fitz = library.require_ready()
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise PdfExtractionError(f"Could not open PDF: {e}") from e
    try:
        return "\n".join(" ".join(_page_text_items(page)) for page in doc)
    finally:
        doc.close()
