from typing import Callable, List

import pytest

from backend.app.pdf_extractor import PdfLibrary
from backend.app.schemas import ResumeFile

from .support import build_pdf


@pytest.fixture
def make_pdf() -> Callable[[List[List[str]]], bytes]:
    return build_pdf


@pytest.fixture
def make_resume(make_pdf) -> Callable[..., ResumeFile]:
    def _make(name: str, lines: List[str], content_type: str = "application/pdf") -> ResumeFile:
        return ResumeFile(name=name, content=make_pdf([lines]), content_type=content_type)

    return _make


@pytest.fixture
def ready_library() -> PdfLibrary:
    library = PdfLibrary()
    library.initialize()
    assert library.is_ready
    return library
