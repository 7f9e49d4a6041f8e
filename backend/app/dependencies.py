# backend/app/dependencies.py
from fastapi import Depends

from .config import Settings, get_settings
from .pdf_extractor import PdfLibrary, pdf_library
from .relay_client import RelayClient, relay_client_for
from .screening import ScreeningSession


def get_pdf_library() -> PdfLibrary:
    return pdf_library


def get_relay_client(settings: Settings = Depends(get_settings)) -> RelayClient:
    return relay_client_for(settings)


def get_screening_session(
    relay: RelayClient = Depends(get_relay_client),
    library: PdfLibrary = Depends(get_pdf_library),
) -> ScreeningSession:
    """A fresh session per request; nothing is kept between requests."""
    return ScreeningSession(relay, library)
