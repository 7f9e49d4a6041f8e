# backend/app/resume.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from . import schemas
from .dependencies import get_screening_session
from .exceptions import EmailDraftUnavailable
from .pdf_extractor import LIBRARY_NOT_READY_MESSAGE
from .results import to_view
from .screening import ScreeningSession

router = APIRouter()

logger = logging.getLogger(__name__)


async def _read_uploads(files: List[UploadFile]) -> List[schemas.ResumeFile]:
    resumes = []
    for file in files:
        content = await file.read()
        resumes.append(
            schemas.ResumeFile(
                name=file.filename or "resume.pdf",
                content=content,
                content_type=file.content_type,
            )
        )
    return resumes


@router.post("/analyze", response_model=schemas.AnalyzeResponse)
async def analyze_resumes(
    job_description: str = Form(""),
    files: Optional[List[UploadFile]] = File(None),
    session: ScreeningSession = Depends(get_screening_session),
):
    """Analyze every uploaded PDF against the job description.

    Returns one entry per accepted PDF, best match first. Files that fail
    are reported in place with their error message. Non-PDF uploads are
    ignored.
    """
    if not session.library.is_ready:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=session.library.error or LIBRARY_NOT_READY_MESSAGE,
        )

    session.job_description = job_description
    accepted = session.add_resumes(await _read_uploads(files or []))
    logger.info("Received %d file(s), %d accepted as PDF", len(files or []), len(accepted))

    results = await run_in_threadpool(session.analyze)
    if session.error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=session.error)
    return schemas.AnalyzeResponse(results=[to_view(r) for r in results])


@router.post("/email-draft", response_model=schemas.EmailDraftResponse)
def draft_outreach_email(
    payload: schemas.EmailDraftRequest,
    session: ScreeningSession = Depends(get_screening_session),
):
    try:
        email = session.draft_email(payload.result, job_title=payload.job_title)
    except EmailDraftUnavailable as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return schemas.EmailDraftResponse(email=email)
