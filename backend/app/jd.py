# backend/app/jd.py
from fastapi import APIRouter, Depends, HTTPException

from . import schemas
from .dependencies import get_screening_session
from .screening import MISSING_JOB_DESCRIPTION, ScreeningSession

router = APIRouter()


@router.post("/enhance", response_model=schemas.EnhanceResponse)
def enhance_jd(
    payload: schemas.EnhanceRequest,
    session: ScreeningSession = Depends(get_screening_session),
):
    """Rewrite a job description with the model.

    A failed rewrite returns the original text with `error` set rather than
    an error status, so the client keeps what the recruiter typed.
    """
    if not payload.job_description.strip():
        raise HTTPException(status_code=400, detail=MISSING_JOB_DESCRIPTION)
    session.job_description = payload.job_description
    session.enhance_job_description()
    return schemas.EnhanceResponse(job_description=session.job_description, error=session.error)
