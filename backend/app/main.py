# backend/app/main.py
import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import schemas, services
from .config import Settings, get_settings
from .dependencies import get_pdf_library
from .export import router as export_router
from .jd import router as jd_router
from .pdf_extractor import PdfLibrary, pdf_library
from .resume import router as resume_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the PDF library once and report the relay's configuration."""
    pdf_library.initialize()
    if not get_settings().has_credential:
        logger.warning("GEMINI_API_KEY is not set; every relay call will fail with a configuration error.")
    logger.info("Server is running on port %s", settings.port)
    logger.info("This server acts as a secure proxy for your Gemini API calls.")
    yield
    logger.info("Application shutting down.")


app = FastAPI(title="AI Resume Screener API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Relay ---

@app.post("/api/gemini", tags=["relay"])
@app.post("/api/analyze", tags=["relay"], include_in_schema=False)
async def relay_prompt(request: Request, settings: Settings = Depends(get_settings)):
    """Forward `{prompt, isJson}` to Gemini using the server-held key.

    The upstream body is returned unchanged, with the upstream status on
    failure. A body that isn't a valid request counts as a missing prompt.
    """
    try:
        payload = schemas.RelayRequest.model_validate(await request.json())
    except ValueError:
        payload = schemas.RelayRequest()
    result = await run_in_threadpool(services.forward_prompt, payload.prompt, payload.is_json, settings)
    return JSONResponse(status_code=result.status_code, content=result.body)


@app.get("/health", response_model=schemas.HealthStatus, tags=["admin"])
def health(
    settings: Settings = Depends(get_settings),
    library: PdfLibrary = Depends(get_pdf_library),
):
    return schemas.HealthStatus(
        pdf_library=library.state.value,
        credential_configured=settings.has_credential,
        relay_mode="http" if settings.relay_url else "in-process",
    )

# --- Include Routers ---
app.include_router(jd_router, prefix="/jd", tags=["jd"])
app.include_router(resume_router, prefix="/resume", tags=["resume"])
app.include_router(export_router, prefix="/export", tags=["export"])

# The built front-end, when present, is served from the root.
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


def run():
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
