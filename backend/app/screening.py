# backend/app/screening.py
import logging
from typing import Iterable, List, Optional

from . import prompts
from .exceptions import EmailDraftUnavailable
from .pdf_extractor import LIBRARY_NOT_READY_MESSAGE, PdfLibrary, extract_text
from .relay_client import RelayClient
from .results import can_draft_email, rank_results
from .schemas import AnalysisResult, CandidateAnalysis, ResumeFile

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DEFAULT_JOB_TITLE = "the role"

MISSING_INPUTS = "Please provide a job description and at least one resume."
MISSING_JOB_DESCRIPTION = "Please enter a job description first."


# --- Orchestrator ---

def analyze_resume(
    job_description: str,
    resume: ResumeFile,
    relay: RelayClient,
    library: PdfLibrary,
) -> AnalysisResult:
    """Analyze one file. Never raises: any failure becomes an error-tagged result."""
    try:
        resume_text = extract_text(library, resume.content)
        raw = relay.generate(prompts.analysis_prompt(job_description, resume_text), is_json=True)
        analysis = CandidateAnalysis.model_validate(raw)
    except Exception as e:
        logger.warning("Analysis failed for %s: %s", resume.name, e)
        return AnalysisResult(file_name=resume.name, error=f"Failed to analyze: {e}")
    return AnalysisResult(file_name=resume.name, analysis=analysis)


def analyze_resumes(
    job_description: str,
    resumes: Iterable[ResumeFile],
    relay: RelayClient,
    library: PdfLibrary,
) -> List[AnalysisResult]:
    """One result per file, best score first.

    Files are processed strictly one after another; each file's extraction
    and remote call finish before the next file starts. Ordering happens
    only once the whole batch is done.
    """
    results: List[AnalysisResult] = []
    for i, resume in enumerate(resumes, start=1):
        logger.info("Analyzing resume %d: %s", i, resume.name)
        results.append(analyze_resume(job_description, resume, relay, library))
    return rank_results(results)


# --- Session ---

def filter_pdf_files(files: Iterable[ResumeFile]) -> List[ResumeFile]:
    return [f for f in files if f.content_type == PDF_MIME_TYPE]


class ScreeningSession:
    """State for one recruiter session: job description, files and the latest results.

    `error` holds the message the client shows above the results panel.
    """

    def __init__(self, relay: RelayClient, library: PdfLibrary, job_description: str = ""):
        self.relay = relay
        self.library = library
        self.job_description = job_description
        self.resumes: List[ResumeFile] = []
        self.results: List[AnalysisResult] = []
        self.error: Optional[str] = None
        self.is_loading = False

    def add_resumes(self, files: Iterable[ResumeFile]) -> List[ResumeFile]:
        accepted = filter_pdf_files(files)
        self.resumes.extend(accepted)
        return accepted

    def remove_resume(self, name: str) -> None:
        self.resumes = [f for f in self.resumes if f.name != name]

    def analyze(self) -> List[AnalysisResult]:
        if not self.job_description.strip() or not self.resumes:
            self.error = MISSING_INPUTS
            return self.results
        if not self.library.is_ready:
            self.error = self.library.error or LIBRARY_NOT_READY_MESSAGE
            return self.results

        self.is_loading = True
        self.error = None
        self.results = []
        try:
            self.results = analyze_resumes(self.job_description, self.resumes, self.relay, self.library)
        finally:
            self.is_loading = False
        return self.results

    def enhance_job_description(self) -> bool:
        """Replace the job description with an AI rewrite. Returns False on failure."""
        if not self.job_description.strip():
            self.error = MISSING_JOB_DESCRIPTION
            return False
        self.error = None
        try:
            self.job_description = self.relay.generate(prompts.enhance_prompt(self.job_description))
        except Exception as e:
            logger.warning("Job description enhancement failed: %s", e)
            self.error = f"Failed to enhance: {e}"
            return False
        return True

    def job_title(self) -> str:
        # Taken from the top-ranked result, as the results panel shows it.
        if self.results and self.results[0].analysis is not None:
            return self.results[0].analysis.job_title or DEFAULT_JOB_TITLE
        return DEFAULT_JOB_TITLE

    def draft_email(self, result: AnalysisResult, job_title: Optional[str] = None) -> str:
        """Outreach email text for one candidate.

        A failed remote call comes back as the draft text itself.
        """
        if not can_draft_email(result):
            raise EmailDraftUnavailable(
                f"No outreach email is offered for {result.file_name}: a successful analysis "
                "scoring at least 70 is required."
            )
        analysis = result.analysis
        try:
            prompt = prompts.outreach_email_prompt(
                analysis.candidate_name or result.file_name,
                job_title or self.job_title(),
                analysis.strengths,
            )
            return self.relay.generate(prompt)
        except Exception as e:
            logger.warning("Email draft failed for %s: %s", result.file_name, e)
            return f"Failed to generate email: {e}"
