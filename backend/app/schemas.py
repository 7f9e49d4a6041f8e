# backend/app/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional, List, Union

# --- Base Schemas ---
class CamelModel(BaseModel):
    """Wire format is camelCase (what the browser client sends); Python code uses snake_case."""
    model_config = ConfigDict(populate_by_name=True)

# --- Relay Schemas ---
class RelayRequest(CamelModel):
    # Only a falsy prompt is rejected; isJson is read by truthiness.
    prompt: Optional[Any] = None
    is_json: bool = Field(False, alias="isJson")

    @field_validator("is_json", mode="before")
    @classmethod
    def _truthy_flag(cls, value: Any) -> bool:
        return bool(value)

# --- AI Model Schemas ---
class CandidateAnalysis(CamelModel):
    # Extra keys returned by the model are kept as-is.
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    job_title: Optional[str] = Field(None, alias="jobTitle")
    candidate_name: Optional[str] = Field(None, alias="candidateName")
    # Stored exactly as the model returned it; ordering code coerces it.
    suitability_score: Optional[Union[int, float, str]] = Field(None, alias="suitabilityScore")
    match_summary: Optional[str] = Field(None, alias="matchSummary")
    strengths: List[str] = []
    potential_gaps: List[str] = Field(default_factory=list, alias="potentialGaps")
    suggested_questions: List[str] = Field(default_factory=list, alias="suggestedQuestions")

    @field_validator("strengths", "potential_gaps", "suggested_questions", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

# --- Screening Result Schemas ---
class ResumeFile(BaseModel):
    name: str
    content: bytes
    content_type: Optional[str] = None

class AnalysisResult(CamelModel):
    file_name: str = Field(alias="fileName")
    analysis: Optional[CandidateAnalysis] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.analysis is not None

# --- Response Schemas ---
class ResultView(CamelModel):
    file_name: str = Field(alias="fileName")
    display_name: str = Field(alias="displayName")
    error: Optional[str] = None
    suitability_score: Optional[Union[int, float, str]] = Field(None, alias="suitabilityScore")
    score_band: Optional[str] = Field(None, alias="scoreBand")
    match_summary: Optional[str] = Field(None, alias="matchSummary")
    strengths: List[str] = []
    potential_gaps: List[str] = Field(default_factory=list, alias="potentialGaps")
    suggested_questions: List[str] = Field(default_factory=list, alias="suggestedQuestions")
    can_draft_email: bool = Field(False, alias="canDraftEmail")
    # The raw result, so the client can send it back for an email draft.
    result: AnalysisResult

class AnalyzeResponse(BaseModel):
    results: List[ResultView]

class EnhanceRequest(CamelModel):
    job_description: str = Field("", alias="jobDescription")

class EnhanceResponse(CamelModel):
    job_description: str = Field(alias="jobDescription")
    error: Optional[str] = None

class EmailDraftRequest(CamelModel):
    result: AnalysisResult
    job_title: Optional[str] = Field(None, alias="jobTitle")

class EmailDraftResponse(BaseModel):
    email: str

class ExportRequest(BaseModel):
    results: List[AnalysisResult]

class HealthStatus(CamelModel):
    pdf_library: str = Field(alias="pdfLibrary")
    credential_configured: bool = Field(alias="credentialConfigured")
    relay_mode: str = Field(alias="relayMode")
