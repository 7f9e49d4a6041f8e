# backend/app/results.py
import math
from typing import Any, Iterable, List, Optional

from .schemas import AnalysisResult, ResultView

# Outreach emails are only offered to candidates scoring at least this much.
EMAIL_DRAFT_MIN_SCORE = 70
STRONG_MATCH_SCORE = 85


def numeric_score(value: Any) -> Optional[float]:
    """Best-effort float of a model-supplied score; None when it isn't a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    return score if math.isfinite(score) else None


def sort_key(result: AnalysisResult) -> float:
    """Ordering score: missing, unparseable and failed results count as 0."""
    if result.analysis is None:
        return 0.0
    return numeric_score(result.analysis.suitability_score) or 0.0


def rank_results(results: Iterable[AnalysisResult]) -> List[AnalysisResult]:
    # sorted() is stable, so ties keep their upload order
    return sorted(results, key=sort_key, reverse=True)


def score_band(score: Any) -> str:
    value = numeric_score(score) or 0.0
    if value >= STRONG_MATCH_SCORE:
        return "strong"
    elif value >= EMAIL_DRAFT_MIN_SCORE:
        return "moderate"
    return "weak"


def can_draft_email(result: AnalysisResult) -> bool:
    if not result.succeeded:
        return False
    score = numeric_score(result.analysis.suitability_score)
    return score is not None and score >= EMAIL_DRAFT_MIN_SCORE


def to_view(result: AnalysisResult) -> ResultView:
    """Flatten a result into what the results panel renders."""
    if not result.succeeded:
        return ResultView(
            file_name=result.file_name,
            display_name=result.file_name,
            error=result.error,
            result=result,
        )
    analysis = result.analysis
    return ResultView(
        file_name=result.file_name,
        display_name=analysis.candidate_name or result.file_name,
        suitability_score=analysis.suitability_score,
        score_band=score_band(analysis.suitability_score),
        match_summary=analysis.match_summary,
        strengths=analysis.strengths,
        potential_gaps=analysis.potential_gaps,
        suggested_questions=analysis.suggested_questions,
        can_draft_email=can_draft_email(result),
        result=result,
    )
