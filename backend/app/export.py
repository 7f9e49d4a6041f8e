# backend/app/export.py
import csv
import io
from typing import Iterable

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from . import schemas
from .results import rank_results

router = APIRouter()

CSV_HEADER = [
    "File Name",
    "Candidate Name",
    "Job Title",
    "Suitability Score",
    "Match Summary",
    "Strengths",
    "Potential Gaps",
    "Suggested Questions",
    "Error",
]


def results_to_csv(results: Iterable[schemas.AnalysisResult]) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_HEADER)

    for result in rank_results(results):
        analysis = result.analysis
        if analysis is None:
            writer.writerow([result.file_name, "", "", "", "", "", "", "", result.error or ""])
            continue
        writer.writerow([
            result.file_name,
            analysis.candidate_name or "",
            analysis.job_title or "",
            "" if analysis.suitability_score is None else analysis.suitability_score,
            analysis.match_summary or "",
            "; ".join(analysis.strengths),
            "; ".join(analysis.potential_gaps),
            "; ".join(analysis.suggested_questions),
            "",
        ])
    return output.getvalue()


@router.post("/csv")
def export_results_to_csv(payload: schemas.ExportRequest):
    """Download a result set (as returned by /resume/analyze) as a CSV shortlist."""
    response = StreamingResponse(iter([results_to_csv(payload.results)]), media_type="text/csv")
    response.headers["Content-Disposition"] = "attachment; filename=shortlist.csv"
    return response
