"""Helpers shared by the test modules: PDFs built with PyMuPDF and a scripted relay."""

import json
from typing import Any, Callable, List, Optional, Tuple

import fitz

from backend.app.relay_client import RelayClient


def gemini_body(text: str) -> dict:
    """A generateContent success body whose first candidate carries `text`."""
    return {
        "candidates": [
            {"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}
        ],
        "modelVersion": "gemini-2.5-flash-preview-05-20",
    }


def build_pdf(pages: List[List[str]]) -> bytes:
    """One page per entry; each string becomes its own line of text."""
    doc = fitz.open()
    for lines in pages:
        page = doc.new_page()
        y = 72
        for line in lines:
            page.insert_text((72, y), line)
            y += 24
    data = doc.tobytes()
    doc.close()
    return data


class ScriptedRelay(RelayClient):
    """Relay stand-in answering through `handler(prompt, is_json) -> (status, body)`."""

    def __init__(self, handler: Callable[[str, bool], Tuple[int, Any]], events: Optional[list] = None):
        self.handler = handler
        self.calls: List[Tuple[str, bool]] = []
        self.events = events

    def _post(self, prompt: str, is_json: bool) -> Tuple[int, Any]:
        self.calls.append((prompt, is_json))
        if self.events is not None:
            self.events.append("generate")
        return self.handler(prompt, is_json)


def analysis_json(name: str, score: Any, job_title: str = "Backend Engineer") -> str:
    return json.dumps({
        "jobTitle": job_title,
        "candidateName": name,
        "suitabilityScore": score,
        "matchSummary": f"{name} summary.",
        "strengths": ["Python", "APIs"],
        "potentialGaps": ["Kubernetes"],
        "suggestedQuestions": ["Tell me about a service you scaled."],
    })


def relay_by_candidate(scores: dict) -> Callable[[str, bool], Tuple[int, Any]]:
    """Answer the analysis prompt for whichever candidate name appears in it.

    Any other prompt gets plain text back.
    """

    def handler(prompt: str, is_json: bool) -> Tuple[int, Any]:
        if is_json:
            for name, score in scores.items():
                if name in prompt:
                    return 200, gemini_body(analysis_json(name, score))
            return 500, {"error": "unexpected prompt"}
        return 200, gemini_body("Generated text.")

    return handler
