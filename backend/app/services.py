# backend/app/services.py
import logging
from typing import Any, Dict, NamedTuple

import requests

from .config import Settings

logger = logging.getLogger(__name__)

API_KEY_MISSING = "API key not configured on the server."
PROMPT_MISSING = "Prompt is missing from the request."
INTERNAL_ERROR = "An internal server error occurred."

JSON_MIME_TYPE = "application/json"


class GeminiRequest(NamedTuple):
    url: str
    headers: Dict[str, str]
    payload: Dict[str, Any]


class RelayResponse(NamedTuple):
    status_code: int
    body: Any


# --- Request Construction ---
def build_gemini_request(prompt: str, is_json: bool, settings: Settings) -> GeminiRequest:
    """Pure mapping of (prompt, mode, credential) to the generateContent call.

    Structured mode only asks the model for JSON output through
    `responseMimeType`; nothing is validated locally.
    """
    url = f"{settings.gemini_api_base}/models/{settings.gemini_model}:generateContent"
    headers = {
        "Content-Type": JSON_MIME_TYPE,
        "x-goog-api-key": settings.gemini_api_key or "",
    }
    payload = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {"responseMimeType": JSON_MIME_TYPE} if is_json else {},
    }
    return GeminiRequest(url=url, headers=headers, payload=payload)


# --- Relay ---
def forward_prompt(prompt: Any, is_json: bool, settings: Settings) -> RelayResponse:
    """Forward one prompt to Gemini and hand back status and body untouched.

    - no credential -> 500, no outbound call
    - no prompt -> 400
    - upstream non-2xx -> upstream status and body
    - transport failure / non-JSON upstream body -> 500
    """
    if not settings.gemini_api_key:
        return RelayResponse(500, {"error": API_KEY_MISSING})
    if not prompt:
        return RelayResponse(400, {"error": PROMPT_MISSING})

    request = build_gemini_request(prompt, is_json, settings)
    try:
        api_response = requests.post(request.url, headers=request.headers, json=request.payload)
        data = api_response.json()
    except (requests.RequestException, ValueError):
        logger.exception("Error in backend relay")
        return RelayResponse(500, {"error": INTERNAL_ERROR})

    if not api_response.ok:
        logger.error("Error from Gemini API (status=%s): %s", api_response.status_code, data)
        return RelayResponse(api_response.status_code, data)

    return RelayResponse(200, data)
