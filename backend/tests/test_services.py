"""
Tests for the relay core: request construction and forwarding.

No real network calls are made; `requests.post` is patched throughout.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from backend.app import services
from backend.app.config import Settings

from .support import gemini_body


def upstream(status_code: int, body) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body
    return response


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", gemini_model="gemini-test")


class TestBuildGeminiRequest:
    def test_structured_mode_sets_response_mime_type(self, settings):
        request = services.build_gemini_request("Rate this resume", True, settings)

        assert request.url == (
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-test:generateContent"
        )
        assert request.payload == {
            "contents": [{"parts": [{"text": "Rate this resume"}]}],
            "generationConfig": {"responseMimeType": "application/json"},
        }

    def test_plain_mode_has_empty_generation_config(self, settings):
        request = services.build_gemini_request("Write an email", False, settings)

        assert request.payload["generationConfig"] == {}

    def test_credential_goes_in_header_not_url(self, settings):
        request = services.build_gemini_request("hi", False, settings)

        assert request.headers["x-goog-api-key"] == "test-key"
        assert "test-key" not in request.url


class TestForwardPrompt:
    @pytest.mark.parametrize("prompt", ["hello", None, ""])
    def test_missing_credential_fails_without_calling_out(self, prompt):
        with patch("backend.app.services.requests.post") as post:
            result = services.forward_prompt(prompt, False, Settings(gemini_api_key=None))

        post.assert_not_called()
        assert result.status_code == 500
        assert result.body == {"error": services.API_KEY_MISSING}

    @pytest.mark.parametrize("prompt", [None, ""])
    def test_missing_prompt(self, settings, prompt):
        with patch("backend.app.services.requests.post") as post:
            result = services.forward_prompt(prompt, True, settings)

        post.assert_not_called()
        assert result == (400, {"error": "Prompt is missing from the request."})

    def test_success_body_is_returned_unchanged(self, settings):
        body = gemini_body('{"suitabilityScore": 88}')
        with patch("backend.app.services.requests.post", return_value=upstream(200, body)) as post:
            result = services.forward_prompt("Analyze", True, settings)

        assert result.status_code == 200
        assert result.body == body
        _, kwargs = post.call_args
        assert kwargs["json"]["generationConfig"] == {"responseMimeType": "application/json"}
        assert kwargs["headers"]["x-goog-api-key"] == "test-key"

    def test_upstream_error_status_and_body_forwarded(self, settings):
        body = {"error": {"code": 429, "message": "Resource exhausted", "status": "RESOURCE_EXHAUSTED"}}
        with patch("backend.app.services.requests.post", return_value=upstream(429, body)):
            result = services.forward_prompt("Analyze", False, settings)

        assert result.status_code == 429
        assert result.body == body

    def test_transport_failure_is_internal_error(self, settings):
        with patch(
            "backend.app.services.requests.post",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            result = services.forward_prompt("Analyze", False, settings)

        assert result == (500, {"error": services.INTERNAL_ERROR})

    def test_non_json_upstream_body_is_internal_error(self, settings):
        response = upstream(502, None)
        response.json.side_effect = ValueError("Expecting value")
        with patch("backend.app.services.requests.post", return_value=response):
            result = services.forward_prompt("Analyze", False, settings)

        assert result == (500, {"error": services.INTERNAL_ERROR})
