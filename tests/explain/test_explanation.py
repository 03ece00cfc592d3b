"""Tests for the explanation client and its fallbacks"""

import json
import socket
from io import BytesIO
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError

import pytest

from vdiv_app.config.defaults import ExplanationParams
from vdiv_app.errors import ExplanationServiceError
from vdiv_app.explain import (
    EMPTY_RESPONSE_FALLBACK,
    SERVICE_FAILURE_FALLBACK,
    ExplanationRequest,
    GeminiExplanationService,
    build_prompt,
    explain_circuit,
)
from vdiv_app.solver.divider import solve


def _mock_response(payload, status=200):
    response = MagicMock()
    response.getcode.return_value = status
    response.read.return_value = json.dumps(payload).encode("utf-8")
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def _gemini_payload(*texts):
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


class TestPrompt:
    """Test prompt assembly"""

    def test_prompt_contents(self, sample_request):
        prompt = build_prompt(sample_request)
        assert "Input Voltage: 12.0V" in prompt
        assert "Desired Output: 3.3V" in prompt
        assert "Actual Output with standard resistors: 3.30V" in prompt
        assert "R1 (Top Resistor): 24kΩ" in prompt
        assert "R2 (Bottom Resistor): 9.1kΩ" in prompt
        assert "E24" in prompt

    def test_request_from_pair(self):
        pair = solve(12.0, 3.3).best_pair
        request = ExplanationRequest.from_pair(12.0, 3.3, pair)
        assert request.r1_formatted == "24kΩ"
        assert request.r2_formatted == "9.1kΩ"
        assert request.actual_v_out == pair.actual_v_out


class TestExplainCircuit:
    """Test best-effort wrapper"""

    def test_returns_service_text(self, stub_service, sample_request):
        assert explain_circuit(stub_service, sample_request) == "A divider splits voltage."
        assert stub_service.requests == [sample_request]

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_empty_text_falls_back(self, stub_service, sample_request, text):
        stub_service.text = text
        assert explain_circuit(stub_service, sample_request) == EMPTY_RESPONSE_FALLBACK

    def test_service_error_falls_back(self, stub_service, sample_request):
        stub_service.error = ExplanationServiceError("HTTP 503", status_code=503, retryable=True)
        assert explain_circuit(stub_service, sample_request) == SERVICE_FAILURE_FALLBACK

    def test_unexpected_error_falls_back(self, stub_service, sample_request):
        stub_service.error = RuntimeError("boom")
        assert explain_circuit(stub_service, sample_request) == SERVICE_FAILURE_FALLBACK


class TestGeminiService:
    """Test the HTTP client against a mocked urlopen"""

    def test_url(self):
        service = GeminiExplanationService(ExplanationParams(model="m-1"), api_key="k")
        assert service.url == "https://generativelanguage.googleapis.com/v1beta/models/m-1:generateContent"

    def test_missing_api_key(self, sample_request, monkeypatch):
        monkeypatch.delenv("VDIV_TEST_KEY", raising=False)
        service = GeminiExplanationService(ExplanationParams(api_key_env="VDIV_TEST_KEY"))
        with pytest.raises(ExplanationServiceError, match="VDIV_TEST_KEY"):
            service.generate(sample_request)

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("VDIV_TEST_KEY", "secret")
        service = GeminiExplanationService(ExplanationParams(api_key_env="VDIV_TEST_KEY"))
        assert service.api_key == "secret"

    @patch("vdiv_app.explain.gemini.urlopen")
    def test_successful_request(self, mock_urlopen, sample_request):
        mock_urlopen.return_value = _mock_response(_gemini_payload("Hello ", "maker!"))
        service = GeminiExplanationService(ExplanationParams(timeout_seconds=3.0), api_key="k")

        assert service.generate(sample_request) == "Hello maker!"

        req = mock_urlopen.call_args[0][0]
        assert mock_urlopen.call_args[1]["timeout"] == 3.0
        assert req.get_method() == "POST"
        assert req.get_header("X-goog-api-key") == "k"
        body = json.loads(req.data.decode("utf-8"))
        assert body["contents"][0]["parts"][0]["text"] == build_prompt(sample_request)

    @patch("vdiv_app.explain.gemini.urlopen")
    def test_no_candidates_is_empty(self, mock_urlopen, sample_request):
        mock_urlopen.return_value = _mock_response({"candidates": []})
        service = GeminiExplanationService(api_key="k")
        assert service.generate(sample_request) == ""
        assert explain_circuit(service, sample_request) == EMPTY_RESPONSE_FALLBACK

    @patch("vdiv_app.explain.gemini.urlopen")
    def test_http_error(self, mock_urlopen, sample_request):
        mock_urlopen.side_effect = HTTPError(
            "https://example.invalid", 500, "Server Error", {}, BytesIO(b"")
        )
        service = GeminiExplanationService(api_key="k")

        with pytest.raises(ExplanationServiceError) as exc_info:
            service.generate(sample_request)
        assert exc_info.value.status_code == 500
        assert exc_info.value.retryable is True

    @patch("vdiv_app.explain.gemini.urlopen")
    def test_client_error_not_retryable(self, mock_urlopen, sample_request):
        mock_urlopen.side_effect = HTTPError(
            "https://example.invalid", 403, "Forbidden", {}, BytesIO(b"")
        )
        service = GeminiExplanationService(api_key="k")

        with pytest.raises(ExplanationServiceError) as exc_info:
            service.generate(sample_request)
        assert exc_info.value.retryable is False

    @pytest.mark.parametrize("error", [URLError("unreachable"), socket.timeout("timed out")])
    def test_network_errors(self, sample_request, error):
        service = GeminiExplanationService(api_key="k")
        with patch("vdiv_app.explain.gemini.urlopen", side_effect=error):
            with pytest.raises(ExplanationServiceError, match="Network error"):
                service.generate(sample_request)
            assert explain_circuit(service, sample_request) == SERVICE_FAILURE_FALLBACK

    @patch("vdiv_app.explain.gemini.urlopen")
    def test_malformed_json(self, mock_urlopen, sample_request):
        response = _mock_response({})
        response.read.return_value = b"not json"
        mock_urlopen.return_value = response
        service = GeminiExplanationService(api_key="k")

        with pytest.raises(ExplanationServiceError, match="Malformed"):
            service.generate(sample_request)

    @patch("vdiv_app.explain.gemini.urlopen")
    def test_unexpected_shape(self, mock_urlopen, sample_request):
        mock_urlopen.return_value = _mock_response(["not", "an", "object"])
        service = GeminiExplanationService(api_key="k")

        with pytest.raises(ExplanationServiceError, match="Unexpected response shape"):
            service.generate(sample_request)
