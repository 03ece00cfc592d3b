"""Explanation service backed by the Gemini generateContent REST API."""

import json
import os
import socket
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..config.defaults import ExplanationParams
from ..errors import ExplanationServiceError
from .base import BaseExplanationService, ExplanationRequest
from .prompt import build_prompt


class GeminiExplanationService(BaseExplanationService):
    """HTTP POST to a Gemini model's generateContent endpoint."""

    def __init__(self, config: Optional[ExplanationParams] = None,
                 api_key: Optional[str] = None):
        super().__init__("gemini")
        self.config = config or ExplanationParams()
        self.api_key = api_key if api_key is not None else os.environ.get(self.config.api_key_env)

    @property
    def url(self) -> str:
        return f"{self.config.endpoint.rstrip('/')}/models/{quote(self.config.model)}:generateContent"

    def generate(self, request: ExplanationRequest) -> str:
        """Send the prompt and return the concatenated text parts."""
        if not self.api_key:
            raise ExplanationServiceError(
                f"No API key in environment variable {self.config.api_key_env}"
            )

        body = {"contents": [{"parts": [{"text": build_prompt(request)}]}]}
        data = json.dumps(body).encode('utf-8')
        headers = {
            'Content-Type': 'application/json',
            'Content-Length': str(len(data)),
            'User-Agent': 'vdiv-app/1.0',
            'x-goog-api-key': self.api_key,
        }

        req = Request(self.url, data=data, headers=headers, method='POST')

        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                response_code = response.getcode()
                response_data = response.read().decode('utf-8')

        except HTTPError as e:
            self.logger.warning(
                "Explanation request HTTP error",
                error_code=e.code,
                error_reason=e.reason
            )
            # Server errors are worth retrying later, client errors are not
            raise ExplanationServiceError(
                f"HTTP {e.code}: {e.reason}", status_code=e.code, retryable=e.code >= 500
            )

        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning("Explanation request network error", error=str(e))
            raise ExplanationServiceError(f"Network error: {str(e)}", retryable=True)

        if not 200 <= response_code < 300:
            raise ExplanationServiceError(
                f"HTTP {response_code}: {response_data[:200]}", status_code=response_code
            )

        try:
            payload = json.loads(response_data)
        except json.JSONDecodeError as e:
            raise ExplanationServiceError(f"Malformed response JSON: {str(e)}")

        return self._extract_text(payload)

    @staticmethod
    def _extract_text(payload: Any) -> str:
        """Join the text parts of the first candidate; empty when there are none."""
        try:
            candidates = payload.get("candidates") or []
            if not candidates:
                return ""
            parts = candidates[0].get("content", {}).get("parts") or []
            return "".join(part.get("text", "") for part in parts)
        except AttributeError as e:
            raise ExplanationServiceError(f"Unexpected response shape: {str(e)}")
