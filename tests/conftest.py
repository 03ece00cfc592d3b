"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from vdiv_app.explain.base import BaseExplanationService, ExplanationRequest


class StubExplanationService(BaseExplanationService):
    """Explanation service returning canned text or raising a canned error."""

    def __init__(self, text: str = "A divider splits voltage.", error: Exception = None):
        super().__init__("stub")
        self.text = text
        self.error = error
        self.requests: list[ExplanationRequest] = []

    def generate(self, request: ExplanationRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def stub_service() -> StubExplanationService:
    """Explanation service that answers without network access."""
    return StubExplanationService()


@pytest.fixture
def empty_config_dir(tmp_path: Path) -> Path:
    """Config directory without a settings file, so defaults apply."""
    return tmp_path


@pytest.fixture
def sample_request() -> ExplanationRequest:
    """Explanation request for the 12 V to 3.3 V divider."""
    return ExplanationRequest(
        v_in=12.0,
        target_v_out=3.3,
        r1_formatted="24kΩ",
        r2_formatted="9.1kΩ",
        actual_v_out=12.0 * (9100.0 / 33100.0),
    )
