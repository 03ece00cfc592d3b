"""Best-effort narrative explanations of a solved divider"""

from .base import (
    EMPTY_RESPONSE_FALLBACK,
    SERVICE_FAILURE_FALLBACK,
    BaseExplanationService,
    ExplanationRequest,
    explain_circuit,
)
from .gemini import GeminiExplanationService
from .prompt import build_prompt

__all__ = [
    "EMPTY_RESPONSE_FALLBACK",
    "SERVICE_FAILURE_FALLBACK",
    "BaseExplanationService",
    "ExplanationRequest",
    "GeminiExplanationService",
    "build_prompt",
    "explain_circuit",
]
