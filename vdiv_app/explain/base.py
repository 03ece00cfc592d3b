"""Base classes for narrative explanation services."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import structlog

from ..errors import ExplanationServiceError
from ..models.results import ResistorPair

logger = structlog.get_logger(__name__)

EMPTY_RESPONSE_FALLBACK = (
    "I couldn't generate an explanation right now, but your circuit looks great!"
)
SERVICE_FAILURE_FALLBACK = (
    "The AI assistant is taking a break. Your math is still solid though!"
)


@dataclass(frozen=True)
class ExplanationRequest:
    """Everything the service is told about a solved divider."""
    v_in: float
    target_v_out: float
    r1_formatted: str
    r2_formatted: str
    actual_v_out: float

    @classmethod
    def from_pair(cls, v_in: float, target_v_out: float,
                  pair: ResistorPair) -> "ExplanationRequest":
        return cls(
            v_in=v_in,
            target_v_out=target_v_out,
            r1_formatted=pair.r1_formatted,
            r2_formatted=pair.r2_formatted,
            actual_v_out=pair.actual_v_out,
        )


class BaseExplanationService(ABC):
    """Base class for explanation text generators."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"explain.{name}")

    @abstractmethod
    def generate(self, request: ExplanationRequest) -> str:
        """
        Produce explanation text for a solved divider.

        Args:
            request: Inputs and chosen resistors

        Returns:
            Generated text, possibly empty

        Raises:
            ExplanationServiceError: the service could not be reached or
                answered with something unusable
        """
        pass


def explain_circuit(service: BaseExplanationService, request: ExplanationRequest) -> str:
    """
    Ask service for an explanation, never failing the caller.

    Empty answers and every service failure map to fixed fallback text.
    """
    try:
        text = service.generate(request)

    except ExplanationServiceError as e:
        logger.warning(
            "Explanation service failed",
            service=service.name,
            status_code=e.status_code,
            error=str(e)
        )
        return SERVICE_FAILURE_FALLBACK

    except Exception as e:
        logger.error(
            "Unexpected error generating explanation",
            service=service.name,
            error=str(e)
        )
        return SERVICE_FAILURE_FALLBACK

    if not text or not text.strip():
        logger.info("Explanation service returned no text", service=service.name)
        return EMPTY_RESPONSE_FALLBACK

    return text
