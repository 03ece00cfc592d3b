"""
Divider designer coordinator.

Loads configuration, runs the resistor search, and hands solved circuits to
the explanation service without holding up the next solve.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .explain.base import (
    SERVICE_FAILURE_FALLBACK,
    BaseExplanationService,
    ExplanationRequest,
    explain_circuit,
)
from .explain.gemini import GeminiExplanationService
from .logging.config import configure_logging, get_solver_logger, log_solve_outcome
from .models.results import CalculationResult, ResistorPair
from .solver.divider import solve

logger = structlog.get_logger(__name__)
solver_logger = get_solver_logger(__name__)


class DividerDesigner:
    """
    Main entry point for designing voltage dividers.

    Pipeline:
    Voltages → Validation → E24 Search → Metrics/Message → (Explanation)
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
        explanation_service: Optional[BaseExplanationService] = None,
        setup_logging: bool = False,
    ) -> None:
        """Initialize the designer from settings.yaml, defaults and overrides."""
        self.logger = logger
        self.solver_logger = solver_logger

        loader = ConfigLoader.create(Path(config_dir) if config_dir is not None else None)
        merged = loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid configuration", errors=validation_errors)

        self.config = loader.load(overrides)

        if setup_logging:
            configure_logging(
                level=self.config.logging.level,
                format_json=self.config.logging.format_json
            )

        if explanation_service is None and self.config.explanation.enabled:
            explanation_service = GeminiExplanationService(self.config.explanation)
        self.explanation_service = explanation_service

        # Created on the first explanation request
        self._executor: Optional[ThreadPoolExecutor] = None

        self.logger.info(
            "Divider designer initialized",
            r2_min_ohms=self.config.solver.r2_min_ohms,
            r2_max_ohms=self.config.solver.r2_max_ohms,
            explanations_enabled=self.explanation_service is not None
        )

    def design(self, v_in: float, target_v_out: float) -> CalculationResult:
        """Solve for the best E24 pair and log the outcome."""
        result = solve(v_in, target_v_out, self.config.solver)
        log_solve_outcome(self.solver_logger, v_in, target_v_out, result)
        return result

    def explain(self, v_in: float, target_v_out: float, pair: ResistorPair) -> str:
        """Explanation text for a solved pair; falls back instead of failing."""
        if self.explanation_service is None:
            return SERVICE_FAILURE_FALLBACK

        request = ExplanationRequest.from_pair(v_in, target_v_out, pair)
        return explain_circuit(self.explanation_service, request)

    def request_explanation(self, v_in: float, target_v_out: float,
                            pair: ResistorPair) -> "Future[str]":
        """Run explain() on the background worker and return its future."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="vdiv-explain")
        return self._executor.submit(self.explain, v_in, target_v_out, pair)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the explanation worker."""
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def __enter__(self) -> "DividerDesigner":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()
