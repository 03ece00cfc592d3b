"""
Logging configuration and utilities for the divider designer.
"""
from .config import configure_logging, get_logger, get_solver_logger, log_solve_outcome

__all__ = ["configure_logging", "get_logger", "get_solver_logger", "log_solve_outcome"]
