"""Utility functions for AlphaQuest.

This module provides utility functions including:

- Logging setup and configuration
- Evaluation statistics tracking
"""

from alphaquest.utils.logging import (
    EvaluationLogger,
    EvaluationStats,
    configure_logging,
)

__all__ = [
    "EvaluationLogger",
    "EvaluationStats",
    "configure_logging",
]
