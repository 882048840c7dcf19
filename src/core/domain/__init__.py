"""
Domain models and value objects.

Contains immutable models for multiplication results.
"""

from src.core.domain.multiplication import (
    NORMALIZED_DIGIT_STRING_PATTERN,
    KaratsubaStats,
    MultiplicationResult,
)

__all__ = [
    # Patterns
    "NORMALIZED_DIGIT_STRING_PATTERN",
    # Models
    "KaratsubaStats",
    "MultiplicationResult",
]
