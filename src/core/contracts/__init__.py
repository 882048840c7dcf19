"""
Contract Validation Module

Контракт результата Karatsuba-умножения.
"""

from .result_contract import (
    RESULT_SCHEMA_PATH,
    ResultContractViolation,
    collect_result_violations,
    load_result_schema,
    validate_multiplication_result,
)

__all__ = [
    # Constants
    "RESULT_SCHEMA_PATH",
    # Exceptions
    "ResultContractViolation",
    # Functions
    "load_result_schema",
    "collect_result_violations",
    "validate_multiplication_result",
]
