"""
Core math modules

Арифметика над десятичными строками цифр и Karatsuba-умножение.
"""

# Digit Strings
from src.core.math.digit_strings import (
    # Constants
    DECIMAL_BASE,
    DECIMAL_DIGITS,
    DIGIT_ZERO_ORD,
    ZERO_DIGIT_STRING,
    # Exceptions
    InvalidDigitString,
    # Validation
    is_digit_string,
    validate_digit_string,
    # Normalization
    compare_digit_strings,
    normalize_digit_string,
    pad_to_equal_length,
    shift_left,
    split_digit_string,
)

# Digit Arithmetic
from src.core.math.digit_arithmetic import (
    NegativeResult,
    add_digit_strings,
    subtract_digit_strings,
)

# Karatsuba
from src.core.math.karatsuba import (
    DEFAULT_MULTIPLIER_CONFIG,
    KaratsubaInvariantViolation,
    MultiplierConfig,
    OperandTooLarge,
    karatsuba_multiply,
    karatsuba_multiply_with_stats,
)

__all__ = [
    # Digit Strings — Constants
    "DECIMAL_BASE",
    "DECIMAL_DIGITS",
    "DIGIT_ZERO_ORD",
    "ZERO_DIGIT_STRING",
    # Digit Strings — Exceptions
    "InvalidDigitString",
    # Digit Strings — Validation
    "is_digit_string",
    "validate_digit_string",
    # Digit Strings — Normalization
    "compare_digit_strings",
    "normalize_digit_string",
    "pad_to_equal_length",
    "shift_left",
    "split_digit_string",
    # Digit Arithmetic — Exceptions
    "NegativeResult",
    # Digit Arithmetic — Functions
    "add_digit_strings",
    "subtract_digit_strings",
    # Karatsuba — Config
    "DEFAULT_MULTIPLIER_CONFIG",
    "MultiplierConfig",
    # Karatsuba — Exceptions
    "KaratsubaInvariantViolation",
    "OperandTooLarge",
    # Karatsuba — Functions
    "karatsuba_multiply",
    "karatsuba_multiply_with_stats",
]
