"""
Karatsuba — Умножение десятичных строк произвольной длины

Модуль реализует умножение неотрицательных целых чисел, заданных строками
десятичных цифр, по схеме Karatsuba:
- Три рекурсивных под-произведения вместо четырёх
- Сборка результата только сдвигом, сложением и вычитанием
- Выравнивание длины операндов на каждом уровне рекурсии

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно три рекурсивных вызова на каждый не-базовый уровень
2. Базовый случай только для n == 1 (произведение цифр 0..81)
3. z1 = zMid - z2 - z0 всегда неотрицательно; NegativeResult при сборке
   → KaratsubaInvariantViolation (дефект, а не ошибка ввода)
4. Результат всегда нормализован

ФОРМУЛЫ:
    m = ceil(n / 2)
    x = xHigh * 10^m + xLow,  y = yHigh * 10^m + yLow

    z0   = xLow * yLow
    z2   = xHigh * yHigh
    zMid = (xLow + xHigh) * (yLow + yHigh)
    z1   = zMid - z2 - z0

    x * y = z2 * 10^(2m) + z1 * 10^m + z0

СЛОЖНОСТЬ:
    T(n) = 3 T(n/2) + O(n)  =>  O(n^log2(3)) ≈ O(n^1.585)
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from src.core.contracts.result_contract import validate_multiplication_result
from src.core.domain.multiplication import KaratsubaStats, MultiplicationResult
from src.core.math.digit_arithmetic import (
    NegativeResult,
    add_digit_strings,
    subtract_digit_strings,
)
from src.core.math.digit_strings import (
    DIGIT_ZERO_ORD,
    normalize_digit_string,
    pad_to_equal_length,
    shift_left,
    split_digit_string,
    validate_digit_string,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OperandTooLarge(ValueError):
    """Операнд длиннее MultiplierConfig.max_operand_digits."""

    pass


class KaratsubaInvariantViolation(AssertionError):
    """
    Нарушение внутреннего инварианта при сборке Karatsuba.

    Вычитание z1 = zMid - z2 - z0 вернуло NegativeResult. Для корректных
    паддинга и разбиения это недостижимо, поэтому ошибка фатальна и
    отличается от InvalidDigitString (ошибки ввода).
    Исходный NegativeResult доступен через __cause__.
    """

    pass


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class MultiplierConfig:
    """
    Конфигурация умножителя.

    - max_operand_digits: предел длины нормализованного операнда (None = без предела)
    - trace_recursion: DEBUG запись на каждый рекурсивный вызов
    - check_result_contract: проверять результат контрактом multiplication_result
    """

    max_operand_digits: Optional[int] = None
    trace_recursion: bool = False
    check_result_contract: bool = False

    def __post_init__(self):
        if self.max_operand_digits is not None and self.max_operand_digits <= 0:
            raise ValueError(
                f"max_operand_digits must be positive, got {self.max_operand_digits}"
            )


DEFAULT_MULTIPLIER_CONFIG: Final[MultiplierConfig] = MultiplierConfig()


@dataclass
class _RecursionCounter:
    """Изменяемый счётчик формы рекурсии, один на вызов умножителя."""

    calls: int = 0
    base_cases: int = 0
    max_depth: int = 0

    def to_stats(self) -> KaratsubaStats:
        return KaratsubaStats(
            calls=self.calls,
            base_cases=self.base_cases,
            max_depth=self.max_depth,
        )


# =============================================================================
# PUBLIC API
# =============================================================================


def karatsuba_multiply(
    x: str,
    y: str,
    config: Optional[MultiplierConfig] = None,
) -> str:
    """
    Произведение двух десятичных строк по Karatsuba.

    Args:
        x: Первый множитель (строка ASCII цифр, ведущие нули допустимы)
        y: Второй множитель
        config: Конфигурация (default: DEFAULT_MULTIPLIER_CONFIG)

    Returns:
        Нормализованная строка x * y

    Raises:
        InvalidDigitString: Если операнд пустой или содержит не-цифры
        OperandTooLarge: Если операнд длиннее config.max_operand_digits
        KaratsubaInvariantViolation: Дефект алгоритма (недостижимо)

    Examples:
        >>> karatsuba_multiply("1234", "5678")
        '7006652'
        >>> karatsuba_multiply("00042", "10")
        '420'
        >>> karatsuba_multiply("0", "1234")
        '0'
    """
    return karatsuba_multiply_with_stats(x, y, config).product


def karatsuba_multiply_with_stats(
    x: str,
    y: str,
    config: Optional[MultiplierConfig] = None,
) -> MultiplicationResult:
    """
    Karatsuba-умножение с диагностикой дерева рекурсии.

    Args:
        x: Первый множитель
        y: Второй множитель
        config: Конфигурация (default: DEFAULT_MULTIPLIER_CONFIG)

    Returns:
        MultiplicationResult с нормализованными операндами, произведением
        и KaratsubaStats

    Raises:
        InvalidDigitString, OperandTooLarge, KaratsubaInvariantViolation:
            см. karatsuba_multiply
        ResultContractViolation: Если config.check_result_contract и результат
            не проходит контракт
    """
    config = config or DEFAULT_MULTIPLIER_CONFIG

    # Валидация до нормализации
    validate_digit_string(x, "x")
    validate_digit_string(y, "y")

    x_norm = normalize_digit_string(x)
    y_norm = normalize_digit_string(y)

    limit = config.max_operand_digits
    if limit is not None:
        for name, operand in (("x", x_norm), ("y", y_norm)):
            if len(operand) > limit:
                raise OperandTooLarge(
                    f"{name} has {len(operand)} digits, limit is {limit}"
                )

    logger.debug(
        "karatsuba_multiply: len(x)=%d len(y)=%d", len(x_norm), len(y_norm)
    )

    counter = _RecursionCounter()
    product = _multiply(x_norm, y_norm, 0, counter, config.trace_recursion)

    stats = counter.to_stats()
    logger.debug(
        "karatsuba_multiply done: product_digits=%d calls=%d base_cases=%d max_depth=%d",
        len(product),
        stats.calls,
        stats.base_cases,
        stats.max_depth,
    )

    result = MultiplicationResult(
        x=x_norm,
        y=y_norm,
        product=product,
        operand_digits=max(len(x_norm), len(y_norm)),
        stats=stats,
    )

    if config.check_result_contract:
        validate_multiplication_result(result)

    return result


# =============================================================================
# RECURSION
# =============================================================================


def _multiply(
    x: str,
    y: str,
    depth: int,
    counter: _RecursionCounter,
    trace: bool,
) -> str:
    """Один уровень рекурсии Karatsuba. Операнды уже провалидированы."""
    counter.calls += 1
    if depth > counter.max_depth:
        counter.max_depth = depth

    # 1. Выравнивание длины на каждом уровне: определяет точку разбиения
    x_pad, y_pad = pad_to_equal_length(x, y)
    n = len(x_pad)

    # 2. Базовый случай: произведение двух цифр (0..81)
    if n == 1:
        counter.base_cases += 1
        return str((ord(x_pad) - DIGIT_ZERO_ORD) * (ord(y_pad) - DIGIT_ZERO_ORD))

    # 3. Разбиение: low — последние m цифр
    m = (n + 1) // 2
    x_high, x_low = split_digit_string(x_pad, m)
    y_high, y_low = split_digit_string(y_pad, m)

    if trace:
        logger.debug("karatsuba frame: depth=%d n=%d m=%d", depth, n, m)

    # 4. Три под-произведения
    z0 = _multiply(x_low, y_low, depth + 1, counter, trace)
    z2 = _multiply(x_high, y_high, depth + 1, counter, trace)
    z_mid = _multiply(
        add_digit_strings(x_low, x_high),
        add_digit_strings(y_low, y_high),
        depth + 1,
        counter,
        trace,
    )

    # 5. Сборка: z1 = zMid - z2 - z0 (перекрёстный член без 4-го умножения)
    try:
        z1 = subtract_digit_strings(subtract_digit_strings(z_mid, z2), z0)
    except NegativeResult as exc:
        logger.error(
            "Karatsuba invariant violated at depth=%d n=%d m=%d: %s",
            depth,
            n,
            m,
            exc,
        )
        raise KaratsubaInvariantViolation(
            f"Negative middle term at depth {depth} (n={n}, m={m}): "
            f"zMid < z2 + z0. This indicates a padding/splitting defect."
        ) from exc

    return add_digit_strings(
        add_digit_strings(shift_left(z2, 2 * m), shift_left(z1, m)),
        z0,
    )
