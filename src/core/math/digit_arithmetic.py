"""
Digit Arithmetic — Сложение и вычитание десятичных строк

Поразрядная арифметика "в столбик" над строками цифр без перевода
в int. Используется Karatsuba-умножением для сборки частичных произведений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда нормализован (нет ведущих нулей, ноль = "0")
2. Вычитание с отрицательным результатом → NegativeResult (без clamp к нулю)
3. Операнды разной длины: недостающие разряды считаются нулями
"""

from src.core.math.digit_strings import (
    DECIMAL_BASE,
    DIGIT_ZERO_ORD,
    compare_digit_strings,
    normalize_digit_string,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NegativeResult(ArithmeticError):
    """
    Вычитание a - b при a < b.

    Строки цифр представляют только неотрицательные числа, поэтому такой
    результат непредставим. При сборке Karatsuba это означает дефект
    алгоритма, а не ошибку ввода.
    """

    pass


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_digit_strings(a: str, b: str) -> str:
    """
    Сложение двух неотрицательных строк цифр.

    Алгоритм:
        Проход от младшего разряда к старшему с переносом (0 или 1).
        Разряды, отсутствующие в более короткой строке, равны 0.
        Остаточный перенос дописывается старшим разрядом.

    Args:
        a: Строка цифр (ведущие нули допустимы)
        b: Строка цифр (ведущие нули допустимы)

    Returns:
        Нормализованная строка a + b

    Examples:
        >>> add_digit_strings("999", "2")
        '1001'
        >>> add_digit_strings("0", "0")
        '0'
        >>> add_digit_strings("007", "03")
        '10'
    """
    result: list[str] = []
    carry = 0
    i = len(a) - 1
    j = len(b) - 1

    while i >= 0 or j >= 0:
        digit_a = ord(a[i]) - DIGIT_ZERO_ORD if i >= 0 else 0
        digit_b = ord(b[j]) - DIGIT_ZERO_ORD if j >= 0 else 0
        total = digit_a + digit_b + carry
        result.append(chr(DIGIT_ZERO_ORD + total % DECIMAL_BASE))
        carry = total // DECIMAL_BASE
        i -= 1
        j -= 1

    if carry:
        result.append(chr(DIGIT_ZERO_ORD + carry))

    # Цифры собраны младшим разрядом вперёд
    result.reverse()
    return normalize_digit_string("".join(result))


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_digit_strings(a: str, b: str) -> str:
    """
    Вычитание b из a для a >= b.

    Алгоритм:
        Проход от младшего разряда к старшему с заёмом:
        diff = digit(a) - digit(b) - borrow; при diff < 0: diff += 10, borrow = 1.
        a < b отсекается сравнением до прохода; незакрытый заём после
        последнего разряда a остаётся последней проверкой.

    Args:
        a: Уменьшаемое (строка цифр)
        b: Вычитаемое (строка цифр)

    Returns:
        Нормализованная строка a - b

    Raises:
        NegativeResult: Если a < b

    Examples:
        >>> subtract_digit_strings("1000", "1")
        '999'
        >>> subtract_digit_strings("42", "42")
        '0'
    """
    minuend = normalize_digit_string(a)
    subtrahend = normalize_digit_string(b)

    if compare_digit_strings(minuend, subtrahend) < 0:
        raise NegativeResult(
            f"Cannot subtract larger value from smaller one "
            f"({len(minuend)}-digit minuend, {len(subtrahend)}-digit subtrahend): "
            f"result would be negative"
        )

    result: list[str] = []
    borrow = 0
    j = len(subtrahend) - 1

    for i in range(len(minuend) - 1, -1, -1):
        digit_b = ord(subtrahend[j]) - DIGIT_ZERO_ORD if j >= 0 else 0
        diff = ord(minuend[i]) - DIGIT_ZERO_ORD - digit_b - borrow
        if diff < 0:
            diff += DECIMAL_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(chr(DIGIT_ZERO_ORD + diff))
        j -= 1

    if borrow:
        raise NegativeResult(
            f"Subtraction borrow unresolved after {len(minuend)} digits: "
            f"minuend is smaller than subtrahend"
        )

    result.reverse()
    return normalize_digit_string("".join(result))
