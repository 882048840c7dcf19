"""
Digit Strings — Десятичные строки цифр и их инварианты

Модуль задаёт представление неотрицательного целого числа как строки
десятичных цифр (старший разряд первым) и набор примитивов над ним:
- Валидация входных строк (только '0'..'9', не пустая)
- Нормализация (удаление ведущих нулей, ноль = "0")
- Выравнивание длины двух строк ведущими нулями
- Разбиение строки на high/low части
- Сравнение строк по числовому значению
- Умножение на 10^k (сдвиг влево)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализованная строка не имеет ведущих нулей, кроме значения "0"
2. Строки immutable: каждая операция возвращает новую строку
3. Сдвиг "0" всегда даёт "0" (без хвостовых нулей)
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (поддерживается только 10)
DECIMAL_BASE: Final[int] = 10

# Допустимые символы цифр (ASCII only)
DECIMAL_DIGITS: Final[str] = "0123456789"

# Нормализованное представление нуля
ZERO_DIGIT_STRING: Final[str] = "0"

# Код символа '0': digit = ord(ch) - DIGIT_ZERO_ORD
DIGIT_ZERO_ORD: Final[int] = ord("0")

_DIGIT_SET: Final[frozenset[str]] = frozenset(DECIMAL_DIGITS)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitString(ValueError):
    """
    Входная строка не является строкой десятичных цифр.

    Пустая строка, знак, пробелы, разделители или не-ASCII цифры.
    Ошибка пользовательского ввода: вызывающий код может запросить ввод заново.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_digit_string(value: object) -> bool:
    """
    Проверка, является ли значение непустой строкой ASCII цифр.

    Examples:
        >>> is_digit_string("00042")
        True
        >>> is_digit_string("-1")
        False
        >>> is_digit_string("")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    return all(ch in _DIGIT_SET for ch in value)


def validate_digit_string(value: object, name: str = "value") -> str:
    """
    Валидация строки десятичных цифр.

    str.isdigit() не используется: он принимает не-ASCII цифры ('٣', '²').

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений (ведущие нули допустимы)

    Raises:
        InvalidDigitString: Если value не str, пустая или содержит не-цифры
    """
    if is_digit_string(value):
        return value

    # Медленный путь: точная диагностика ошибки
    if not isinstance(value, str):
        raise InvalidDigitString(
            f"{name} must be a str of decimal digits, got {type(value).__name__}"
        )

    if not value:
        raise InvalidDigitString(f"{name} must not be empty")

    position, ch = next(
        (i, ch) for i, ch in enumerate(value) if ch not in _DIGIT_SET
    )
    raise InvalidDigitString(
        f"{name} contains non-digit character {ch!r} at position {position}"
    )


# =============================================================================
# НОРМАЛИЗАЦИЯ И ВЫРАВНИВАНИЕ
# =============================================================================


def normalize_digit_string(digits: str) -> str:
    """
    Удаление ведущих нулей.

    Args:
        digits: Непустая строка цифр

    Returns:
        Нормализованная строка; строка из одних нулей → "0"

    Examples:
        >>> normalize_digit_string("00042")
        '42'
        >>> normalize_digit_string("0000")
        '0'
        >>> normalize_digit_string("7")
        '7'
    """
    stripped = digits.lstrip("0")
    return stripped or ZERO_DIGIT_STRING


def pad_to_equal_length(a: str, b: str) -> tuple[str, str]:
    """
    Выравнивание двух строк до общей длины ведущими нулями.

    Паддинг временный: результат нарушает инвариант нормализации до тех пор,
    пока не пройдёт через сложение/нормализацию.

    Examples:
        >>> pad_to_equal_length("999", "2")
        ('999', '002')
        >>> pad_to_equal_length("12", "34")
        ('12', '34')
    """
    width = max(len(a), len(b))
    return a.rjust(width, "0"), b.rjust(width, "0")


def split_digit_string(digits: str, low_length: int) -> tuple[str, str]:
    """
    Разбиение строки на (high, low), где low — последние low_length цифр.

    Args:
        digits: Строка цифр длины n
        low_length: Длина младшей части, 0 < low_length <= n

    Returns:
        (high, low); high пустая только при low_length == n

    Examples:
        >>> split_digit_string("1234", 2)
        ('12', '34')
        >>> split_digit_string("123", 2)
        ('1', '23')
    """
    if not 0 < low_length <= len(digits):
        raise ValueError(
            f"low_length must be in (0, {len(digits)}], got {low_length}"
        )

    cut = len(digits) - low_length
    return digits[:cut], digits[cut:]


def compare_digit_strings(a: str, b: str) -> int:
    """
    Сравнение двух строк цифр по числовому значению.

    Ведущие нули игнорируются.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare_digit_strings("0099", "100")
        -1
        >>> compare_digit_strings("42", "042")
        0
    """
    a_norm = normalize_digit_string(a)
    b_norm = normalize_digit_string(b)

    # Для нормализованных строк длина определяет порядок
    if len(a_norm) != len(b_norm):
        return -1 if len(a_norm) < len(b_norm) else 1

    # Одинаковая длина: лексикографический порядок совпадает с числовым
    if a_norm == b_norm:
        return 0
    return -1 if a_norm < b_norm else 1


# =============================================================================
# СДВИГ (УМНОЖЕНИЕ НА 10^k)
# =============================================================================


def shift_left(digits: str, places: int) -> str:
    """
    Умножение на 10^places дописыванием нулей справа.

    Args:
        digits: Нормализованная строка цифр
        places: Количество разрядов (>= 0)

    Returns:
        digits * 10^places; для "0" возвращается "0"

    Raises:
        ValueError: Если places < 0

    Examples:
        >>> shift_left("12", 3)
        '12000'
        >>> shift_left("0", 5)
        '0'
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if digits == ZERO_DIGIT_STRING:
        return ZERO_DIGIT_STRING

    return digits + "0" * places
