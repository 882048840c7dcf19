"""
Multiplication — Модели результата умножения

Immutable Pydantic модели результата умножения десятичных строк.
Полная совместимость с JSON Schema (schema/multiplication_result.json).
"""

from pydantic import BaseModel, Field


# Нормализованная строка цифр: "0" или без ведущих нулей
NORMALIZED_DIGIT_STRING_PATTERN = "^(0|[1-9][0-9]*)$"


# =============================================================================
# RECURSION STATS
# =============================================================================


class KaratsubaStats(BaseModel):
    """
    Диагностика формы дерева рекурсии.

    - calls: все вызовы рекурсивного умножителя, включая корневой
    - base_cases: вызовы, дошедшие до умножения одиночных цифр
    - max_depth: глубина самого глубокого вызова (корень = 0)

    Для каждого не-базового вызова ровно три дочерних, поэтому
    calls == 3 * (calls - base_cases) + 1.
    """

    calls: int = Field(..., ge=1, description="Количество вызовов умножителя")
    base_cases: int = Field(..., ge=1, description="Количество базовых случаев")
    max_depth: int = Field(..., ge=0, description="Максимальная глубина рекурсии")

    model_config = {"frozen": True}


# =============================================================================
# RESULT
# =============================================================================


class MultiplicationResult(BaseModel):
    """
    Результат Karatsuba-умножения.

    Immutable модель (frozen=True):
    - Нормализованные операнды и произведение
    - operand_digits: длина операндов после выравнивания на верхнем уровне
    - stats: форма дерева рекурсии
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    x: str = Field(..., pattern=NORMALIZED_DIGIT_STRING_PATTERN)
    y: str = Field(..., pattern=NORMALIZED_DIGIT_STRING_PATTERN)
    product: str = Field(..., pattern=NORMALIZED_DIGIT_STRING_PATTERN)
    operand_digits: int = Field(..., ge=1)
    stats: KaratsubaStats

    model_config = {"frozen": True}
