"""
Result Contract — Проверка результата умножения

Контракт multiplication_result (schema/multiplication_result.json) в двух слоях:
- Структура: JSON Schema (draft 2020-12) над MultiplicationResult.model_dump(mode="json")
- Семантика: свойства, которые схема выразить не может

СЕМАНТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый не-базовый вызов имеет ровно три дочерних: calls == 3 * (calls - base_cases) + 1
2. len(product) <= len(x) + len(y)
3. operand_digits == max(len(x), len(y))
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Mapping, Union

from jsonschema import Draft202012Validator, SchemaError

from src.core.domain.multiplication import MultiplicationResult

RESULT_SCHEMA_PATH: Final[Path] = (
    Path(__file__).parent / "schema" / "multiplication_result.json"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ResultContractViolation(ValueError):
    """
    Результат умножения не соответствует контракту.

    violations: список сообщений вида "<json path>: <описание>",
    отсортированный по пути.
    """

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__(
            f"multiplication_result contract violated: {'; '.join(violations)}"
        )


# =============================================================================
# SCHEMA
# =============================================================================


def load_result_schema(path: Path = RESULT_SCHEMA_PATH) -> dict[str, Any]:
    """
    Загрузка и meta-validation схемы результата.

    Raises:
        FileNotFoundError: Если файла схемы нет
        ValueError: Если файл не является корректной JSON Schema
    """
    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

    return schema


@lru_cache(maxsize=1)
def _result_validator() -> Draft202012Validator:
    return Draft202012Validator(load_result_schema())


# =============================================================================
# CONTRACT CHECKS
# =============================================================================


def _as_json(result: Union[MultiplicationResult, Mapping[str, Any]]) -> dict[str, Any]:
    if isinstance(result, MultiplicationResult):
        return result.model_dump(mode="json")
    return dict(result)


def _semantic_violations(data: dict[str, Any]) -> list[str]:
    # Только для структурно валидных данных
    stats = data["stats"]
    violations = []

    inner_calls = stats["calls"] - stats["base_cases"]
    if stats["calls"] != 3 * inner_calls + 1:
        violations.append(
            f"stats: calls={stats['calls']} with base_cases={stats['base_cases']} "
            f"is not a tree with three children per inner call"
        )

    if len(data["product"]) > len(data["x"]) + len(data["y"]):
        violations.append(
            f"product: {len(data['product'])} digits exceeds "
            f"len(x) + len(y) = {len(data['x']) + len(data['y'])}"
        )

    expected_digits = max(len(data["x"]), len(data["y"]))
    if data["operand_digits"] != expected_digits:
        violations.append(
            f"operand_digits: {data['operand_digits']} != max(len(x), len(y)) = "
            f"{expected_digits}"
        )

    return violations


def collect_result_violations(
    result: Union[MultiplicationResult, Mapping[str, Any]],
) -> list[str]:
    """
    Все нарушения контракта без exception.

    Args:
        result: MultiplicationResult или его JSON-представление (dict)

    Returns:
        Пустой список для валидного результата
    """
    data = _as_json(result)

    schema_errors = sorted(
        _result_validator().iter_errors(data),
        key=lambda e: list(e.absolute_path),
    )
    if schema_errors:
        return [
            f"{e.json_path}: {e.message}" for e in schema_errors
        ]

    return _semantic_violations(data)


def validate_multiplication_result(
    result: Union[MultiplicationResult, Mapping[str, Any]],
) -> None:
    """
    Проверка результата умножения против контракта.

    Args:
        result: MultiplicationResult или его JSON-представление (dict)

    Raises:
        ResultContractViolation: Если есть хотя бы одно нарушение
    """
    violations = collect_result_violations(result)
    if violations:
        raise ResultContractViolation(violations)
