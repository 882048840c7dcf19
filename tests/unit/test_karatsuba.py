"""
Тесты для Karatsuba — умножение десятичных строк

Проверяемые инварианты:
1. Корректность: совпадение с произведением int
2. Коммутативность и нейтральные элементы (1 и 0)
3. Нормализация результата
4. Операнды разной длины (включая 1 цифру против 50)
5. Ровно три под-произведения на уровень (форма дерева рекурсии)
6. InvalidDigitString для плохого ввода, KaratsubaInvariantViolation для дефекта
"""

import dataclasses
import logging
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.core.contracts import ResultContractViolation
from src.core.math.digit_arithmetic import NegativeResult
from src.core.math.digit_strings import InvalidDigitString, normalize_digit_string
from src.core.math.karatsuba import (
    DEFAULT_MULTIPLIER_CONFIG,
    KaratsubaInvariantViolation,
    MultiplierConfig,
    OperandTooLarge,
    karatsuba_multiply,
    karatsuba_multiply_with_stats,
)


non_negative = st.integers(min_value=0, max_value=10**80)
padded_digit_strings = st.text(alphabet="0123456789", min_size=1, max_size=40)


# =============================================================================
# ТЕСТЫ: Known products
# =============================================================================


class TestKnownProducts:
    """Базовые сценарии умножения."""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            ("12", "34", "408"),
            ("1234", "5678", "7006652"),
            ("100", "200", "20000"),
            ("0", "1234", "0"),
            ("999", "2", "1998"),
            ("10", "20", "200"),
        ],
    )
    def test_seed_scenarios(self, x, y, expected):
        assert karatsuba_multiply(x, y) == expected

    def test_all_single_digit_products(self):
        """Базовый случай: все 100 произведений цифр, включая двузначные."""
        for a in range(10):
            for b in range(10):
                assert karatsuba_multiply(str(a), str(b)) == str(a * b)

    def test_two_digit_base_case(self):
        assert karatsuba_multiply("7", "8") == "56"
        assert karatsuba_multiply("9", "9") == "81"

    def test_leading_zeros_in_input(self):
        """Ведущие нули во входе допустимы и не попадают в результат."""
        assert karatsuba_multiply("00042", "10") == "420"
        assert karatsuba_multiply("0000", "0000") == "0"
        assert karatsuba_multiply("0001", "0009") == "9"

    def test_powers_of_ten(self):
        assert karatsuba_multiply("1" + "0" * 20, "1" + "0" * 15) == "1" + "0" * 35

    def test_large_operands(self):
        """Операнды в сотни цифр (глубокая рекурсия)."""
        rng = random.Random(20240517)
        for _ in range(5):
            a = rng.randrange(10**299, 10**300)
            b = rng.randrange(10**199, 10**200)
            assert karatsuba_multiply(str(a), str(b)) == str(a * b)

    def test_all_nines(self):
        """Максимальные переносы в каждом разряде."""
        for n in [2, 3, 7, 16, 33]:
            x = "9" * n
            assert karatsuba_multiply(x, x) == str(int(x) ** 2)


# =============================================================================
# ТЕСТЫ: Algebraic properties
# =============================================================================


class TestAlgebraicProperties:
    """Свойства, проверяемые против арифметики int."""

    @given(non_negative, non_negative)
    def test_matches_int_product(self, a, b):
        assert karatsuba_multiply(str(a), str(b)) == str(a * b)

    @given(padded_digit_strings, padded_digit_strings)
    def test_commutative(self, x, y):
        assert karatsuba_multiply(x, y) == karatsuba_multiply(y, x)

    @given(padded_digit_strings)
    def test_one_is_identity(self, x):
        assert karatsuba_multiply(x, "1") == normalize_digit_string(x)

    @given(padded_digit_strings)
    def test_zero_annihilates(self, x):
        assert karatsuba_multiply(x, "0") == "0"
        assert karatsuba_multiply("000", x) == "0"

    @given(padded_digit_strings, padded_digit_strings)
    def test_output_normalized(self, x, y):
        result = karatsuba_multiply(x, y)
        assert result == "0" or not result.startswith("0")

    @given(
        st.integers(min_value=0, max_value=9),
        st.integers(min_value=10**49, max_value=10**50 - 1),
    )
    def test_skewed_lengths(self, digit, big):
        """1 цифра против 50 цифр, в обоих порядках."""
        expected = str(digit * big)
        assert karatsuba_multiply(str(digit), str(big)) == expected
        assert karatsuba_multiply(str(big), str(digit)) == expected


# =============================================================================
# ТЕСТЫ: Recursion shape
# =============================================================================


class TestRecursionShape:
    """Форма дерева рекурсии: три под-произведения на уровень."""

    def test_single_digit_is_one_base_case(self):
        result = karatsuba_multiply_with_stats("7", "8")
        assert result.product == "56"
        assert result.stats.calls == 1
        assert result.stats.base_cases == 1
        assert result.stats.max_depth == 0

    def test_two_digits_three_base_cases(self):
        """12 * 34: z0 = 2*4, z2 = 1*3, zMid = 3*7."""
        result = karatsuba_multiply_with_stats("12", "34")
        assert result.product == "408"
        assert result.stats.calls == 4
        assert result.stats.base_cases == 3
        assert result.stats.max_depth == 1

    def test_carry_in_sum_adds_level(self):
        """99 * 99: суммы половин 9 + 9 = 18 дают ещё один уровень для zMid."""
        result = karatsuba_multiply_with_stats("99", "99")
        assert result.product == "9801"
        assert result.stats.calls == 7
        assert result.stats.base_cases == 5
        assert result.stats.max_depth == 2

    @pytest.mark.parametrize("k", [1, 2, 3])
    def test_three_pow_k_base_cases(self, k):
        """Для n = 2^k без переносов в суммах базовых случаев ровно 3^k, а не 4^k."""
        x = "1" * (2**k)
        result = karatsuba_multiply_with_stats(x, x)
        assert result.product == str(int(x) ** 2)
        assert result.stats.base_cases == 3**k
        assert result.stats.calls == (3 ** (k + 1) - 1) // 2
        assert result.stats.max_depth == k

    @given(padded_digit_strings, padded_digit_strings)
    def test_every_inner_frame_has_three_children(self, x, y):
        stats = karatsuba_multiply_with_stats(x, y).stats
        inner = stats.calls - stats.base_cases
        assert stats.calls == 3 * inner + 1

    @settings(max_examples=25, deadline=None)
    @given(st.integers(min_value=1, max_value=200))
    def test_depth_is_logarithmic(self, n):
        x = "9" * n
        stats = karatsuba_multiply_with_stats(x, x).stats
        # Переносы в суммах половин удлиняют операнд не более чем на цифру за уровень
        assert stats.max_depth <= 2 * n.bit_length() + 4

    def test_result_fields(self):
        result = karatsuba_multiply_with_stats("0042", "7")
        assert result.x == "42"
        assert result.y == "7"
        assert result.product == "294"
        assert result.operand_digits == 2
        assert result.schema_version == "1"


# =============================================================================
# ТЕСТЫ: Errors
# =============================================================================


class TestErrors:
    """Ошибки ввода и внутренние дефекты различимы."""

    @pytest.mark.parametrize("bad", ["", "-5", "12a", " 1", "1.0", "٣"])
    def test_invalid_x_rejected(self, bad):
        with pytest.raises(InvalidDigitString, match="^x "):
            karatsuba_multiply(bad, "12")

    @pytest.mark.parametrize("bad", ["", "+5", "1e3"])
    def test_invalid_y_rejected(self, bad):
        with pytest.raises(InvalidDigitString, match="^y "):
            karatsuba_multiply("12", bad)

    def test_non_str_rejected(self):
        with pytest.raises(InvalidDigitString):
            karatsuba_multiply(12, "34")

    def test_negative_middle_term_is_invariant_violation(self, monkeypatch, caplog):
        """NegativeResult при сборке → KaratsubaInvariantViolation, не NegativeResult."""

        def broken_subtract(a, b):
            raise NegativeResult("forced")

        monkeypatch.setattr(
            "src.core.math.karatsuba.subtract_digit_strings", broken_subtract
        )

        with caplog.at_level(logging.ERROR, logger="src.core.math.karatsuba"):
            with pytest.raises(KaratsubaInvariantViolation) as exc_info:
                karatsuba_multiply("12", "34")

        assert isinstance(exc_info.value.__cause__, NegativeResult)
        assert not isinstance(exc_info.value, NegativeResult)
        assert not isinstance(exc_info.value, InvalidDigitString)
        assert isinstance(exc_info.value, AssertionError)
        assert any("invariant violated" in r.getMessage() for r in caplog.records)

    def test_single_digit_never_reaches_subtraction(self, monkeypatch):
        """Базовый случай не использует вычитание."""

        def broken_subtract(a, b):
            raise NegativeResult("forced")

        monkeypatch.setattr(
            "src.core.math.karatsuba.subtract_digit_strings", broken_subtract
        )
        assert karatsuba_multiply("7", "8") == "56"


# =============================================================================
# ТЕСТЫ: Configuration
# =============================================================================


class TestMultiplierConfig:
    """Тесты MultiplierConfig."""

    def test_defaults(self):
        assert DEFAULT_MULTIPLIER_CONFIG.max_operand_digits is None
        assert DEFAULT_MULTIPLIER_CONFIG.trace_recursion is False
        assert DEFAULT_MULTIPLIER_CONFIG.check_result_contract is False

    def test_frozen(self):
        config = MultiplierConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.trace_recursion = True

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValueError, match="max_operand_digits"):
            MultiplierConfig(max_operand_digits=0)
        with pytest.raises(ValueError, match="max_operand_digits"):
            MultiplierConfig(max_operand_digits=-3)

    def test_limit_enforced(self):
        config = MultiplierConfig(max_operand_digits=3)
        assert karatsuba_multiply("999", "999", config) == "998001"
        with pytest.raises(OperandTooLarge, match="x has 4 digits, limit is 3"):
            karatsuba_multiply("1000", "1", config)
        with pytest.raises(OperandTooLarge, match="y has 4 digits"):
            karatsuba_multiply("1", "1000", config)

    def test_limit_applies_after_normalization(self):
        """Ведущие нули не учитываются в лимите."""
        config = MultiplierConfig(max_operand_digits=1)
        assert karatsuba_multiply("0007", "0008", config) == "56"

    def test_operand_too_large_is_value_error(self):
        assert issubclass(OperandTooLarge, ValueError)

    def test_result_contract_checked_when_enabled(self, monkeypatch):
        checked = []
        monkeypatch.setattr(
            "src.core.math.karatsuba.validate_multiplication_result", checked.append
        )
        result = karatsuba_multiply_with_stats(
            "1234", "5678", MultiplierConfig(check_result_contract=True)
        )
        assert checked == [result]

    def test_result_contract_skipped_by_default(self, monkeypatch):
        checked = []
        monkeypatch.setattr(
            "src.core.math.karatsuba.validate_multiplication_result", checked.append
        )
        karatsuba_multiply_with_stats("1234", "5678")
        assert checked == []

    def test_result_contract_violation_propagates(self, monkeypatch):
        def reject(result):
            raise ResultContractViolation(["stats: broken"])

        monkeypatch.setattr("src.core.math.karatsuba.validate_multiplication_result", reject)
        config = MultiplierConfig(check_result_contract=True)
        with pytest.raises(ResultContractViolation, match="stats: broken"):
            karatsuba_multiply("12", "34", config)

    @pytest.mark.parametrize("x, y", [("0", "0"), ("1234", "5678"), ("9" * 33, "0042")])
    def test_real_results_pass_contract(self, x, y):
        config = MultiplierConfig(check_result_contract=True)
        assert karatsuba_multiply(x, y, config) == str(int(x) * int(y))


# =============================================================================
# ТЕСТЫ: Logging
# =============================================================================


class TestLogging:
    """Тесты DEBUG логирования."""

    def test_entry_and_exit_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.core.math.karatsuba"):
            karatsuba_multiply("12", "34")

        messages = [r.getMessage() for r in caplog.records]
        assert any("len(x)=2 len(y)=2" in m for m in messages)
        assert any("calls=4 base_cases=3" in m for m in messages)
        assert not any("karatsuba frame" in m for m in messages)

    def test_trace_recursion_logs_each_inner_frame(self, caplog):
        config = MultiplierConfig(trace_recursion=True)
        with caplog.at_level(logging.DEBUG, logger="src.core.math.karatsuba"):
            result = karatsuba_multiply_with_stats("1111", "1111", config)

        frames = [r for r in caplog.records if "karatsuba frame" in r.getMessage()]
        assert len(frames) == result.stats.calls - result.stats.base_cases
        assert "depth=0 n=4 m=2" in frames[0].getMessage()
