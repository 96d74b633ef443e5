"""
Vectors — примитивы векторной арифметики

Vector — упорядоченная последовательность действительных чисел фиксированной
длины. Бинарные операции требуют равной длины операндов.

Ошибки:
- DimensionMismatch: разная длина, операнд не последовательность,
  нечисловая координата или нечисловой скаляр
- ValueError: p <= 0 в vector_norm
"""

import math
from typing import Any, Sequence

from src.core.math.errors import DimensionMismatch
from src.core.math.numerical_safeguards import is_real_number

Vector = Sequence[float]


# =============================================================================
# ПРОВЕРКИ ОПЕРАНДОВ
# =============================================================================


def is_vector(value: Any) -> bool:
    """True если value — последовательность (не строка) из действительных чисел."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return all(is_real_number(component) for component in value)


def _require_vector(value: Any, name: str) -> None:
    if not is_vector(value):
        raise DimensionMismatch(
            f"{name} must be a sequence of real numbers, got {value!r}"
        )


def _require_same_length(v1: Any, v2: Any) -> None:
    _require_vector(v1, "v1")
    _require_vector(v2, "v2")
    if len(v1) != len(v2):
        raise DimensionMismatch(
            f"Vectors must have the same length, got {len(v1)} and {len(v2)}"
        )


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def vector_add(v1: Vector, v2: Vector) -> list[float]:
    """
    Покоординатная сумма v1 + v2.

    Examples:
        >>> vector_add([1, 2], [3, 4])
        [4, 6]
    """
    _require_same_length(v1, v2)
    return [a + b for a, b in zip(v1, v2)]


def vector_subtract(v1: Vector, v2: Vector) -> list[float]:
    """
    Покоординатная разность v1 - v2.

    Examples:
        >>> vector_subtract([3, 4], [1, 1])
        [2, 3]
    """
    _require_same_length(v1, v2)
    return [a - b for a, b in zip(v1, v2)]


def vector_scale(v: Vector, scalar: float) -> list[float]:
    """
    Умножение вектора на скаляр.

    Raises:
        DimensionMismatch: Если v не вектор или scalar не число
    """
    _require_vector(v, "v")
    if not is_real_number(scalar):
        raise DimensionMismatch(f"scalar must be a real number, got {scalar!r}")
    return [component * scalar for component in v]


def dot_product(v1: Vector, v2: Vector) -> float:
    """
    Скалярное произведение Σ v1_i * v2_i.

    Examples:
        >>> dot_product([1, 2, 3], [4, 5, 6])
        32
    """
    _require_same_length(v1, v2)
    return sum((a * b for a, b in zip(v1, v2)), 0)


def vector_norm(v: Vector, p: float = 2) -> float:
    """
    p-норма вектора.

    Формулы:
        p конечное: (Σ |v_i|^p)^(1/p)
        p = inf:    max |v_i|  (0.0 для пустого вектора)

    Args:
        v: Вектор
        p: Порядок нормы (> 0 или math.inf)

    Raises:
        DimensionMismatch: Если v не числовой вектор
        ValueError: Если p <= 0 или не число

    Examples:
        >>> vector_norm([3, 4])
        5.0
        >>> vector_norm([3, -4], 1)
        7.0
        >>> vector_norm([3, -4], math.inf)
        4.0
    """
    _require_vector(v, "v")
    if not is_real_number(p) or math.isnan(p) or p <= 0:
        raise ValueError(f"p must be positive, got {p!r}")

    if math.isinf(p):
        return float(max((abs(component) for component in v), default=0.0))

    total = sum(abs(component) ** p for component in v)
    return float(total ** (1.0 / p))
