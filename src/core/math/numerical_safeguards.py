"""
Numerical Safeguards — допуски по умолчанию и проверки числовых аргументов

Модуль задаёт конфигурацию вычислительного ядра и единые проверки входов:
- Допуски (epsilon / delta / tolerance) и границы итераций по умолчанию
- Проверка, что значение является действительным числом (bool — не число)
- Валидация параметров с единообразными сообщениями об ошибках
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Некорректный вход никогда не заменяется значением по умолчанию
2. Все границы итераций конечны (единственная гарантия завершения)
3. Все операции детерминированы и воспроизводимы
"""

import math
from numbers import Real
from typing import Any, Final

# =============================================================================
# ДОПУСКИ И ГРАНИЦЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Epsilon для проверок сходимости, Cauchy и непрерывности
DEFAULT_EPSILON: Final[float] = 1e-10

# Допуск остановки fixed-point итерации |f(x) - x| < tolerance
DEFAULT_TOLERANCE: Final[float] = 1e-10

# Радиус окрестности для проверки непрерывности
DEFAULT_DELTA: Final[float] = 1e-10

# Сколько членов последовательности просматривается
DEFAULT_MAX_TERMS: Final[int] = 1000

# Максимум итераций x <- f(x)
DEFAULT_MAX_ITERATIONS: Final[int] = 100

# Количество точек разбиения домена
DEFAULT_SAMPLES: Final[int] = 100

# Минимум точек, при котором разбиение [a, b] определено
MIN_SAMPLES: Final[int] = 2

# Абсолютная толерантность для сравнения float (проверка аксиом метрики)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Относительная толерантность для сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9


# =============================================================================
# ПРОВЕРКА ТИПОВ
# =============================================================================


def is_real_number(value: Any) -> bool:
    """
    Проверка, является ли значение действительным числом.

    bool формально является int в Python, но как координата вектора или
    значение функции не допускается.

    Examples:
        >>> is_real_number(1.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number("1")
        False
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """True если значение конечно (не NaN, не Inf)."""
    return math.isfinite(value)


def require_finite(value: Any, name: str) -> float:
    """
    Проверка, что value — конечное действительное число.

    Returns:
        float(value)

    Raises:
        ValueError: Если value не число, NaN или Inf
    """
    if not is_real_number(value) or not is_valid_float(value):
        raise ValueError(f"{name} must be a finite real number, got {value!r}")
    return float(value)


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_positive(value: Any, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Используется для epsilon, delta, tolerance.

    Raises:
        ValueError: Если value <= 0, не число или NaN/Inf
    """
    require_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: Any, name: str) -> None:
    """
    Валидация, что значение неотрицательное и конечное.

    Raises:
        ValueError: Если value < 0, не число или NaN/Inf
    """
    require_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_count(value: Any, name: str, minimum: int = 0) -> None:
    """
    Валидация целочисленной границы (max_terms, max_iterations).

    Raises:
        ValueError: Если value не int или value < minimum
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol
