"""
Function Space — алгебра действительных функций и sup-расстояние

Композиты — неизменяемые значения с единственным методом __call__,
владеющие своими составляющими функциями:
- compose(f, g)        → ComposedFunction:  x ↦ f(g(x))
- function_add(f, g)   → FunctionSum:       x ↦ f(x) + g(x)
- function_scale(f, c) → ScaledFunction:    x ↦ c · f(x)

Вычисление ленивое, без мемоизации.

function_distance — ДИСКРЕТНОЕ приближение sup-метрики: максимум расстояния
по `samples` равноотстоящим точкам домена. Точность ограничена плотностью
сэмплирования: пик разности между соседними точками не будет замечен.
"""

from dataclasses import dataclass
from typing import Callable, Sequence

from src.core.math.errors import InvalidSampleCount
from src.core.math.numerical_safeguards import (
    DEFAULT_SAMPLES,
    MIN_SAMPLES,
    require_finite,
)

RealFunction = Callable[[float], float]
Domain = Sequence[float]


# =============================================================================
# КОМПОЗИТНЫЕ ФУНКЦИИ
# =============================================================================


@dataclass(frozen=True)
class ComposedFunction:
    """x ↦ outer(inner(x))."""

    outer: RealFunction
    inner: RealFunction

    def __call__(self, x: float) -> float:
        return self.outer(self.inner(x))


@dataclass(frozen=True)
class FunctionSum:
    """x ↦ left(x) + right(x)."""

    left: RealFunction
    right: RealFunction

    def __call__(self, x: float) -> float:
        return self.left(x) + self.right(x)


@dataclass(frozen=True)
class ScaledFunction:
    """x ↦ factor · function(x)."""

    function: RealFunction
    factor: float

    def __call__(self, x: float) -> float:
        return self.factor * self.function(x)


def compose(f: RealFunction, g: RealFunction) -> ComposedFunction:
    """
    Композиция f ∘ g.

    Examples:
        >>> compose(lambda x: x + 1, lambda x: 2 * x)(3)
        7
    """
    return ComposedFunction(outer=f, inner=g)


def function_add(f: RealFunction, g: RealFunction) -> FunctionSum:
    """Поточечная сумма f + g."""
    return FunctionSum(left=f, right=g)


def function_scale(f: RealFunction, c: float) -> ScaledFunction:
    """Поточечное умножение на скаляр c · f."""
    return ScaledFunction(function=f, factor=c)


def map_coordinates(f: RealFunction, vector: Sequence[float]) -> list[float]:
    """
    Покоординатное применение действительной функции к вектору.

    Examples:
        >>> map_coordinates(abs, [-1, 2, -3])
        [1, 2, 3]
    """
    return [f(component) for component in vector]


# =============================================================================
# СЭМПЛИРОВАНИЕ
# =============================================================================


def sample_points(domain: Domain, samples: int = DEFAULT_SAMPLES) -> list[float]:
    """
    Разбиение [domain[0], domain[1]] на `samples` равноотстоящих точек.

    Концы домена входят в разбиение.

    Raises:
        InvalidSampleCount: Если samples не int или samples < 2
        ValueError: Если domain не пара конечных чисел

    Examples:
        >>> sample_points((0.0, 1.0), 3)
        [0.0, 0.5, 1.0]
    """
    if not isinstance(samples, int) or isinstance(samples, bool) or samples < MIN_SAMPLES:
        raise InvalidSampleCount(samples, MIN_SAMPLES)

    if len(domain) != 2:
        raise ValueError(f"domain must be a pair [start, end], got {domain!r}")

    start = require_finite(domain[0], "domain[0]")
    end = require_finite(domain[1], "domain[1]")

    step = (end - start) / (samples - 1)
    points = [start + i * step for i in range(samples - 1)]
    points.append(end)
    return points


def function_distance(
    f: RealFunction,
    g: RealFunction,
    metric: Callable[[Sequence[float], Sequence[float]], float],
    domain: Domain,
    samples: int = DEFAULT_SAMPLES,
) -> float:
    """
    Сэмплированное sup-расстояние max_x metric([f(x)], [g(x)]).

    Приближение снизу к точному sup: увеличение samples повышает точность
    пропорционально стоимости вычислений.

    Args:
        f, g: Сравниваемые функции
        metric: Метрика над одномерными векторами
        domain: [start, end]
        samples: Количество точек (>= 2)

    Raises:
        InvalidSampleCount: Если samples < 2
        ValueError: Если f, g или metric вернули не конечное число
    """
    max_distance = 0.0

    for x in sample_points(domain, samples):
        fx = require_finite(f(x), f"f({x!r})")
        gx = require_finite(g(x), f"g({x!r})")
        distance = require_finite(metric([fx], [gx]), f"metric at x={x!r}")
        max_distance = max(max_distance, distance)

    return max_distance
