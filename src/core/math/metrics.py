"""
Metrics — каталог метрик над числовыми векторами

Все именованные метрики — тонкие композиции vector_norm(v1 - v2, p):
- Euclidean:  p = 2
- Manhattan:  p = 1
- Chebyshev:  p = inf
- Minkowski:  p задаёт вызывающий
- Discrete:   0 если входы равны (скаляры или векторы), иначе 1

Симметрия и неравенство треугольника — контракт вызывающего, в рантайме не
проверяются. Для упражнений вида "является ли функция метрикой" есть
verify_metric_axioms: проверка аксиом на конечной выборке точек (необходимое
условие, не доказательство).
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Any, Callable, Optional, Sequence

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    is_real_number,
    validate_non_negative,
)
from src.core.math.vectors import Vector, vector_norm, vector_subtract

logger = logging.getLogger(__name__)

Metric = Callable[[Any, Any], float]


# =============================================================================
# ИМЕНОВАННЫЕ МЕТРИКИ
# =============================================================================


def euclidean_distance(p1: Vector, p2: Vector) -> float:
    """
    Евклидово расстояние ||p1 - p2||_2.

    Examples:
        >>> euclidean_distance([0, 0], [3, 4])
        5.0
    """
    return vector_norm(vector_subtract(p1, p2), 2)


def manhattan_distance(p1: Vector, p2: Vector) -> float:
    """
    Манхэттенское расстояние ||p1 - p2||_1.

    Examples:
        >>> manhattan_distance([0, 0], [3, 4])
        7.0
    """
    return vector_norm(vector_subtract(p1, p2), 1)


def chebyshev_distance(p1: Vector, p2: Vector) -> float:
    """
    Расстояние Чебышёва ||p1 - p2||_inf.

    Examples:
        >>> chebyshev_distance([0, 0], [3, 4])
        4.0
    """
    return vector_norm(vector_subtract(p1, p2), math.inf)


def minkowski_distance(p1: Vector, p2: Vector, p: float = 2) -> float:
    """Расстояние Минковского ||p1 - p2||_p."""
    return vector_norm(vector_subtract(p1, p2), p)


def discrete_metric(p1: Any, p2: Any) -> int:
    """
    Дискретная (индикаторная) метрика для дискретной топологии.

    Векторы сравниваются покоординатно (разная длина → 1), скаляры —
    по значению; скаляр и вектор всегда различны.

    Examples:
        >>> discrete_metric([1, 2], [1, 2])
        0
        >>> discrete_metric([1, 2], [1, 2, 3])
        1
        >>> discrete_metric("a", "b")
        1
    """
    p1_is_vector = isinstance(p1, (list, tuple))
    p2_is_vector = isinstance(p2, (list, tuple))

    if p1_is_vector and p2_is_vector:
        if len(p1) != len(p2):
            return 1
        return 0 if all(a == b for a, b in zip(p1, p2)) else 1

    if p1_is_vector or p2_is_vector:
        return 1

    return 0 if p1 == p2 else 1


# =============================================================================
# КАТАЛОГ
# =============================================================================


class MetricKind(str, Enum):
    """Метрики каталога (имена совпадают с contracts/schema/metric_definition.json)."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"
    MINKOWSKI = "minkowski"
    DISCRETE = "discrete"


_CATALOGUE: dict[MetricKind, Metric] = {
    MetricKind.EUCLIDEAN: euclidean_distance,
    MetricKind.MANHATTAN: manhattan_distance,
    MetricKind.CHEBYSHEV: chebyshev_distance,
    MetricKind.DISCRETE: discrete_metric,
}


def get_metric(kind: MetricKind, p: Optional[float] = None) -> Metric:
    """
    Разрешение имени метрики каталога в callable.

    Args:
        kind: Метрика каталога (MetricKind или его строковое значение)
        p: Порядок для MINKOWSKI (обязателен), для остальных игнорируется

    Raises:
        ValueError: Неизвестное имя или MINKOWSKI без p
    """
    kind = MetricKind(kind)

    if kind is MetricKind.MINKOWSKI:
        if p is None:
            raise ValueError("p is required for the minkowski metric")
        order = p

        def minkowski(p1: Vector, p2: Vector) -> float:
            return minkowski_distance(p1, p2, order)

        return minkowski

    return _CATALOGUE[kind]


# =============================================================================
# ПРОВЕРКА АКСИОМ МЕТРИКИ
# =============================================================================


class MetricAxiom(str, Enum):
    """Аксиомы метрики."""

    NON_NEGATIVITY = "non-negativity"
    IDENTITY = "identity-of-indiscernibles"
    SYMMETRY = "symmetry"
    TRIANGLE_INEQUALITY = "triangle-inequality"


@dataclass(frozen=True)
class MetricAxiomReport:
    """Результат проверки аксиом метрики на выборке точек."""

    is_metric: bool
    violated_axiom: Optional[MetricAxiom]

    # Точки, на которых найдено первое нарушение
    witness: tuple

    # Детали
    details: str


def verify_metric_axioms(
    metric: Metric,
    points: Sequence[Any],
    tolerance: float = EPS_FLOAT_COMPARE_ABS,
) -> MetricAxiomReport:
    """
    Проверка аксиом метрики на всех парах и тройках выборки.

    Порядок проверок:
    1. d(x, y) >= 0 — действительное число
    2. d(x, y) = 0 ⟺ x = y (по значению)
    3. d(x, y) = d(y, x)
    4. d(x, z) <= d(x, y) + d(y, z)

    Сравнения ведутся с абсолютным допуском tolerance. Проверка конечной
    выборки — необходимое условие, а не доказательство: прохождение не
    гарантирует, что функция является метрикой на всём пространстве.

    Сложность O(n³) вызовов metric для n точек.

    Raises:
        ValueError: Если tolerance < 0 или metric вернула не число
    """
    validate_non_negative(tolerance, "tolerance")

    n = len(points)
    distances: dict[tuple[int, int], float] = {}

    for i, j in product(range(n), repeat=2):
        value = metric(points[i], points[j])
        if not is_real_number(value) or math.isnan(value):
            raise ValueError(
                f"metric must return a real number, got {value!r} "
                f"for ({points[i]!r}, {points[j]!r})"
            )
        distances[(i, j)] = float(value)

    def violation(axiom: MetricAxiom, witness: tuple, details: str) -> MetricAxiomReport:
        logger.debug("metric axiom violated: %s at %r", axiom.value, witness)
        return MetricAxiomReport(
            is_metric=False, violated_axiom=axiom, witness=witness, details=details
        )

    for (i, j), d in distances.items():
        if d < -tolerance:
            return violation(
                MetricAxiom.NON_NEGATIVITY,
                (points[i], points[j]),
                f"d={d} is negative",
            )

    for (i, j), d in distances.items():
        same = discrete_metric(points[i], points[j]) == 0
        if same and abs(d) > tolerance:
            return violation(
                MetricAxiom.IDENTITY,
                (points[i], points[j]),
                f"d(x, x)={d} is not zero",
            )
        if not same and abs(d) <= tolerance:
            return violation(
                MetricAxiom.IDENTITY,
                (points[i], points[j]),
                "distinct points at zero distance",
            )

    for i in range(n):
        for j in range(i + 1, n):
            if abs(distances[(i, j)] - distances[(j, i)]) > tolerance:
                return violation(
                    MetricAxiom.SYMMETRY,
                    (points[i], points[j]),
                    f"d(x, y)={distances[(i, j)]} != d(y, x)={distances[(j, i)]}",
                )

    for i, j, k in product(range(n), repeat=3):
        if distances[(i, k)] > distances[(i, j)] + distances[(j, k)] + tolerance:
            return violation(
                MetricAxiom.TRIANGLE_INEQUALITY,
                (points[i], points[j], points[k]),
                f"d(x, z)={distances[(i, k)]} > "
                f"d(x, y) + d(y, z)={distances[(i, j)] + distances[(j, k)]}",
            )

    return MetricAxiomReport(
        is_metric=True,
        violated_axiom=None,
        witness=(),
        details=f"PASS: {n} points, {n * n} pairs, {n ** 3} triples",
    )
