"""
Sequences — анализ последовательностей и итерационных процессов

Все проверки — конечные приближения определений анализа с ограниченным
числом вычислений (max_terms / samples / max_iterations):

- is_convergent: существует ли член, попавший в epsilon-окрестность предела
  (близость в некоторой точке, а не стабилизация начиная с неё)
- is_cauchy: все пары членов хвоста ближе epsilon (полный попарный перебор)
- is_contraction: |f(x) - f(y)| <= L·|x - y| на всех парах сэмплов
- find_fixed_point: итерация Банаха x ← f(x)
- is_continuous_at: epsilon-delta на пяти пробных точках

Сходимость find_fixed_point гарантирована только если вызывающий передал
сжатие на полном пространстве; ядро это предусловие не проверяет.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции без состояния и без побочных эффектов
2. Неудача сигнализируется явно (результат или исключение), не подавляется
3. is_cauchy никогда не возвращает True после проверки одного индекса
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from src.core.math.errors import NonConvergent
from src.core.math.function_space import Domain, RealFunction, sample_points
from src.core.math.numerical_safeguards import (
    DEFAULT_DELTA,
    DEFAULT_EPSILON,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_TERMS,
    DEFAULT_SAMPLES,
    DEFAULT_TOLERANCE,
    require_finite,
    validate_count,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger(__name__)

Sequence = Callable[[int], float]


# =============================================================================
# СХОДИМОСТЬ
# =============================================================================


def is_convergent(
    sequence: Sequence,
    limit: float,
    epsilon: float = DEFAULT_EPSILON,
    max_terms: int = DEFAULT_MAX_TERMS,
) -> bool:
    """
    Проверка, попадает ли какой-либо из первых max_terms членов в
    epsilon-окрестность limit.

    Просматриваются индексы 0 .. max_terms - 1; True на первом n с
    |a_n - limit| < epsilon. Это проверка близости в некоторой точке,
    а не стабилизации: последовательность, один раз прошедшая через limit,
    считается сходящейся.

    Raises:
        ValueError: Если epsilon <= 0, max_terms < 0 или член не конечное число

    Examples:
        >>> is_convergent(lambda n: 1 / (n + 1), 0.0, epsilon=0.01)
        True
        >>> is_convergent(lambda n: n, 0.5, epsilon=0.1)
        False
    """
    validate_positive(epsilon, "epsilon")
    validate_count(max_terms, "max_terms")

    for n in range(max_terms):
        term = require_finite(sequence(n), f"sequence({n})")
        if abs(term - limit) < epsilon:
            logger.debug("sequence within epsilon=%g of %r at n=%d", epsilon, limit, n)
            return True

    return False


def cauchy_threshold(
    sequence: Sequence,
    epsilon: float = DEFAULT_EPSILON,
    max_terms: int = DEFAULT_MAX_TERMS,
) -> Optional[int]:
    """
    Наименьший индекс N, начиная с которого ВСЕ пары членов
    N <= n < m < max_terms удовлетворяют |a_n - a_m| < epsilon.

    Максимум |a_n - a_m| по всем парам хвоста равен max - min хвоста,
    поэтому перебор пар сворачивается в один проход с конца с накоплением
    минимума и максимума: хвост [N, max_terms) проходит проверку ⟺ каждая
    его пара проходит.

    Returns:
        N или None, если даже последняя пара членов не ближе epsilon

    Raises:
        ValueError: Если epsilon <= 0, max_terms < 2 или член не конечное число
    """
    validate_positive(epsilon, "epsilon")
    validate_count(max_terms, "max_terms", minimum=2)

    terms = [
        require_finite(sequence(n), f"sequence({n})") for n in range(max_terms)
    ]

    tail_min = tail_max = terms[-1]
    threshold: Optional[int] = None

    for n in range(max_terms - 2, -1, -1):
        tail_min = min(tail_min, terms[n])
        tail_max = max(tail_max, terms[n])
        if tail_max - tail_min >= epsilon:
            break
        threshold = n

    return threshold


def is_cauchy(
    sequence: Sequence,
    epsilon: float = DEFAULT_EPSILON,
    max_terms: int = DEFAULT_MAX_TERMS,
) -> bool:
    """
    Проверка фундаментальности (Cauchy) на первых max_terms членах.

    Последовательность проходит, если найден порог N такой, что все пары
    N <= n < m < max_terms ближе epsilon, и проверенный хвост покрывает
    не меньше половины просмотренных членов (N <= max_terms // 2).
    Без второго условия любой хвост из двух последних членов давал бы
    тривиальный True.

    Raises:
        ValueError: Если epsilon <= 0, max_terms < 2 или член не конечное число

    Examples:
        >>> is_cauchy(lambda n: 1 / (n + 1), epsilon=0.01)
        True
        >>> is_cauchy(lambda n: (-1) ** n, epsilon=0.5)
        False
    """
    threshold = cauchy_threshold(sequence, epsilon, max_terms)

    logger.debug(
        "cauchy threshold=%s for epsilon=%g over %d terms", threshold, epsilon, max_terms
    )

    return threshold is not None and threshold <= max_terms // 2


# =============================================================================
# СЖАТИЯ
# =============================================================================


def is_contraction(
    f: RealFunction,
    domain: Domain,
    lipschitz_constant: float,
    samples: int = DEFAULT_SAMPLES,
) -> bool:
    """
    Проверка условия Липшица |f(x) - f(y)| <= L·|x - y| на всех парах
    `samples` равноотстоящих точек домена.

    Сэмплированное необходимое условие, не доказательство: нарушение между
    точками сетки не обнаруживается. Условие L < 1 не навязывается —
    вызывающий сам передаёт константу, которую проверяет.

    Raises:
        InvalidSampleCount: Если samples < 2
        ValueError: Если lipschitz_constant < 0 или f вернула не конечное число

    Examples:
        >>> is_contraction(lambda x: x / 2, (0.0, 10.0), 0.5)
        True
        >>> is_contraction(lambda x: 2 * x, (0.0, 10.0), 0.5)
        False
    """
    validate_non_negative(lipschitz_constant, "lipschitz_constant")
    points = sample_points(domain, samples)
    values = [require_finite(f(x), f"f({x!r})") for x in points]

    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            dist_inputs = abs(points[i] - points[j])
            dist_outputs = abs(values[i] - values[j])

            if dist_outputs > lipschitz_constant * dist_inputs:
                logger.debug(
                    "lipschitz bound %g violated at x=%r, y=%r",
                    lipschitz_constant, points[i], points[j],
                )
                return False

    return True


def estimate_lipschitz_constant(
    f: RealFunction,
    domain: Domain,
    samples: int = DEFAULT_SAMPLES,
) -> float:
    """
    Наибольшее отношение |f(x) - f(y)| / |x - y| по парам сэмплов.

    Оценка снизу истинной константы Липшица на домене. Пары совпадающих
    точек (вырожденный домен) пропускаются; для вырожденного домена
    возвращается 0.0.

    Raises:
        InvalidSampleCount: Если samples < 2
        ValueError: Если f вернула не конечное число
    """
    points = sample_points(domain, samples)
    values = [require_finite(f(x), f"f({x!r})") for x in points]
    best = 0.0

    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            dist_inputs = abs(points[i] - points[j])
            if dist_inputs == 0:
                continue
            best = max(best, abs(values[i] - values[j]) / dist_inputs)

    return best


# =============================================================================
# НЕПОДВИЖНАЯ ТОЧКА
# =============================================================================


@dataclass(frozen=True)
class FixedPointResult:
    """Результат итерации Банаха x ← f(x)."""

    converged: bool

    # Последнее вычисленное значение f(x)
    value: float

    # Сколько раз была применена f
    iterations: int

    # |f(x) - x| на последней итерации (None если итераций не было)
    last_step: Optional[float]

    def unwrap(self) -> float:
        """
        Значение неподвижной точки.

        Raises:
            NonConvergent: Если итерация не сошлась
        """
        if not self.converged:
            raise NonConvergent(self)
        return self.value


def iterate_fixed_point(
    f: RealFunction,
    initial_guess: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> FixedPointResult:
    """
    Итерация x ← f(x) до |f(x) - x| < tolerance или исчерпания max_iterations.

    Никогда не бросает исключение на несходимость — возвращает
    FixedPointResult(converged=False, ...). При max_iterations = 0 возвращает
    initial_guess без вызова f.

    Raises:
        ValueError: Если tolerance <= 0, max_iterations < 0 или f вернула
            не конечное число
    """
    validate_positive(tolerance, "tolerance")
    validate_count(max_iterations, "max_iterations")

    x = require_finite(initial_guess, "initial_guess")
    last_step: Optional[float] = None

    for iteration in range(1, max_iterations + 1):
        next_x = require_finite(f(x), f"f({x!r})")
        last_step = abs(next_x - x)

        if last_step < tolerance:
            logger.debug("fixed point %r reached after %d iterations", next_x, iteration)
            return FixedPointResult(
                converged=True, value=next_x, iterations=iteration, last_step=last_step
            )

        x = next_x

    logger.debug("fixed point iteration exhausted %d iterations at %r", max_iterations, x)
    return FixedPointResult(
        converged=False, value=x, iterations=max_iterations, last_step=last_step
    )


def find_fixed_point(
    f: RealFunction,
    initial_guess: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> float:
    """
    Неподвижная точка сжатия f итерацией Банаха.

    Raises:
        NonConvergent: Если за max_iterations не достигнуто |f(x) - x| < tolerance
        ValueError: См. iterate_fixed_point

    Examples:
        >>> abs(find_fixed_point(lambda x: x / 2 + 1, 0.0, 1e-9) - 2.0) < 1e-8
        True
    """
    return iterate_fixed_point(f, initial_guess, tolerance, max_iterations).unwrap()


# =============================================================================
# НЕПРЕРЫВНОСТЬ
# =============================================================================


def is_continuous_at(
    f: RealFunction,
    x0: float,
    epsilon: float = DEFAULT_EPSILON,
    delta: float = DEFAULT_DELTA,
) -> bool:
    """
    Конечное приближение epsilon-delta определения непрерывности в x0.

    Пробные точки: x0 - delta/2, x0 - delta/4, x0, x0 + delta/4, x0 + delta/2.
    False, если хотя бы в одной |f(x) - f(x0)| >= epsilon. Разрыв между
    пробными точками не обнаруживается — это не доказательство.

    Raises:
        ValueError: Если epsilon <= 0, delta <= 0 или f вернула не конечное
            число

    Examples:
        >>> is_continuous_at(lambda x: x * x, 1.0, epsilon=1e-3, delta=1e-4)
        True
        >>> is_continuous_at(lambda x: 0.0 if x < 0 else 1.0, 0.0, 0.5, 1e-3)
        False
    """
    validate_positive(epsilon, "epsilon")
    validate_positive(delta, "delta")

    y0 = require_finite(f(x0), f"f({x0!r})")
    test_points = (
        x0 - delta / 2,
        x0 - delta / 4,
        x0,
        x0 + delta / 4,
        x0 + delta / 2,
    )

    for x in test_points:
        if abs(require_finite(f(x), f"f({x!r})") - y0) >= epsilon:
            return False

    return True
