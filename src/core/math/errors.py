"""
Errors — типизированные ошибки вычислительного ядра

Все ошибки наследуются от AnalysisError и пробрасываются вызывающему коду
(exercise-evaluation слой) без retry и без логирования.

Таксономия:
- DimensionMismatch: векторы разной длины или нечисловой операнд
- InvalidSampleCount: samples < 2 там, где требуется сэмплирование
- NonConvergent: fixed-point итерация исчерпала max_iterations
- InvalidTopology: нарушены аксиомы топологии (несёт список нарушений)
"""

from typing import Any


class AnalysisError(Exception):
    """Базовая ошибка вычислительного ядра."""
    pass


class DimensionMismatch(AnalysisError, ValueError):
    """
    Векторная операция над операндами разной длины или нечисловыми операндами.
    """
    pass


class InvalidSampleCount(AnalysisError, ValueError):
    """Запрошено меньше 2 точек сэмплирования."""

    def __init__(self, samples: Any, minimum: int = 2):
        self.samples = samples
        self.minimum = minimum
        super().__init__(f"samples must be >= {minimum}, got {samples}")


class NonConvergent(AnalysisError):
    """
    Fixed-point итерация не сошлась за max_iterations.

    Attributes:
        result: FixedPointResult последней итерации (value, iterations, last_step)
    """

    def __init__(self, result: Any):
        self.result = result
        super().__init__(
            f"Fixed point iteration did not converge within "
            f"{result.iterations} iterations "
            f"(last value={result.value!r}, last step={result.last_step!r})"
        )


class InvalidTopology(AnalysisError):
    """
    Кандидат не удовлетворяет аксиомам топологического пространства.

    Attributes:
        violations: кортеж TopologyViolation (аксиома + детали)
    """

    def __init__(self, violations: tuple):
        self.violations = tuple(violations)
        reasons = ", ".join(v.axiom.value for v in self.violations)
        super().__init__(f"Invalid topology: {reasons}")

    @property
    def axioms(self) -> tuple:
        """Нарушенные аксиомы без деталей (в порядке обнаружения)."""
        return tuple(v.axiom for v in self.violations)
