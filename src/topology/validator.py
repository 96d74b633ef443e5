"""Topology Validator — проверка аксиом топологического пространства

Проверяет кандидата (base_set, open_sets) на аксиомы топологии.

Порядок проверок:
1. base_set непуст, семейство open_sets непусто
2. Каждое открытое множество ⊆ base_set
3. ∅ и base_set присутствуют в семействе (по равенству множеств)
4. Пересечение каждой неупорядоченной пары открытых множеств присутствует
   в семействе — O(k²·n) через hash-индекс семейства
5. Замкнутость относительно объединений по умолчанию НЕ проверяется

ИЗВЕСТНОЕ ОГРАНИЧЕНИЕ (шаг 5): контракт слабее математического определения.
Вызывающий обязан передавать семейства, замкнутые относительно объединений
по построению (сгенерированные, а не отредактированные вручную), если ему
нужна полная гарантия. Проверка попарных объединений включается явно через
TopologyValidatorConfig(check_union_closure=True); для конечного семейства
её достаточно.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from itertools import combinations

from src.core.domain.topological_space import TopologicalSpace
from src.core.math.errors import InvalidTopology
from src.core.math.set_algebra import FiniteSet

logger = logging.getLogger(__name__)


# =============================================================================
# TYPES
# =============================================================================


class TopologyAxiom(str, Enum):
    """Нарушенная аксиома (значения стабильны для exercise-evaluation слоя)."""

    NON_EMPTY_BASE = "non-empty-base"
    NON_SUBSET_OPEN_SET = "non-subset-open-set"
    MISSING_EMPTY_SET = "missing-empty-set"
    MISSING_WHOLE_SPACE = "missing-whole-space"
    INTERSECTION_NOT_OPEN = "intersection-not-open"
    UNION_NOT_OPEN = "union-not-open"


@dataclass(frozen=True)
class TopologyViolation:
    """Одно нарушение: аксиома + детали (индексы открытых множеств и т.п.)."""

    axiom: TopologyAxiom
    details: str


@dataclass(frozen=True)
class TopologyValidatorConfig:
    """Конфигурация валидатора.

    check_union_closure: проверять попарные объединения (по умолчанию нет —
        документированный слабый контракт)
    """

    check_union_closure: bool = False


@dataclass(frozen=True)
class TopologyValidationResult:
    """Результат валидации."""

    is_valid: bool
    violations: tuple

    # Детали
    details: str

    @property
    def axioms(self) -> tuple:
        """Нарушенные аксиомы без повторов, в порядке обнаружения."""
        return tuple(dict.fromkeys(v.axiom for v in self.violations))

    def raise_for_violations(self) -> None:
        """
        Raises:
            InvalidTopology: Если кандидат невалиден
        """
        if not self.is_valid:
            raise InvalidTopology(self.violations)


# =============================================================================
# VALIDATOR
# =============================================================================


class TopologyValidator:
    """Валидатор аксиом топологии (stateless)."""

    def __init__(self, config: TopologyValidatorConfig | None = None):
        """
        Args:
            config: конфигурация (default: TopologyValidatorConfig())
        """
        self.config = config or TopologyValidatorConfig()

    def evaluate(self, space: TopologicalSpace) -> TopologyValidationResult:
        """Проверка аксиом.

        Собирает все нарушения шагов 2-4 (и 5, если включён), кроме случая
        пустого base_set / пустого семейства — тогда остальные шаги не имеют
        смысла и результат возвращается сразу.

        Args:
            space: кандидат

        Returns:
            TopologyValidationResult со списком нарушений
        """
        base_set = space.base_set
        open_sets = space.open_sets

        # 1. Непустота
        if not base_set:
            return self._result([
                TopologyViolation(TopologyAxiom.NON_EMPTY_BASE, "base set is empty")
            ])

        if not open_sets:
            return self._result([
                TopologyViolation(
                    TopologyAxiom.MISSING_EMPTY_SET, "collection of open sets is empty"
                ),
                TopologyViolation(
                    TopologyAxiom.MISSING_WHOLE_SPACE, "collection of open sets is empty"
                ),
            ])

        violations: list[TopologyViolation] = []

        # 2. Открытые множества ⊆ base_set
        for index, open_set in enumerate(open_sets):
            outside = open_set.difference(base_set)
            if outside:
                violations.append(TopologyViolation(
                    TopologyAxiom.NON_SUBSET_OPEN_SET,
                    f"open set #{index} has elements outside the base set: {list(outside)!r}",
                ))

        # Hash-индекс семейства: проверка присутствия множества за O(n)
        family = set(open_sets)

        # 3. ∅ и X
        if FiniteSet() not in family:
            violations.append(TopologyViolation(
                TopologyAxiom.MISSING_EMPTY_SET, "empty set is not open"
            ))

        if base_set not in family:
            violations.append(TopologyViolation(
                TopologyAxiom.MISSING_WHOLE_SPACE, "base set is not open"
            ))

        # 4. Пересечения пар
        for (i, set_i), (j, set_j) in combinations(enumerate(open_sets), 2):
            meet = set_i.intersection(set_j)
            if meet not in family:
                violations.append(TopologyViolation(
                    TopologyAxiom.INTERSECTION_NOT_OPEN,
                    f"intersection of open sets #{i} and #{j} is not open: {list(meet)!r}",
                ))

        # 5. Объединения пар (только явно)
        if self.config.check_union_closure:
            for (i, set_i), (j, set_j) in combinations(enumerate(open_sets), 2):
                join = set_i.union(set_j)
                if join not in family:
                    violations.append(TopologyViolation(
                        TopologyAxiom.UNION_NOT_OPEN,
                        f"union of open sets #{i} and #{j} is not open: {list(join)!r}",
                    ))

        return self._result(violations)

    def _result(self, violations: list) -> TopologyValidationResult:
        if violations:
            logger.debug(
                "topology rejected: %s", ", ".join(v.axiom.value for v in violations)
            )
            return TopologyValidationResult(
                is_valid=False,
                violations=tuple(violations),
                details=f"INVALID: {len(violations)} violation(s)",
            )

        return TopologyValidationResult(is_valid=True, violations=(), details="PASS")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_topology(
    space: TopologicalSpace,
    config: TopologyValidatorConfig | None = None,
) -> TopologyValidationResult:
    """Валидация кандидата с конфигурацией по умолчанию (или заданной)."""
    return TopologyValidator(config).evaluate(space)


def ensure_valid_topology(
    space: TopologicalSpace,
    config: TopologyValidatorConfig | None = None,
) -> TopologicalSpace:
    """Валидация с исключением.

    Returns:
        space без изменений, если валиден

    Raises:
        InvalidTopology: со списком нарушений
    """
    validate_topology(space, config).raise_for_violations()
    return space
