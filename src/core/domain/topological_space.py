"""
TopologicalSpace — модель кандидата в топологическое пространство

Два представления:
- TopologicalSpace: неизменяемый value object ядра (FiniteSet'ы), на нём
  работают Validator и Derivation
- TopologicalSpacePayload: Immutable Pydantic модель JSON-представления,
  которое присылает exercise-evaluation слой
  (contracts/schema/topological_space.json)

Аксиомы топологии при создании НЕ проверяются — это задача
src.topology.validator.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Union

from pydantic import BaseModel, Field

from src.core.math.set_algebra import FiniteSet, as_finite_set


# =============================================================================
# VALUE OBJECT
# =============================================================================


@dataclass(frozen=True)
class TopologicalSpace:
    """
    Кандидат (base_set, open_sets).

    open_sets — упорядоченный кортеж; дубликаты допускаются и сохраняются
    (порядок важен только для детерминизма сообщений валидатора).
    """

    base_set: FiniteSet
    open_sets: tuple

    def __post_init__(self) -> None:
        # Приведение коллекций к FiniteSet; frozen dataclass → object.__setattr__
        object.__setattr__(self, "base_set", as_finite_set(self.base_set))
        object.__setattr__(
            self, "open_sets", tuple(as_finite_set(s) for s in self.open_sets)
        )

    @classmethod
    def from_collections(
        cls,
        base_set: Iterable[Any],
        open_sets: Iterable[Iterable[Any]],
    ) -> "TopologicalSpace":
        """
        Создание из произвольных коллекций.

        Examples:
            >>> space = TopologicalSpace.from_collections(["a"], [[], ["a"]])
            >>> len(space.open_sets)
            2
        """
        return cls(base_set=base_set, open_sets=tuple(open_sets))

    @property
    def size(self) -> int:
        """Мощность base_set."""
        return len(self.base_set)


# =============================================================================
# PYDANTIC PAYLOAD
# =============================================================================

# Элементы, представимые в JSON payload
ElementValue = Union[str, int, float]


class TopologicalSpacePayload(BaseModel):
    """
    JSON-представление кандидата.

    Пример:
        {"base_set": ["a", "b"], "open_sets": [[], ["a"], ["a", "b"]]}
    """

    base_set: List[ElementValue] = Field(
        ..., description="Элементы базового множества"
    )
    open_sets: List[List[ElementValue]] = Field(
        ..., description="Семейство открытых множеств"
    )
    label: str = Field("", description="Необязательная подпись для упражнения")

    model_config = {"frozen": True}

    def to_space(self) -> TopologicalSpace:
        """Преобразование в value object ядра."""
        return TopologicalSpace.from_collections(self.base_set, self.open_sets)
