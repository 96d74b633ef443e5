"""
MetricDefinition — описание метрики в упражнении

Immutable Pydantic модель, совместимая с
contracts/schema/metric_definition.json. Связывает запись упражнения
(имя, формула для отображения, размерность пространства) с метрикой
каталога src.core.math.metrics.

resolve() возвращает метрику, привязанную к space_dimension: точки другой
размерности отклоняются с DimensionMismatch.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.math.errors import DimensionMismatch
from src.core.math.metrics import Metric, MetricKind, get_metric


@dataclass(frozen=True)
class DimensionBoundMetric:
    """
    Метрика каталога, принимающая только точки размерности dimension.

    Скаляр считается точкой размерности 1.
    """

    metric: Metric
    dimension: int

    def _check(self, point: Any, name: str) -> None:
        size = len(point) if isinstance(point, (list, tuple)) else 1
        if size != self.dimension:
            raise DimensionMismatch(
                f"{name} must have dimension {self.dimension}, got {size}"
            )

    def __call__(self, p1: Any, p2: Any) -> float:
        self._check(p1, "p1")
        self._check(p2, "p2")
        return self.metric(p1, p2)


class MetricDefinition(BaseModel):
    """
    Определение метрики.

    Поля:
    - name: отображаемое имя ("Taxicab metric")
    - formula: формула для отображения (не интерпретируется ядром)
    - space_dimension: размерность векторов пространства
    - kind: метрика каталога
    - p: порядок для MINKOWSKI
    """

    name: str = Field(..., min_length=1, description="Имя метрики")
    formula: str = Field(..., min_length=1, description="Формула (для отображения)")
    space_dimension: int = Field(..., gt=0, description="Размерность пространства")
    kind: MetricKind = Field(..., description="Метрика каталога")
    p: Optional[float] = Field(None, gt=0, description="Порядок Минковского")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_order(self) -> "MetricDefinition":
        if self.kind is MetricKind.MINKOWSKI and self.p is None:
            raise ValueError("p is required for the minkowski metric")
        return self

    def resolve(self) -> DimensionBoundMetric:
        """Метрика каталога, привязанная к space_dimension."""
        return DimensionBoundMetric(
            metric=get_metric(self.kind, self.p), dimension=self.space_dimension
        )
