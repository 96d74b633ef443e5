"""
Domain models and value objects.

Contains the topological space candidate, its JSON payload model and
metric definitions used by exercises.
"""

from src.core.domain.metric_definition import DimensionBoundMetric, MetricDefinition
from src.core.domain.topological_space import (
    ElementValue,
    TopologicalSpace,
    TopologicalSpacePayload,
)

__all__ = [
    # Topological space
    "TopologicalSpace",
    "TopologicalSpacePayload",
    "ElementValue",
    # Metric definition
    "MetricDefinition",
    "DimensionBoundMetric",
]
