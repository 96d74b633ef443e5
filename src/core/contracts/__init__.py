"""
Contract Validation Module

Модуль для валидации JSON контрактов Topology Explorer.
"""

from .validators import (
    ContractValidator,
    MetricDefinitionValidator,
    SchemaLoader,
    TopologicalSpaceValidator,
    get_validator,
    validate_contract,
    validate_metric_definition,
    validate_topological_space,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TopologicalSpaceValidator",
    "MetricDefinitionValidator",
    # Functions
    "get_validator",
    "validate_contract",
    "validate_topological_space",
    "validate_metric_definition",
]
