"""Topology — валидация и производные величины конечных топологических пространств.

- Validator: аксиомы (∅ и X открыты, попарные пересечения открыты);
  замкнутость по объединениям — обязанность вызывающего (см. validator)
- Derivation: is_closed, closure, interior, boundary
"""

from .derivation import (
    SubsetKind,
    boundary,
    classify_subset,
    closed_sets,
    closure,
    complement,
    interior,
    is_closed,
    is_open,
)
from .validator import (
    TopologyAxiom,
    TopologyValidationResult,
    TopologyValidator,
    TopologyValidatorConfig,
    TopologyViolation,
    ensure_valid_topology,
    validate_topology,
)

__all__ = [
    # Validator
    "TopologyAxiom",
    "TopologyViolation",
    "TopologyValidatorConfig",
    "TopologyValidationResult",
    "TopologyValidator",
    "validate_topology",
    "ensure_valid_topology",
    # Derivation
    "SubsetKind",
    "complement",
    "closed_sets",
    "is_open",
    "is_closed",
    "closure",
    "interior",
    "boundary",
    "classify_subset",
]
