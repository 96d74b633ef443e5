"""
Core math modules для Topology Explorer

Чистые функции: алгебра множеств, векторы и метрики, алгебра функций,
анализ последовательностей. Состояния между вызовами нет.
"""

# Errors
from src.core.math.errors import (
    AnalysisError,
    DimensionMismatch,
    InvalidSampleCount,
    InvalidTopology,
    NonConvergent,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Defaults
    DEFAULT_DELTA,
    DEFAULT_EPSILON,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_TERMS,
    DEFAULT_SAMPLES,
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MIN_SAMPLES,
    # Checks
    is_close,
    is_real_number,
    is_valid_float,
    is_zero,
    require_finite,
    validate_count,
    validate_non_negative,
    validate_positive,
)

# Set Algebra
from src.core.math.set_algebra import (
    FiniteSet,
    are_disjoint,
    as_finite_set,
    canonical_key,
    difference,
    intersection,
    is_subset,
    sets_equal,
    union,
)

# Vectors
from src.core.math.vectors import (
    dot_product,
    is_vector,
    vector_add,
    vector_norm,
    vector_scale,
    vector_subtract,
)

# Metrics
from src.core.math.metrics import (
    MetricAxiom,
    MetricAxiomReport,
    MetricKind,
    chebyshev_distance,
    discrete_metric,
    euclidean_distance,
    get_metric,
    manhattan_distance,
    minkowski_distance,
    verify_metric_axioms,
)

# Function Space
from src.core.math.function_space import (
    ComposedFunction,
    FunctionSum,
    ScaledFunction,
    compose,
    function_add,
    function_distance,
    function_scale,
    map_coordinates,
    sample_points,
)

# Sequences
from src.core.math.sequences import (
    FixedPointResult,
    cauchy_threshold,
    estimate_lipschitz_constant,
    find_fixed_point,
    is_cauchy,
    is_continuous_at,
    is_contraction,
    is_convergent,
    iterate_fixed_point,
)

__all__ = [
    # Errors
    "AnalysisError",
    "DimensionMismatch",
    "InvalidSampleCount",
    "InvalidTopology",
    "NonConvergent",
    # Numerical Safeguards — Defaults
    "DEFAULT_DELTA",
    "DEFAULT_EPSILON",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_MAX_TERMS",
    "DEFAULT_SAMPLES",
    "DEFAULT_TOLERANCE",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "MIN_SAMPLES",
    # Numerical Safeguards — Checks
    "is_close",
    "is_real_number",
    "is_valid_float",
    "is_zero",
    "require_finite",
    "validate_count",
    "validate_non_negative",
    "validate_positive",
    # Set Algebra
    "FiniteSet",
    "are_disjoint",
    "as_finite_set",
    "canonical_key",
    "difference",
    "intersection",
    "is_subset",
    "sets_equal",
    "union",
    # Vectors
    "dot_product",
    "is_vector",
    "vector_add",
    "vector_norm",
    "vector_scale",
    "vector_subtract",
    # Metrics
    "MetricAxiom",
    "MetricAxiomReport",
    "MetricKind",
    "chebyshev_distance",
    "discrete_metric",
    "euclidean_distance",
    "get_metric",
    "manhattan_distance",
    "minkowski_distance",
    "verify_metric_axioms",
    # Function Space
    "ComposedFunction",
    "FunctionSum",
    "ScaledFunction",
    "compose",
    "function_add",
    "function_distance",
    "function_scale",
    "map_coordinates",
    "sample_points",
    # Sequences
    "FixedPointResult",
    "cauchy_threshold",
    "estimate_lipschitz_constant",
    "find_fixed_point",
    "is_cauchy",
    "is_continuous_at",
    "is_contraction",
    "is_convergent",
    "iterate_fixed_point",
]
