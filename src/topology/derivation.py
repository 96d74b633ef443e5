"""Topology Derivation — замыкание, внутренность, граница

Работает только на пространствах, которые считаются валидными: повторной
валидации нет, для недоверенного ввода сначала вызывается
src.topology.validator.

Определения (X — base_set, τ — open_sets):
- S замкнуто      ⟺ X − S ∈ τ
- closure(S)      = ∩ {F замкнуто : S ⊆ F}   (X, если таких нет)
- interior(S)     = ∪ {U ∈ τ : U ⊆ S}        (∅, если таких нет)
- boundary(S)     = closure(S) − interior(S)

Все функции детерминированы, возвращают новый FiniteSet и не меняют ни
пространство, ни S.
"""

from enum import Enum

from src.core.domain.topological_space import TopologicalSpace
from src.core.math.set_algebra import FiniteSet, SetLike, as_finite_set


class SubsetKind(str, Enum):
    """Классификация подмножества относительно топологии."""

    OPEN = "open"
    CLOSED = "closed"
    CLOPEN = "clopen"
    NEITHER = "neither"


def _subset_of_base(subset: SetLike, space: TopologicalSpace) -> FiniteSet:
    subset = as_finite_set(subset)
    if not subset.is_subset(space.base_set):
        outside = subset.difference(space.base_set)
        raise ValueError(
            f"subset has elements outside the base set: {list(outside)!r}"
        )
    return subset


def complement(subset: SetLike, space: TopologicalSpace) -> FiniteSet:
    """X − S."""
    return space.base_set.difference(_subset_of_base(subset, space))


def closed_sets(space: TopologicalSpace) -> tuple:
    """Замкнутые множества: дополнения открытых (в порядке open_sets)."""
    return tuple(space.base_set.difference(open_set) for open_set in space.open_sets)


def is_open(subset: SetLike, space: TopologicalSpace) -> bool:
    """S ∈ τ (по равенству множеств)."""
    return _subset_of_base(subset, space) in set(space.open_sets)


def is_closed(subset: SetLike, space: TopologicalSpace) -> bool:
    """
    S замкнуто ⟺ X − S совпадает с некоторым открытым множеством.

    Raises:
        ValueError: Если S ⊄ X
    """
    return complement(subset, space) in set(space.open_sets)


def closure(subset: SetLike, space: TopologicalSpace) -> FiniteSet:
    """
    Наименьшее замкнутое множество, содержащее S.

    Raises:
        ValueError: Если S ⊄ X
    """
    subset = _subset_of_base(subset, space)
    result = space.base_set

    for closed_set in closed_sets(space):
        if subset.is_subset(closed_set):
            result = result.intersection(closed_set)

    return result


def interior(subset: SetLike, space: TopologicalSpace) -> FiniteSet:
    """
    Наибольшее открытое множество, содержащееся в S.

    Raises:
        ValueError: Если S ⊄ X
    """
    subset = _subset_of_base(subset, space)
    result = FiniteSet()

    for open_set in space.open_sets:
        if open_set.is_subset(subset):
            result = result.union(open_set)

    return result


def boundary(subset: SetLike, space: TopologicalSpace) -> FiniteSet:
    """
    closure(S) − interior(S).

    Raises:
        ValueError: Если S ⊄ X
    """
    return closure(subset, space).difference(interior(subset, space))


def classify_subset(subset: SetLike, space: TopologicalSpace) -> SubsetKind:
    """
    Открыто / замкнуто / открыто-замкнуто / ни то ни другое.

    Raises:
        ValueError: Если S ⊄ X
    """
    open_ = is_open(subset, space)
    closed = is_closed(subset, space)

    if open_ and closed:
        return SubsetKind.CLOPEN
    if open_:
        return SubsetKind.OPEN
    if closed:
        return SubsetKind.CLOSED
    return SubsetKind.NEITHER
