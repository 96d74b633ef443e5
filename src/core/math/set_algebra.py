"""
Set Algebra — конечные множества дискретных элементов

FiniteSet — неизменяемое множество с hash-индексом по каноническому ключу
элемента. Равенство элементов — равенство по значению, не по identity:
составные элементы (list / tuple / set / dict, в т.ч. вложенные)
канонизируются в hashable ключ.

Операции:
- union, intersection, difference → новый FiniteSet, входы не меняются
- is_subset, are_disjoint, sets_equal → bool

Сложность O(|A| + |B|) за счёт O(1) membership.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В множестве нет дубликатов (по значению)
2. Порядок итерации = порядок первого добавления (детерминизм)
3. Два множества равны ⟺ одинаковая мощность и взаимное включение
"""

from typing import Any, Hashable, Iterable, Iterator, Union


def canonical_key(element: Any) -> Hashable:
    """
    Канонический hashable ключ элемента для сравнения по значению.

    - list / tuple → tuple канонических ключей (порядок важен)
    - set / frozenset / FiniteSet → frozenset канонических ключей
    - dict → frozenset пар (ключ, канонический ключ значения)
    - прочее → сам элемент (должен быть hashable)

    Raises:
        TypeError: Если элемент не hashable и не поддерживаемый контейнер

    Examples:
        >>> canonical_key([1, [2, 3]])
        ('seq', (1, ('seq', (2, 3))))
        >>> canonical_key({1, 2}) == canonical_key({2, 1})
        True
    """
    if isinstance(element, (list, tuple)):
        return ("seq", tuple(canonical_key(item) for item in element))
    if isinstance(element, (set, frozenset, FiniteSet)):
        return ("set", frozenset(canonical_key(item) for item in element))
    if isinstance(element, dict):
        return (
            "map",
            frozenset((k, canonical_key(v)) for k, v in element.items()),
        )
    hash(element)
    return element


class FiniteSet:
    """
    Неизменяемое конечное множество Element'ов.

    Хранит отображение canonical_key → исходный элемент. Поддерживает
    len, in, iter, ==, hash; операции возвращают новые экземпляры.
    """

    __slots__ = ("_items",)

    def __init__(self, elements: Iterable[Any] = ()):
        items: dict = {}
        for element in elements:
            items.setdefault(canonical_key(element), element)
        self._items = items

    @classmethod
    def _from_items(cls, items: dict) -> "FiniteSet":
        instance = cls.__new__(cls)
        instance._items = items
        return instance

    # -------------------------------------------------------------------------
    # Протокол коллекции
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items.values())

    def __contains__(self, element: Any) -> bool:
        try:
            return canonical_key(element) in self._items
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return len(self) == len(other) and self.is_subset(other)

    def __hash__(self) -> int:
        return hash(frozenset(self._items))

    def __repr__(self) -> str:
        return f"FiniteSet({list(self._items.values())!r})"

    def __bool__(self) -> bool:
        return bool(self._items)

    def keys(self) -> frozenset:
        """Канонические ключи элементов (для hash-индексов семейств множеств)."""
        return frozenset(self._items)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def union(self, other: "FiniteSet") -> "FiniteSet":
        items = dict(self._items)
        for key, element in other._items.items():
            items.setdefault(key, element)
        return FiniteSet._from_items(items)

    def intersection(self, other: "FiniteSet") -> "FiniteSet":
        small, large = (self, other) if len(self) <= len(other) else (other, self)
        # Элементы берутся из self, чтобы результат не зависел от размеров
        items = {
            key: self._items[key] for key in small._items if key in large._items
        }
        return FiniteSet._from_items(items)

    def difference(self, other: "FiniteSet") -> "FiniteSet":
        items = {
            key: element
            for key, element in self._items.items()
            if key not in other._items
        }
        return FiniteSet._from_items(items)

    def is_subset(self, other: "FiniteSet") -> bool:
        if len(self) > len(other):
            return False
        return all(key in other._items for key in self._items)

    def is_disjoint(self, other: "FiniteSet") -> bool:
        small, large = (self, other) if len(self) <= len(other) else (other, self)
        return not any(key in large._items for key in small._items)


SetLike = Union[FiniteSet, Iterable[Any]]


def as_finite_set(value: SetLike) -> FiniteSet:
    """Приведение произвольной коллекции к FiniteSet (FiniteSet не копируется)."""
    if isinstance(value, FiniteSet):
        return value
    if isinstance(value, (str, bytes)):
        # Строка считается одним элементом, а не коллекцией символов
        raise TypeError(f"expected a collection of elements, got {type(value).__name__}")
    return FiniteSet(value)


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ ИНТЕРФЕЙС
# =============================================================================


def union(set_a: SetLike, set_b: SetLike) -> FiniteSet:
    """A ∪ B."""
    return as_finite_set(set_a).union(as_finite_set(set_b))


def intersection(set_a: SetLike, set_b: SetLike) -> FiniteSet:
    """A ∩ B."""
    return as_finite_set(set_a).intersection(as_finite_set(set_b))


def difference(set_a: SetLike, set_b: SetLike) -> FiniteSet:
    """A − B."""
    return as_finite_set(set_a).difference(as_finite_set(set_b))


def is_subset(set_a: SetLike, set_b: SetLike) -> bool:
    """A ⊆ B."""
    return as_finite_set(set_a).is_subset(as_finite_set(set_b))


def are_disjoint(set_a: SetLike, set_b: SetLike) -> bool:
    """A ∩ B = ∅."""
    return as_finite_set(set_a).is_disjoint(as_finite_set(set_b))


def sets_equal(set_a: SetLike, set_b: SetLike) -> bool:
    """
    Равенство множеств: одинаковая мощность и каждый элемент одного
    содержится в другом (порядок не важен).
    """
    return as_finite_set(set_a) == as_finite_set(set_b)
