"""
Base containers for the hierarchical output model.

Projects -> Project -> Framework -> Dependency are assembled bottom-up. Each
container only accepts children that pass its validity gate, so empty branches
are dropped on insertion, and exposes them through a lazily sorted view.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from .comparer import Comparable, compare_strings, fold

TChild = TypeVar("TChild")
TIdentifier = TypeVar("TIdentifier")


class Base(ABC, Generic[TChild]):
    """
    Container with validity-gated insertion and a cached sorted view.

    Args:
        capacity: Expected number of children (a sizing hint only)
        children: Initial children, accepted without the validity gate
    """

    def __init__(self, capacity: int = 0, children: Optional[Iterable[TChild]] = None):
        self.capacity = capacity
        self._children: List[TChild] = list(children) if children is not None else []
        self._children_sorted = not self._children
        self._sorted_view: Tuple[TChild, ...] = ()

    @property
    def has_children(self) -> bool:
        return len(self._children) != 0

    @property
    def sorted_children(self) -> Tuple[TChild, ...]:
        """Children in ascending order; only re-sorted after an add."""
        if not self._children_sorted:
            self._children.sort()
            self._sorted_view = tuple(self._children)
            self._children_sorted = True

        return self._sorted_view

    def add(self, child: TChild) -> None:
        """Append ``child`` if the container accepts it; rejected children are ignored."""
        if self.is_add_valid(child):
            self._children.append(child)
            self._children_sorted = False

    @abstractmethod
    def is_add_valid(self, child: TChild) -> bool:
        pass


class IdentifiedBase(Comparable, Base[TChild], Generic[TIdentifier, TChild]):
    """Container whose equality, ordering and hash derive from its identifier only."""

    def __init__(
        self,
        identifier: TIdentifier,
        capacity: int = 0,
        children: Optional[Iterable[TChild]] = None,
    ):
        super().__init__(capacity=capacity, children=children)
        self.identifier = identifier

    @staticmethod
    def comparison_function(current: "IdentifiedBase", other: "IdentifiedBase") -> int:
        return compare_strings(str(current.identifier), str(other.identifier))

    def __hash__(self) -> int:
        return hash(fold(str(self.identifier)))

    def __str__(self) -> str:
        return str(self.identifier)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.identifier)!r}, children={len(self._children)})"
