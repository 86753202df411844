"""
Classified dependency record.

A ``Dependency`` is created once per distinct library name during one
framework's walk and is shared by reference: the walker inserts parents into
its ``via`` set and the classifier sets ``is_transitive``. Equality, ordering
and hashing only look at the identifier and version.
"""

from typing import Set

from .comparer import Comparable, compare_strings, fold


class Dependency(Comparable):
    """A resolved library within one project/framework analysis."""

    def __init__(self, identifier: str, version: str):
        self.identifier = identifier
        self.version = version
        self.via: Set["Dependency"] = set()
        self.is_transitive = False

    @staticmethod
    def comparison_function(current: "Dependency", other: "Dependency") -> int:
        result = compare_strings(current.identifier, other.identifier)
        if result != 0:
            return result
        return compare_strings(str(current.version), str(other.version))

    def __hash__(self) -> int:
        return hash((fold(self.identifier), fold(str(self.version))))

    def __repr__(self) -> str:
        return f"Dependency({self.identifier!r}, {self.version!r}, is_transitive={self.is_transitive})"

    def __str__(self) -> str:
        return f"{self.identifier} v{self.version}"
