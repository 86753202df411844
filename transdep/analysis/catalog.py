"""
Input types for the classification engine.

A ``Catalog`` is the closed set of resolved libraries for one project/target
framework combination. The frontier is the list of names the project
references directly.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from transdep.output.comparer import fold
from transdep.output.framework import FrameworkIdentifier


_NUGET_VERSION = re.compile(
    r"^(?P<release>\d+(?:\.\d+){0,3})(?:-(?P<label>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


def normalize_version(version: str) -> str:
    """
    Render a NuGet version in its normalized form.

    Leading zeros are dropped, missing minor and patch parts become ``0``,
    a zero revision is omitted and build metadata is removed. Strings that
    are not NuGet versions are returned unchanged.
    """
    match = _NUGET_VERSION.match(version.strip())
    if not match:
        return version

    parts = [int(part) for part in match.group("release").split(".")]
    parts += [0] * (3 - len(parts))
    if len(parts) == 4 and parts[3] == 0:
        parts = parts[:3]

    result = ".".join(str(part) for part in parts)
    if match.group("label"):
        result += f"-{match.group('label')}"
    return result


@dataclass(frozen=True)
class Library:
    """A resolved library and the names of the libraries it requires directly."""

    name: str
    version: str
    dependencies: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "version", normalize_version(self.version))


class Catalog(Mapping):
    """Read-only mapping of library name to ``Library``, keyed case-insensitively."""

    def __init__(self, libraries: Iterable[Library] = ()):
        self._libraries: Dict[str, Library] = {}
        for library in libraries:
            self._libraries[fold(library.name)] = library

    @classmethod
    def from_dict(cls, data: Dict[str, Tuple[str, Iterable[str]]]) -> "Catalog":
        """Build a catalog from ``{name: (version, [dependency names])}``."""
        return cls(
            Library(name, version, tuple(dependencies))
            for name, (version, dependencies) in data.items()
        )

    def __getitem__(self, name: str) -> Library:
        return self._libraries[fold(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and fold(name) in self._libraries

    def __iter__(self) -> Iterator[str]:
        return (library.name for library in self._libraries.values())

    def __len__(self) -> int:
        return len(self._libraries)

    def get(self, name: str, default: Optional[Library] = None) -> Optional[Library]:
        return self._libraries.get(fold(name), default)

    def libraries(self) -> List[Library]:
        return list(self._libraries.values())

    def __repr__(self) -> str:
        return f"Catalog({len(self)} libraries)"


@dataclass
class TargetFrameworkAssets:
    """Catalog and frontier for one target framework of a project."""

    identifier: FrameworkIdentifier
    catalog: Catalog
    frontier: List[str] = field(default_factory=list)


@dataclass
class ProjectAssets:
    """Everything the engine needs to analyse one project."""

    name: str
    frameworks: List[TargetFrameworkAssets] = field(default_factory=list)
    path: Optional[str] = None
