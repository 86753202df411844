"""
Transitive classifier and result filters.

Classification is relative to one project and framework: a library is
transitive when the project does not reference it directly but something in
the closure of its direct references requires it.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Set

from transdep.output.comparer import fold
from transdep.output.dependency import Dependency

from .catalog import Catalog


class TransitiveClassifier:
    """Marks dependency records reachable from a frontier as transitive or direct."""

    def __init__(self):
        """Initialize classifier."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def classify(
        self,
        records: Dict[str, Dependency],
        catalog: Catalog,
        frontier: Iterable[str],
    ) -> List[Dependency]:
        """
        Set ``is_transitive`` on every record reachable from the frontier.

        Args:
            records: Records produced by the walker for ``catalog``
            catalog: The catalog that was walked
            frontier: Names the project references directly

        Returns:
            Reachable records, in catalog order
        """
        direct = {fold(name) for name in frontier if name in catalog}
        reachable = self._reachable(direct, catalog)

        classified = []
        for key in self._ordered_keys(records, catalog, reachable):
            record = records.get(key)
            if record is None:
                continue

            record.is_transitive = key not in direct and len(record.via) > 0
            classified.append(record)

        self.logger.debug(
            f"{len(classified)} reachable dependencies, "
            f"{sum(1 for record in classified if record.is_transitive)} transitive"
        )
        return classified

    @staticmethod
    def _reachable(direct: Set[str], catalog: Catalog) -> Set[str]:
        reachable: Set[str] = set()
        pending = list(direct)

        while pending:
            key = pending.pop()
            if key in reachable:
                continue
            reachable.add(key)

            library = catalog.get(key)
            if library is None:
                continue

            for dependency_name in library.dependencies:
                dependency_key = fold(dependency_name)
                if dependency_key not in reachable:
                    pending.append(dependency_key)

        return reachable

    @staticmethod
    def _ordered_keys(records: Dict[str, Dependency], catalog: Catalog, reachable: Set[str]) -> List[str]:
        keys = [fold(library.name) for library in catalog.libraries() if fold(library.name) in reachable]
        # Unresolved names only exist as records
        keys.extend(key for key in records if key in reachable and key not in catalog)
        return keys


def filter_dependencies(
    dependencies: Iterable[Dependency],
    collate_all: bool = False,
    name_filter: Optional[re.Pattern] = None,
) -> List[Dependency]:
    """
    Select the classified dependencies to emit.

    Args:
        dependencies: Classified records
        collate_all: Keep non-transitive records as well
        name_filter: Keep only identifiers the pattern matches (``re.search``)
    """
    selected = []
    for dependency in dependencies:
        if not collate_all and not dependency.is_transitive:
            continue
        if name_filter is not None and not name_filter.search(dependency.identifier):
            continue
        selected.append(dependency)
    return selected
