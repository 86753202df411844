"""
Provenance graph walker.

Visits every library in a catalog, creating one ``Dependency`` record per
distinct name and pushing provenance down the dependency edges: when library
A requires B, A's record is added to B's ``via`` set.
"""

import logging
from typing import Dict, List, Tuple

from transdep.output.comparer import fold
from transdep.output.dependency import Dependency

from .catalog import Catalog, Library


class ProvenanceWalker:
    """
    Populates dependency records and their provenance for one catalog.

    Record creation is idempotent: a record that already exists is returned
    without descending into it again. Every library's edges are therefore
    processed exactly once, so the walk terminates on cyclic catalogs and its
    work stack never holds more entries than there are libraries.
    """

    def __init__(self):
        """Initialize walker."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def walk(self, catalog: Catalog) -> Dict[str, Dependency]:
        """
        Walk the whole catalog.

        Args:
            catalog: Resolved libraries for one project/framework

        Returns:
            Fresh map of case-folded library name to its record
        """
        records: Dict[str, Dependency] = {}

        for library in catalog.libraries():
            self._record(library, catalog, records)

        self.logger.debug(f"Recorded {len(records)} dependencies from {len(catalog)} libraries")
        return records

    def _record(self, library: Library, catalog: Catalog, records: Dict[str, Dependency]) -> Dependency:
        record, created = self._get_or_create(library, records)
        if not created:
            return record

        pending: List[Tuple[Library, Dependency]] = [(library, record)]
        while pending:
            current, current_record = pending.pop()
            key = fold(current.name)

            for dependency_name in current.dependencies:
                if fold(dependency_name) == key:
                    continue

                child_library = catalog.get(dependency_name)
                if child_library is None:
                    self._record_unresolved(dependency_name, current, records)
                    continue

                child, child_created = self._get_or_create(child_library, records)
                child.via.add(current_record)
                if child_created:
                    pending.append((child_library, child))

        return record

    @staticmethod
    def _get_or_create(library: Library, records: Dict[str, Dependency]) -> Tuple[Dependency, bool]:
        key = fold(library.name)
        existing = records.get(key)
        if existing is not None:
            return existing, False

        record = Dependency(library.name, library.version)
        records[key] = record
        return record, True

    def _record_unresolved(self, name: str, parent: Library, records: Dict[str, Dependency]) -> None:
        """Unresolvable names get a version-less record with no provenance."""
        key = fold(name)
        if key in records:
            return

        self.logger.warning(
            f"{parent.name} v{parent.version} requires {name}, which is not in the catalog"
        )
        records[key] = Dependency(name, "")
