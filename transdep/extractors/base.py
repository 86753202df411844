"""
Base extractor interface for reading resolved-library catalogs.

Defines the contract that catalog readers must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from transdep.analysis.catalog import ProjectAssets
from transdep.utils.exceptions import AssetsFileError


class BaseExtractor(ABC):
    """
    Abstract base class for catalog readers.

    Each extractor is responsible for:
    1. Locating the files it understands below a path
    2. Parsing each file into a ``ProjectAssets``
    """

    def __init__(self, file_name: str):
        """
        Initialize the extractor.

        Args:
            file_name: Name of the file this extractor reads
        """
        self.file_name = file_name

    @property
    def project_suffixes(self) -> List[str]:
        """Suffixes of project or solution files that resolve to their directory."""
        return []

    def locate(self, path: Path) -> List[Path]:
        """
        Find the files to read for ``path``.

        A file with the extractor's suffix is used as-is, a project or solution
        file is replaced by its directory, and a directory is searched
        recursively.

        Raises:
            AssetsFileError: If the path does not exist or nothing is found
        """
        if not path.exists():
            raise AssetsFileError("Path does not exist", path=str(path))

        if path.is_file():
            if path.suffix.lower() in self.project_suffixes:
                path = path.parent
            else:
                return [path]

        found_files = sorted(path.rglob(self.file_name))
        if not found_files:
            raise AssetsFileError(f"No {self.file_name} found", path=str(path))

        return found_files

    @abstractmethod
    def read(self, path: Path) -> ProjectAssets:
        """
        Parse one file.

        Returns:
            The project's name and, per target framework, its catalog and frontier
        """
        pass
