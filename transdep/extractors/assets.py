"""
NuGet assets file reader.

Reads the ``project.assets.json`` written by a restore and turns it into the
catalog and frontier for each target framework of the project.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from transdep.analysis.catalog import Catalog, Library, ProjectAssets, TargetFrameworkAssets
from transdep.output.comparer import fold
from transdep.output.framework import FrameworkIdentifier
from transdep.utils.exceptions import AssetsFileError

from .base import BaseExtractor

DEFAULT_ASSETS_FILE = "project.assets.json"


class AssetsReader(BaseExtractor):
    """
    Reader for NuGet ``project.assets.json`` files.

    Libraries come from the ``targets`` section (keys are ``Name/Version``);
    direct references come from ``project.frameworks.<alias>.dependencies``.
    """

    def __init__(
        self,
        file_name: str = DEFAULT_ASSETS_FILE,
        ignored_references: Optional[Iterable[str]] = None,
    ):
        super().__init__(file_name)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.ignored_references = {fold(name) for name in (ignored_references or [])}

    @property
    def project_suffixes(self) -> List[str]:
        return [".csproj", ".fsproj", ".vbproj", ".sln", ".slnx"]

    def read(self, path: Path) -> ProjectAssets:
        self.logger.debug(f"Reading assets file {path}")

        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise AssetsFileError("Assets file is not valid JSON", path=str(path), original_exception=e)
        except OSError as e:
            raise AssetsFileError("Assets file could not be read", path=str(path), original_exception=e)

        if not isinstance(data, dict) or "targets" not in data or "project" not in data:
            raise AssetsFileError("Assets file has no 'targets' or 'project' section", path=str(path))

        project = data["project"]
        targets = self._index_targets(data["targets"])

        frameworks = []
        for alias, framework_data in project.get("frameworks", {}).items():
            identifier = FrameworkIdentifier.parse(alias)
            target = self._match_target(identifier, targets)
            if target is None:
                self.logger.warning(f"No target for framework {alias} in {path}")
                continue

            identifier, libraries = target
            catalog = self._build_catalog(libraries)
            frontier = self._build_frontier(framework_data.get("dependencies", {}), catalog)
            frameworks.append(TargetFrameworkAssets(identifier, catalog, frontier))

        name = self._project_name(project, path)
        self.logger.info(f"Read {len(frameworks)} framework(s) for project {name}")
        return ProjectAssets(name=name, frameworks=frameworks, path=str(path))

    def _index_targets(self, targets: Dict[str, Any]) -> Dict[FrameworkIdentifier, Dict[str, Any]]:
        indexed = {}
        for key, libraries in targets.items():
            # Runtime-specific targets such as "net8.0/win-x64" repeat the framework
            if "/" in key:
                continue
            indexed[FrameworkIdentifier.parse(key)] = libraries or {}
        return indexed

    @staticmethod
    def _match_target(
        identifier: FrameworkIdentifier,
        targets: Dict[FrameworkIdentifier, Dict[str, Any]],
    ) -> Optional[Tuple[FrameworkIdentifier, Dict[str, Any]]]:
        if identifier in targets:
            return identifier, targets[identifier]

        candidates = [key for key in targets if identifier.matches(key)]
        if len(candidates) == 1:
            return candidates[0], targets[candidates[0]]
        return None

    @staticmethod
    def _build_catalog(libraries: Dict[str, Any]) -> Catalog:
        entries = []
        for key, library_data in libraries.items():
            name, _, version = key.partition("/")
            dependencies = tuple((library_data or {}).get("dependencies", {}).keys())
            entries.append(Library(name, version, dependencies))
        return Catalog(entries)

    def _build_frontier(self, dependencies: Dict[str, Any], catalog: Catalog) -> List[str]:
        frontier = []
        for name in dependencies:
            if fold(name) in self.ignored_references:
                continue
            if name not in catalog:
                self.logger.debug(f"Direct reference {name} has no catalog entry, skipping")
                continue
            frontier.append(name)
        return frontier

    @staticmethod
    def _project_name(project: Dict[str, Any], path: Path) -> str:
        restore = project.get("restore", {})
        if restore.get("projectName"):
            return restore["projectName"]
        if restore.get("projectPath"):
            return Path(restore["projectPath"].replace("\\", "/")).stem
        # <project>/obj/project.assets.json
        return path.parent.parent.name if path.parent.name == "obj" else path.parent.name
