"""
Transitive dependency finder.

Runs the walker and classifier once per project and target framework and
assembles the results into the output model.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

from transdep.analysis.catalog import ProjectAssets, TargetFrameworkAssets
from transdep.analysis.classifier import TransitiveClassifier, filter_dependencies
from transdep.analysis.walker import ProvenanceWalker
from transdep.extractors.base import BaseExtractor
from transdep.extractors.dotnet import DotNetRunner
from transdep.output.framework import Framework
from transdep.output.project import Project
from transdep.output.projects import Projects


class TransitiveDependencyFinder:
    """Finds the transitive dependencies of every project under a set of paths."""

    def __init__(
        self,
        extractor: BaseExtractor,
        dotnet_runner: Optional[DotNetRunner] = None,
        walker: Optional[ProvenanceWalker] = None,
        classifier: Optional[TransitiveClassifier] = None,
    ):
        self.extractor = extractor
        self.dotnet_runner = dotnet_runner
        self.walker = walker or ProvenanceWalker()
        self.classifier = classifier or TransitiveClassifier()
        self.logger = logging.getLogger(self.__class__.__name__)

    def find(
        self,
        paths: Iterable[Path],
        collate_all: bool = False,
        name_filter: Optional[re.Pattern] = None,
        restore: bool = False,
    ) -> Projects:
        """
        Locate and read the catalogs under ``paths`` and analyse them.

        Args:
            paths: Assets files, project/solution files or directories
            collate_all: Emit direct dependencies as well as transitive ones
            name_filter: Only emit identifiers matching this pattern
            restore: Run a restore on each path before reading

        Raises:
            AssetsFileError: If a path yields no readable assets file
            DotNetRunError: If a requested restore fails
        """
        project_assets = []
        for path in paths:
            if restore and self.dotnet_runner is not None:
                self.dotnet_runner.restore(path)

            for assets_file in self.extractor.locate(path):
                project_assets.append(self.extractor.read(assets_file))

        return self.run(project_assets, collate_all=collate_all, name_filter=name_filter)

    def run(
        self,
        project_assets: List[ProjectAssets],
        collate_all: bool = False,
        name_filter: Optional[re.Pattern] = None,
    ) -> Projects:
        """Analyse already-read projects."""
        result = Projects(len(project_assets))

        for assets in project_assets:
            project = Project(assets.name, len(assets.frameworks))
            for framework_assets in assets.frameworks:
                project.add(self.find_framework_dependencies(framework_assets, collate_all, name_filter))

            if not project.has_children:
                self.logger.info(f"No dependencies to report for project {assets.name}")

            result.add(project)

        return result

    def find_framework_dependencies(
        self,
        framework_assets: TargetFrameworkAssets,
        collate_all: bool = False,
        name_filter: Optional[re.Pattern] = None,
    ) -> Framework:
        """Walk and classify one framework's catalog."""
        records = self.walker.walk(framework_assets.catalog)
        classified = self.classifier.classify(records, framework_assets.catalog, framework_assets.frontier)
        selected = filter_dependencies(classified, collate_all, name_filter)

        self.logger.debug(
            f"{framework_assets.identifier}: {len(selected)} of {len(classified)} dependencies selected"
        )
        return Framework(framework_assets.identifier, selected, capacity=len(selected))
