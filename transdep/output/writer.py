"""
Console and JSON rendering of the output model.
"""

import json
import logging
from typing import Any, Dict, Iterable

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .dependency import Dependency
from .projects import Projects

NO_DEPENDENCIES = "No transitive dependencies found."


class DependencyWriter:
    """Writes projects -> frameworks -> dependencies as a tree."""

    def __init__(self, console: Console):
        self.console = console
        self.logger = logging.getLogger(self.__class__.__name__)

    def write(self, projects: Projects) -> None:
        if not projects.has_children:
            self.console.print(NO_DEPENDENCIES, style="bold")
            return

        for project in projects.sorted_children:
            tree = Tree(f"[bold]{escape(str(project))}[/]")
            for framework in project.sorted_children:
                branch = tree.add(f"[bold cyan]{escape(str(framework))}[/]")
                for dependency in framework.sorted_children:
                    branch.add(self._dependency_label(dependency))

            self.console.print(tree)
            self.console.print()

    @staticmethod
    def _dependency_label(dependency: Dependency) -> str:
        if not dependency.is_transitive:
            return f"[dim]{escape(str(dependency))}[/]"

        via = ", ".join(str(parent) for parent in sorted(dependency.via))
        return f"[bold yellow]{escape(str(dependency))}[/] [yellow](transitive via {escape(via)})[/]"

    def to_dict(self, projects: Projects) -> Dict[str, Any]:
        """JSON-serialisable report of the output model."""
        return {
            "projects": [
                {
                    "name": str(project),
                    "frameworks": [
                        {
                            "framework": str(framework.identifier),
                            "dependencies": self._dependencies_to_list(framework.sorted_children),
                        }
                        for framework in project.sorted_children
                    ],
                }
                for project in projects.sorted_children
            ]
        }

    @staticmethod
    def _dependencies_to_list(dependencies: Iterable[Dependency]) -> list:
        return [
            {
                "identifier": dependency.identifier,
                "version": str(dependency.version),
                "is_transitive": dependency.is_transitive,
                "via": [str(parent) for parent in sorted(dependency.via)],
            }
            for dependency in dependencies
        ]

    def save(self, projects: Projects, report_file: str) -> None:
        with open(report_file, "w") as fp:
            json.dump(self.to_dict(projects), fp, indent=4)
        self.logger.info(f"Report written to {report_file}")
