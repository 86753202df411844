"""Tests for console and JSON rendering."""

import io
import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from rich.console import Console

from transdep.output import Dependency, Framework, FrameworkIdentifier, Project, Projects
from transdep.output.writer import NO_DEPENDENCIES, DependencyWriter


@pytest.fixture
def console():
    return Console(record=True, width=200, file=io.StringIO())


@pytest.fixture
def projects():
    a = Dependency("Serilog", "3.1.1")
    b = Dependency("Microsoft.Extensions.Logging", "8.0.0")
    c = Dependency("System.Memory", "4.5.5")
    c.via.update({b, a})
    c.is_transitive = True

    project = Project("Web")
    project.add(Framework(FrameworkIdentifier.parse("net8.0"), [c, a]))

    result = Projects()
    result.add(project)
    return result


class TestDependencyWriter:
    """Test the DependencyWriter class."""

    def test_writes_tree(self, console, projects):
        DependencyWriter(console).write(projects)
        text = console.export_text()

        assert "Web" in text
        assert ".NETCoreApp v8.0" in text
        assert "Serilog v3.1.1" in text
        assert (
            "System.Memory v4.5.5 (transitive via Microsoft.Extensions.Logging v8.0.0, Serilog v3.1.1)" in text
        )
        assert text.index("Serilog v3.1.1") < text.index("System.Memory v4.5.5")

    def test_empty_projects(self, console):
        DependencyWriter(console).write(Projects())

        assert NO_DEPENDENCIES in console.export_text()

    def test_markup_in_names_is_escaped(self, console):
        dependency = Dependency("Odd[bold]Name", "1.0.0")
        project = Project("App")
        project.add(Framework(FrameworkIdentifier.parse("net8.0"), [dependency]))
        projects = Projects()
        projects.add(project)

        DependencyWriter(console).write(projects)

        assert "Odd[bold]Name v1.0.0" in console.export_text()

    def test_to_dict(self, console, projects):
        report = DependencyWriter(console).to_dict(projects)

        assert report == {
            "projects": [
                {
                    "name": "Web",
                    "frameworks": [
                        {
                            "framework": ".NETCoreApp,Version=v8.0",
                            "dependencies": [
                                {
                                    "identifier": "Serilog",
                                    "version": "3.1.1",
                                    "is_transitive": False,
                                    "via": [],
                                },
                                {
                                    "identifier": "System.Memory",
                                    "version": "4.5.5",
                                    "is_transitive": True,
                                    "via": ["Microsoft.Extensions.Logging v8.0.0", "Serilog v3.1.1"],
                                },
                            ],
                        }
                    ],
                }
            ]
        }

    def test_save(self, console, projects, tmp_path):
        report_file = tmp_path / "report.json"

        DependencyWriter(console).save(projects, str(report_file))

        assert json.loads(report_file.read_text()) == DependencyWriter(console).to_dict(projects)
