"""
Statistics calculation for transdep.

Handles calculation of result statistics with single responsibility for
statistics computation.
"""

from transdep.output.projects import Projects


class StatisticsCalculator:
    """Calculates summary statistics over the output model."""

    def calculate(self, projects: Projects) -> dict:
        """Count projects, frameworks and dependencies."""
        statistics = {
            "projects": 0,
            "frameworks": 0,
            "dependencies": 0,
            "transitive_dependencies": 0,
        }

        for project in projects.sorted_children:
            statistics["projects"] += 1
            for framework in project.sorted_children:
                statistics["frameworks"] += 1
                for dependency in framework.sorted_children:
                    statistics["dependencies"] += 1
                    if dependency.is_transitive:
                        statistics["transitive_dependencies"] += 1

        statistics["direct_dependencies"] = (
            statistics["dependencies"] - statistics["transitive_dependencies"]
        )
        return statistics
