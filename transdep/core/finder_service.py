"""
Finder service implementation for transdep.

"""
import logging
import re
from pathlib import Path
from typing import Optional

import yaml
from rich.markup import escape

from transdep.core.config_manager import ConfigManager
from transdep.core.finder import TransitiveDependencyFinder
from transdep.core.statistics import StatisticsCalculator
from transdep.extractors.assets import AssetsReader
from transdep.extractors.dotnet import DotNetRunner
from transdep.output.projects import Projects
from transdep.output.writer import DependencyWriter
from transdep.rich_utils.ui_helpers import configure_logging, get_console
from transdep.utils.exceptions import TransdepError


class FinderService:
    """Loads configuration, runs the finder and reports the results."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.statistics_calculator = StatisticsCalculator()
        self.console = get_console()
        self.logger = logging.getLogger(self.__class__.__name__)

    def initialize(
        self,
        config_path: Optional[str],
        collate_all: bool,
        name_filter: Optional[str],
        output: Optional[str],
        restore: bool,
        verbose: bool,
    ) -> dict:
        """Load and merge configuration, then set up logging."""
        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.merge_config_and_args(
            config,
            collate_all=collate_all,
            name_filter=name_filter,
            output=output,
            restore=restore,
            verbose=verbose,
        )

        logging_config = config.get("logging", {})
        configure_logging(logging_config.get("level", "WARNING"), logging_config.get("file"))
        return config

    def build_finder(self, config: dict) -> TransitiveDependencyFinder:
        analysis_config = config.get("analysis", {})
        dotnet_config = config.get("dotnet", {})

        extractor = AssetsReader(
            file_name=config.get("assets", {}).get("file_name", "project.assets.json"),
            ignored_references=analysis_config.get("ignored_references", []),
        )
        dotnet_runner = DotNetRunner(
            executable=dotnet_config.get("executable", "dotnet"),
            timeout=dotnet_config.get("timeout", 300),
        )
        return TransitiveDependencyFinder(extractor, dotnet_runner=dotnet_runner)

    @staticmethod
    def compile_filter(pattern: Optional[str]) -> Optional[re.Pattern]:
        if not pattern:
            return None
        try:
            return re.compile(pattern)
        except re.error as e:
            raise TransdepError(
                "Invalid dependency filter",
                original_exception=e,
                suggested_action="Pass a valid regular expression to --filter",
            )

    def execute_find(
        self,
        path: str = ".",
        collate_all: bool = False,
        name_filter: Optional[str] = None,
        config_path: Optional[str] = None,
        output: Optional[str] = None,
        restore: bool = False,
        verbose: bool = False,
    ) -> int:
        """
        Run a complete find and print the results.

        Returns:
            Process exit code: 0 on success, 1 on failure, 130 when interrupted
        """
        try:
            config = self.initialize(config_path, collate_all, name_filter, output, restore, verbose)
            analysis_config = config.get("analysis", {})

            finder = self.build_finder(config)
            projects = finder.find(
                [Path(path)],
                collate_all=bool(analysis_config.get("collate_all", False)),
                name_filter=self.compile_filter(analysis_config.get("filter")),
                restore=bool(config.get("dotnet", {}).get("restore", False)),
            )

            self.report(projects, config)
            return 0
        except KeyboardInterrupt:
            self.console.print("\n⚠️ Interrupted by user", style="bold yellow")
            return 130
        except (TransdepError, FileNotFoundError, yaml.YAMLError) as e:
            self.logger.debug("Find failed", exc_info=True)
            self.console.print(f"\n❌ Find failed: {escape(str(e))}", style="bold red")
            return 1

    def report(self, projects: Projects, config: dict) -> None:
        writer = DependencyWriter(self.console)
        writer.write(projects)

        report_file = config.get("output", {}).get("report_file")
        if report_file:
            writer.save(projects, report_file)
            self.console.print(f"📊 Report saved to {report_file}", style="dim")

        statistics = self.statistics_calculator.calculate(projects)
        self.console.print(
            f"{statistics['projects']} project(s), {statistics['frameworks']} framework(s), "
            f"{statistics['transitive_dependencies']} transitive and "
            f"{statistics['direct_dependencies']} direct dependencies",
            style="dim",
        )
