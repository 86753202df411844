"""
Runner for the .NET restore tooling.

Restoring a project writes the assets file the reader consumes. Output is
forwarded to logging: stdout at DEBUG, stderr at ERROR.
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from transdep.utils.exceptions import DotNetRunError


class DotNetRunner:
    """Runs ``dotnet`` commands for a project or solution."""

    def __init__(self, executable: str = "dotnet", timeout: int = 300):
        self.executable = executable
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def restore(self, path: Path) -> None:
        """
        Restore ``path`` so that its assets files exist.

        Args:
            path: Project, solution or directory to restore

        Raises:
            DotNetRunError: If the tool is missing, times out or fails
        """
        working_directory = path if path.is_dir() else path.parent
        self.run(["restore", str(path)], working_directory)

    def run(self, arguments: List[str], working_directory: Path) -> None:
        command = [self.executable, *arguments]
        self.logger.info(f"Running {' '.join(command)} in {working_directory}")

        try:
            result = subprocess.run(
                command,
                cwd=working_directory,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise DotNetRunError(
                f"{self.executable} was not found",
                path=str(working_directory),
                original_exception=e,
            )
        except subprocess.TimeoutExpired as e:
            raise DotNetRunError(
                f"{self.executable} timed out after {self.timeout}s",
                path=str(working_directory),
                original_exception=e,
            )

        for line in (result.stdout or "").splitlines():
            self.logger.debug(line)
        for line in (result.stderr or "").splitlines():
            self.logger.error(line)

        if result.returncode != 0:
            raise DotNetRunError(
                f"{self.executable} {arguments[0]} failed",
                path=str(working_directory),
                return_code=result.returncode,
            )
