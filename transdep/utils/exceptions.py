"""
Exception types for transdep.

Each exception carries:
- Clear error message
- Path of the file or project involved
- Suggested user action
- Original exception preserved for debugging

The classification engine itself never raises; these are raised by the
collaborators that locate and read assets files or run the restore tooling.
"""

from typing import Optional


class TransdepError(Exception):
    """
    Base exception for all transdep errors.

    Should be used for generic failures that don't fit other specific categories.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize TransdepError.

        Args:
            message: Human-readable error message
            path: File or project path the error relates to
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.path = path
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class AssetsFileError(TransdepError):
    """
    Raised when an assets file cannot be found or parsed.

    This typically indicates:
    - The project has not been restored yet
    - The file is truncated or not valid JSON
    - The file was written by an unsupported tool version
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            path=path,
            original_exception=original_exception,
            suggested_action="Run a restore for the project (or pass --restore) and retry",
        )


class DotNetRunError(TransdepError):
    """
    Raised when the restore tooling cannot be run or exits with an error.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        return_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.return_code = return_code

        suggested_action = "Check that the .NET SDK is installed and on PATH"
        if return_code is not None:
            suggested_action = f"Inspect the restore output above (exit code {return_code})"

        super().__init__(
            message=message,
            path=path,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class InvalidComparisonError(TransdepError, TypeError):
    """Raised when an output entity is ordered against an incompatible type."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f"Object must be of type {class_name}.")
