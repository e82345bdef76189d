"""Custom exceptions and exit codes for create-turborepo-template.

This module defines the exit codes and exception hierarchy used throughout
the application. Library code raises these exceptions; only the CLI layer
turns them into a process exit status.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    Every failure maps to a non-zero code so calling scripts or CI systems
    can detect that scaffolding did not complete.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_PROJECT_NAME = 2
    DIRECTORY_EXISTS = 3
    USER_CANCELLED = 4
    GIT_ERROR = 5
    INSTALL_ERROR = 6
    CONFIG_ERROR = 7


class CreateTurborepoError(Exception):
    """Base exception for create-turborepo-template errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class InvalidProjectNameError(CreateTurborepoError):
    """Project name is not a valid npm package name.

    Attributes:
        project_name: The rejected name
        problems: All errors and warnings reported by the validator
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.INVALID_PROJECT_NAME

    def __init__(
        self,
        project_name: str,
        problems: list[str] | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.project_name = project_name
        self.problems = list(problems or [])
        reason = self.problems[0] if self.problems else "Invalid package name"
        super().__init__(f"Invalid project name: {reason}", exit_code)


class DirectoryExistsError(CreateTurborepoError):
    """Target directory for the new project already exists."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.DIRECTORY_EXISTS


class UserCancelledError(CreateTurborepoError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - User dismisses an interactive prompt without answering
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


class GitOperationError(CreateTurborepoError):
    """Git operation failed.

    Raised when:
    - The 'git' command is not found in PATH
    - Cloning the template or an add-on repository fails
    - Repository initialization fails
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GIT_ERROR


class DependencyInstallError(CreateTurborepoError):
    """Package manager install failed or the package manager is missing."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.INSTALL_ERROR


class ConfigPatchError(CreateTurborepoError):
    """A project configuration file (turbo.json, biome.json) could not be patched.

    Attributes:
        path: Path of the file that failed to parse or write
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.CONFIG_ERROR

    def __init__(self, message: str, path: str = "", exit_code: ExitCode | None = None) -> None:
        super().__init__(message, exit_code)
        self.path = path


__all__ = [
    "ExitCode",
    "CreateTurborepoError",
    "InvalidProjectNameError",
    "DirectoryExistsError",
    "UserCancelledError",
    "GitOperationError",
    "DependencyInstallError",
    "ConfigPatchError",
]
