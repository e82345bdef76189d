"""Utility modules for create-turborepo-template.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from create_turborepo.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
    show_banner,
)
from create_turborepo.utils.errors import (
    ConfigPatchError,
    CreateTurborepoError,
    DependencyInstallError,
    DirectoryExistsError,
    ExitCode,
    GitOperationError,
    InvalidProjectNameError,
    UserCancelledError,
)
from create_turborepo.utils.logging import (
    log_command,
    log_message,
    log_warning,
    setup_logging,
)

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "show_banner",
    # Errors
    "ExitCode",
    "CreateTurborepoError",
    "InvalidProjectNameError",
    "DirectoryExistsError",
    "UserCancelledError",
    "GitOperationError",
    "DependencyInstallError",
    "ConfigPatchError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
    "log_warning",
]
