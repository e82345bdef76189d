"""JavaScript package manager integration.

Supports the package managers the template works with and runs the
dependency install step inside the newly created project.
"""

import shlex
import shutil
import subprocess
from enum import Enum
from pathlib import Path

from create_turborepo.utils.errors import DependencyInstallError
from create_turborepo.utils.logging import log_command, log_message


class PackageManager(str, Enum):
    """Supported package managers, in prompt order."""

    PNPM = "pnpm"
    NPM = "npm"
    YARN = "yarn"
    BUN = "bun"

    @property
    def display_name(self) -> str:
        """Label shown in the interactive selection prompt."""
        if self is PackageManager.PNPM:
            return "pnpm (recommended)"
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "PackageManager | None":
        """Parse a package manager name, returning None when unknown."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


DEFAULT_PACKAGE_MANAGER = PackageManager.PNPM


def is_package_manager_installed(package_manager: PackageManager) -> bool:
    """Check if the package manager executable is available in PATH."""
    return shutil.which(package_manager.value) is not None


def install_dependencies(package_manager: PackageManager, cwd: Path) -> None:
    """Run ``<package-manager> install`` in cwd with inherited stdio.

    Raises:
        DependencyInstallError: If the executable is missing or exits non-zero
    """
    command = [package_manager.value, "install"]
    try:
        result = subprocess.run(command, cwd=str(cwd))
    except FileNotFoundError as e:
        log_message(f"{package_manager.value} executable not found")
        raise DependencyInstallError(
            f"{package_manager.value} is not installed or not in PATH"
        ) from e

    log_command(command, result.returncode)
    if result.returncode != 0:
        raise DependencyInstallError(
            f"Command failed with exit code {result.returncode}: {shlex.join(command)}"
        )


__all__ = [
    "PackageManager",
    "DEFAULT_PACKAGE_MANAGER",
    "is_package_manager_installed",
    "install_dependencies",
]
