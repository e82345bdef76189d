"""External tool integrations for create-turborepo-template.

This package contains:
- git: Clone, history removal and repository initialization
- package_manager: Dependency installation via pnpm, npm, yarn or bun
"""

from create_turborepo.integrations.git import (
    clone_repository,
    init_repository,
    is_git_installed,
    remove_git_dir,
)
from create_turborepo.integrations.package_manager import (
    DEFAULT_PACKAGE_MANAGER,
    PackageManager,
    install_dependencies,
    is_package_manager_installed,
)

__all__ = [
    # Git
    "clone_repository",
    "init_repository",
    "is_git_installed",
    "remove_git_dir",
    # Package managers
    "DEFAULT_PACKAGE_MANAGER",
    "PackageManager",
    "install_dependencies",
    "is_package_manager_installed",
]
