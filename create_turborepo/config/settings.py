"""Settings dataclass for create-turborepo-template configuration.

This module defines the Settings dataclass that holds all configuration
values and the mapping between config keys and attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from create_turborepo import TEMPLATE_REPO
from create_turborepo.integrations.package_manager import PackageManager
from create_turborepo.utils.logging import log_warning


@dataclass
class Settings:
    """Configuration settings for create-turborepo-template.

    All settings have sensible defaults and can be overridden from the
    configuration file (~/.create-turborepo-config) or the environment.

    Attributes:
        template_repo: Repository cloned as the project skeleton
        default_package_manager: Package manager used when none is passed
            on the command line (empty = prompt)
        clone_depth: History depth for template and add-on clones
            (0 = full clone)
    """

    template_repo: str = TEMPLATE_REPO
    default_package_manager: str = ""
    clone_depth: int = 1

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "TEMPLATE_REPO": "template_repo",
            "DEFAULT_PACKAGE_MANAGER": "default_package_manager",
            "CLONE_DEPTH": "clone_depth",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "TEMPLATE_REPO")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    def get_default_package_manager(self) -> PackageManager | None:
        """Get default package manager as enum, or None if not configured.

        Logs a warning if the configured value is invalid (non-empty but not
        a supported package manager).
        """
        if not self.default_package_manager:
            return None
        package_manager = PackageManager.from_string(self.default_package_manager)
        if package_manager is None:
            valid = ", ".join(pm.value for pm in PackageManager)
            log_warning(
                f"Invalid DEFAULT_PACKAGE_MANAGER value '{self.default_package_manager}', "
                f"ignoring. Valid options: {valid}"
            )
        return package_manager


# Default configuration file path
CONFIG_FILE = Path.home() / ".create-turborepo-config"
