"""Configuration management for create-turborepo-template.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration

Configuration Format
====================
The configuration format is flat KEY=VALUE (environment variable style):

    TEMPLATE_REPO=https://github.com/Lynsoft/turborepo-template.git
    DEFAULT_PACKAGE_MANAGER=pnpm
    CLONE_DEPTH=1
"""

from create_turborepo.config.manager import ConfigManager
from create_turborepo.config.settings import CONFIG_FILE, Settings

__all__ = [
    "CONFIG_FILE",
    "ConfigManager",
    "Settings",
]
