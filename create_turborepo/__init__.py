"""create-turborepo-template - Scaffold a new Turborepo project.

This package provides a Python CLI application that clones the Turborepo
template, wires in optional add-ons, installs dependencies and initializes git.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "create-turborepo-template"
TEMPLATE_REPO = "https://github.com/Lynsoft/turborepo-template.git"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "TEMPLATE_REPO",
]
