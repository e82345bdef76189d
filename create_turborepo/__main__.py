"""Entry point for running create_turborepo as a module.

This allows running the application with:
    python -m create_turborepo [OPTIONS] [PROJECT_NAME]
"""

from create_turborepo.cli import app

if __name__ == "__main__":
    app()
