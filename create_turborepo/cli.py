"""CLI interface for create-turborepo-template.

This module provides the Typer-based command-line interface. Missing inputs
are collected interactively; every failure is reported and turned into a
non-zero exit status here.
"""

from typing import Annotated

import typer

from create_turborepo import SCRIPT_NAME
from create_turborepo.config.manager import ConfigManager
from create_turborepo.integrations.package_manager import PackageManager
from create_turborepo.scaffold import (
    CreateProjectOptions,
    create_project,
    get_addons,
    get_package_manager,
    get_project_name,
)
from create_turborepo.utils.console import print_error, print_info, show_banner, show_version
from create_turborepo.utils.errors import CreateTurborepoError, ExitCode
from create_turborepo.utils.logging import setup_logging
from create_turborepo.validation import validate_project_name

app = typer.Typer(
    name=SCRIPT_NAME,
    help="Create a new project using the Turborepo template",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.command()
def main(
    project_name: Annotated[
        str | None,
        typer.Argument(help="Name of the project"),
    ] = None,
    package_manager: Annotated[
        PackageManager | None,
        typer.Option(
            "--package-manager",
            "-p",
            help="Package manager to use (pnpm, npm, yarn, bun)",
        ),
    ] = None,
    skip_install: Annotated[
        bool,
        typer.Option("--skip-install", help="Skip installing dependencies"),
    ] = False,
    skip_git: Annotated[
        bool,
        typer.Option("--skip-git", help="Skip git initialization"),
    ] = False,
    addons: Annotated[
        str | None,
        typer.Option(
            "--addons",
            "-a",
            help="Comma-separated add-ons to include (e.g. expo)",
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option("--config", help="Show current configuration and exit"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Create a new project using the Turborepo template."""
    setup_logging()

    try:
        show_banner()

        config = ConfigManager()
        settings = config.load()

        if show_config:
            config.show()
            raise typer.Exit()

        name = get_project_name(project_name)
        validate_project_name(name)

        selected_pm = get_package_manager(
            package_manager, default=settings.get_default_package_manager()
        )
        selected_addons = get_addons(addons)

        create_project(
            CreateProjectOptions(
                project_name=name,
                package_manager=selected_pm,
                skip_install=skip_install,
                skip_git=skip_git,
                addons=selected_addons,
                template_repo=settings.template_repo,
                clone_depth=settings.clone_depth,
            )
        )

    except CreateTurborepoError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


__all__ = ["app", "main", "version_callback"]
