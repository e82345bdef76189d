"""Rich-based console output utilities.

This module provides the colored terminal output used for progress,
warnings and the final project summary.
"""

from rich.console import Console
from rich.theme import Theme

from create_turborepo import __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "highlight": "bold white",
    }
)

# Global console instances
console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    """Print error message in red."""
    from create_turborepo.utils.logging import log_message

    console_err.print(f"[error]✖[/error] [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green."""
    from create_turborepo.utils.logging import log_message

    console.print(f"[success]✓[/success] [green]{message}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    from create_turborepo.utils.logging import log_message

    console_err.print(f"[warning]⚠[/warning] [yellow]{message}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in blue/cyan."""
    from create_turborepo.utils.logging import log_message

    console.print(f"[info]ℹ[/info] [cyan]{message}[/cyan]")
    log_message(f"INFO: {message}")


def print_header(title: str) -> None:
    """Print section header in magenta."""
    console.print()
    console.print(f"[header]{title}[/header]")
    console.print()


def show_banner() -> None:
    """Display the start-up banner."""
    console.print()
    console.print("[bold cyan]🚀 Create Turborepo Template[/bold cyan]")
    console.print()


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]create-turborepo-template[/bold] {__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "show_banner",
    "show_version",
]
