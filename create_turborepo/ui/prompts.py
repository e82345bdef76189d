"""Interactive prompts for create-turborepo-template.

This module provides Questionary-based user input prompts with
consistent styling and error handling.
"""

from collections.abc import Callable, Sequence
from typing import Any

import questionary
from questionary import Choice, Style

from create_turborepo.utils.errors import UserCancelledError
from create_turborepo.utils.logging import log_message

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def prompt_input(
    message: str,
    default: str = "",
    *,
    validate: Callable[[str], bool | str] | None = None,
) -> str:
    """Prompt for text input.

    Args:
        message: Prompt message
        default: Default value
        validate: Optional validation function returning True or an error string

    Returns:
        User input string

    Raises:
        UserCancelledError: If user presses Ctrl+C or leaves the answer empty
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            validate=validate,
            style=custom_style,
        ).ask()

        if not result:
            raise UserCancelledError("Project creation cancelled")

        log_message(f"User input: {result[:50]}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("Project creation cancelled") from None


def prompt_select(
    message: str,
    choices: Sequence[str | Choice],
    default: str | None = None,
) -> Any:
    """Prompt for single selection from list.

    Args:
        message: Prompt message
        choices: Plain strings or questionary Choices (title shown, value returned)
        default: Value of the choice selected initially

    Returns:
        Value of the selected choice

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt select: {message}")

    try:
        result = questionary.select(
            message,
            choices=list(choices),
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("Project creation cancelled")

        log_message(f"User selected: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("Project creation cancelled") from None


def prompt_checkbox(
    message: str,
    choices: Sequence[str | Choice],
) -> list[Any]:
    """Prompt for multiple selections from list.

    Returns:
        List of selected values (possibly empty)

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt checkbox: {message}")

    try:
        result = questionary.checkbox(
            message,
            choices=list(choices),
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("Project creation cancelled")

        log_message(f"User selected: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("Project creation cancelled") from None


__all__ = [
    "custom_style",
    "prompt_input",
    "prompt_select",
    "prompt_checkbox",
]
