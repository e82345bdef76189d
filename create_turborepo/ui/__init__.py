"""UI components for create-turborepo-template.

This package contains:
- prompts: Questionary-based user input prompts
"""

from create_turborepo.ui.prompts import (
    custom_style,
    prompt_checkbox,
    prompt_input,
    prompt_select,
)

__all__ = [
    "custom_style",
    "prompt_checkbox",
    "prompt_input",
    "prompt_select",
]
