"""Project creation workflow.

Collects the remaining inputs interactively and runs the scaffolding steps
in order: clone template, add-ons, config patches, dependency install,
git init, summary. Every step finishes before the next one starts; the
first failure raises and nothing is rolled back.
"""

from dataclasses import dataclass, field
from pathlib import Path

from questionary import Choice

from create_turborepo import TEMPLATE_REPO
from create_turborepo.addons import (
    AVAILABLE_ADDONS,
    Addon,
    install_addons,
    parse_addons,
    update_biome_config,
    update_turbo_config,
)
from create_turborepo.integrations.git import (
    clone_repository,
    init_repository,
    is_git_installed,
    remove_git_dir,
)
from create_turborepo.integrations.package_manager import (
    PackageManager,
    install_dependencies,
    is_package_manager_installed,
)
from create_turborepo.ui.prompts import prompt_checkbox, prompt_input, prompt_select
from create_turborepo.utils.console import console, print_header, print_info, print_success
from create_turborepo.utils.errors import (
    DependencyInstallError,
    DirectoryExistsError,
    GitOperationError,
)
from create_turborepo.utils.logging import log_message
from create_turborepo.validation import project_name_validator

DEFAULT_PROJECT_NAME = "my-turborepo-app"

TEMPLATE_FEATURES: list[tuple[str, list[str]]] = [
    ("🚀 Modern Stack", ["TypeScript, React, Tailwind CSS"]),
    ("⚡ Fast Tooling", ["Biome (linting + formatting)", "Turborepo (build orchestration)"]),
    (
        "🔧 Developer Experience",
        ["Lefthook git hooks", "Conventional commits enforced", "Semantic-release automation"],
    ),
    ("🐳 Docker Ready", ["PostgreSQL + Redis included", "Multi-stage builds (dev + prod)"]),
    (
        "📦 Shared Packages",
        ["@repo/ui - React components", "@repo/typescript-config - TS configs"],
    ),
    ("🤖 CI/CD", ["GitHub Actions configured", "Automated releases on push"]),
]


@dataclass
class CreateProjectOptions:
    """Inputs for a single project creation run."""

    project_name: str
    package_manager: PackageManager
    skip_install: bool = False
    skip_git: bool = False
    addons: list[str] = field(default_factory=list)
    template_repo: str = TEMPLATE_REPO
    clone_depth: int = 1
    cwd: Path | None = None

    @property
    def target_dir(self) -> Path:
        """Absolute path of the directory the project is created in."""
        return ((self.cwd or Path.cwd()) / self.project_name).resolve()


def get_project_name(project_name_arg: str | None = None) -> str:
    """Return the project name, prompting when it was not passed.

    Raises:
        UserCancelledError: If the prompt is cancelled
    """
    if project_name_arg:
        return project_name_arg

    return prompt_input(
        "What is your project named?",
        default=DEFAULT_PROJECT_NAME,
        validate=project_name_validator,
    )


def get_package_manager(
    package_manager_option: PackageManager | None = None,
    default: PackageManager | None = None,
) -> PackageManager:
    """Return the package manager from the option, config default, or a prompt.

    Raises:
        UserCancelledError: If the prompt is cancelled
    """
    if package_manager_option is not None:
        return package_manager_option
    if default is not None:
        log_message(f"Using configured package manager: {default.value}")
        return default

    choices = [Choice(title=pm.display_name, value=pm.value) for pm in PackageManager]
    selected = prompt_select(
        "Which package manager would you like to use?",
        choices,
        default=PackageManager.PNPM.value,
    )
    return PackageManager(selected)


def get_addons(addons_option: str | None = None) -> list[str]:
    """Return the add-on keys from the option, or prompt for them.

    Raises:
        UserCancelledError: If the prompt is cancelled
    """
    if addons_option is not None:
        return parse_addons(addons_option)

    choices = [
        Choice(title=f"{addon.name} - {addon.description}", value=addon.key)
        for addon in AVAILABLE_ADDONS.values()
    ]
    return list(prompt_checkbox("Which add-ons would you like to include?", choices))


def _check_tools(options: CreateProjectOptions) -> None:
    """Fail before touching the filesystem if a required tool is missing."""
    if not is_git_installed():
        raise GitOperationError("git is not installed or not in PATH")
    if not options.skip_install and not is_package_manager_installed(options.package_manager):
        raise DependencyInstallError(
            f"{options.package_manager.value} is not installed or not in PATH"
        )


def create_project(options: CreateProjectOptions) -> Path:
    """Create a new project from the template.

    Args:
        options: Project name, package manager, flags and add-ons

    Returns:
        Path of the created project

    Raises:
        DirectoryExistsError: If the target directory already exists
        GitOperationError: If cloning or git init fails
        DependencyInstallError: If installing dependencies fails
        ConfigPatchError: If turbo.json or biome.json cannot be parsed
    """
    target_dir = options.target_dir

    if target_dir.exists():
        raise DirectoryExistsError(f"Directory {options.project_name} already exists")

    _check_tools(options)

    console.print(f"\n[info]📦 Creating project in[/info] [highlight]{target_dir}[/highlight]\n")

    print_info("Downloading template...")
    clone_repository(options.template_repo, target_dir, depth=options.clone_depth)
    remove_git_dir(target_dir)
    print_success("Template downloaded")

    installed = install_addons(target_dir, options.addons, depth=options.clone_depth)
    update_turbo_config(target_dir, options.addons)
    update_biome_config(target_dir, options.addons)

    if not options.skip_install:
        print_info(f"Installing dependencies with {options.package_manager.value}...")
        install_dependencies(options.package_manager, target_dir)
        print_success("Dependencies installed")

    if not options.skip_git:
        print_info("Initializing git repository...")
        init_repository(target_dir)
        print_success("Git initialized")

    print_summary(options, target_dir, installed)
    return target_dir


def print_summary(
    options: CreateProjectOptions,
    target_dir: Path,
    installed_addons: list[Addon],
) -> None:
    """Print the success message, the template features and next steps."""
    pm = options.package_manager.value

    console.print()
    console.print(
        f"[success]✨ Success! Created {options.project_name} at {target_dir}[/success]"
    )

    print_header("📦 What you got:")
    for title, items in TEMPLATE_FEATURES:
        console.print(f"  [bold]{title}[/bold]")
        for item in items:
            console.print(f"     • {item}")

    if installed_addons:
        console.print("  [bold]🧩 Add-ons[/bold]")
        for addon in installed_addons:
            console.print(f"     • {addon.name} ({addon.target_dir})")

    print_header("🎯 Get started:")
    console.print(f"  [bold]cd {options.project_name}[/bold]")
    if options.skip_install:
        console.print(f"  [bold]{pm} install[/bold]")
    console.print(f"  [bold]{pm} hooks:install[/bold] - Set up git hooks")
    console.print(f"  [bold]{pm} dev[/bold] - Start development")
    console.print()


__all__ = [
    "DEFAULT_PROJECT_NAME",
    "CreateProjectOptions",
    "create_project",
    "get_addons",
    "get_package_manager",
    "get_project_name",
    "print_summary",
]
