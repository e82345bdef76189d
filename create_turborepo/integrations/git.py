"""Git operations for create-turborepo-template.

This module wraps the handful of git commands the scaffolder needs:
shallow clones of the template and add-on repositories, removal of the
cloned history, and initialization of a fresh repository.
"""

import shlex
import shutil
import subprocess
from pathlib import Path

from create_turborepo.utils.errors import GitOperationError
from create_turborepo.utils.logging import log_command, log_message


def is_git_installed() -> bool:
    """Check if the git executable is available in PATH."""
    return shutil.which("git") is not None


def _run_git(args: list[str], cwd: Path | None = None) -> None:
    """Run a git command with inherited stdio so progress stays visible.

    Raises:
        GitOperationError: If git is missing or exits non-zero
    """
    command = ["git", *args]
    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd is not None else None,
        )
    except FileNotFoundError as e:
        log_message(f"git executable not found while running: {shlex.join(command)}")
        raise GitOperationError("git is not installed or not in PATH") from e

    log_command(command, result.returncode)
    if result.returncode != 0:
        raise GitOperationError(
            f"Command failed with exit code {result.returncode}: {shlex.join(command)}"
        )


def clone_repository(repo: str, target: Path, depth: int = 1) -> None:
    """Shallow-clone a repository into the target directory.

    Args:
        repo: Repository URL
        target: Directory to clone into (must not exist)
        depth: History depth passed to ``git clone --depth``

    Raises:
        GitOperationError: If the clone fails
    """
    args = ["clone"]
    if depth > 0:
        args += ["--depth", str(depth)]
    args += [repo, str(target)]
    _run_git(args)


def remove_git_dir(path: Path) -> None:
    """Remove the .git directory inside path, if present."""
    git_dir = path / ".git"
    shutil.rmtree(git_dir, ignore_errors=True)
    log_message(f"Removed {git_dir}")


def init_repository(path: Path) -> None:
    """Initialize a new git repository in path.

    Raises:
        GitOperationError: If ``git init`` fails
    """
    _run_git(["init"], cwd=path)


__all__ = [
    "is_git_installed",
    "clone_repository",
    "remove_git_dir",
    "init_repository",
]
