"""Shared pytest fixtures for create-turborepo-template tests."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample values."""
    config_file = tmp_path / ".create-turborepo-config"
    config_file.write_text(
        """# create-turborepo-template configuration
TEMPLATE_REPO="https://example.com/custom-template.git"
DEFAULT_PACKAGE_MANAGER="npm"
CLONE_DEPTH="5"
"""
    )
    return config_file


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for git and package manager commands."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A scaffolded project root containing the template's turbo.json and biome.json."""
    root = tmp_path / "my-app"
    root.mkdir()
    (root / "turbo.json").write_text(
        json.dumps(
            {
                "tasks": {
                    "build": {
                        "outputs": [".next/**", "!.next/cache/**", "dist/**"],
                    },
                },
            }
        )
    )
    (root / "biome.json").write_text(
        json.dumps(
            {
                "files": {
                    "includes": [
                        "apps/**/*.{js,jsx,ts,tsx,json,jsonc}",
                        "packages/**/*.{js,jsx,ts,tsx,json,jsonc}",
                        "*.{js,jsx,ts,tsx,json,jsonc}",
                    ],
                },
            }
        )
    )
    return root


@pytest.fixture
def tools_available():
    """Pretend git and every package manager are installed."""
    with (
        patch("create_turborepo.scaffold.is_git_installed", return_value=True),
        patch("create_turborepo.scaffold.is_package_manager_installed", return_value=True),
    ):
        yield
