"""Optional add-ons cloned into a new project.

An add-on is a separate repository (for example an Expo mobile app) that is
cloned into a subdirectory of the scaffolded monorepo. Add-ons also need to be
registered with the monorepo tooling: their build artifacts are declared as
Turborepo task outputs and their generated native folders are excluded from
Biome.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from create_turborepo.integrations.git import clone_repository, remove_git_dir
from create_turborepo.utils.console import print_info, print_success, print_warning
from create_turborepo.utils.errors import ConfigPatchError
from create_turborepo.utils.logging import log_message

TURBO_CONFIG_FILE = "turbo.json"
BIOME_CONFIG_FILE = "biome.json"


@dataclass(frozen=True)
class Addon:
    """An installable add-on.

    Attributes:
        key: Identifier used on the command line (``--addons expo``)
        name: Human-readable name
        repo: Repository URL cloned into the project
        target_dir: Destination relative to the project root
        description: One-line summary shown in the selection prompt
        turbo_outputs: Entries added to ``tasks.build.outputs`` in turbo.json
        biome_includes: Entries added to ``files.includes`` in biome.json
    """

    key: str
    name: str
    repo: str
    target_dir: str
    description: str = ""
    turbo_outputs: tuple[str, ...] = field(default_factory=tuple)
    biome_includes: tuple[str, ...] = field(default_factory=tuple)


AVAILABLE_ADDONS: dict[str, Addon] = {
    "expo": Addon(
        key="expo",
        name="Expo App",
        repo="https://github.com/Lynsoft/turborepo-template-apps-expo.git",
        target_dir="apps/mobile-expo",
        description="React Native mobile app powered by Expo",
        turbo_outputs=("android/app/build/**", "ios/build/**", ".expo/**"),
        biome_includes=("!.expo", "!android", "!ios"),
    ),
}


def parse_addons(value: str) -> list[str]:
    """Split a comma-separated add-on option into trimmed, unique keys.

    The first occurrence of a repeated key keeps its position.
    """
    keys = [part.strip() for part in value.split(",") if part.strip()]
    return list(dict.fromkeys(keys))


def append_unique(items: list[Any], values: tuple[str, ...] | list[str]) -> list[Any]:
    """Append each value to items unless it is already present.

    Existing entries and their order are left untouched.

    Returns:
        The same list, for chaining
    """
    for value in values:
        if value not in items:
            items.append(value)
    return items


def _known_addons(addons: list[str]) -> list[Addon]:
    return [AVAILABLE_ADDONS[key] for key in addons if key in AVAILABLE_ADDONS]


def install_addons(project_dir: Path, addons: list[str], depth: int = 1) -> list[Addon]:
    """Clone the selected add-ons into the project.

    Unknown keys and add-ons whose target directory already exists are
    skipped with a warning.

    Args:
        project_dir: Root of the scaffolded project
        addons: Add-on keys to install
        depth: History depth for the clones

    Returns:
        The add-ons that were installed

    Raises:
        GitOperationError: If cloning an add-on fails
    """
    installed: list[Addon] = []
    if not addons:
        return installed

    print_info("Installing add-ons...")

    for key in dict.fromkeys(addons):
        addon = AVAILABLE_ADDONS.get(key)
        if addon is None:
            valid = ", ".join(AVAILABLE_ADDONS)
            print_warning(f"Unknown add-on: {key} (available: {valid})")
            continue

        target = project_dir / addon.target_dir
        if target.exists():
            print_warning(f"Skipping {addon.name}: {addon.target_dir} already exists")
            continue

        print_info(f"Downloading {addon.name} into {addon.target_dir}...")
        clone_repository(addon.repo, target, depth=depth)
        remove_git_dir(target)
        print_success(f"{addon.name} added")
        installed.append(addon)

    return installed


def _load_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigPatchError(f"Failed to parse {path.name}: {e}", path=str(path)) from e
    except OSError as e:
        raise ConfigPatchError(f"Failed to read {path.name}: {e}", path=str(path)) from e
    if not isinstance(data, dict):
        raise ConfigPatchError(f"Expected a JSON object in {path.name}", path=str(path))
    return data


def _write_json(path: Path, data: dict[str, Any]) -> None:
    try:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigPatchError(f"Failed to write {path.name}: {e}", path=str(path)) from e


def _nested_list(path: Path, data: dict[str, Any], *keys: str) -> list[Any]:
    """Return the list at data[keys...], creating missing levels.

    Raises:
        ConfigPatchError: If an existing level has the wrong type
    """
    node = data
    for depth, key in enumerate(keys):
        expected = list if depth == len(keys) - 1 else dict
        if key not in node:
            node[key] = expected()
        child = node[key]
        if not isinstance(child, expected):
            dotted = ".".join(keys[: depth + 1])
            kind = "an array" if expected is list else "an object"
            raise ConfigPatchError(
                f"Expected {dotted} in {path.name} to be {kind}", path=str(path)
            )
        node = child
    return node


def update_turbo_config(project_dir: Path, addons: list[str]) -> None:
    """Register add-on build outputs in turbo.json.

    Raises:
        ConfigPatchError: If turbo.json cannot be read, parsed or written
    """
    if not addons:
        return

    config_path = project_dir / TURBO_CONFIG_FILE
    if not config_path.exists():
        print_warning(f"{TURBO_CONFIG_FILE} not found, skipping add-on outputs")
        return

    config = _load_json(config_path)
    outputs = _nested_list(config_path, config, "tasks", "build", "outputs")
    for addon in _known_addons(addons):
        append_unique(outputs, addon.turbo_outputs)

    _write_json(config_path, config)
    log_message(f"Updated {config_path} build outputs: {outputs}")
    print_success(f"Updated {TURBO_CONFIG_FILE}")


def update_biome_config(project_dir: Path, addons: list[str]) -> None:
    """Exclude add-on generated folders in biome.json.

    Raises:
        ConfigPatchError: If biome.json cannot be read, parsed or written
    """
    if not addons:
        return

    config_path = project_dir / BIOME_CONFIG_FILE
    if not config_path.exists():
        print_warning(f"{BIOME_CONFIG_FILE} not found, skipping add-on exclusions")
        return

    config = _load_json(config_path)
    includes = _nested_list(config_path, config, "files", "includes")
    for addon in _known_addons(addons):
        append_unique(includes, addon.biome_includes)

    _write_json(config_path, config)
    log_message(f"Updated {config_path} file includes: {includes}")
    print_success(f"Updated {BIOME_CONFIG_FILE}")


__all__ = [
    "Addon",
    "AVAILABLE_ADDONS",
    "BIOME_CONFIG_FILE",
    "TURBO_CONFIG_FILE",
    "append_unique",
    "install_addons",
    "parse_addons",
    "update_biome_config",
    "update_turbo_config",
]
