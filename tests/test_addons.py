"""Tests for create_turborepo.addons module."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from create_turborepo.addons import (
    AVAILABLE_ADDONS,
    append_unique,
    install_addons,
    parse_addons,
    update_biome_config,
    update_turbo_config,
)
from create_turborepo.utils.errors import ConfigPatchError, ExitCode, GitOperationError

EXPO_OUTPUTS = ["android/app/build/**", "ios/build/**", ".expo/**"]
EXPO_INCLUDES = ["!.expo", "!android", "!ios"]


def _read(path: Path) -> dict:
    return json.loads(path.read_text())


class TestAvailableAddons:
    """Tests for the add-on registry."""

    def test_expo_addon(self):
        expo = AVAILABLE_ADDONS["expo"]

        assert expo.name == "Expo App"
        assert expo.repo == "https://github.com/Lynsoft/turborepo-template-apps-expo.git"
        assert expo.target_dir == "apps/mobile-expo"

    def test_registry_keys_match_addon_keys(self):
        for key, addon in AVAILABLE_ADDONS.items():
            assert addon.key == key


class TestParseAddons:
    """Tests for parse_addons function."""

    def test_single(self):
        assert parse_addons("expo") == ["expo"]

    def test_comma_separated(self):
        assert parse_addons("expo,other") == ["expo", "other"]

    def test_trims_whitespace(self):
        assert parse_addons("expo , other ") == ["expo", "other"]

    def test_drops_empty_entries(self):
        assert parse_addons(",expo,,") == ["expo"]
        assert parse_addons("") == []

    def test_repeated_keys_kept_once_in_order(self):
        assert parse_addons("expo,other,expo, other") == ["expo", "other"]


class TestAppendUnique:
    """Tests for append_unique function."""

    def test_appends_missing_values(self):
        assert append_unique(["a"], ["b", "c"]) == ["a", "b", "c"]

    def test_never_duplicates(self):
        items = append_unique(["a", "b"], ["b", "a", "c"])

        assert items == ["a", "b", "c"]

    def test_values_repeated_in_input_are_added_once(self):
        assert append_unique([], ["x", "x"]) == ["x"]

    def test_returns_same_list(self):
        items = ["a"]
        assert append_unique(items, ["b"]) is items


class TestInstallAddons:
    """Tests for install_addons function."""

    def test_no_addons_runs_nothing(self, mock_subprocess, tmp_path):
        assert install_addons(tmp_path, []) == []
        mock_subprocess.assert_not_called()

    def test_clones_into_target_dir(self, mock_subprocess, tmp_path):
        installed = install_addons(tmp_path, ["expo"])

        target = tmp_path / "apps/mobile-expo"
        mock_subprocess.assert_called_once_with(
            [
                "git",
                "clone",
                "--depth",
                "1",
                "https://github.com/Lynsoft/turborepo-template-apps-expo.git",
                str(target),
            ],
            cwd=None,
        )
        assert installed == [AVAILABLE_ADDONS["expo"]]

    @patch("create_turborepo.addons.remove_git_dir")
    @patch("create_turborepo.addons.clone_repository")
    def test_removes_addon_git_dir(self, mock_clone, mock_remove, tmp_path):
        install_addons(tmp_path, ["expo"])

        mock_remove.assert_called_once_with(tmp_path / "apps/mobile-expo")

    @patch("create_turborepo.addons.print_warning")
    def test_warns_about_unknown_addons(self, mock_warning, mock_subprocess, tmp_path):
        installed = install_addons(tmp_path, ["unknown-addon"])

        assert installed == []
        mock_warning.assert_called_once()
        assert "unknown-addon" in mock_warning.call_args[0][0]
        mock_subprocess.assert_not_called()

    @patch("create_turborepo.addons.print_warning")
    def test_skips_existing_target(self, mock_warning, mock_subprocess, tmp_path):
        (tmp_path / "apps/mobile-expo").mkdir(parents=True)

        installed = install_addons(tmp_path, ["expo"])

        assert installed == []
        mock_warning.assert_called_once()
        mock_subprocess.assert_not_called()

    @patch("create_turborepo.addons.print_warning")
    def test_repeated_key_cloned_once_without_warning(
        self, mock_warning, mock_subprocess, tmp_path
    ):
        installed = install_addons(tmp_path, ["expo", "expo"])

        assert installed == [AVAILABLE_ADDONS["expo"]]
        mock_subprocess.assert_called_once()
        mock_warning.assert_not_called()

    def test_clone_failure_propagates(self, mock_subprocess, tmp_path):
        mock_subprocess.return_value = MagicMock(returncode=128)

        with pytest.raises(GitOperationError):
            install_addons(tmp_path, ["expo"])


class TestUpdateTurboConfig:
    """Tests for update_turbo_config function."""

    def test_no_addons_leaves_file_untouched(self, project_dir):
        before = (project_dir / "turbo.json").read_text()

        update_turbo_config(project_dir, [])

        assert (project_dir / "turbo.json").read_text() == before

    @patch("create_turborepo.addons.print_warning")
    def test_missing_file_warns(self, mock_warning, tmp_path):
        update_turbo_config(tmp_path, ["expo"])

        mock_warning.assert_called_once()
        assert not (tmp_path / "turbo.json").exists()

    def test_adds_expo_outputs(self, project_dir):
        update_turbo_config(project_dir, ["expo"])

        outputs = _read(project_dir / "turbo.json")["tasks"]["build"]["outputs"]
        assert outputs == [".next/**", "!.next/cache/**", "dist/**", *EXPO_OUTPUTS]

    def test_does_not_duplicate_outputs(self, project_dir):
        config_path = project_dir / "turbo.json"
        config_path.write_text(
            json.dumps({"tasks": {"build": {"outputs": ["dist/**", *EXPO_OUTPUTS]}}})
        )

        update_turbo_config(project_dir, ["expo"])
        update_turbo_config(project_dir, ["expo"])

        outputs = _read(config_path)["tasks"]["build"]["outputs"]
        for entry in EXPO_OUTPUTS:
            assert outputs.count(entry) == 1

    def test_handles_config_without_tasks(self, project_dir):
        (project_dir / "turbo.json").write_text("{}")

        update_turbo_config(project_dir, ["expo"])

        config = _read(project_dir / "turbo.json")
        assert config["tasks"]["build"]["outputs"] == EXPO_OUTPUTS

    def test_preserves_other_keys(self, project_dir):
        (project_dir / "turbo.json").write_text(
            json.dumps({"$schema": "https://turbo.build/schema.json", "tasks": {"lint": {}}})
        )

        update_turbo_config(project_dir, ["expo"])

        config = _read(project_dir / "turbo.json")
        assert config["$schema"] == "https://turbo.build/schema.json"
        assert config["tasks"]["lint"] == {}

    def test_unknown_addon_adds_nothing(self, project_dir):
        update_turbo_config(project_dir, ["unknown"])

        outputs = _read(project_dir / "turbo.json")["tasks"]["build"]["outputs"]
        assert outputs == [".next/**", "!.next/cache/**", "dist/**"]

    def test_invalid_json_raises(self, project_dir):
        (project_dir / "turbo.json").write_text("invalid json")

        with pytest.raises(ConfigPatchError, match="turbo.json"):
            update_turbo_config(project_dir, ["expo"])

    def test_written_with_trailing_newline(self, project_dir):
        update_turbo_config(project_dir, ["expo"])

        assert (project_dir / "turbo.json").read_text().endswith("}\n")


class TestUpdateBiomeConfig:
    """Tests for update_biome_config function."""

    def test_no_addons_leaves_file_untouched(self, project_dir):
        before = (project_dir / "biome.json").read_text()

        update_biome_config(project_dir, [])

        assert (project_dir / "biome.json").read_text() == before

    @patch("create_turborepo.addons.print_warning")
    def test_missing_file_warns(self, mock_warning, tmp_path):
        update_biome_config(tmp_path, ["expo"])

        mock_warning.assert_called_once()
        assert not (tmp_path / "biome.json").exists()

    def test_adds_expo_exclusions(self, project_dir):
        update_biome_config(project_dir, ["expo"])

        includes = _read(project_dir / "biome.json")["files"]["includes"]
        assert includes[-3:] == EXPO_INCLUDES
        assert len(includes) == 6

    def test_does_not_duplicate_exclusions(self, project_dir):
        config_path = project_dir / "biome.json"
        config_path.write_text(json.dumps({"files": {"includes": ["*.ts", *EXPO_INCLUDES]}}))

        update_biome_config(project_dir, ["expo"])

        includes = _read(config_path)["files"]["includes"]
        assert includes == ["*.ts", *EXPO_INCLUDES]

    def test_handles_config_without_files(self, project_dir):
        (project_dir / "biome.json").write_text("{}")

        update_biome_config(project_dir, ["expo"])

        assert _read(project_dir / "biome.json")["files"]["includes"] == EXPO_INCLUDES

    def test_invalid_json_raises(self, project_dir):
        (project_dir / "biome.json").write_text("invalid json")

        with pytest.raises(ConfigPatchError, match="biome.json"):
            update_biome_config(project_dir, ["expo"])

    def test_non_object_json_raises(self, project_dir):
        (project_dir / "biome.json").write_text("[]")

        with pytest.raises(ConfigPatchError):
            update_biome_config(project_dir, ["expo"])

    def test_invalid_utf8_raises(self, project_dir):
        (project_dir / "biome.json").write_bytes(b'{"files": {"x": "\xff\xfe"}}')

        with pytest.raises(ConfigPatchError, match="biome.json"):
            update_biome_config(project_dir, ["expo"])

    def test_non_ascii_text_preserved(self, project_dir):
        config_path = project_dir / "biome.json"
        config_path.write_text(
            json.dumps({"name": "café", "files": {"includes": ["src/**"]}}, ensure_ascii=False),
            encoding="utf-8",
        )

        update_biome_config(project_dir, ["expo"])

        content = config_path.read_text(encoding="utf-8")
        assert '"name": "café"' in content
        assert "\\u00e9" not in content

    def test_non_list_includes_raises_and_keeps_file(self, project_dir):
        config_path = project_dir / "biome.json"
        original = json.dumps({"files": {"includes": "src/**"}})
        config_path.write_text(original)

        with pytest.raises(ConfigPatchError, match="files.includes"):
            update_biome_config(project_dir, ["expo"])

        assert config_path.read_text() == original


class TestConfigFileErrors:
    """Tests for read, write and shape errors while patching turbo.json."""

    def test_invalid_utf8_raises(self, project_dir):
        (project_dir / "turbo.json").write_bytes(b'{"tasks": {"x": "\xff\xfe"}}')

        with pytest.raises(ConfigPatchError, match="turbo.json") as exc_info:
            update_turbo_config(project_dir, ["expo"])

        assert exc_info.value.exit_code == ExitCode.CONFIG_ERROR

    def test_unreadable_file_raises(self, project_dir):
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigPatchError, match="Failed to read turbo.json"):
                update_turbo_config(project_dir, ["expo"])

    def test_unwritable_file_raises(self, project_dir):
        with patch.object(Path, "write_text", side_effect=OSError("read-only file system")):
            with pytest.raises(ConfigPatchError, match="Failed to write turbo.json"):
                update_turbo_config(project_dir, ["expo"])

    @pytest.mark.parametrize(
        "config, dotted",
        [
            ({"tasks": []}, "tasks"),
            ({"tasks": {"build": "yes"}}, "tasks.build"),
            ({"tasks": {"build": {"outputs": "dist/**"}}}, "tasks.build.outputs"),
        ],
    )
    def test_wrong_type_raises_instead_of_replacing(self, project_dir, config, dotted):
        config_path = project_dir / "turbo.json"
        config_path.write_text(json.dumps(config))

        with pytest.raises(ConfigPatchError, match=f"Expected {dotted} in turbo.json"):
            update_turbo_config(project_dir, ["expo"])

        assert json.loads(config_path.read_text()) == config

    def test_non_ascii_text_preserved(self, project_dir):
        config_path = project_dir / "turbo.json"
        config_path.write_text(
            '{"$comment": "naïve ✓", "tasks": {"build": {"outputs": []}}}', encoding="utf-8"
        )

        update_turbo_config(project_dir, ["expo"])

        config = json.loads(config_path.read_text(encoding="utf-8"))
        assert config["$comment"] == "naïve ✓"
        assert "naïve ✓" in config_path.read_text(encoding="utf-8")
