"""Tests for create_turborepo.utils.errors module."""

from create_turborepo.utils.errors import (
    ConfigPatchError,
    CreateTurborepoError,
    DependencyInstallError,
    DirectoryExistsError,
    ExitCode,
    GitOperationError,
    InvalidProjectNameError,
    UserCancelledError,
)


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self):
        assert ExitCode.SUCCESS == 0

    def test_failures_are_non_zero(self):
        """Every failure exit code is non-zero."""
        for code in ExitCode:
            if code is not ExitCode.SUCCESS:
                assert int(code) != 0

    def test_exit_code_is_int(self):
        """Exit codes should be usable as integers."""
        assert int(ExitCode.GENERAL_ERROR) == 1


class TestCreateTurborepoError:
    """Tests for base CreateTurborepoError exception."""

    def test_default_exit_code(self):
        """Base exception has GENERAL_ERROR exit code."""
        error = CreateTurborepoError("Test error")
        assert error.exit_code == ExitCode.GENERAL_ERROR

    def test_custom_exit_code(self):
        """Can override exit code in constructor."""
        error = CreateTurborepoError("Test error", exit_code=ExitCode.GIT_ERROR)
        assert error.exit_code == ExitCode.GIT_ERROR

    def test_message(self):
        """Exception message is accessible."""
        error = CreateTurborepoError("Test error message")
        assert str(error) == "Test error message"


class TestSubclassExitCodes:
    """Each subclass carries its own exit code."""

    def test_directory_exists(self):
        assert DirectoryExistsError("exists").exit_code == ExitCode.DIRECTORY_EXISTS

    def test_user_cancelled(self):
        assert UserCancelledError("cancelled").exit_code == ExitCode.USER_CANCELLED

    def test_git_operation(self):
        assert GitOperationError("clone failed").exit_code == ExitCode.GIT_ERROR

    def test_dependency_install(self):
        assert DependencyInstallError("install failed").exit_code == ExitCode.INSTALL_ERROR

    def test_config_patch(self):
        error = ConfigPatchError("bad json", path="/tmp/turbo.json")
        assert error.exit_code == ExitCode.CONFIG_ERROR
        assert error.path == "/tmp/turbo.json"

    def test_all_inherit_from_base(self):
        for cls in (
            InvalidProjectNameError,
            DirectoryExistsError,
            UserCancelledError,
            GitOperationError,
            DependencyInstallError,
            ConfigPatchError,
        ):
            assert issubclass(cls, CreateTurborepoError)


class TestInvalidProjectNameError:
    """Tests for InvalidProjectNameError."""

    def test_message_uses_first_problem(self):
        error = InvalidProjectNameError(".bad", ["name cannot start with a period", "other"])
        assert str(error) == "Invalid project name: name cannot start with a period"
        assert error.project_name == ".bad"
        assert error.exit_code == ExitCode.INVALID_PROJECT_NAME

    def test_message_without_problems(self):
        error = InvalidProjectNameError("bad")
        assert str(error) == "Invalid project name: Invalid package name"
