"""Project name validation using npm package name rules.

A Turborepo project's root ``package.json`` carries the project name, so the
name must be acceptable to npm. The rules follow the ones enforced by the
``validate-npm-package-name`` package: errors make a name invalid for any
package, warnings make it invalid only for newly published packages.
"""

import re
from dataclasses import dataclass, field
from urllib.parse import quote

from create_turborepo.utils.errors import InvalidProjectNameError

MAX_NAME_LENGTH = 214

RESERVED_NAMES = frozenset({"node_modules", "favicon.ico"})

NODE_BUILTIN_MODULES = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

# Characters encodeURIComponent leaves untouched besides letters and digits
_URL_SAFE = "-_.!~*'()"
_SCOPED_NAME = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARS = re.compile(r"[~'!()*]")


@dataclass
class NameValidation:
    """Outcome of validating a package name.

    Attributes:
        valid_for_new_packages: No errors and no warnings
        valid_for_old_packages: No errors (warnings tolerated)
        errors: Problems that make the name unusable
        warnings: Problems that only block new packages
    """

    valid_for_new_packages: bool
    valid_for_old_packages: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def problems(self) -> list[str]:
        """Errors followed by warnings."""
        return [*self.errors, *self.warnings]


def _is_url_friendly(value: str) -> bool:
    return quote(value, safe=_URL_SAFE) == value


def validate_npm_package_name(name: str) -> NameValidation:
    """Validate a name against npm package naming rules.

    Args:
        name: Candidate package name

    Returns:
        NameValidation describing every problem found
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not name:
        errors.append("name length must be greater than zero")

    if name.startswith("."):
        errors.append("name cannot start with a period")

    if name.startswith("_"):
        errors.append("name cannot start with an underscore")

    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    if name.lower() in RESERVED_NAMES:
        errors.append(f"{name} is a blacklisted name")

    if name in NODE_BUILTIN_MODULES:
        warnings.append(f"{name} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")

    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")

    if _SPECIAL_CHARS.search(name.split("/")[-1]):
        warnings.append('name can no longer contain special characters ("~\'!()*")')

    if not _is_url_friendly(name):
        match = _SCOPED_NAME.match(name)
        scoped_ok = False
        if match and match.group(1) is not None:
            user, package = match.group(1), match.group(2)
            scoped_ok = _is_url_friendly(user) and _is_url_friendly(package)
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return NameValidation(
        valid_for_new_packages=not errors and not warnings,
        valid_for_old_packages=not errors,
        errors=errors,
        warnings=warnings,
    )


def validate_project_name(project_name: str) -> None:
    """Ensure the project name can be used for a new npm package.

    Raises:
        InvalidProjectNameError: If the name is not valid for new packages
    """
    validation = validate_npm_package_name(project_name)
    if not validation.valid_for_new_packages:
        raise InvalidProjectNameError(project_name, validation.problems)


def project_name_validator(value: str) -> bool | str:
    """Validator for the interactive project name prompt.

    Returns:
        True if valid, otherwise the first problem as a message
    """
    validation = validate_npm_package_name(value)
    if not validation.valid_for_new_packages:
        return validation.problems[0] if validation.problems else "Invalid package name"
    return True


__all__ = [
    "MAX_NAME_LENGTH",
    "NameValidation",
    "validate_npm_package_name",
    "validate_project_name",
    "project_name_validator",
]
