"""Run log for create-turborepo-template.

A scaffolding run can be recorded to a file: every external command (git
clone, ``<pm> install``, git init) with its exit code, the status lines shown
in the terminal, and configuration warnings. Recording is off unless the
environment enables it at the time ``setup_logging()`` runs, so each CLI
invocation picks up the current environment.

Environment Variables:
    CREATE_TURBOREPO_LOG: "true", "1", "yes" or "on" enables the run log
    CREATE_TURBOREPO_LOG_FILE: Path to log file (default: ~/.create-turborepo.log)
"""

import logging
import os
import shlex
from collections.abc import Sequence
from pathlib import Path

LOGGER_NAME = "create_turborepo"
LOG_ENV_VAR = "CREATE_TURBOREPO_LOG"
LOG_FILE_ENV_VAR = "CREATE_TURBOREPO_LOG_FILE"
DEFAULT_LOG_FILE = Path.home() / ".create-turborepo.log"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

_logger: logging.Logger | None = None


def is_logging_enabled() -> bool:
    """Whether the environment currently asks for a run log."""
    return os.environ.get(LOG_ENV_VAR, "").strip().lower() in _TRUE_VALUES


def get_log_file() -> Path:
    """Log file path from the environment, ``~`` expanded."""
    value = os.environ.get(LOG_FILE_ENV_VAR, "").strip()
    return Path(value).expanduser() if value else DEFAULT_LOG_FILE


def setup_logging() -> logging.Logger:
    """Configure the run log from the current environment.

    Safe to call more than once: handlers installed by an earlier call are
    closed and replaced, so a second CLI invocation in the same process
    (as under ``CliRunner``) logs according to its own environment.

    Returns:
        The ``create_turborepo`` logger
    """
    global _logger

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if is_logging_enabled():
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    else:
        logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Return the run logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    get_logger().info(message)


def log_warning(message: str) -> None:
    """Record a problem that does not stop the run, e.g. a bad config value."""
    get_logger().warning(message)


def log_command(command: Sequence[str], exit_code: int = 0) -> None:
    """Record an external command and the exit code it returned.

    Args:
        command: Argument list as passed to ``subprocess.run``
        exit_code: Process return code
    """
    get_logger().info(f"COMMAND: {shlex.join(command)} | EXIT_CODE: {exit_code}")


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "get_log_file",
    "get_logger",
    "is_logging_enabled",
    "log_command",
    "log_message",
    "log_warning",
    "setup_logging",
]
