"""Helpers for emitting GitHub Actions workflow commands from a job's process."""

from __future__ import annotations

from gha_commands.commands import (
    add_mask,
    add_mask_to,
    log_debug,
    log_debug_to,
    log_error,
    log_error_to,
    log_warning,
    log_warning_to,
)
from gha_commands.environment import ConfigError, GitHubActionsError
from gha_commands.outputs import append_to_file, set_output, set_summary
from gha_commands.run_url import RunURLError, get_run_url

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "GitHubActionsError",
    "RunURLError",
    "__version__",
    "add_mask",
    "add_mask_to",
    "append_to_file",
    "get_run_url",
    "log_debug",
    "log_debug_to",
    "log_error",
    "log_error_to",
    "log_warning",
    "log_warning_to",
    "set_output",
    "set_summary",
]
