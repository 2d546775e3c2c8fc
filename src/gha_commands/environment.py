"""Environment variables exposed by the GitHub Actions runner.

Every lookup takes an optional ``env`` mapping so callers and tests can pass a
fixed set of values instead of mutating ``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping


GITHUB_OUTPUT = "GITHUB_OUTPUT"
GITHUB_STEP_SUMMARY = "GITHUB_STEP_SUMMARY"
GITHUB_SERVER_URL = "GITHUB_SERVER_URL"
GITHUB_REPOSITORY = "GITHUB_REPOSITORY"
GITHUB_RUN_ID = "GITHUB_RUN_ID"


class GitHubActionsError(Exception):
    """Base class for errors raised by gha_commands."""


class ConfigError(GitHubActionsError):
    """Raised when a required runner environment variable is missing or empty."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} env variable not specified")


def get_env(name: str, env: Mapping[str, str] | None = None) -> str:
    """Return the value of ``name``, or an empty string if it is unset."""
    if env is None:
        env = os.environ
    return env.get(name, "")


def require_env(name: str, env: Mapping[str, str] | None = None) -> str:
    """Return the value of ``name``.

    Raises:
        ConfigError: If the variable is unset or empty.
    """
    value = get_env(name, env)
    if not value:
        raise ConfigError(name)
    return value
