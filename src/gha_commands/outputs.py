"""Set step outputs and job summaries through the runner's append-only files."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Mapping

from gha_commands.environment import GITHUB_OUTPUT, GITHUB_STEP_SUMMARY, require_env


FILE_MODE = 0o644


def append_to_file(path: str, content: str) -> None:
    """Append ``content`` to ``path``, creating the file if needed.

    The file is opened, written once and closed. If the write fails the
    handle is still closed and the write error is raised; otherwise a close
    error is raised.
    """
    fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, FILE_MODE)
    f = os.fdopen(fd, "a", encoding="utf-8", newline="")
    try:
        f.write(content)
    except OSError:
        with contextlib.suppress(OSError):
            f.close()
        raise
    f.close()


def set_output(name: str, value: str, *, env: Mapping[str, str] | None = None) -> None:
    """Write a ``name=value`` pair to the $GITHUB_OUTPUT file.

    Neither ``name`` nor ``value`` is escaped, so a value containing a
    newline corrupts the record.

    Raises:
        ConfigError: If GITHUB_OUTPUT is unset or empty.
        OSError: If the file cannot be opened, written or closed.
    """
    output_file = require_env(GITHUB_OUTPUT, env)
    append_to_file(output_file, f"{name}={value}\n")


def set_summary(markdown: str, *, env: Mapping[str, str] | None = None) -> None:
    """Append Markdown content to the $GITHUB_STEP_SUMMARY file.

    A trailing newline is added unless ``markdown`` already ends with one.

    Raises:
        ConfigError: If GITHUB_STEP_SUMMARY is unset or empty.
        OSError: If the file cannot be opened, written or closed.
    """
    summary_file = require_env(GITHUB_STEP_SUMMARY, env)
    if not markdown.endswith("\n"):
        markdown += "\n"
    append_to_file(summary_file, markdown)
