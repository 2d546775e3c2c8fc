"""Emit workflow commands on the job's output stream.

Each command has a ``*_to`` form that writes to an explicit stream and a
wrapper that writes to ``sys.stdout``. Send commands to ``sys.stderr`` by
calling the ``*_to`` form directly.

See https://docs.github.com/en/actions/using-workflows/workflow-commands-for-github-actions
"""

from __future__ import annotations

import sys
from typing import Any, TextIO


def _write_command(stream: TextIO, command: str, text: str) -> None:
    stream.write(f"::{command}::{text}\n")


def _format(message: str, args: tuple[Any, ...]) -> str:
    # Same convention as logging: only interpolate when args are given.
    if args:
        return message % args
    return message


def add_mask_to(stream: TextIO, value: str) -> None:
    """Mask ``value`` from all subsequent log output.

    The value is written verbatim; it must not contain a newline.
    """
    _write_command(stream, "add-mask", value)


def add_mask(value: str) -> None:
    """Mask ``value`` from all subsequent log output."""
    add_mask_to(sys.stdout, value)


def log_debug_to(stream: TextIO, message: str, *args: Any) -> None:
    """Write a debug message. ``message % args`` is applied when args are given."""
    _write_command(stream, "debug", _format(message, args))


def log_debug(message: str, *args: Any) -> None:
    log_debug_to(sys.stdout, message, *args)


def log_warning_to(stream: TextIO, message: str, *args: Any) -> None:
    """Write a warning annotation. ``message % args`` is applied when args are given."""
    _write_command(stream, "warning", _format(message, args))


def log_warning(message: str, *args: Any) -> None:
    log_warning_to(sys.stdout, message, *args)


def log_error_to(stream: TextIO, message: str, *args: Any) -> None:
    """Write an error annotation. ``message % args`` is applied when args are given."""
    _write_command(stream, "error", _format(message, args))


def log_error(message: str, *args: Any) -> None:
    log_error_to(sys.stdout, message, *args)
