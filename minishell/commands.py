"""Command lookup: builtin names, the external command list and classification."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Iterable

BUILTINS: tuple[str, ...] = (
    "echo", "printf", "read", "cd", "pwd", "pushd", "popd", "dirs", "let",
    "eval", "set", "unset", "export", "declare", "typeset", "readonly",
    "getopts", "source", "exit", "exec", "shopt", "caller", "true", "type",
    "hash", "bind", "help", "fg", "bg", "jobs",
)

MAX_COMMAND_LENGTH = 19


class CommandType(IntEnum):
    """How a command name is resolved."""

    BUILTIN = 1
    EXTERNAL = 2
    NO_COMMAND = 3


def load_external_commands(path: str | Path) -> list[str]:
    """Read external command names, one per line, from ``path``.

    Windows line endings are accepted and blank lines are skipped. A missing
    file yields an empty list; a file that cannot be read because of its
    permissions raises ``PermissionError``.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        return []
    names = []
    for line in text.split("\n"):
        name = line.removesuffix("\r")
        if name:
            names.append(name)
    return names


def get_command(line: str) -> str:
    """Return the first word of ``line``, cut to 19 characters, or ``""``."""
    words = line.split()
    if not words:
        return ""
    return words[0][:MAX_COMMAND_LENGTH]


def check_command_type(command: str, external_commands: Iterable[str]) -> CommandType:
    """Classify ``command``; builtins take precedence over external commands."""
    if command in BUILTINS:
        return CommandType.BUILTIN
    if command in external_commands:
        return CommandType.EXTERNAL
    return CommandType.NO_COMMAND