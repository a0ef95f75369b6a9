"""Splitting command lines into pipelines and running them."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence

MAX_TOKENS = 63
MAX_ARGS = 19
MAX_COMMANDS = 10


class PipelineError(ValueError):
    """A command line that cannot be turned into a pipeline."""


def parse_pipeline(line: str) -> list[list[str]]:
    """Split ``line`` on spaces into argument lists separated by ``|``."""
    tokens = [token for token in line.split(" ") if token][:MAX_TOKENS]
    if not tokens:
        return []
    commands: list[list[str]] = []
    current: list[str] = []
    for token in tokens:
        if token == "|":
            if not current:
                raise PipelineError("syntax error near '|'")
            commands.append(current)
            current = []
        else:
            if len(current) >= MAX_ARGS:
                raise PipelineError("minishell: too many arguments")
            current.append(token)
    if not current:
        raise PipelineError("syntax error near '|'")
    commands.append(current)
    if len(commands) > MAX_COMMANDS:
        raise PipelineError("minishell: too many commands")
    return commands


def _exit_code(raw_status: int) -> int:
    code = os.waitstatus_to_exitcode(raw_status)
    return 128 - code if code < 0 else code


def run_pipeline(commands: Sequence[Sequence[str]]) -> tuple[int, list[int]]:
    """Run the commands connected by pipes and wait for them.

    Returns the exit status of the last command and the pids of any
    processes that were stopped instead of finishing.
    """
    if not commands:
        return 0, []
    started: list[subprocess.Popen | None] = []
    previous_out = None
    last_index = len(commands) - 1
    for index, argv in enumerate(commands):
        if previous_out is not None:
            stdin = previous_out
        else:
            stdin = subprocess.DEVNULL if index > 0 else None
        stdout = None if index == last_index else subprocess.PIPE
        try:
            proc = subprocess.Popen(list(argv), stdin=stdin, stdout=stdout)
        except OSError as exc:
            print(f"execvp: {exc.strerror}", file=sys.stderr)
            proc = None
        if previous_out is not None:
            previous_out.close()
        previous_out = proc.stdout if proc is not None and index != last_index else None
        started.append(proc)

    status = 0
    stopped: list[int] = []
    for proc in started:
        if proc is None:
            status = 1
            continue
        _, raw = os.waitpid(proc.pid, os.WUNTRACED)
        if os.WIFSTOPPED(raw):
            stopped.append(proc.pid)
            status = 128 + os.WSTOPSIG(raw)
        else:
            status = _exit_code(raw)
            proc.returncode = status
    return status, stopped