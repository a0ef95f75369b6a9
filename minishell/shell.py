"""The interactive read-evaluate loop."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import Iterable, TextIO

from .commands import CommandType, check_command_type, get_command, load_external_commands
from .jobs import JobList
from .pipeline import PipelineError, parse_pipeline, run_pipeline
from .signals import SignalFlags

DEFAULT_PROMPT = "minishell$: "
EXTERNAL_COMMANDS_FILE = "ext_commands.txt"
_CYAN = "\x1b[36m"
_RESET = "\x1b[0m"


class Shell:
    """A small shell with a few builtins, pipelines and stopped-job control."""

    def __init__(
        self,
        external_commands: Iterable[str],
        prompt: str = DEFAULT_PROMPT,
        stdout: TextIO | None = None,
    ) -> None:
        self.external_commands = frozenset(external_commands)
        self.prompt = prompt
        self.stdout = stdout if stdout is not None else sys.stdout
        self.status = 0
        self.jobs = JobList()
        self.flags = SignalFlags()

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def handle_line(self, line: str) -> bool:
        """Process one input line; return ``False`` when the shell should exit."""
        if line.startswith("PS1=") and line[4:5] != " ":
            self.prompt = line[4:]
            return True
        command = get_command(line)
        kind = check_command_type(command, self.external_commands)
        if kind is CommandType.BUILTIN:
            return self.execute_builtin(line)
        if kind is CommandType.EXTERNAL:
            self.run_external(line)
        else:
            self._write(f"{_CYAN}cmd --> {command}   type --> NO_COMMAND\n{_RESET}")
        return True

    def execute_builtin(self, line: str) -> bool:
        """Run a builtin; return ``False`` for ``exit``."""
        if line.startswith("exit"):
            return False
        if line.startswith("pwd"):
            self._write(os.getcwd() + "\n")
        elif line.startswith("cd"):
            try:
                os.chdir(line[3:])
            except OSError:
                pass
            self._write(os.getcwd() + "\n")
        elif line.startswith("echo $$"):
            self._write(f"{os.getpid()}\n")
        elif line.startswith("echo $?"):
            self._write(f"{self.status}\n")
        elif line.startswith("echo $SHELL"):
            shell = os.environ.get("SHELL")
            if shell is not None:
                self._write(shell + "\n")
        elif line == "jobs":
            self._write(self.jobs.format())
        elif line == "fg":
            self._foreground()
        elif line == "bg":
            self._background()
        return True

    def _foreground(self) -> None:
        job = self.jobs.peek()
        if job is None:
            self._write("-bash: fg: current: no such job\n")
            return
        try:
            os.kill(job.pid, signal.SIGCONT)
            _, raw = os.waitpid(job.pid, os.WUNTRACED)
        except (ProcessLookupError, ChildProcessError):
            self.jobs.pop_first()
            return
        self.jobs.pop_first()
        if os.WIFSTOPPED(raw):
            self.jobs.push(job.pid, job.command)
            self.status = 128 + os.WSTOPSIG(raw)
        else:
            code = os.waitstatus_to_exitcode(raw)
            self.status = 128 - code if code < 0 else code

    def _background(self) -> None:
        job = self.jobs.peek()
        if job is None:
            self._write("-bash: bg: current: no such job\n")
            return
        try:
            os.kill(job.pid, signal.SIGCONT)
        except ProcessLookupError:
            pass

    def run_external(self, line: str) -> None:
        """Run ``line`` as a pipeline, recording stopped processes as jobs."""
        try:
            commands = parse_pipeline(line)
        except PipelineError as exc:
            print(exc, file=sys.stderr)
            self.status = 1
        else:
            self.status, stopped = run_pipeline(commands)
            for pid in stopped:
                self.jobs.push(pid, line)

        if self.flags.consume(signal.SIGCHLD):
            self._reap()
        if self.flags.consume(signal.SIGINT):
            self._write("\n" + self.prompt)
        if self.flags.consume(signal.SIGTSTP):
            self._write("\n" + self.prompt)

    def _reap(self) -> None:
        while True:
            try:
                pid, _ = os.waitpid(-1, os.WNOHANG)
            except ChildProcessError:
                return
            if pid <= 0:
                return
            self.jobs.remove_pid(pid)

    def run(self, stdin: TextIO | None = None) -> int:
        """Read and run lines until ``exit`` or end of input; return the status."""
        source = stdin if stdin is not None else sys.stdin
        while True:
            self._write("\n" + self.prompt)
            line = source.readline()
            if not line:
                return self.status
            if not self.handle_line(line.rstrip("\n")):
                return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shell in the current directory."""
    argparse.ArgumentParser(prog="minishell", description="A minimal shell.").parse_args(argv)
    if sys.stdout.isatty():
        sys.stdout.write("\x1b[H\x1b[2J")
    try:
        external = load_external_commands(EXTERNAL_COMMANDS_FILE)
    except PermissionError as exc:
        print(f"open: {exc.strerror}", file=sys.stderr)
        print("Error in extracting external commands")
        return 1
    shell = Shell(external)
    shell.flags.install()
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())