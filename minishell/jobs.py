"""The list of stopped jobs, newest first."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Job:
    """A stopped process and the command line that started it."""

    pid: int
    command: str


class JobList:
    """Stopped jobs; the most recently stopped one comes first."""

    def __init__(self) -> None:
        self._jobs: deque[Job] = deque()

    def push(self, pid: int, command: str) -> Job:
        """Add a job at the front and return it."""
        job = Job(pid, command)
        self._jobs.appendleft(job)
        return job

    def remove_pid(self, pid: int) -> bool:
        """Remove the first job with ``pid``; return whether one was found."""
        for job in self._jobs:
            if job.pid == pid:
                self._jobs.remove(job)
                return True
        return False

    def pop_first(self) -> Job:
        """Remove and return the newest job; ``IndexError`` when empty."""
        if not self._jobs:
            raise IndexError("no such job")
        return self._jobs.popleft()

    def peek(self) -> Job | None:
        """Return the newest job without removing it, or ``None``."""
        return self._jobs[0] if self._jobs else None

    def format(self) -> str:
        """Render the job table as printed by the ``jobs`` builtin."""
        return "".join(
            f"[{number}][pid:{job.pid}]    Stopped    {job.command}\n"
            for number, job in enumerate(self._jobs, start=1)
        )

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._jobs))