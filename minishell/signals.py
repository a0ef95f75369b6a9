"""Signal flags set asynchronously and consumed by the main loop."""

from __future__ import annotations

import signal
from dataclasses import dataclass

_SIGTSTP = getattr(signal, "SIGTSTP", None)
_SIGCHLD = getattr(signal, "SIGCHLD", None)


@dataclass
class SignalFlags:
    """Records which of SIGINT, SIGTSTP and SIGCHLD have arrived."""

    sigint: bool = False
    sigtstp: bool = False
    sigchld: bool = False

    def _attribute(self, signum: int) -> str | None:
        if signum == signal.SIGINT:
            return "sigint"
        if _SIGTSTP is not None and signum == _SIGTSTP:
            return "sigtstp"
        if _SIGCHLD is not None and signum == _SIGCHLD:
            return "sigchld"
        return None

    def handler(self, signum: int, frame: object) -> None:
        """Signal handler: only raises the matching flag."""
        name = self._attribute(signum)
        if name is not None:
            setattr(self, name, True)

    def install(self) -> None:
        """Route SIGINT, SIGTSTP and SIGCHLD to :meth:`handler`."""
        for signum in (signal.SIGINT, _SIGTSTP, _SIGCHLD):
            if signum is not None:
                signal.signal(signum, self.handler)

    def consume(self, signum: int) -> bool:
        """Return whether ``signum`` arrived, clearing its flag."""
        name = self._attribute(signum)
        if name is None:
            return False
        raised = getattr(self, name)
        setattr(self, name, False)
        return raised