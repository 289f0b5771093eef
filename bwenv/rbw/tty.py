"""
Terminal resolution for pinentry prompts.

The rbw-agent daemon has no controlling terminal, so it cannot work out where
to show a PIN/passphrase prompt on its own. rbw reads the terminal from the
RBW_TTY environment variable; it must be an absolute device path such as
/dev/pts/3, because /dev/tty only means something inside our process tree.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

RBW_TTY = "RBW_TTY"

DEVICE_PREFIX = "/dev/"
FD_DIR = Path("/proc/self/fd")
CONTROLLING_TTY = Path("/dev/tty")

# stderr first: our stdout may be piped by the caller while stderr is still
# attached to the terminal.
PROBE_FDS = (2, 0)


class TerminalResolver(ABC):
    """Finds the device path of the terminal the user is sitting at."""

    @abstractmethod
    def resolve(self) -> str | None:
        """Return an absolute terminal device path, or None if there is none."""


class ProcTerminalResolver(TerminalResolver):
    """Resolve the terminal through /proc/self/fd links, then /dev/tty."""

    def __init__(
        self,
        fd_dir: Path = FD_DIR,
        fallback: Path = CONTROLLING_TTY,
        fds: tuple[int, ...] = PROBE_FDS,
    ):
        self.fd_dir = Path(fd_dir)
        self.fallback = Path(fallback)
        self.fds = fds

    def resolve(self) -> str | None:
        for fd in self.fds:
            try:
                target = os.readlink(self.fd_dir / str(fd))
            except OSError:
                continue
            if target.startswith(DEVICE_PREFIX):
                return target

        if self.fallback.exists():
            return str(self.fallback)

        return None


def real_tty_path() -> str | None:
    """Resolve the real terminal path with the default probe order."""
    return ProcTerminalResolver().resolve()


def tty_env(
    resolver: TerminalResolver | None = None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build a child environment carrying RBW_TTY when a terminal is known."""
    env = dict(os.environ if base is None else base)
    tty = real_tty_path() if resolver is None else resolver.resolve()
    if tty:
        env[RBW_TTY] = tty
    else:
        logger.debug("No terminal found, %s not set", RBW_TTY)
    return env
