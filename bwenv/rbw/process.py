"""
Spawning the rbw CLI.

Three modes:
    capture      run to completion, collect stdout/stderr/exit status
    pipe         write a payload to stdin, stdout/stderr go straight to the user
    interactive  inherit every stream (used for `rbw unlock` and pinentry)

Pipe mode is how notes get written: when stdin is not a terminal, rbw reads
the whole of stdin as the edited entry instead of launching $EDITOR, so no
temp files or editor subprocesses are involved.
"""

from __future__ import annotations

import contextlib
import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from bwenv.rbw.errors import RbwLaunchError
from bwenv.rbw.spinner import spinner
from bwenv.rbw.tty import TerminalResolver, tty_env

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a captured rbw run."""

    args: tuple[str, ...]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace").strip()


def describe(args: Sequence[str]) -> str:
    """Short command name for messages, e.g. "rbw get"."""
    return f"rbw {args[0]}" if args else "rbw"


class ProcessInvoker(ABC):
    """Runs rbw subcommands. Swapped for a fake in tests."""

    @abstractmethod
    def capture(self, args: Sequence[str], *, status: str | None = None) -> CommandResult:
        """Run rbw with `args` and collect its output.

        Args:
            args: rbw arguments, without the binary name.
            status: Spinner label shown while the command runs.
        """

    @abstractmethod
    def pipe(self, args: Sequence[str], payload: str, *, status: str | None = None) -> int:
        """Run rbw with `payload` on stdin and return its exit status."""

    @abstractmethod
    def interactive(self, args: Sequence[str]) -> int:
        """Run rbw attached to the caller's terminal and return its exit status."""


class RbwProcess(ProcessInvoker):
    """Invoke the real rbw binary via subprocess."""

    def __init__(
        self,
        binary: str = "rbw",
        resolver: TerminalResolver | None = None,
        show_spinner: bool = True,
    ):
        self.binary = binary
        self.resolver = resolver
        self.show_spinner = show_spinner

    def _command(self, args: Sequence[str]) -> list[str]:
        return [self.binary, *args]

    def _env(self) -> dict[str, str]:
        # Set on every spawn: rbw may need to unlock mid-command if another
        # process locked the vault since ensure_unlocked ran.
        return tty_env(self.resolver)

    def capture(self, args: Sequence[str], *, status: str | None = None) -> CommandResult:
        name = describe(args)
        logger.debug("Running %s", name)
        with spinner(status, enabled=self.show_spinner):
            try:
                proc = subprocess.run(
                    self._command(args),
                    capture_output=True,
                    env=self._env(),
                )
            except OSError as e:
                raise RbwLaunchError(f"failed to run `{name}`: {e}") from e
        logger.debug("%s exited with status %d", name, proc.returncode)
        return CommandResult(
            args=tuple(args),
            returncode=proc.returncode,
            stdout=proc.stdout or b"",
            stderr=proc.stderr or b"",
        )

    def pipe(self, args: Sequence[str], payload: str, *, status: str | None = None) -> int:
        name = describe(args)
        logger.debug("Piping %d bytes to %s", len(payload.encode("utf-8")), name)
        with spinner(status, enabled=self.show_spinner):
            try:
                proc = subprocess.Popen(
                    self._command(args),
                    stdin=subprocess.PIPE,
                    env=self._env(),
                )
            except OSError as e:
                raise RbwLaunchError(f"failed to spawn `{name}`: {e}") from e

            if proc.stdin is None:
                proc.kill()
                proc.wait()
                raise RbwLaunchError(f"failed to open `{name}` stdin")

            try:
                proc.stdin.write(payload.encode("utf-8"))
                proc.stdin.close()
            except OSError as e:
                with contextlib.suppress(OSError):
                    proc.stdin.close()
                proc.kill()
                proc.wait()
                raise RbwLaunchError(f"failed to write to `{name}` stdin: {e}") from e

            try:
                returncode = proc.wait()
            except OSError as e:
                raise RbwLaunchError(f"failed to wait for `{name}`: {e}") from e

        logger.debug("%s exited with status %d", name, returncode)
        return returncode

    def interactive(self, args: Sequence[str]) -> int:
        name = describe(args)
        logger.debug("Running %s interactively", name)
        try:
            proc = subprocess.run(self._command(args), env=self._env())
        except OSError as e:
            raise RbwLaunchError(f"failed to run `{name}`: {e}") from e
        logger.debug("%s exited with status %d", name, proc.returncode)
        return proc.returncode
