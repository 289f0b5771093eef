"""
rbw failure taxonomy and exit-status classification.

Every failure surfaces as an RbwError subclass, except "entry does not exist"
on a single-item fetch, which is a normal outcome (see is_not_found).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bwenv.rbw.process import CommandResult

# rbw has used all of these for a missing entry
NOT_FOUND_MARKERS = (
    "no entry found",
    "no items found",
    "Entry not found",
)


class RbwError(Exception):
    """Base class for every rbw adapter failure."""


class RbwLaunchError(RbwError):
    """rbw could not be spawned, written to, or waited on."""


class RbwUnlockError(RbwError):
    """`rbw unlock` exited non-zero."""

    def __init__(self, returncode: int):
        self.returncode = returncode
        super().__init__(f"`rbw unlock` failed (exit status {returncode})")


class RbwCommandError(RbwError):
    """An rbw command exited non-zero."""

    def __init__(self, command: str, returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"`{command}` failed (exit status {returncode})"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class RbwParseError(RbwError):
    """rbw printed JSON we could not decode."""


def is_not_found(result: CommandResult) -> bool:
    """True when a failed fetch means the entry simply does not exist."""
    if result.ok:
        return False
    stderr = result.stderr.decode("utf-8", errors="replace")
    return any(marker in stderr for marker in NOT_FOUND_MARKERS)


def check_status(command: str, result: CommandResult) -> None:
    """Raise RbwCommandError unless the command succeeded."""
    if not result.ok:
        raise RbwCommandError(command, result.returncode, result.stderr_text)
