"""Make sure the rbw vault is unlocked before running commands."""

from __future__ import annotations

import logging

from bwenv.rbw.errors import RbwUnlockError
from bwenv.rbw.process import ProcessInvoker

logger = logging.getLogger(__name__)


def ensure_unlocked(invoker: ProcessInvoker) -> None:
    """Unlock the vault up front if it is locked.

    Runs `rbw unlock` (and so pinentry) before the real command, so the
    command itself never has to prompt while its stdin/stdout are piped.
    Checked on every call: the vault can lock between two operations.
    """
    result = invoker.capture(["unlocked"], status="Checking vault…")
    if result.ok:
        return

    logger.debug("Vault is locked, running rbw unlock")
    returncode = invoker.interactive(["unlock"])
    if returncode != 0:
        raise RbwUnlockError(returncode)
