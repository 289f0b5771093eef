"""Progress spinner shown on stderr while rbw runs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

_console: Console | None = None


def _stderr_console() -> Console:
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console


@contextmanager
def spinner(
    message: str | None,
    *,
    enabled: bool = True,
    console: Console | None = None,
) -> Iterator[None]:
    """Show a dots spinner for the duration of the block.

    Nothing is drawn when there is no message, when disabled, or when stderr
    is not a terminal. The spinner is always cleared on exit, including when
    the block raises.
    """
    if console is None:
        console = _stderr_console()
    if not message or not enabled or not console.is_terminal:
        yield
        return

    status = console.status(message, spinner="dots")
    status.start()
    try:
        yield
    finally:
        status.stop()
