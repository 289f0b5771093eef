"""Shared fixtures for rbw adapter tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from bwenv.rbw.client import RbwClient
from bwenv.rbw.process import CommandResult, ProcessInvoker


@dataclass
class Call:
    mode: str
    args: tuple[str, ...]
    payload: str | None = None
    status: str | None = None


@dataclass
class FakeInvoker(ProcessInvoker):
    """Records every rbw call and answers from canned results.

    `results` maps the rbw subcommand (first argument) to a CommandResult, or
    a list of them consumed in order. `unlocked` is unlocked by default.
    """

    results: dict[str, CommandResult | list[CommandResult]] = field(default_factory=dict)
    returncodes: dict[str, int] = field(default_factory=dict)
    calls: list[Call] = field(default_factory=list)

    def _result(self, args: Sequence[str]) -> CommandResult:
        canned = self.results.get(args[0])
        if isinstance(canned, list):
            canned = canned.pop(0)
        if canned is None:
            return CommandResult(args=tuple(args), returncode=0)
        return canned

    def capture(self, args, *, status=None):
        self.calls.append(Call("capture", tuple(args), status=status))
        return self._result(args)

    def pipe(self, args, payload, *, status=None):
        self.calls.append(Call("pipe", tuple(args), payload=payload, status=status))
        return self.returncodes.get(args[0], 0)

    def interactive(self, args):
        self.calls.append(Call("interactive", tuple(args)))
        return self.returncodes.get(args[0], 0)

    def commands(self) -> list[str]:
        return [call.args[0] for call in self.calls]

    def last(self, mode: str) -> Call:
        return [c for c in self.calls if c.mode == mode][-1]


@pytest.fixture
def invoker() -> FakeInvoker:
    return FakeInvoker()


@pytest.fixture
def client(invoker: FakeInvoker) -> RbwClient:
    return RbwClient(invoker)


@pytest.fixture
def catalog() -> list[dict]:
    """`rbw list --raw` output spanning several folders and types."""
    return [
        {"id": "1", "name": "prod", "user": None, "folder": "bwenv", "type": "Login"},
        {"id": "2", "name": "github", "user": "me", "folder": None, "type": "Login"},
        {"id": "3", "name": "staging", "user": None, "folder": "bwenv", "type": "Note"},
        {"id": "4", "name": "bank", "user": "me", "folder": "personal", "type": "Login"},
        {"id": "5", "name": "dev", "user": None, "folder": "bwenv", "type": "Login"},
    ]
