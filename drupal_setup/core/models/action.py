"""
Action and Receipt models — the command contract.

An Action names one external command (binary + argument list) and how to
run it. A Receipt is what came back. Adapters turn Actions into Receipts
and report failures through the Receipt, never by raising.
"""

from __future__ import annotations

import shlex
from typing import Any, Literal

from pydantic import BaseModel, Field


class Action(BaseModel):
    """One external command invocation.

    ``params["args"]`` holds the argument list passed after the binary.
    ``params["capture"]`` captures stdout instead of streaming it to
    the terminal.
    """

    id: str                         # the rendered command line
    adapter: str                    # binary / adapter name
    name: str = ""                  # human-readable label
    params: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def command(cls, adapter: str, *args: str, capture: bool = False, name: str = "") -> Action:
        """Build an action for ``adapter args...``.

        The id is the shell-quoted command line, so receipts and logs
        read like what a user would type.
        """
        argv = [adapter, *args]
        return cls(
            id=shlex.join(argv),
            adapter=adapter,
            name=name,
            params={"args": list(args), "capture": capture},
        )

    @property
    def args(self) -> list[str]:
        return list(self.params.get("args", []))

    @property
    def capture(self) -> bool:
        return bool(self.params.get("capture", False))


class Receipt(BaseModel):
    """What one command left behind.

    ``output`` is the stripped stdout of a captured command (empty when
    streamed). ``error`` is stderr, or a synthesized reason when the
    binary could not be spawned. ``return_code`` is None if the process
    never ran.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"
    output: str = ""
    error: str | None = None
    return_code: int | None = None
    duration_ms: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Exit status 0."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **extra: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, output=output, **extra)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **extra: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **extra)
