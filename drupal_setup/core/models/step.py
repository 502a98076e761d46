"""
Step models — the outcome of one installer step.

Steps compose Receipts into a single verdict: did this stage of the
installation succeed, fail, or get skipped, and why.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Protocol

from pydantic import BaseModel, Field


class Provider(str, Enum):
    """Container backend DDEV runs on top of."""

    DOCKER = "docker"
    COLIMA = "colima"

    @property
    def label(self) -> str:
        return "Docker Desktop" if self is Provider.DOCKER else "Colima"


class StepResult(BaseModel):
    """Verdict of a single step.

    ``message`` is the human-readable reason on failure or skip,
    and an optional summary on success.
    """

    status: Literal["ok", "skipped", "failed"] = "ok"
    message: str = ""
    commands: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, message: str = "", commands: list[str] | None = None) -> StepResult:
        return cls(status="ok", message=message, commands=commands or [])

    @classmethod
    def failure(cls, message: str, commands: list[str] | None = None) -> StepResult:
        return cls(status="failed", message=message, commands=commands or [])

    @classmethod
    def skipped(cls, message: str = "") -> StepResult:
        return cls(status="skipped", message=message)


class Reporter(Protocol):
    """Where steps send their status lines.

    The CLI implements this with coloured terminal output; tests use
    a recording double.
    """

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def echo(self, message: str = "") -> None: ...
