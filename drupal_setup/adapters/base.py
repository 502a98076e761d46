"""
Adapter base — the contract between installer steps and external tools.

Steps never call subprocess directly. They build an Action, hand it to
the AdapterRegistry, and read the Receipt that comes back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from drupal_setup.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to run one command."""

    action: Action
    cwd: str | None = None

    @property
    def working_dir(self) -> str | None:
        """Directory the command runs in (None = inherit the process cwd)."""
        return self.cwd


class Adapter(ABC):
    """One external CLI tool, addressed by its binary name.

    A tool that is missing, exits non-zero or cannot be spawned is
    reported in the Receipt, never raised.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier, which is also the binary name (e.g. 'ddev')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the underlying tool resolves on PATH.

        A PATH lookup only; never spawns the tool.
        """

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action before anything is spawned.

        Returns:
            (ok, reason); reason is "" when ok.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Run the command to completion and describe the outcome."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
