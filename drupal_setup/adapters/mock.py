"""
Mock adapter — stands in for one real tool (brew, docker, colima, ddev,
composer) so the installer can run end to end without a Mac.

Canned results are keyed by command line, e.g. ``"brew list docker"``.
A command with nothing canned succeeds with ``default_output``.
"""

from __future__ import annotations

from drupal_setup.adapters.base import Adapter, ExecutionContext
from drupal_setup.core.models.action import Receipt


class MockAdapter(Adapter):
    """In-memory tool: records every invocation, replays canned receipts."""

    def __init__(self, adapter_name: str = "mock", available: bool = True, default_output: str = ""):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._canned: dict[str, Receipt] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    @property
    def commands(self) -> list[str]:
        """Command lines in the order they ran."""
        return [ctx.action.id for ctx in self.call_log]

    # ── Presence ────────────────────────────────────────────────

    def is_available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        """Pretend the binary is (or is not) on PATH."""
        self._available = available

    # ── Canned results ──────────────────────────────────────────

    def set_response(self, command: str, receipt: Receipt) -> None:
        self._canned[command] = receipt

    def set_output(self, command: str, output: str) -> None:
        """``command`` exits 0 and prints ``output``."""
        self.set_response(command, Receipt.success(self._name, command, output, return_code=0))

    def set_failure(self, command: str, error: str = "Mock failure", return_code: int = 1) -> None:
        """``command`` exits ``return_code`` with ``error`` on stderr."""
        self.set_response(
            command, Receipt.failure(self._name, command, error, return_code=return_code)
        )

    # ── Adapter ─────────────────────────────────────────────────

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        command = context.action.id

        canned = self._canned.get(command)
        if canned is not None:
            # Each replay is a fresh copy
            return canned.model_copy()

        return Receipt.success(
            self._name,
            command,
            self._default_output,
            return_code=0,
            metadata={"mock": True},
        )
