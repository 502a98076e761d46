"""
Adapter registry — one lookup table for every tool the installer drives.

Installer steps ask the registry two things: is ``<tool>`` on PATH, and
run ``<tool> <args...>`` (optionally in a directory, optionally
captured). The answer to the second is always a Receipt; nothing a tool
does, or fails to do, escapes as an exception.
"""

from __future__ import annotations

import logging
import time

from drupal_setup.adapters.base import Adapter, ExecutionContext
from drupal_setup.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Tool adapters keyed by binary name."""

    def __init__(self) -> None:
        self._adapters: dict[str, Adapter] = {}

    def register(self, adapter: Adapter) -> None:
        if adapter.name in self._adapters:
            logger.warning("Replacing adapter for %s", adapter.name)
        self._adapters[adapter.name] = adapter
        logger.debug("Registered %r", adapter)

    def is_available(self, name: str) -> bool:
        """Whether the tool resolves on PATH. Unknown tools are absent."""
        adapter = self._adapters.get(name)
        if adapter is None:
            return False
        try:
            return adapter.is_available()
        except Exception:
            logger.debug("PATH lookup for %s raised", name, exc_info=True)
            return False

    # ── Execution ───────────────────────────────────────────────

    def execute_action(self, action: Action, cwd: str | None = None) -> Receipt:
        """Validate and run ``action``; always returns a Receipt.

        Args:
            action: The command to run.
            cwd: Working directory (None = inherit).
        """
        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            return self._failed(action, f"No adapter registered for '{action.adapter}'")

        context = ExecutionContext(action=action, cwd=cwd)
        try:
            valid, reason = adapter.validate(context)
        except Exception as e:
            return self._failed(action, f"Validation error: {e}")
        if not valid:
            return self._failed(action, f"Validation failed: {reason}")

        started = time.monotonic()
        try:
            receipt = adapter.execute(context)
        except Exception as e:
            logger.error("%s raised while running %s: %s", adapter.name, action.id, e)
            receipt = self._failed(action, f"Unexpected error: {e}")
        receipt.duration_ms = int((time.monotonic() - started) * 1000)

        logger.debug("%s → %s (%d ms)", action.id, receipt.status, receipt.duration_ms)
        return receipt

    def run(
        self,
        adapter: str,
        *args: str,
        cwd: str | None = None,
        capture: bool = False,
    ) -> Receipt:
        """``execute_action`` for ``adapter args...``."""
        return self.execute_action(Action.command(adapter, *args, capture=capture), cwd=cwd)

    @staticmethod
    def _failed(action: Action, error: str) -> Receipt:
        return Receipt.failure(action.adapter, action.id, error)


def build_default_registry(stdout_to_stderr: bool = False) -> AdapterRegistry:
    """Registry wired to the real brew, docker, colima, ddev and composer.

    ``stdout_to_stderr`` sends streamed command output to stderr.
    """
    from drupal_setup.adapters.containers.colima import ColimaAdapter
    from drupal_setup.adapters.containers.docker import DockerAdapter
    from drupal_setup.adapters.tools.composer import ComposerAdapter
    from drupal_setup.adapters.tools.ddev import DdevAdapter
    from drupal_setup.adapters.tools.homebrew import HomebrewAdapter

    registry = AdapterRegistry()
    for adapter_cls in (
        HomebrewAdapter,
        DockerAdapter,
        ColimaAdapter,
        DdevAdapter,
        ComposerAdapter,
    ):
        registry.register(adapter_cls(stdout_to_stderr=stdout_to_stderr))
    return registry
