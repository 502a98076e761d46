"""
Command adapter — run one CLI binary with an argument list.

Every tool adapter (brew, docker, colima, ddev, composer) is a
CommandAdapter bound to its binary, optionally restricted to the
subcommands the installer actually uses.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
import time
from pathlib import Path

from drupal_setup.adapters.base import Adapter, ExecutionContext
from drupal_setup.core.models.action import Receipt

logger = logging.getLogger(__name__)


class CommandAdapter(Adapter):
    """Run ``<binary> <args...>`` and capture the outcome.

    Action params:
        args (list[str]): Arguments after the binary.
        capture (bool): Capture stdout/stderr instead of streaming them
            to the terminal (default: False).

    With ``stdout_to_stderr`` a streamed command writes its stdout to
    our stderr, leaving stdout free for machine-readable output.

    Commands block until the child exits; there is no timeout.
    """

    binary: str = ""
    # Empty = any subcommand is accepted
    subcommands: frozenset[str] = frozenset()

    def __init__(self, binary: str | None = None, stdout_to_stderr: bool = False):
        self.stdout_to_stderr = stdout_to_stderr
        if binary is not None:
            self.binary = binary
        if not self.binary:
            raise ValueError(f"{self.__class__.__name__} needs a binary name")

    @property
    def name(self) -> str:
        return self.binary

    def is_available(self) -> bool:
        return shutil.which(self.binary) is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        args = context.action.args
        if self.subcommands:
            if not args:
                return False, f"Missing subcommand for '{self.binary}'"
            if args[0] not in self.subcommands:
                valid = ", ".join(sorted(self.subcommands))
                return False, f"Unknown {self.binary} subcommand '{args[0]}'. Valid: {valid}"

        cwd = context.working_dir
        if cwd and not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action
        argv = [self.binary, *action.args]
        capture = action.capture
        cwd = context.working_dir

        logger.debug("Executing: %s (cwd=%s)", action.id, cwd or ".")
        start = time.monotonic()

        try:
            result = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=capture,
                stdout=sys.stderr if self.stdout_to_stderr and not capture else None,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"{self.binary}: command not found",
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command execution error: {e}",
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        stdout = (result.stdout or "").strip() if capture else ""
        stderr = (result.stderr or "").strip() if capture else ""

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=action.id,
                output=stdout,
                duration_ms=elapsed_ms,
                return_code=0,
                metadata={"stderr": stderr} if stderr else {},
            )

        return Receipt.failure(
            adapter=self.name,
            action_id=action.id,
            error=stderr or f"Command exited with code {result.returncode}",
            output=stdout,
            duration_ms=elapsed_ms,
            return_code=result.returncode,
        )
