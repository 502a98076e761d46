"""
Docker adapter — Docker Desktop daemon probe.

Only ``docker info`` is needed: it exits non-zero when the CLI is
installed but the daemon is not running.
"""

from __future__ import annotations

from drupal_setup.adapters.shell.command import CommandAdapter


class DockerAdapter(CommandAdapter):
    """Docker CLI restricted to daemon health checks."""

    binary = "docker"
    subcommands = frozenset({"info", "version"})
