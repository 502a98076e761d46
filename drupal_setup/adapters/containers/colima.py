"""
Colima adapter — lightweight container runtime for macOS.

``colima status`` exits non-zero while the VM is stopped;
``colima start`` boots it with default resources.
"""

from __future__ import annotations

from drupal_setup.adapters.shell.command import CommandAdapter


class ColimaAdapter(CommandAdapter):
    """Colima CLI restricted to status and start."""

    binary = "colima"
    subcommands = frozenset({"status", "start"})
