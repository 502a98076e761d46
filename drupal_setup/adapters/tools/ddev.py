"""
DDEV adapter — local development environment CLI.

Covers project setup (``config``, ``start``), passthrough into the web
container (``composer``, ``drush``) and status (``version``,
``describe --json-output``).
"""

from __future__ import annotations

from drupal_setup.adapters.shell.command import CommandAdapter


class DdevAdapter(CommandAdapter):
    """ddev CLI restricted to the subcommands the installer drives."""

    binary = "ddev"
    subcommands = frozenset(
        {"version", "config", "start", "composer", "drush", "describe"}
    )
