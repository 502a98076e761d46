"""
Composer adapter — host-side project scaffolding.

Only ``create-project`` runs on the host; every later Composer call
goes through ``ddev composer`` inside the web container.
"""

from __future__ import annotations

from drupal_setup.adapters.shell.command import CommandAdapter


class ComposerAdapter(CommandAdapter):
    binary = "composer"
    subcommands = frozenset({"create-project"})
