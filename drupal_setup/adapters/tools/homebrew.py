"""
Homebrew adapter — package presence checks and installs.

``brew list <pkg>`` exits 0 only when the package is installed, which
makes it the presence probe for packages that do not put a binary of
the same name on PATH (Docker Desktop).
"""

from __future__ import annotations

from drupal_setup.adapters.shell.command import CommandAdapter


class HomebrewAdapter(CommandAdapter):
    """brew CLI restricted to list and install."""

    binary = "brew"
    subcommands = frozenset({"list", "install"})
