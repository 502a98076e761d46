"""
Terminal output and prompts for the CLI.

Status lines carry a coloured tag: ``[INFO]`` blue, ``[SUCCESS]`` green,
``[WARNING]`` yellow, ``[ERROR]`` red. With ``err=True`` everything,
prompts included, goes to stderr so stdout carries only a JSON summary.
"""

from __future__ import annotations

import click


class ClickReporter:
    """Reporter that writes tagged status lines with click."""

    def __init__(self, quiet: bool = False, err: bool = False):
        self._quiet = quiet
        self._err = err

    def _tagged(self, tag: str, colour: str, message: str, *, always: bool = False) -> None:
        if self._quiet and not always:
            return
        click.secho(f"[{tag}]", fg=colour, nl=False, err=self._err)
        click.echo(f" {message}", err=self._err)

    def info(self, message: str) -> None:
        self._tagged("INFO", "blue", message)

    def success(self, message: str) -> None:
        self._tagged("SUCCESS", "green", message)

    def warning(self, message: str) -> None:
        self._tagged("WARNING", "yellow", message, always=True)

    def error(self, message: str) -> None:
        self._tagged("ERROR", "red", message, always=True)

    def echo(self, message: str = "") -> None:
        if not self._quiet:
            click.echo(message, err=self._err)


def click_prompt(question: str, default: str, err: bool = False) -> str:
    """Line-oriented prompt; an empty answer yields ``default``."""
    return click.prompt(question, default=default, show_default=False, err=err)
