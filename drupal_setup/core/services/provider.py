"""
Provider selection — Docker Desktop or Colima.

Only the answer ``2`` picks Colima; anything else, including an empty
answer, keeps the Docker Desktop default.
"""

from __future__ import annotations

from collections.abc import Callable

from drupal_setup.core.models.step import Provider, Reporter

PROVIDER_QUESTION = "Which Docker provider would you like to use?"
CHOICE_PROMPT = "Enter your choice (1 or 2)"
COLIMA_CHOICE = "2"


def provider_from_choice(answer: str) -> Provider:
    return Provider.COLIMA if answer.strip() == COLIMA_CHOICE else Provider.DOCKER


def select_provider(prompt: Callable[[str, str], str], reporter: Reporter) -> Provider:
    reporter.echo(PROVIDER_QUESTION)
    reporter.echo(f"1. {Provider.DOCKER.label}")
    reporter.echo(f"2. {Provider.COLIMA.label}")
    provider = provider_from_choice(prompt(CHOICE_PROMPT, ""))
    reporter.echo()
    return provider
