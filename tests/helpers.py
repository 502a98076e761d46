"""
Test doubles and filesystem helpers shared across test modules.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from drupal_setup.adapters.mock import MockAdapter
from drupal_setup.adapters.registry import AdapterRegistry

SETTINGS_PHP = """<?php
// DDEV generated settings.
$settings['config_sync_directory'] = 'sites/default/files/sync';
$settings['hash_salt'] = 'abc';
"""


class RecordingReporter:
    """Reporter double that keeps every line."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.lines.append(("info", message))

    def success(self, message: str) -> None:
        self.lines.append(("success", message))

    def warning(self, message: str) -> None:
        self.lines.append(("warning", message))

    def error(self, message: str) -> None:
        self.lines.append(("error", message))

    def echo(self, message: str = "") -> None:
        self.lines.append(("echo", message))

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.lines if lvl == level]


class ScriptedPrompt:
    """Prompt double answering from a fixed list, then with defaults."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str, default: str) -> str:
        self.questions.append(question)
        if self.answers:
            return self.answers.pop(0)
        return default


@dataclass
class Toolbox:
    registry: AdapterRegistry
    brew: MockAdapter
    docker: MockAdapter
    colima: MockAdapter
    ddev: MockAdapter
    composer: MockAdapter

    def all_commands(self) -> list[str]:
        return [
            *self.brew.commands,
            *self.docker.commands,
            *self.colima.commands,
            *self.ddev.commands,
            *self.composer.commands,
        ]


def describe_json(url: str) -> str:
    return json.dumps({"raw": [{"name": "site", "https_url": url}]})


def make_project_tree(parent: Path, name: str, settings: str = SETTINGS_PHP) -> Path:
    """Lay out what composer create-project + ddev config would leave behind."""
    root = parent / name
    settings_dir = root / "web" / "sites" / "default"
    settings_dir.mkdir(parents=True)
    (settings_dir / "settings.ddev.php").write_text(settings, encoding="utf-8")
    return root
